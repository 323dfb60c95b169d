"""Affine transform construction.

Elementary matrices (translation, scaling, rotations, shearing) are exposed as
plain functions returning Matrix4, and the Transform builder chains them.
Each builder step left-multiplies the accumulated matrix, so the steps are
applied to a point in the order they are written:

    Transform().scaling(2, 2, 2).translation(0, 1, 0).build()

scales first and then translates (the matrix is T @ S).

Example:
    >>> import math
    >>> from raylite.core.transform import Transform
    >>> from raylite.core.tuples import Point
    >>> m = Transform().rotation_x(math.pi / 2).translation(0, 0, 5).build()
    >>> m @ Point(0, 1, 0)
    Point(0.0, 6.123233995736766e-17, 6.0)
"""

from __future__ import annotations

import math

from raylite.core.matrix import Matrix4
from raylite.core.tuples import Point, Vector


def translation(x: float, y: float, z: float) -> Matrix4:
    return Matrix4(
        [
            [1.0, 0.0, 0.0, x],
            [0.0, 1.0, 0.0, y],
            [0.0, 0.0, 1.0, z],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def scaling(x: float, y: float, z: float) -> Matrix4:
    return Matrix4(
        [
            [x, 0.0, 0.0, 0.0],
            [0.0, y, 0.0, 0.0],
            [0.0, 0.0, z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_x(radians: float) -> Matrix4:
    cos_theta = math.cos(radians)
    sin_theta = math.sin(radians)
    return Matrix4(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, cos_theta, -sin_theta, 0.0],
            [0.0, sin_theta, cos_theta, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_y(radians: float) -> Matrix4:
    cos_theta = math.cos(radians)
    sin_theta = math.sin(radians)
    return Matrix4(
        [
            [cos_theta, 0.0, sin_theta, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-sin_theta, 0.0, cos_theta, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_z(radians: float) -> Matrix4:
    cos_theta = math.cos(radians)
    sin_theta = math.sin(radians)
    return Matrix4(
        [
            [cos_theta, -sin_theta, 0.0, 0.0],
            [sin_theta, cos_theta, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix4:
    """Shear each axis in proportion to the other two.

    ``xy`` moves x in proportion to y, ``xz`` moves x in proportion to z, and
    so on.
    """
    return Matrix4(
        [
            [1.0, xy, xz, 0.0],
            [yx, 1.0, yz, 0.0],
            [zx, zy, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def view_transform(from_point: Point, to: Point, up: Vector) -> Matrix4:
    """Orient the world relative to an eye at ``from_point`` looking at ``to``.

    Builds an orthonormal basis (left, true_up, -forward) and composes it with
    a translation that moves the eye to the origin.

    Args:
        from_point: The eye position.
        to: The point being looked at.
        up: Approximate up direction; need not be normalized or orthogonal.

    Returns:
        The world-to-camera transform.
    """
    forward = (to - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix4(
        [
            [left.x, left.y, left.z, 0.0],
            [true_up.x, true_up.y, true_up.z, 0.0],
            [-forward.x, -forward.y, -forward.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return orientation @ translation(-from_point.x, -from_point.y, -from_point.z)


class Transform:
    """Immutable builder composing elementary transforms in application order.

    Every step returns a new builder whose matrix is ``step @ accumulated``,
    so the most recently added step is applied last to a point.
    """

    __slots__ = ("_matrix",)

    def __init__(self, matrix: Matrix4 | None = None) -> None:
        self._matrix = matrix if matrix is not None else Matrix4.identity()

    def then(self, matrix: Matrix4) -> Transform:
        """Append an arbitrary transform."""
        return Transform(matrix @ self._matrix)

    def translation(self, x: float, y: float, z: float) -> Transform:
        return self.then(translation(x, y, z))

    def scaling(self, x: float, y: float, z: float) -> Transform:
        return self.then(scaling(x, y, z))

    def rotation_x(self, radians: float) -> Transform:
        return self.then(rotation_x(radians))

    def rotation_y(self, radians: float) -> Transform:
        return self.then(rotation_y(radians))

    def rotation_z(self, radians: float) -> Transform:
        return self.then(rotation_z(radians))

    def shearing(self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Transform:
        return self.then(shearing(xy, xz, yx, yz, zx, zy))

    def view_transform(self, from_point: Point, to: Point, up: Vector) -> Transform:
        return self.then(view_transform(from_point, to, up))

    def build(self) -> Matrix4:
        return self._matrix

    def __repr__(self) -> str:
        return f"Transform({self._matrix!r})"
