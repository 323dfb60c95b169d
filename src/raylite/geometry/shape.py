"""Transformed primitives with materials.

A Shape is a single record tagged by ShapeKind. Every primitive is
unit-sized in its own object space; the shape's transform places it in the
world. The inverse transform and the normal matrix (the transpose of the
inverse) are computed once at construction, so a singular transform fails
here rather than mid-render.

Shape ids are handed out by a ShapeFactory, each factory keeping its own
counter, and are used as handles by Intersection and World.

Example:
    >>> from raylite.geometry.shape import ShapeFactory
    >>> from raylite.core.transform import scaling
    >>> shapes = ShapeFactory()
    >>> ball = shapes.sphere(transform=scaling(2.0, 2.0, 2.0))
    >>> floor = shapes.plane()
    >>> ball.id, floor.id
    (0, 1)
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import IntEnum

from raylite.core.matrix import Matrix4
from raylite.core.ray import Ray
from raylite.core.tuples import Colour, Point, Vector
from raylite.geometry import plane, sphere
from raylite.geometry.intersection import Intersection
from raylite.materials.material import Material


class ShapeKind(IntEnum):
    """Enumeration of primitive types, shared with the Taichi kernel."""

    SPHERE = 0
    PLANE = 1


@dataclass(frozen=True, eq=False)
class Shape:
    """A primitive placed in the world.

    Two shapes are equal when their ids are equal.

    Attributes:
        id: Unique handle of the shape within its factory.
        kind: The primitive type.
        transform: Object-to-world transform.
        material: Surface material.
        inverse: World-to-object transform (precomputed).
        normal_matrix: Transpose of ``inverse``, for transforming normals.

    Raises:
        SingularMatrixError: If ``transform`` cannot be inverted.
    """

    id: int
    kind: ShapeKind
    transform: Matrix4 = field(default_factory=Matrix4.identity)
    material: Material = field(default_factory=Material)
    inverse: Matrix4 = field(init=False, repr=False)
    normal_matrix: Matrix4 = field(init=False, repr=False)

    def __post_init__(self) -> None:
        inverse = self.transform.inverse()
        object.__setattr__(self, "inverse", inverse)
        object.__setattr__(self, "normal_matrix", inverse.transpose())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a world-space ray with this shape.

        Returns:
            Intersections in ascending t, possibly empty, negatives included.
        """
        local_ray = ray.transform(self.inverse)
        if self.kind == ShapeKind.SPHERE:
            ts = sphere.local_intersect(local_ray)
        else:
            ts = plane.local_intersect(local_ray)
        return [Intersection(t, self.id) for t in ts]

    def normal_at(self, world_point: Point) -> Vector:
        """Unit surface normal at a world-space point on the shape.

        The object-space normal is mapped back with the inverse-transpose so
        that it stays perpendicular to the surface under non-uniform scaling.
        """
        object_point = self.inverse @ world_point
        if self.kind == ShapeKind.SPHERE:
            local = sphere.local_normal(object_point)
        else:
            local = plane.local_normal(object_point)
        return (self.normal_matrix @ local).normalize()

    def colour_at(self, world_point: Point) -> Colour:
        """Surface colour at a world-space point, from the material pattern."""
        return self.material.pattern.colour_at_object(self, world_point)


class ShapeFactory:
    """Creates shapes with ids from a private, monotonically increasing counter."""

    def __init__(self, start: int = 0) -> None:
        self._ids = itertools.count(start)

    def next_id(self) -> int:
        return next(self._ids)

    def sphere(self, transform: Matrix4 | None = None, material: Material | None = None) -> Shape:
        return self._make(ShapeKind.SPHERE, transform, material)

    def plane(self, transform: Matrix4 | None = None, material: Material | None = None) -> Shape:
        return self._make(ShapeKind.PLANE, transform, material)

    def _make(self, kind: ShapeKind, transform: Matrix4 | None, material: Material | None) -> Shape:
        return Shape(
            id=self.next_id(),
            kind=kind,
            transform=transform if transform is not None else Matrix4.identity(),
            material=material if material is not None else Material(),
        )
