"""Per-hit shading geometry.

Example:
    >>> from raylite.geometry.shape import ShapeFactory
    >>> from raylite.geometry.intersection import Intersection
    >>> from raylite.core.ray import Ray
    >>> from raylite.core.tuples import Point, Vector
    >>> ball = ShapeFactory().sphere()
    >>> ray = Ray(Point(0.0, 0.0, -5.0), Vector(0.0, 0.0, 1.0))
    >>> comps = prepare_computations(Intersection(4.0, ball.id), ray, {ball.id: ball})
    >>> comps.point, comps.inside
    (Point(0.0, 0.0, -1.0), False)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from raylite.core.ray import Ray
from raylite.core.tuples import Point, Vector
from raylite.geometry.intersection import Intersection
from raylite.geometry.shape import Shape

# Distance hit points are pushed along the normal before shadow testing
SHADOW_BIAS = 1e-4


@dataclass(frozen=True)
class Computations:
    """Geometry derived from one intersection and the ray that produced it.

    Attributes:
        t: Ray parameter of the hit.
        shape_id: Handle of the shape that was hit.
        point: World-space hit point.
        eye: Unit vector from the hit point back toward the ray origin.
        normal: Unit surface normal, flipped to face the eye when ``inside``.
        inside: True when the ray started inside the shape.
        over_point: ``point`` nudged SHADOW_BIAS along ``normal``; shadow rays
            start here so a surface cannot shadow itself through round-off.
    """

    t: float
    shape_id: int
    point: Point
    eye: Vector
    normal: Vector
    inside: bool
    over_point: Point


def prepare_computations(
    intersection: Intersection, ray: Ray, arena: Mapping[int, Shape]
) -> Computations:
    """Build the shading record for a hit.

    Args:
        intersection: The hit being shaded.
        ray: The ray that produced it.
        arena: Id to shape lookup used to resolve the intersection's handle
            (a World works).

    Returns:
        The Computations for the hit.

    Raises:
        KeyError: If the shape id is not in ``arena``.
    """
    shape = arena[intersection.shape_id]
    point = ray.position(intersection.t)
    eye = -ray.direction
    normal = shape.normal_at(point)

    inside = normal.dot(eye) < 0.0
    if inside:
        normal = -normal

    return Computations(
        t=intersection.t,
        shape_id=intersection.shape_id,
        point=point,
        eye=eye,
        normal=normal,
        inside=inside,
        over_point=point + normal * SHADOW_BIAS,
    )
