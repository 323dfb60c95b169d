"""Infinite plane primitive: object-space intersection and normal.

In object space the plane is y = 0 with constant normal +Y. A ray whose
object-space direction has |y| < PARALLEL_EPSILON is treated as parallel and
never intersects, and this includes a ray lying inside the plane. A coplanar
ray therefore produces no intersections rather than infinitely many.
"""

import taichi as ti

from raylite.core.ray import Ray
from raylite.core.ti_types import vec3
from raylite.core.tuples import Point, Vector

# Direction y-components below this magnitude count as parallel to the plane
PARALLEL_EPSILON = 1e-4


def local_intersect(ray: Ray) -> list[float]:
    """Intersect an object-space ray with the xz plane.

    Returns:
        An empty list for parallel or coplanar rays, else ``[-O.y / D.y]``.
    """
    if abs(ray.direction.y) < PARALLEL_EPSILON:
        return []
    return [-ray.origin.y / ray.direction.y]


def local_normal(object_point: Point) -> Vector:
    return Vector(0.0, 1.0, 0.0)


@ti.func
def hit_plane(origin: vec3, direction: vec3):
    """Kernel-side version of local_intersect.

    Returns:
        A tuple (count, t0, t1); count is 0 or 1 and t1 repeats t0.
    """
    count = 0
    t = 0.0
    if ti.abs(direction.y) >= PARALLEL_EPSILON:
        t = -origin.y / direction.y
        count = 1
    return count, t, t
