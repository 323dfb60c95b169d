"""Unit sphere primitive: object-space intersection and normal.

The sphere is centred at the object-space origin with radius 1; size and
placement come from the owning Shape's transform. Callers transform the ray
into object space before calling these functions.

The ray-sphere intersection solves

    |O + tD|^2 = 1

which expands to the quadratic a*t^2 + b*t + c = 0 with

    a = D . D
    b = 2 * D . (O - centre)
    c = (O - centre) . (O - centre) - 1

A negative discriminant means the ray misses. Otherwise both roots are
returned in ascending order, including negative ones (intersections behind
the ray origin) and the repeated root of a tangent ray.
"""

import math

import taichi as ti

from raylite.core.ray import Ray
from raylite.core.ti_types import vec3
from raylite.core.tuples import Point, Vector


def local_intersect(ray: Ray) -> list[float]:
    """Intersect an object-space ray with the unit sphere.

    Args:
        ray: The ray, already in the sphere's object space.

    Returns:
        An empty list on a miss, else the two t values (t0 <= t1).
    """
    sphere_to_ray = ray.origin - Point.origin()
    a = ray.direction.dot(ray.direction)
    b = 2.0 * ray.direction.dot(sphere_to_ray)
    c = sphere_to_ray.dot(sphere_to_ray) - 1.0
    discriminant = b * b - 4.0 * a * c

    if discriminant < 0.0:
        return []

    sqrt_d = math.sqrt(discriminant)
    return [(-b - sqrt_d) / (2.0 * a), (-b + sqrt_d) / (2.0 * a)]


def local_normal(object_point: Point) -> Vector:
    """Outward normal of the unit sphere (not normalized)."""
    return object_point - Point.origin()


@ti.func
def hit_sphere(origin: vec3, direction: vec3):
    """Kernel-side version of local_intersect.

    Args:
        origin: Object-space ray origin.
        direction: Object-space ray direction.

    Returns:
        A tuple (count, t0, t1); count is 0 on a miss and 2 otherwise.
    """
    a = direction.dot(direction)
    b = 2.0 * direction.dot(origin)
    c = origin.dot(origin) - 1.0
    discriminant = b * b - 4.0 * a * c

    count = 0
    t0 = 0.0
    t1 = 0.0
    if discriminant >= 0.0:
        sqrt_d = ti.sqrt(discriminant)
        t0 = (-b - sqrt_d) / (2.0 * a)
        t1 = (-b + sqrt_d) / (2.0 * a)
        count = 2

    return count, t0, t1
