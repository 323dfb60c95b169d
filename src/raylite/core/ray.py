"""Ray data structure.

Example:
    >>> from raylite.core.ray import Ray
    >>> from raylite.core.tuples import Point, Vector
    >>> ray = Ray(Point(2.0, 3.0, 4.0), Vector(1.0, 0.0, 0.0))
    >>> ray.position(2.5)
    Point(4.5, 3.0, 4.0)
"""

from __future__ import annotations

from dataclasses import dataclass

from raylite.core.matrix import Matrix4
from raylite.core.tuples import Point, Vector


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction of the ray. Not required to be normalized;
            rays transformed into object space generally are not.
    """

    origin: Point
    direction: Vector

    def position(self, t: float) -> Point:
        """Compute the point along the ray at parameter t."""
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix4) -> Ray:
        """Return the ray with origin and direction mapped through ``matrix``."""
        return Ray(matrix @ self.origin, matrix @ self.direction)
