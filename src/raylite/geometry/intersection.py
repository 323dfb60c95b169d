"""Intersection records and hit selection."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Intersection:
    """A ray parameter paired with the handle of the shape it hit.

    The shape is referenced by its integer id rather than by object, so an
    intersection can outlive or be detached from the collection that produced
    it. Resolve the handle through the owning World (or any id -> Shape
    mapping).

    Attributes:
        t: The ray parameter of the intersection.
        shape_id: Id of the intersected shape.
    """

    t: float
    shape_id: int


def find_hit(intersections: Iterable[Intersection]) -> Intersection | None:
    """Return the visible intersection: the smallest t that is >= 0.

    The input need not be sorted. Negative t values lie behind the ray origin
    and are never visible. Ties keep the first candidate seen.

    Returns:
        The hit, or None if there are no non-negative intersections.
    """
    hit = None
    for intersection in intersections:
        if intersection.t < 0.0:
            continue
        if hit is None or intersection.t < hit.t:
            hit = intersection
    return hit
