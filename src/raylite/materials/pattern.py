"""Surface patterns mapping a point to a colour.

A Pattern is a tagged variant (PatternKind) holding one to three colours and
its own transform, independent of the transform of the shape it decorates.
Evaluation happens in pattern space:

    world point --(shape inverse)--> object point --(pattern inverse)--> pattern point

SOLID skips the second mapping since it is the same everywhere.

Variants:
    SOLID: one colour everywhere.
    STRIPE: alternates two colours on floor(x) parity.
    STRIPES: splits each unit cycle along x into thirds, one per colour.
    GRADIENT: blends linearly from the first to the second colour across each
        unit cell in x, restarting at every integer.
    RING: alternates two colours on floor(sqrt(x^2 + z^2)) parity.
    RINGS: three colours on the band b = floor(sqrt(x^2 + z^2)): the first
        on even bands, the second on odd multiples of 3, the third otherwise.
    CHECKERS: alternates two colours on (floor(x) + floor(y) + floor(z)) parity.

Example:
    >>> from raylite.materials.pattern import Pattern
    >>> from raylite.core.tuples import Colour, Point
    >>> stripes = Pattern.stripe(Colour.white(), Colour.black())
    >>> stripes.colour_at(Point(1.5, 0.0, 0.0))
    Colour(0.0, 0.0, 0.0)
"""

import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING

import taichi as ti

from raylite.core.matrix import Matrix4
from raylite.core.ti_types import vec3
from raylite.core.tuples import Colour, Point

if TYPE_CHECKING:
    from raylite.geometry.shape import Shape


class PatternKind(IntEnum):
    """Enumeration of pattern variants, shared with the Taichi kernel."""

    SOLID = 0
    STRIPE = 1
    STRIPES = 2
    GRADIENT = 3
    RING = 4
    RINGS = 5
    CHECKERS = 6


# Number of colours each variant takes
COLOUR_COUNTS = {
    PatternKind.SOLID: 1,
    PatternKind.STRIPE: 2,
    PatternKind.STRIPES: 3,
    PatternKind.GRADIENT: 2,
    PatternKind.RING: 2,
    PatternKind.RINGS: 3,
    PatternKind.CHECKERS: 2,
}

# Colour slots per pattern in kernel storage
MAX_PATTERN_COLOURS = 3


@dataclass(frozen=True)
class Pattern:
    """A colour pattern with its own transform.

    Attributes:
        kind: The pattern variant.
        colours: The variant's colours, in order.
        transform: Object-space to pattern-space placement of the pattern.
        inverse: Precomputed inverse of ``transform``.

    Raises:
        ValueError: If the number of colours does not match the variant.
        SingularMatrixError: If ``transform`` cannot be inverted.
    """

    kind: PatternKind
    colours: tuple[Colour, ...]
    transform: Matrix4 = field(default_factory=Matrix4.identity)
    inverse: Matrix4 = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        expected = COLOUR_COUNTS[self.kind]
        if len(self.colours) != expected:
            raise ValueError(
                f"{self.kind.name} pattern takes {expected} colour(s), got {len(self.colours)}"
            )
        object.__setattr__(self, "colours", tuple(self.colours))
        object.__setattr__(self, "inverse", self.transform.inverse())

    @classmethod
    def solid(cls, colour: Colour) -> "Pattern":
        return cls(PatternKind.SOLID, (colour,))

    @classmethod
    def stripe(cls, a: Colour, b: Colour, transform: Matrix4 | None = None) -> "Pattern":
        return cls._make(PatternKind.STRIPE, (a, b), transform)

    @classmethod
    def stripes(cls, a: Colour, b: Colour, c: Colour, transform: Matrix4 | None = None) -> "Pattern":
        return cls._make(PatternKind.STRIPES, (a, b, c), transform)

    @classmethod
    def gradient(cls, a: Colour, b: Colour, transform: Matrix4 | None = None) -> "Pattern":
        return cls._make(PatternKind.GRADIENT, (a, b), transform)

    @classmethod
    def ring(cls, a: Colour, b: Colour, transform: Matrix4 | None = None) -> "Pattern":
        return cls._make(PatternKind.RING, (a, b), transform)

    @classmethod
    def rings(cls, a: Colour, b: Colour, c: Colour, transform: Matrix4 | None = None) -> "Pattern":
        return cls._make(PatternKind.RINGS, (a, b, c), transform)

    @classmethod
    def checkers(cls, a: Colour, b: Colour, transform: Matrix4 | None = None) -> "Pattern":
        return cls._make(PatternKind.CHECKERS, (a, b), transform)

    @classmethod
    def _make(cls, kind: PatternKind, colours: tuple[Colour, ...], transform: Matrix4 | None) -> "Pattern":
        if transform is None:
            return cls(kind, colours)
        return cls(kind, colours, transform)

    def colour_at(self, point: Point) -> Colour:
        """Evaluate the pattern at a point already in pattern space."""
        kind = self.kind
        colours = self.colours

        if kind == PatternKind.SOLID:
            return colours[0]

        if kind == PatternKind.STRIPE:
            return colours[0] if math.floor(point.x) % 2 == 0 else colours[1]

        if kind == PatternKind.STRIPES:
            fraction = point.x - math.floor(point.x)
            if fraction < 1.0 / 3.0:
                return colours[0]
            if fraction < 2.0 / 3.0:
                return colours[1]
            return colours[2]

        if kind == PatternKind.GRADIENT:
            fraction = point.x - math.floor(point.x)
            return colours[0] + (colours[1] - colours[0]) * fraction

        if kind == PatternKind.RING:
            band = math.floor(math.hypot(point.x, point.z))
            return colours[0] if band % 2 == 0 else colours[1]

        if kind == PatternKind.RINGS:
            band = math.floor(math.hypot(point.x, point.z))
            if band % 2 == 0:
                return colours[0]
            if band % 3 == 0:
                return colours[1]
            return colours[2]

        # CHECKERS
        total = math.floor(point.x) + math.floor(point.y) + math.floor(point.z)
        return colours[0] if total % 2 == 0 else colours[1]

    def colour_at_object(self, shape: "Shape", world_point: Point) -> Colour:
        """Evaluate the pattern for a world-space point on ``shape``."""
        object_point = shape.inverse @ world_point
        if self.kind == PatternKind.SOLID:
            return self.colour_at(object_point)
        return self.colour_at(self.inverse @ object_point)

    def padded_colours(self) -> list[list[float]]:
        """Colours as RGB lists padded with black to MAX_PATTERN_COLOURS."""
        rows = [list(colour) for colour in self.colours]
        rows.extend([0.0, 0.0, 0.0] for _ in range(MAX_PATTERN_COLOURS - len(rows)))
        return rows


# =============================================================================
# Kernel-side Pattern Evaluation
# =============================================================================


@ti.func
def _parity(value):
    """Return 0 if floor(value) is even, 1 otherwise (Python-style modulo)."""
    return ti.cast(ti.floor(value), ti.i64) % 2


@ti.func
def pattern_colour(kind: ti.i32, c1: vec3, c2: vec3, c3: vec3, p: vec3) -> vec3:
    """Evaluate a pattern inside a Taichi kernel.

    Args:
        kind: The PatternKind value.
        c1: First colour.
        c2: Second colour (unused by SOLID).
        c3: Third colour (used by STRIPES and RINGS only).
        p: The point in pattern space.

    Returns:
        The pattern colour at p.
    """
    result = c1

    if kind == int(PatternKind.STRIPE):
        if _parity(p.x) != 0:
            result = c2

    elif kind == int(PatternKind.STRIPES):
        fraction = p.x - ti.floor(p.x)
        if fraction >= 2.0 / 3.0:
            result = c3
        elif fraction >= 1.0 / 3.0:
            result = c2

    elif kind == int(PatternKind.GRADIENT):
        fraction = p.x - ti.floor(p.x)
        result = c1 + (c2 - c1) * fraction

    elif kind == int(PatternKind.RING):
        if _parity(ti.sqrt(p.x * p.x + p.z * p.z)) != 0:
            result = c2

    elif kind == int(PatternKind.RINGS):
        band = ti.cast(ti.floor(ti.sqrt(p.x * p.x + p.z * p.z)), ti.i64)
        if band % 2 != 0:
            result = c3
            if band % 3 == 0:
                result = c2

    elif kind == int(PatternKind.CHECKERS):
        total = ti.floor(p.x) + ti.floor(p.y) + ti.floor(p.z)
        if _parity(total) != 0:
            result = c2

    return result
