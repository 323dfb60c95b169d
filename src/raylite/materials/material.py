"""Phong material: reflectance coefficients plus a surface pattern.

Example:
    >>> from raylite.materials.material import Material
    >>> from raylite.core.tuples import Colour
    >>> matte_red = Material.with_colour(Colour(1.0, 0.2, 0.2), specular=0.0)
    >>> matte_red.diffuse
    0.9
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from raylite.core.tuples import Colour
from raylite.materials.pattern import Pattern


def _white() -> Pattern:
    return Pattern.solid(Colour.white())


@dataclass(frozen=True)
class Material:
    """Surface reflectance for the Phong lighting model.

    Attributes:
        pattern: Surface colour source. Defaults to solid white.
        ambient: Fraction of light reflected regardless of direction.
        diffuse: Lambertian reflection weight.
        specular: Highlight weight.
        shininess: Highlight exponent; larger is tighter (typically 10-400).

    Raises:
        ValueError: If any coefficient is negative.
    """

    pattern: Pattern = field(default_factory=_white)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0

    def __post_init__(self) -> None:
        for name in ("ambient", "diffuse", "specular", "shininess"):
            value = getattr(self, name)
            if value < 0.0:
                raise ValueError(f"Material {name} = {value} is negative.")

    @classmethod
    def with_colour(cls, colour: Colour, **coefficients: float) -> Material:
        """Material with a solid colour pattern and optional coefficient overrides."""
        return cls(pattern=Pattern.solid(colour), **coefficients)

    def evolve(self, **changes) -> Material:
        """Copy with some fields replaced."""
        return replace(self, **changes)
