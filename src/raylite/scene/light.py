"""Point light source."""

from dataclasses import dataclass

from raylite.core.tuples import Colour, Point


@dataclass(frozen=True)
class PointLight:
    """A light with no size, radiating equally in all directions.

    Attributes:
        position: Location of the light in world space.
        intensity: Colour and brightness of the light.
    """

    position: Point
    intensity: Colour
