"""Materials module: Phong coefficients and surface patterns."""

from .material import Material
from .pattern import COLOUR_COUNTS, Pattern, PatternKind, pattern_colour

__all__ = [
    "Material",
    "Pattern",
    "PatternKind",
    "COLOUR_COUNTS",
    "pattern_colour",
]
