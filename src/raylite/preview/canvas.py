"""In-memory pixel buffer.

The canvas stores linear RGB colours in a float64 NumPy array of shape
(height, width, 3), indexed as pixels[y, x]. Values are kept unclamped;
clamping and quantisation happen only on export.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from raylite.core.tuples import Colour


class Canvas:
    """A width x height grid of colours, initially black.

    Raises:
        ValueError: If either dimension is negative.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"Canvas size must not be negative, got {width}x{height}")
        self._pixels = np.zeros((height, width, 3), dtype=np.float64)

    @classmethod
    def from_numpy(cls, image: npt.ArrayLike) -> Canvas:
        """Wrap a copy of an (height, width, 3) array."""
        array = np.asarray(image, dtype=np.float64)
        if array.ndim != 3 or array.shape[2] != 3:
            raise ValueError(f"Expected an array of shape (height, width, 3), got {array.shape}")
        canvas = cls(array.shape[1], array.shape[0])
        canvas._pixels[...] = array
        return canvas

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Pixel indices ({x}, {y}) are out of bounds for a canvas of size "
                f"{self.width}x{self.height}."
            )

    def write_pixel(self, x: int, y: int, colour: Colour) -> None:
        """Store a colour at (x, y).

        Raises:
            IndexError: If (x, y) lies outside the canvas.
        """
        self._check_bounds(x, y)
        self._pixels[y, x] = colour.data

    def pixel_at(self, x: int, y: int) -> Colour:
        """Read the colour at (x, y).

        Raises:
            IndexError: If (x, y) lies outside the canvas.
        """
        self._check_bounds(x, y)
        red, green, blue = self._pixels[y, x]
        return Colour(red, green, blue)

    def fill(self, colour: Colour) -> None:
        self._pixels[...] = colour.data

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Copy of the pixels as an (height, width, 3) float64 array."""
        return self._pixels.copy()

    def __repr__(self) -> str:
        return f"Canvas(width={self.width}, height={self.height})"
