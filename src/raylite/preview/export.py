"""Image export utilities for rendered canvases.

Supported formats:
    - PPM (plain "P3" text, via canvas_to_ppm / save_ppm)
    - PNG (8-bit RGB via Pillow)

Colour channels are clamped to [0, 1] here and nowhere earlier.

Example:
    >>> from raylite.preview.canvas import Canvas
    >>> from raylite.preview.export import canvas_to_ppm
    >>> canvas_to_ppm(Canvas(5, 3)).splitlines()[:3]
    ['P3', '5 3', '255']
"""

from __future__ import annotations

import time
from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from raylite.preview.canvas import Canvas
from raylite.preview.display import apply_gamma

# Plain PPM readers may reject longer lines
PPM_MAX_LINE_LENGTH = 70


def scale_channels(image: npt.NDArray[np.float64], max_value: int) -> npt.NDArray[np.int64]:
    """Scale linear [0, 1] values to integers in [0, max_value].

    Values are rounded half away from zero and then clamped, so 0.5 maps to
    128 for max_value 255 and anything negative maps to 0.
    """
    scaled = np.floor(np.asarray(image, dtype=np.float64) * max_value + 0.5)
    return np.clip(scaled, 0, max_value).astype(np.int64)


def _ppm_body(canvas: Canvas, max_colour_value: int) -> str:
    values = scale_channels(canvas.to_numpy(), max_colour_value)
    lines: list[str] = []
    for row in values:
        line = ""
        for value in row.reshape(-1):
            token = str(int(value))
            if len(line) + len(token) > PPM_MAX_LINE_LENGTH:
                lines.append(line.rstrip(" "))
                line = ""
            line += token + " "
        lines.append(line.rstrip(" "))
    return "".join(line + "\n" for line in lines)


def canvas_to_ppm(canvas: Canvas, max_colour_value: int = 255) -> str:
    """Encode a canvas as plain-text PPM (P3).

    Each pixel row starts on a new line; rows longer than 70 characters are
    wrapped between values. The result always ends with a newline.

    Args:
        canvas: The canvas to encode.
        max_colour_value: Maximum channel value written in the header.

    Returns:
        The PPM document.
    """
    header = f"P3\n{canvas.width} {canvas.height}\n{max_colour_value}\n"
    return header + _ppm_body(canvas, max_colour_value)


def default_filename(canvas: Canvas, suffix: str = "ppm") -> str:
    """Name of the form ``<width>_<height>_<unix timestamp>.<suffix>``."""
    return f"{canvas.width}_{canvas.height}_{int(time.time())}.{suffix}"


def save_ppm(canvas: Canvas, filepath: str | Path, max_colour_value: int = 255) -> Path:
    """Write the canvas as a PPM file.

    Returns:
        The path written.
    """
    path = Path(filepath)
    path.write_text(canvas_to_ppm(canvas, max_colour_value), encoding="ascii")
    return path


def image_to_uint8(image: npt.NDArray[np.float64], gamma: float = 1.0) -> npt.NDArray[np.uint8]:
    """Clamp, gamma correct and quantise a linear image to 8 bits.

    Args:
        image: Linear image of shape (H, W, 3).
        gamma: Display gamma; 1.0 leaves values linear, 2.2 approximates sRGB.

    Returns:
        Array of shape (H, W, 3) with dtype uint8.
    """
    return scale_channels(apply_gamma(image, gamma), 255).astype(np.uint8)


def save_png(canvas: Canvas, filepath: str | Path, *, gamma: float = 1.0) -> Path:
    """Write the canvas as an 8-bit RGB PNG.

    Returns:
        The path written.
    """
    path = Path(filepath)
    pil_image = PILImage.fromarray(image_to_uint8(canvas.to_numpy(), gamma=gamma))
    pil_image.save(path)
    return path
