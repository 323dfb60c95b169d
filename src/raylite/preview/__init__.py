"""Preview module: pixel canvas and image export.

Example:
    >>> from raylite.preview import Canvas, save_ppm
    >>> canvas = Canvas(10, 2)
    >>> path = save_ppm(canvas, "out.ppm")
"""

from raylite.preview.canvas import Canvas
from raylite.preview.display import apply_gamma, show_preview
from raylite.preview.export import (
    canvas_to_ppm,
    default_filename,
    image_to_uint8,
    save_png,
    save_ppm,
)

__all__ = [
    "Canvas",
    "canvas_to_ppm",
    "save_ppm",
    "save_png",
    "image_to_uint8",
    "default_filename",
    "apply_gamma",
    "show_preview",
]
