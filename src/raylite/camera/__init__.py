"""Camera module: pinhole camera with pixel-to-ray mapping.

Pixel (x, y) is sampled at its centre, x growing to the right and y growing
downward, through a canvas one unit in front of the eye.
"""

from .camera import Camera

__all__ = ["Camera"]
