"""Pinhole camera: pixel-to-ray mapping and the render loop.

The camera sits at the origin of its own space looking down -z at a canvas
one unit away. Its view transform maps world space into camera space; rays
are generated in camera space and carried back to the world through the
inverse view transform, which is computed once at construction.

For a canvas of hsize x vsize pixels and horizontal or vertical field of view
``fov`` (whichever image side is longer):

    half_view = tan(fov / 2)
    aspect    = hsize / vsize
    half_width, half_height = (half_view, half_view / aspect) if aspect >= 1
                              else (half_view * aspect, half_view)
    pixel_size = 2 * half_width / hsize

Pixel (x, y) is sampled at its centre, x growing right and y growing down.

Example:
    >>> import math
    >>> from raylite.camera.camera import Camera
    >>> from raylite.core.transform import view_transform
    >>> from raylite.core.tuples import Point, Vector
    >>> from raylite.scene.scenes import default_world
    >>> camera = Camera(11, 11, math.pi / 2, view_transform(
    ...     Point(0, 0, -5), Point(0, 0, 0), Vector(0, 1, 0)))
    >>> image = camera.render(default_world())
"""

from __future__ import annotations

import logging
import math
import time

from raylite.core.matrix import Matrix4
from raylite.core.ray import Ray
from raylite.core.tuples import Point
from raylite.preview.canvas import Canvas
from raylite.scene.world import World

logger = logging.getLogger(__name__)


class Camera:
    """A virtual pinhole camera.

    Args:
        hsize: Canvas width in pixels.
        vsize: Canvas height in pixels.
        field_of_view: Angle in radians covered by the longer image side.
        transform: World-to-camera view transform. Defaults to identity.

    Raises:
        ValueError: If either size is not positive.
        SingularMatrixError: If ``transform`` cannot be inverted.
    """

    def __init__(
        self,
        hsize: int,
        vsize: int,
        field_of_view: float,
        transform: Matrix4 | None = None,
    ) -> None:
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Camera size must be positive, got {hsize}x{vsize}")

        self._hsize = hsize
        self._vsize = vsize
        self._field_of_view = field_of_view
        self._transform = transform if transform is not None else Matrix4.identity()
        self._inverse = self._transform.inverse()

        half_view = math.tan(field_of_view / 2.0)
        aspect = hsize / vsize
        if aspect >= 1.0:
            self._half_width = half_view
            self._half_height = half_view / aspect
        else:
            self._half_width = half_view * aspect
            self._half_height = half_view
        self._pixel_size = (self._half_width * 2.0) / hsize

    @property
    def hsize(self) -> int:
        return self._hsize

    @property
    def vsize(self) -> int:
        return self._vsize

    @property
    def field_of_view(self) -> float:
        return self._field_of_view

    @property
    def transform(self) -> Matrix4:
        return self._transform

    @property
    def inverse(self) -> Matrix4:
        return self._inverse

    @property
    def half_width(self) -> float:
        return self._half_width

    @property
    def half_height(self) -> float:
        return self._half_height

    @property
    def pixel_size(self) -> float:
        return self._pixel_size

    def ray_for_pixel(self, x: int, y: int) -> Ray:
        """World-space ray from the eye through the centre of pixel (x, y)."""
        x_offset = (x + 0.5) * self._pixel_size
        y_offset = (y + 0.5) * self._pixel_size

        # The camera looks toward -z, so +x in camera space is to the left
        world_x = self._half_width - x_offset
        world_y = self._half_height - y_offset

        pixel = self._inverse @ Point(world_x, world_y, -1.0)
        origin = self._inverse @ Point.origin()
        direction = (pixel - origin).normalize()
        return Ray(origin, direction)

    def render(self, world: World, parallel: bool = False) -> Canvas:
        """Render the world into a new canvas.

        Args:
            world: The scene to render.
            parallel: Evaluate pixels in parallel inside a Taichi kernel
                instead of the serial Python loop. Taichi must already be
                initialised (see ``raylite.core.ti_types.init_taichi``).

        Returns:
            A Canvas of hsize x vsize pixels.
        """
        start = time.perf_counter()
        if parallel:
            # Deferred so the serial path never allocates Taichi fields
            from raylite.core.integrator import render_world

            image = Canvas.from_numpy(render_world(self, world))
        else:
            image = Canvas(self._hsize, self._vsize)
            for y in range(self._vsize):
                for x in range(self._hsize):
                    ray = self.ray_for_pixel(x, y)
                    image.write_pixel(x, y, world.colour_at(ray))

        logger.info(
            "Rendered %dx%d image of %d shapes in %.3fs (%s)",
            self._hsize,
            self._vsize,
            len(world),
            time.perf_counter() - start,
            "parallel" if parallel else "serial",
        )
        return image

    def __repr__(self) -> str:
        return (
            f"Camera(hsize={self._hsize}, vsize={self._vsize}, "
            f"field_of_view={self._field_of_view!r})"
        )
