"""Unit tests for the pinhole camera.

Tests cover:
- Construction and pixel size for landscape and portrait canvases
- Rays through the centre and corner of the canvas
- Rays from a transformed camera
- Serial rendering of the default world
"""

import math

import pytest

from raylite.camera.camera import Camera
from raylite.core.transform import Transform, view_transform
from raylite.core.tuples import Colour, Point, Vector


class TestCameraConstruction:
    """Tests for camera attributes."""

    def test_defaults(self):
        from raylite.core.matrix import Matrix4

        camera = Camera(160, 120, math.pi / 2)
        assert camera.hsize == 160
        assert camera.vsize == 120
        assert camera.field_of_view == math.pi / 2
        assert camera.transform == Matrix4.identity()

    def test_pixel_size_horizontal_canvas(self):
        assert Camera(200, 125, math.pi / 2).pixel_size == pytest.approx(0.01)

    def test_pixel_size_vertical_canvas(self):
        assert Camera(125, 200, math.pi / 2).pixel_size == pytest.approx(0.01)

    def test_half_extents(self):
        camera = Camera(200, 100, math.pi / 2)
        assert camera.half_width == pytest.approx(1.0)
        assert camera.half_height == pytest.approx(0.5)

    @pytest.mark.parametrize("hsize, vsize", [(0, 10), (10, 0), (-1, 10)])
    def test_non_positive_size_raises(self, hsize, vsize):
        with pytest.raises(ValueError):
            Camera(hsize, vsize, math.pi / 2)

    def test_singular_transform_raises(self):
        from raylite.core.matrix import SingularMatrixError
        from raylite.core.transform import scaling

        with pytest.raises(SingularMatrixError):
            Camera(10, 10, math.pi / 2, scaling(0.0, 1.0, 1.0))


class TestRayForPixel:
    """Tests for ray_for_pixel."""

    def test_through_centre(self):
        ray = Camera(201, 101, math.pi / 2).ray_for_pixel(100, 50)
        assert ray.origin == Point(0.0, 0.0, 0.0)
        assert ray.direction == Vector(0.0, 0.0, -1.0)

    def test_through_corner(self):
        ray = Camera(201, 101, math.pi / 2).ray_for_pixel(0, 0)
        assert ray.origin == Point(0.0, 0.0, 0.0)
        assert ray.direction == Vector(0.66519, 0.33259, -0.66851)

    def test_transformed_camera(self):
        transform = Transform().translation(0.0, -2.0, 5.0).rotation_y(math.pi / 4).build()
        ray = Camera(201, 101, math.pi / 2, transform).ray_for_pixel(100, 50)
        half = math.sqrt(2.0) / 2.0
        assert ray.origin == Point(0.0, 2.0, -5.0)
        assert ray.direction == Vector(half, 0.0, -half)

    def test_direction_is_normalized(self):
        ray = Camera(64, 48, math.pi / 3).ray_for_pixel(7, 40)
        assert ray.direction.magnitude() == pytest.approx(1.0)


class TestSerialRender:
    """Tests for Camera.render with the Python loop."""

    def test_default_world(self, default_world):
        transform = view_transform(Point(0.0, 0.0, -5.0), Point(0.0, 0.0, 0.0), Vector(0.0, 1.0, 0.0))
        image = Camera(11, 11, math.pi / 2, transform).render(default_world)
        assert (image.width, image.height) == (11, 11)
        assert image.pixel_at(5, 5) == Colour(0.38066, 0.47583, 0.2855)

    def test_corners_miss(self, default_world):
        transform = view_transform(Point(0.0, 0.0, -5.0), Point(0.0, 0.0, 0.0), Vector(0.0, 1.0, 0.0))
        image = Camera(11, 11, math.pi / 2, transform).render(default_world)
        assert image.pixel_at(0, 0) == Colour(0.0, 0.0, 0.0)
        assert image.pixel_at(10, 10) == Colour(0.0, 0.0, 0.0)

    def test_logs_render_time(self, default_world, caplog):
        import logging

        camera = Camera(3, 2, math.pi / 2)
        with caplog.at_level(logging.INFO, logger="raylite.camera.camera"):
            camera.render(default_world)
        assert "Rendered 3x2 image of 2 shapes" in caplog.text
