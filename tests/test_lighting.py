"""Unit tests for Phong lighting.

Tests cover:
- Eye and light in the standard configurations
- Light behind the surface
- Points in shadow
- Patterned surfaces
- The kernel-side phong function against the Python version
"""

import math

import pytest
import taichi as ti

from raylite.core.tuples import Colour, Point, Vector
from raylite.materials.material import Material
from raylite.scene.light import PointLight
from raylite.scene.lighting import lighting

POSITION = Point(0.0, 0.0, 0.0)
NORMAL = Vector(0.0, 0.0, -1.0)
HALF = math.sqrt(2.0) / 2.0


class TestLighting:
    """Tests for the Python lighting function."""

    def test_eye_between_light_and_surface(self):
        light = PointLight(Point(0.0, 0.0, -10.0), Colour(1.0, 1.0, 1.0))
        result = lighting(Material(), light, POSITION, Vector(0.0, 0.0, -1.0), NORMAL)
        assert result == Colour(1.9, 1.9, 1.9)

    def test_eye_offset_45_degrees(self):
        light = PointLight(Point(0.0, 0.0, -10.0), Colour(1.0, 1.0, 1.0))
        result = lighting(Material(), light, POSITION, Vector(0.0, HALF, -HALF), NORMAL)
        assert result == Colour(1.0, 1.0, 1.0)

    def test_light_offset_45_degrees(self):
        light = PointLight(Point(0.0, 10.0, -10.0), Colour(1.0, 1.0, 1.0))
        result = lighting(Material(), light, POSITION, Vector(0.0, 0.0, -1.0), NORMAL)
        assert result == Colour(0.7364, 0.7364, 0.7364)

    def test_eye_in_reflection_path(self):
        light = PointLight(Point(0.0, 10.0, -10.0), Colour(1.0, 1.0, 1.0))
        result = lighting(Material(), light, POSITION, Vector(0.0, -HALF, -HALF), NORMAL)
        assert result == Colour(1.6364, 1.6364, 1.6364)

    def test_light_behind_surface(self):
        light = PointLight(Point(0.0, 0.0, 10.0), Colour(1.0, 1.0, 1.0))
        result = lighting(Material(), light, POSITION, Vector(0.0, 0.0, -1.0), NORMAL)
        assert result == Colour(0.1, 0.1, 0.1)

    def test_surface_in_shadow(self):
        light = PointLight(Point(0.0, 0.0, -10.0), Colour(1.0, 1.0, 1.0))
        result = lighting(Material(), light, POSITION, Vector(0.0, 0.0, -1.0), NORMAL, in_shadow=True)
        assert result == Colour(0.1, 0.1, 0.1)

    def test_light_at_point_gives_ambient(self):
        light = PointLight(POSITION, Colour(1.0, 1.0, 1.0))
        result = lighting(Material(), light, POSITION, Vector(0.0, 0.0, -1.0), NORMAL)
        assert result == Colour(0.1, 0.1, 0.1)

    def test_light_colour_modulates(self):
        light = PointLight(Point(0.0, 0.0, -10.0), Colour(1.0, 0.5, 0.0))
        material = Material.with_colour(Colour(1.0, 1.0, 1.0), specular=0.0)
        result = lighting(material, light, POSITION, Vector(0.0, 0.0, -1.0), NORMAL)
        assert result == Colour(1.0, 0.5, 0.0)

    def test_pattern_applied(self):
        from raylite.materials.pattern import Pattern

        material = Material(
            pattern=Pattern.stripe(Colour(1.0, 1.0, 1.0), Colour(0.0, 0.0, 0.0)),
            ambient=1.0,
            diffuse=0.0,
            specular=0.0,
        )
        light = PointLight(Point(0.0, 0.0, -10.0), Colour(1.0, 1.0, 1.0))
        eye = Vector(0.0, 0.0, -1.0)
        normal = Vector(0.0, 0.0, -1.0)
        assert lighting(material, light, Point(0.9, 0.0, 0.0), eye, normal) == Colour(1.0, 1.0, 1.0)
        assert lighting(material, light, Point(1.1, 0.0, 0.0), eye, normal) == Colour(0.0, 0.0, 0.0)

    def test_pattern_through_shape_transform(self, shapes):
        from raylite.core.transform import scaling
        from raylite.materials.pattern import Pattern

        material = Material(
            pattern=Pattern.stripe(Colour(1.0, 1.0, 1.0), Colour(0.0, 0.0, 0.0)),
            ambient=1.0,
            diffuse=0.0,
            specular=0.0,
        )
        ball = shapes.sphere(transform=scaling(2.0, 2.0, 2.0), material=material)
        light = PointLight(Point(0.0, 0.0, -10.0), Colour(1.0, 1.0, 1.0))
        result = lighting(
            material, light, Point(1.5, 0.0, 0.0), Vector(0.0, 0.0, -1.0), NORMAL, shape=ball
        )
        assert result == Colour(1.0, 1.0, 1.0)


class TestPhongKernel:
    """Tests for the Taichi phong function."""

    @pytest.mark.parametrize(
        "light_position, eye, in_shadow",
        [
            ((0.0, 0.0, -10.0), (0.0, 0.0, -1.0), 0),
            ((0.0, 0.0, -10.0), (0.0, HALF, -HALF), 0),
            ((0.0, 10.0, -10.0), (0.0, 0.0, -1.0), 0),
            ((0.0, 10.0, -10.0), (0.0, -HALF, -HALF), 0),
            ((0.0, 0.0, 10.0), (0.0, 0.0, -1.0), 0),
            ((0.0, 0.0, -10.0), (0.0, 0.0, -1.0), 1),
            ((0.0, 0.0, 0.0), (0.0, 0.0, -1.0), 0),
        ],
    )
    def test_matches_python(self, light_position, eye, in_shadow):
        from raylite.scene.lighting import phong

        material = Material()
        light = PointLight(Point(*light_position), Colour(1.0, 1.0, 1.0))
        expected = lighting(material, light, POSITION, Vector(*eye), NORMAL, in_shadow=bool(in_shadow))

        inputs = ti.Vector.field(3, dtype=ti.f64, shape=2)
        result = ti.Vector.field(3, dtype=ti.f64, shape=())
        inputs[0] = list(light_position)
        inputs[1] = list(eye)

        @ti.kernel
        def test_kernel():
            one = ti.Vector([1.0, 1.0, 1.0], dt=ti.f64)
            result[None] = phong(
                one,
                0.1,
                0.9,
                0.9,
                200.0,
                inputs[0],
                one,
                ti.Vector([0.0, 0.0, 0.0], dt=ti.f64),
                inputs[1],
                ti.Vector([0.0, 0.0, -1.0], dt=ti.f64),
                in_shadow,
            )

        test_kernel()
        assert Colour(*result.to_numpy()) == expected
