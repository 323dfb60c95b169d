"""Unit tests for Material."""

import pytest

from raylite.core.tuples import Colour
from raylite.materials.material import Material
from raylite.materials.pattern import Pattern, PatternKind


class TestMaterial:
    """Tests for defaults, validation and copying."""

    def test_defaults(self):
        m = Material()
        assert m.pattern.kind == PatternKind.SOLID
        assert m.pattern.colours == (Colour(1.0, 1.0, 1.0),)
        assert m.ambient == 0.1
        assert m.diffuse == 0.9
        assert m.specular == 0.9
        assert m.shininess == 200.0

    @pytest.mark.parametrize("name", ["ambient", "diffuse", "specular", "shininess"])
    def test_negative_coefficient_raises(self, name):
        with pytest.raises(ValueError, match=name):
            Material(**{name: -0.1})

    def test_zero_coefficients_are_allowed(self):
        m = Material(ambient=0.0, diffuse=0.0, specular=0.0, shininess=0.0)
        assert m.specular == 0.0

    def test_with_colour(self):
        m = Material.with_colour(Colour(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2)
        assert m.pattern == Pattern.solid(Colour(0.8, 1.0, 0.6))
        assert (m.ambient, m.diffuse, m.specular) == (0.1, 0.7, 0.2)

    def test_evolve_copies(self):
        m = Material()
        brighter = m.evolve(ambient=1.0)
        assert brighter.ambient == 1.0
        assert m.ambient == 0.1

    def test_evolve_validates(self):
        with pytest.raises(ValueError):
            Material().evolve(diffuse=-1.0)
