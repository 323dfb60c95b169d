"""Unit tests for affine transforms and the Transform builder.

Tests cover:
- Translation, scaling, rotation and shearing of points and vectors
- Builder ordering (steps apply in the order written)
- View transforms
"""

import math

import pytest


class TestTranslation:
    """Tests for translation matrices."""

    def test_moves_point(self):
        from raylite.core.transform import translation
        from raylite.core.tuples import Point

        assert translation(5.0, -3.0, 2.0) @ Point(-3.0, 4.0, 5.0) == Point(2.0, 1.0, 7.0)

    def test_inverse_moves_back(self):
        from raylite.core.transform import translation
        from raylite.core.tuples import Point

        inverse = translation(5.0, -3.0, 2.0).inverse()
        assert inverse @ Point(-3.0, 4.0, 5.0) == Point(-8.0, 7.0, 3.0)

    def test_does_not_affect_vectors(self):
        from raylite.core.transform import translation
        from raylite.core.tuples import Vector

        assert translation(5.0, -3.0, 2.0) @ Vector(-3.0, 4.0, 5.0) == Vector(-3.0, 4.0, 5.0)


class TestScaling:
    """Tests for scaling matrices."""

    def test_scales_point_and_vector(self):
        from raylite.core.transform import scaling
        from raylite.core.tuples import Point, Vector

        m = scaling(2.0, 3.0, 4.0)
        assert m @ Point(-4.0, 6.0, 8.0) == Point(-8.0, 18.0, 32.0)
        assert m @ Vector(-4.0, 6.0, 8.0) == Vector(-8.0, 18.0, 32.0)

    def test_inverse_shrinks(self):
        from raylite.core.transform import scaling
        from raylite.core.tuples import Vector

        assert scaling(2.0, 3.0, 4.0).inverse() @ Vector(-4.0, 6.0, 8.0) == Vector(-2.0, 2.0, 2.0)

    def test_reflection_is_negative_scaling(self):
        from raylite.core.transform import scaling
        from raylite.core.tuples import Point

        assert scaling(-1.0, 1.0, 1.0) @ Point(2.0, 3.0, 4.0) == Point(-2.0, 3.0, 4.0)

    def test_zero_scale_is_singular(self):
        from raylite.core.matrix import SingularMatrixError
        from raylite.core.transform import scaling

        with pytest.raises(SingularMatrixError):
            scaling(1.0, 0.0, 1.0).inverse()


class TestRotation:
    """Tests for rotations about each axis."""

    def test_rotation_x(self):
        from raylite.core.transform import rotation_x
        from raylite.core.tuples import Point

        p = Point(0.0, 1.0, 0.0)
        half = math.sqrt(2.0) / 2.0
        assert rotation_x(math.pi / 4) @ p == Point(0.0, half, half)
        assert rotation_x(math.pi / 2) @ p == Point(0.0, 0.0, 1.0)

    def test_inverse_rotation_x_goes_the_other_way(self):
        from raylite.core.transform import rotation_x
        from raylite.core.tuples import Point

        half = math.sqrt(2.0) / 2.0
        inverse = rotation_x(math.pi / 4).inverse()
        assert inverse @ Point(0.0, 1.0, 0.0) == Point(0.0, half, -half)

    def test_rotation_y(self):
        from raylite.core.transform import rotation_y
        from raylite.core.tuples import Point

        p = Point(0.0, 0.0, 1.0)
        half = math.sqrt(2.0) / 2.0
        assert rotation_y(math.pi / 4) @ p == Point(half, 0.0, half)
        assert rotation_y(math.pi / 2) @ p == Point(1.0, 0.0, 0.0)

    def test_rotation_z(self):
        from raylite.core.transform import rotation_z
        from raylite.core.tuples import Point

        p = Point(0.0, 1.0, 0.0)
        half = math.sqrt(2.0) / 2.0
        assert rotation_z(math.pi / 4) @ p == Point(-half, half, 0.0)
        assert rotation_z(math.pi / 2) @ p == Point(-1.0, 0.0, 0.0)


class TestShearing:
    """Tests for shearing matrices."""

    @pytest.mark.parametrize(
        "factors, expected",
        [
            ((1, 0, 0, 0, 0, 0), (5.0, 3.0, 4.0)),
            ((0, 1, 0, 0, 0, 0), (6.0, 3.0, 4.0)),
            ((0, 0, 1, 0, 0, 0), (2.0, 5.0, 4.0)),
            ((0, 0, 0, 1, 0, 0), (2.0, 7.0, 4.0)),
            ((0, 0, 0, 0, 1, 0), (2.0, 3.0, 6.0)),
            ((0, 0, 0, 0, 0, 1), (2.0, 3.0, 7.0)),
        ],
    )
    def test_moves_each_component_in_proportion(self, factors, expected):
        from raylite.core.transform import shearing
        from raylite.core.tuples import Point

        assert shearing(*factors) @ Point(2.0, 3.0, 4.0) == Point(*expected)


class TestTransformBuilder:
    """Tests for chaining transforms."""

    def test_individual_steps_in_sequence(self):
        from raylite.core.transform import rotation_x, scaling, translation
        from raylite.core.tuples import Point

        p = Point(1.0, 0.0, 1.0)
        p2 = rotation_x(math.pi / 2) @ p
        assert p2 == Point(1.0, -1.0, 0.0)
        p3 = scaling(5.0, 5.0, 5.0) @ p2
        assert p3 == Point(5.0, -5.0, 0.0)
        p4 = translation(10.0, 5.0, 7.0) @ p3
        assert p4 == Point(15.0, 0.0, 7.0)

    def test_chained_steps_apply_in_written_order(self):
        from raylite.core.transform import Transform
        from raylite.core.tuples import Point

        m = (
            Transform()
            .rotation_x(math.pi / 2)
            .scaling(5.0, 5.0, 5.0)
            .translation(10.0, 5.0, 7.0)
            .build()
        )
        assert m @ Point(1.0, 0.0, 1.0) == Point(15.0, 0.0, 7.0)

    def test_chain_equals_reversed_product(self):
        from raylite.core.transform import Transform, rotation_x, scaling, translation

        a = rotation_x(math.pi / 2)
        b = scaling(5.0, 5.0, 5.0)
        c = translation(10.0, 5.0, 7.0)
        built = Transform().rotation_x(math.pi / 2).scaling(5.0, 5.0, 5.0).translation(10.0, 5.0, 7.0)
        assert built.build() == c @ b @ a

    def test_builder_is_immutable(self):
        from raylite.core.matrix import Matrix4
        from raylite.core.transform import Transform

        base = Transform()
        base.translation(1.0, 2.0, 3.0)
        assert base.build() == Matrix4.identity()

    def test_empty_builder_is_identity(self):
        from raylite.core.matrix import Matrix4
        from raylite.core.transform import Transform

        assert Transform().build() == Matrix4.identity()


class TestViewTransform:
    """Tests for view_transform."""

    def test_default_orientation_is_identity(self):
        from raylite.core.matrix import Matrix4
        from raylite.core.transform import view_transform
        from raylite.core.tuples import Point, Vector

        t = view_transform(Point(0.0, 0.0, 0.0), Point(0.0, 0.0, -1.0), Vector(0.0, 1.0, 0.0))
        assert t == Matrix4.identity()

    def test_looking_in_positive_z_mirrors(self):
        from raylite.core.transform import scaling, view_transform
        from raylite.core.tuples import Point, Vector

        t = view_transform(Point(0.0, 0.0, 0.0), Point(0.0, 0.0, 1.0), Vector(0.0, 1.0, 0.0))
        assert t == scaling(-1.0, 1.0, -1.0)

    def test_moves_the_world(self):
        from raylite.core.transform import translation, view_transform
        from raylite.core.tuples import Point, Vector

        t = view_transform(Point(0.0, 0.0, 8.0), Point(0.0, 0.0, 0.0), Vector(0.0, 1.0, 0.0))
        assert t == translation(0.0, 0.0, -8.0)

    def test_arbitrary_view(self):
        from raylite.core.matrix import Matrix4
        from raylite.core.transform import view_transform
        from raylite.core.tuples import Point, Vector

        t = view_transform(Point(1.0, 3.0, 2.0), Point(4.0, -2.0, 8.0), Vector(1.0, 1.0, 0.0))
        expected = Matrix4(
            [
                [-0.50709, 0.50709, 0.67612, -2.36643],
                [0.76772, 0.60609, 0.12122, -2.82843],
                [-0.35857, 0.59761, -0.71714, 0.00000],
                [0.00000, 0.00000, 0.00000, 1.00000],
            ]
        )
        assert t == expected

    def test_builder_step_matches_function(self):
        from raylite.core.transform import Transform, view_transform
        from raylite.core.tuples import Point, Vector

        args = (Point(0.0, 1.5, -5.0), Point(0.0, 1.0, 0.0), Vector(0.0, 1.0, 0.0))
        assert Transform().view_transform(*args).build() == view_transform(*args)
