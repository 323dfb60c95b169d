"""Unit tests for intersection records and hit selection."""

from raylite.geometry.intersection import Intersection, find_hit


class TestIntersection:
    """Tests for Intersection and find_hit."""

    def test_record_holds_t_and_handle(self):
        i = Intersection(3.5, 7)
        assert i.t == 3.5
        assert i.shape_id == 7

    def test_all_positive(self):
        i1 = Intersection(1.0, 0)
        i2 = Intersection(2.0, 0)
        assert find_hit([i2, i1]) is i1

    def test_some_negative(self):
        i1 = Intersection(-1.0, 0)
        i2 = Intersection(1.0, 0)
        assert find_hit([i2, i1]) is i2

    def test_all_negative(self):
        assert find_hit([Intersection(-2.0, 0), Intersection(-1.0, 0)]) is None

    def test_empty(self):
        assert find_hit([]) is None

    def test_lowest_non_negative_of_unsorted(self):
        i1 = Intersection(5.0, 0)
        i2 = Intersection(7.0, 0)
        i3 = Intersection(-3.0, 0)
        i4 = Intersection(2.0, 0)
        assert find_hit([i1, i2, i3, i4]) is i4

    def test_zero_is_a_hit(self):
        i = Intersection(0.0, 0)
        assert find_hit([Intersection(-0.5, 0), i]) is i

    def test_tie_keeps_first(self):
        first = Intersection(2.0, 0)
        second = Intersection(2.0, 1)
        assert find_hit([first, second]) is first

    def test_accepts_generator(self):
        hit = find_hit(Intersection(t, 0) for t in (3.0, 1.0, 2.0))
        assert hit.t == 1.0
