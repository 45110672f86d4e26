"""Tests for the point / segment predicates."""

import pytest

from contour2d import (
    LineSegment,
    PointSegmentRelation,
    is_on,
    relative_to,
    segments_intersect,
)

R = PointSegmentRelation


def _seg(x0, y0, x1, y1):
    return LineSegment((x0, y0), (x1, y1))


class TestRelativeTo:
    def test_general_segment(self):
        s = _seg(0, 0, 10, 5)
        assert relative_to((4, 2), s, 0.1) is R.ON
        assert relative_to((12, 6), s, 0.1) is R.PAST_B
        assert relative_to((-2, -1), s, 0.1) is R.PAST_A
        assert relative_to((4, 4), s, 0.1) is R.APART

    def test_reversed_segment_swaps_ends(self):
        s = _seg(0, 0, 10, 5).reversed()
        assert relative_to((12, 6), s, 0.1) is R.PAST_A
        assert relative_to((-2, -1), s, 0.1) is R.PAST_B

    def test_vertical_segment(self):
        s = _seg(3, 0, 3, 10)
        assert relative_to((3, 5), s, 0.1) is R.ON
        assert relative_to((3, 11), s, 0.1) is R.PAST_B
        assert relative_to((3, -1), s, 0.1) is R.PAST_A
        assert relative_to((4, 5), s, 0.1) is R.APART
        assert relative_to((3.05, 5), s, 0.1) is R.ON

    def test_horizontal_segment(self):
        s = _seg(0, 2, 10, 2)
        assert relative_to((5, 2), s, 0.1) is R.ON
        assert relative_to((5, 2.5), s, 0.1) is R.APART
        assert relative_to((5, 2.5), s, 1.0) is R.ON

    def test_end_points_are_on(self):
        s = _seg(1, 1, 7, 4)
        assert relative_to((1, 1), s, 1e-9) is R.ON
        assert relative_to((7, 4), s, 1e-9) is R.ON

    def test_degenerate_segment(self):
        s = _seg(2, 2, 2, 2)
        assert relative_to((2.05, 2), s, 0.1) is R.ON
        assert relative_to((3, 2), s, 0.1) is R.APART


class TestIsOn:
    @pytest.mark.parametrize("seg", [
        _seg(0, 0, 10, 10),
        _seg(10, 10, 0, 0),
        _seg(5, 0, 5, 10),
        _seg(5, 10, 5, 0),
        _seg(0, 5, 10, 5),
        _seg(10, 5, 0, 5),
    ])
    def test_both_orderings(self, seg):
        (x0, y0), (x1, y1) = seg
        mid = ((x0 + x1) / 2, (y0 + y1) / 2)
        beyond = (x1 + (x1 - x0), y1 + (y1 - y0))
        assert is_on(mid, seg, 0.5)
        assert is_on(mid, seg.reversed(), 0.5)
        assert not is_on(beyond, seg, 0.5)
        assert not is_on(beyond, seg.reversed(), 0.5)

    def test_matches_algebraic_check(self):
        s = _seg(0, 0, 20, 10)
        for x in range(-5, 26):
            for y in range(-3, 14):
                expected = abs(y - x / 2) <= 0.5 and 0 <= x <= 20
                assert is_on((x, y), s, 0.5) == expected


class TestSegmentsIntersect:
    def test_parallel_offset_segment(self):
        assert not segments_intersect(_seg(0, 0, 30, 30), _seg(10, 15, 20, 21), 0.5)

    def test_crossing_segment(self):
        assert segments_intersect(_seg(0, 0, 30, 30), _seg(10, 15, 20, 19), 0.5)

    def test_collinear_vertical_overlap(self):
        assert segments_intersect(_seg(10, 0, 10, 30), _seg(10, 15, 10, 19), 0.5)

    def test_collinear_vertical_gap(self):
        assert not segments_intersect(_seg(10, 0, 10, 30), _seg(10, 30.001, 10, 50), 0.5)

    def test_symmetric(self):
        a = _seg(0, 0, 30, 30)
        b = _seg(10, 15, 20, 19)
        assert segments_intersect(a, b, 0.5) == segments_intersect(b, a, 0.5)

    def test_touching_end_points(self):
        assert segments_intersect(_seg(0, 0, 5, 5), _seg(5, 5, 10, 0), 0.1)

    def test_plain_cross(self):
        assert segments_intersect(_seg(0, 0, 10, 10), _seg(0, 10, 10, 0), 0.1)

    def test_disjoint(self):
        assert not segments_intersect(_seg(0, 0, 1, 1), _seg(5, 5, 6, 7), 0.1)

    def test_parallel_horizontal_different_heights(self):
        assert not segments_intersect(_seg(0, 0, 10, 0), _seg(2, 3, 8, 3), 0.1)

    def test_collinear_horizontal_overlap(self):
        assert segments_intersect(_seg(0, 0, 10, 0), _seg(5, 0, 15, 0), 0.1)

    def test_perpendicular_miss(self):
        # bounding boxes overlap but the lines cross outside a
        assert not segments_intersect(_seg(0, 0, 10, 10), _seg(8, 0, 10, 4), 0.1)
