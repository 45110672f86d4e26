"""Tests for Contour and ContourBuilder."""

import numpy as np
import numpy.testing as npt
import pytest

from contour2d import Contour, ContourBuilder, LineSegment


def _build(points):
    b = ContourBuilder()
    for p in points:
        b.append(p)
    return b


SQUARE = [(0, 0), (10, 0), (10, 10), (0, 10)]


class TestTryAppend:
    def test_first_two_points_always_accepted(self):
        b = ContourBuilder()
        assert b.try_append((0, 0))
        b.append((0, 0))
        assert b.try_append((0, 0))
        assert b.try_append((100, -3))

    def test_is_side_effect_free(self):
        b = _build([(0, 0), (10, 0)])
        b.try_append((10, 10))
        assert len(b) == 2

    def test_rejects_point_on_last_segment(self):
        b = _build([(0, 0), (10, 0)])
        assert not b.try_append((5, 1))

    def test_rejects_backtracking_past_start(self):
        b = _build([(0, 0), (10, 0)])
        assert not b.try_append((-5, 0))

    def test_accepts_straight_extension(self):
        b = _build([(0, 0), (10, 0)])
        assert b.try_append((20, 0))

    def test_rejects_self_crossing(self):
        b = _build([(0, 0), (10, 0), (10, 10), (5, 10)])
        # (5, 10) -> (5, -5) crosses the first segment
        assert not b.try_append((5, -5))

    def test_accepts_non_crossing(self):
        b = _build([(0, 0), (10, 0), (10, 10), (5, 10)])
        assert b.try_append((0, 5))

    def test_append_raises_on_rejection(self):
        b = _build([(0, 0), (10, 0), (10, 10), (5, 10)])
        with pytest.raises(ValueError):
            b.append((5, -5))
        assert len(b) == 4

    def test_custom_epsilon(self):
        b = _build([(0, 0), (10, 0)])
        assert not b.try_append((5, 2))
        assert b.try_append((5, 2), epsilon=1.0)


class TestClose:
    def test_too_few_points(self):
        assert not ContourBuilder().can_close()
        assert not _build([(0, 0), (10, 0)]).can_close()

    def test_triangle_always_closes(self):
        assert _build([(0, 0), (10, 0), (5, 8)]).can_close()

    def test_square_closes(self):
        c = _build(SQUARE).close()
        assert isinstance(c, Contour)
        assert len(c) == 4

    def test_closing_segment_through_neighbour(self):
        # (0, 5) lies on the closing segment (0, 10) -> (0, 0)
        b = _build([(0, 0), (0, 5), (10, 5), (10, 10), (0, 10)])
        assert not b.can_close()

    def test_closing_segment_crossing(self):
        # last -> first cuts the wall (15, 2) -> (15, 8)
        b = _build([(5, 5), (5, 2), (15, 2), (15, 8), (20, 8)])
        assert not b.can_close()

    def test_close_raises_when_not_closeable(self):
        b = _build([(0, 0), (10, 0)])
        with pytest.raises(ValueError):
            b.close()

    def test_closed_builder_is_frozen(self):
        b = _build(SQUARE)
        b.close()
        assert b.closed
        assert not b.can_close()
        with pytest.raises(RuntimeError):
            b.close()
        with pytest.raises(RuntimeError):
            b.append((5, 5))
        with pytest.raises(RuntimeError):
            b.pop()

    def test_pop_undoes_append(self):
        b = _build(SQUARE)
        assert b.pop() == (0.0, 10.0)
        assert len(b) == 3


class TestContour:
    def test_points_read_only(self):
        c = Contour(SQUARE)
        assert c.points.shape == (4, 2)
        with pytest.raises(ValueError):
            c.points[0, 0] = 5.0

    def test_iteration_and_segments(self):
        c = Contour(SQUARE)
        assert list(c) == [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]
        segs = c.segments()
        assert len(segs) == 4
        assert segs[-1] == LineSegment((0.0, 10.0), (0.0, 0.0))

    def test_transform_points(self):
        c = Contour(SQUARE).transform_points(lambda p: (p[0] * 2, p[1] + 1))
        npt.assert_allclose(c.points[2], [20.0, 11.0])

    def test_bounding_box(self):
        c = Contour([(2, 10), (13, 0), (20, 5), (45, 20), (10, 9)])
        assert c.bounding_box() == ((2.0, 0.0), (45.0, 20.0))

    def test_area(self):
        assert Contour(SQUARE).area() == pytest.approx(100.0)
        assert Contour(SQUARE[::-1]).area() == pytest.approx(100.0)
        assert Contour([(0, 0), (4, 0), (0, 3)]).area() == pytest.approx(6.0)

    def test_contains(self):
        c = Contour([(0, 0), (10, 0), (10, 10), (5, 3), (0, 10)])
        assert c.contains((5, 1))
        assert c.contains((8, 6))
        assert not c.contains((5, 8))
        assert not c.contains((-1, 5))

    def test_equality(self):
        assert Contour(SQUARE) == Contour(np.array(SQUARE, dtype=float))
        assert Contour(SQUARE) != Contour(SQUARE[::-1])
