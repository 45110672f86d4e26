"""Tests for Bresenham lines and scan-line contour filling."""

import numpy as np
import numpy.testing as npt
import pytest

from contour2d import Contour, Grid2D, bresenham_line, fill_contour


def _fill(points, nx=50, ny=30):
    return fill_contour(Grid2D(nx, ny, dtype=np.uint8), Contour(points)).as_array()


class TestBresenham:
    def test_includes_end_points(self):
        cells = bresenham_line(1, 2, 7, 5)
        assert cells[0] == (1, 2)
        assert cells[-1] == (7, 5)

    def test_single_cell(self):
        assert bresenham_line(3, 3, 3, 3) == [(3, 3)]

    def test_horizontal_and_vertical(self):
        assert bresenham_line(0, 0, 3, 0) == [(0, 0), (1, 0), (2, 0), (3, 0)]
        assert bresenham_line(2, 3, 2, 0) == [(2, 3), (2, 2), (2, 1), (2, 0)]

    def test_diagonal(self):
        assert bresenham_line(0, 0, 3, 3) == [(0, 0), (1, 1), (2, 2), (3, 3)]

    def test_connected(self):
        cells = bresenham_line(0, 0, 9, -4)
        for (x0, y0), (x1, y1) in zip(cells, cells[1:]):
            assert max(abs(x1 - x0), abs(y1 - y0)) == 1

    def test_one_cell_per_major_step(self):
        cells = bresenham_line(0, 0, 10, 3)
        assert len(cells) == 11
        assert [c[0] for c in cells] == list(range(11))


class TestFillContour:
    def test_rectangle(self):
        mask = _fill([(2, 3), (12, 3), (12, 8), (2, 8)])
        expected = np.zeros((30, 50), dtype=np.uint8)
        expected[3:9, 2:13] = 1
        npt.assert_array_equal(mask, expected)

    def test_returns_same_grid(self):
        g = Grid2D(20, 20, dtype=np.uint8)
        assert fill_contour(g, Contour([(1, 1), (5, 1), (3, 4)])) is g

    def test_binary(self):
        mask = _fill([(2, 10), (13, 0), (20, 5), (45, 20), (10, 9)])
        assert set(np.unique(mask)) <= {0, 1}

    def test_idempotent_on_fresh_grids(self):
        pts = [(2, 10), (3, 2), (4, 5), (6, 1), (10, 1), (20, 2), (9, 9), (3, 9)]
        npt.assert_array_equal(_fill(pts), _fill(pts))

    def test_outside_bounding_box_untouched(self):
        g = Grid2D(20, 20, dtype=np.uint8)
        g.as_array()[:] = 0
        g.set_value_at(0, 0, 1)
        fill_contour(g, Contour([(5, 5), (10, 5), (10, 10), (5, 10)]))
        assert g.value_at(0, 0) == 1
        assert g.as_array()[:, 11:].sum() == 0

    @pytest.mark.parametrize("pts", [
        [(2, 10), (13, 0), (20, 5), (45, 20), (10, 9)],
        [(2, 10), (3, 2), (4, 5), (6, 1), (10, 1), (20, 2), (9, 9), (3, 9)],
        [(5, 5), (40, 5), (40, 25), (22, 12), (5, 25)],
    ])
    def test_interior_matches_contains(self, pts):
        mask = _fill(pts)
        c = Contour(pts)
        # cells well inside or well outside agree with the ray test;
        # cells near the outline are rasterization dependent
        segs = c.segments()
        for y in range(30):
            for x in range(50):
                p = (x + 0.5, y + 0.5)
                if min(_dist(p, s) for s in segs) < 2.0:
                    continue
                assert mask[y, x] == int(c.contains(p)), (x, y)

    def test_concave_notch(self):
        mask = _fill([(5, 5), (40, 5), (40, 25), (22, 12), (5, 25)])
        assert mask[8, 22] == 1
        assert mask[20, 22] == 0
        assert mask[20, 8] == 1
        assert mask[20, 37] == 1

    def test_vertex_outside_grid(self):
        with pytest.raises(IndexError):
            _fill([(1, 1), (60, 1), (30, 20)])


def _dist(p, seg):
    (x0, y0), (x1, y1) = seg
    px, py = p
    dx, dy = x1 - x0, y1 - y0
    L2 = dx * dx + dy * dy
    t = 0.0 if L2 == 0 else max(0.0, min(1.0, ((px - x0) * dx + (py - y0) * dy) / L2))
    return ((px - x0 - t * dx) ** 2 + (py - y0 - t * dy) ** 2) ** 0.5
