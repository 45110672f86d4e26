"""Tests for marching squares over a Slice."""

import numpy as np
import numpy.testing as npt
import pytest

from contour2d import Grid2D, Slice, marching_squares


def _slice(rows, spacing=(1.0, 1.0)):
    arr = np.asarray(rows, dtype=float)
    h, w = arr.shape
    return Slice((w, h), spacing, arr.ravel())


class TestSlice:
    def test_dimensions(self):
        s = _slice(np.zeros((3, 5)))
        assert s.width == 5
        assert s.height == 3
        assert s.as_array().shape == (3, 5)

    def test_rejects_wrong_length(self):
        with pytest.raises(ValueError):
            Slice((3, 3), (1.0, 1.0), np.zeros(8))

    def test_from_grid(self):
        g = Grid2D(4, 2)
        g.set_value_at(3, 1, 2.5)
        s = Slice.from_grid(g, (0.5, 2.0))
        assert s.dim == (4, 2)
        assert s.as_array()[1, 3] == 2.5
        assert s.spacing == (0.5, 2.0)

    def test_to_physical(self):
        s = _slice(np.zeros((2, 2)), spacing=(0.5, 2.0))
        seg = np.array([[[1.0, 1.0], [2.0, 0.5]]])
        npt.assert_allclose(s.to_physical(seg), [[[0.5, 2.0], [1.0, 1.0]]])


class TestMarchingSquares:
    def test_uniform_slice_is_empty(self):
        assert marching_squares(0.5, _slice(np.zeros((4, 4)))).shape == (0, 2, 2)
        assert marching_squares(0.5, _slice(np.ones((4, 4)))).shape == (0, 2, 2)

    def test_single_corner(self):
        # only (x, y+1) of the single cell is above
        segs = marching_squares(0.5, _slice([[0, 0], [1, 0]]))
        npt.assert_allclose(segs, [[[0.0, 0.5], [0.5, 1.0]]])

    def test_half_plane(self):
        # right column above: one vertical segment per cell row
        segs = marching_squares(0.5, _slice([[0, 0, 1], [0, 0, 1], [0, 0, 1]]))
        assert segs.shape == (2, 2, 2)
        npt.assert_allclose(segs[:, :, 0], 1.5)

    def test_saddle_yields_two_segments(self):
        segs = marching_squares(0.5, _slice([[1, 0], [0, 1]]))
        assert segs.shape == (2, 2, 2)

    def test_last_row_and_column_visited(self):
        field = np.zeros((4, 4))
        field[3, 3] = 1.0
        segs = marching_squares(0.5, _slice(field))
        assert len(segs) == 1
        npt.assert_allclose(sorted(map(tuple, segs[0])), [(2.5, 3.0), (3.0, 2.5)])

    def test_closed_loop_around_bump(self):
        field = np.zeros((5, 5))
        field[2, 2] = 1.0
        segs = marching_squares(0.5, _slice(field))
        assert segs.shape == (4, 2, 2)
        # every end point is shared by exactly two segments
        pts = [tuple(p) for p in segs.reshape(-1, 2)]
        assert all(pts.count(p) == 2 for p in pts)

    def test_points_on_half_cell_offsets(self):
        rng = np.random.default_rng(0)
        segs = marching_squares(0.5, _slice(rng.random((6, 7))))
        frac = np.modf(segs * 2)[0]
        npt.assert_allclose(frac, 0.0)

    def test_too_small(self):
        s = Slice((1, 3), (1.0, 1.0), np.zeros(3))
        assert marching_squares(0.0, s).shape == (0, 2, 2)
