"""Tests for Grid2D / Grid3D containers and lattice sampling."""

import numpy as np
import numpy.testing as npt
import pytest

from contour2d import Grid2D
from surface3d import Grid3D, sample_grid_3d


class TestGrid2D:
    def test_zero_initialised(self):
        g = Grid2D(4, 3)
        assert g.dim == (4, 3)
        assert g.data.shape == (12,)
        assert not g.data.any()

    def test_round_trip(self):
        g = Grid2D(5, 4, dtype=np.uint8)
        for x in range(5):
            for y in range(4):
                g.set_value_at(x, y, x + 10 * y)
        for x in range(5):
            for y in range(4):
                assert g.value_at(x, y) == x + 10 * y

    def test_row_major_x_fastest(self):
        g = Grid2D(3, 2)
        g.set_value_at(2, 1, 7.0)
        assert g.data[1 * 3 + 2] == 7.0
        assert g.as_array()[1, 2] == 7.0

    def test_as_array_is_view(self):
        g = Grid2D(3, 2)
        g.as_array()[0, 1] = 4.0
        assert g.value_at(1, 0) == 4.0

    def test_width_height(self):
        g = Grid2D(6, 2)
        assert g.width == 6
        assert g.height == 2

    def test_from_raw_data(self):
        g = Grid2D.from_raw_data([1, 2, 3, 4, 5, 6], 3, 2)
        assert g is not None
        assert g.value_at(0, 1) == 4

    @pytest.mark.parametrize("n", [0, 5, 7, 12])
    def test_from_raw_data_rejects_length(self, n):
        assert Grid2D.from_raw_data(np.arange(n), 3, 2) is None

    def test_from_raw_data_copies(self):
        src = np.arange(6.0)
        g = Grid2D.from_raw_data(src, 3, 2)
        src[0] = 100.0
        assert g.value_at(0, 0) == 0.0

    @pytest.mark.parametrize("pos", [(-1, 0), (0, -1), (3, 0), (0, 2)])
    def test_out_of_range(self, pos):
        g = Grid2D(3, 2)
        with pytest.raises(IndexError):
            g.value_at(*pos)
        with pytest.raises(IndexError):
            g.set_value_at(*pos, 1.0)

    def test_negative_dimension(self):
        with pytest.raises(ValueError):
            Grid2D(-1, 3)

    def test_equality(self):
        a = Grid2D.from_raw_data([1, 2, 3, 4], 2, 2)
        b = Grid2D.from_raw_data([1, 2, 3, 4], 2, 2)
        c = Grid2D.from_raw_data([1, 2, 3, 4], 4, 1)
        assert a == b
        assert a != c


class TestGrid3D:
    def test_round_trip(self):
        g = Grid3D(3, 4, 2)
        g.set_value_at(2, 3, 1, 9.5)
        assert g.value_at(2, 3, 1) == 9.5
        assert g.data[3 * 4 * 1 + 3 * 3 + 2] == 9.5

    def test_as_array_shape(self):
        assert Grid3D(3, 4, 5).as_array().shape == (5, 4, 3)

    def test_from_raw_data_rejects_length(self):
        assert Grid3D.from_raw_data(np.zeros(23), 2, 3, 4) is None
        assert Grid3D.from_raw_data(np.zeros(24), 2, 3, 4) is not None

    def test_out_of_range(self):
        g = Grid3D(2, 2, 2)
        with pytest.raises(IndexError):
            g.value_at(0, 0, 2)


class TestGrid3DSlices:
    @pytest.fixture
    def grid(self):
        # value encodes its own coordinates
        g = Grid3D(4, 3, 2)
        for z in range(2):
            for y in range(3):
                for x in range(4):
                    g.set_value_at(x, y, z, 100 * z + 10 * y + x)
        return g

    def test_slice_xy(self, grid):
        s = grid.slice_xy_at(1)
        assert s.dim == (4, 3)
        assert s.value_at(3, 2) == 123

    def test_slice_xz(self, grid):
        s = grid.slice_xz_at(2)
        assert s.dim == (4, 2)
        assert s.value_at(1, 1) == 121

    def test_slice_yz(self, grid):
        s = grid.slice_yz_at(3)
        assert s.dim == (3, 2)
        assert s.value_at(2, 0) == 23

    def test_slice_is_copy(self, grid):
        s = grid.slice_xy_at(0)
        s.set_value_at(0, 0, -1)
        assert grid.value_at(0, 0, 0) == 0

    def test_slice_out_of_range(self, grid):
        with pytest.raises(IndexError):
            grid.slice_xy_at(2)
        with pytest.raises(IndexError):
            grid.slice_yz_at(-1)


class TestSampleGrid3D:
    def test_nodes_include_bounds(self):
        g = sample_grid_3d(lambda x, y, z: x + 10 * y + 100 * z,
                           ((0, 1), (0, 2), (0, 4)), (2, 3, 5))
        assert g.dim == (2, 3, 5)
        npt.assert_allclose(g.value_at(0, 0, 0), 0.0)
        npt.assert_allclose(g.value_at(1, 2, 4), 1 + 20 + 400)
        npt.assert_allclose(g.value_at(1, 1, 2), 1 + 10 + 200)

    def test_dtype(self):
        g = sample_grid_3d(lambda x, y, z: x * y * z,
                           ((-1, 1), (-1, 1), (-1, 1)), (3, 3, 3), dtype=np.float32)
        assert g.dtype == np.float32
