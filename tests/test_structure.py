"""Tests for surface3d.structure (contour stacks)."""
from __future__ import annotations

import numpy as np
import numpy.testing as npt
import pytest

from contour2d import Contour
from surface3d import ELEVATION_EPSILON, Structure


def _square(x0, y0, size):
    return Contour([(x0, y0), (x0 + size, y0), (x0 + size, y0 + size), (x0, y0 + size)])


@pytest.fixture
def prism():
    s = Structure()
    s.push(0.0, _square(0, 0, 10))
    s.push(2.0, _square(0, 0, 10))
    return s


class TestQueries:
    def test_len_and_iter(self, prism):
        assert len(prism) == 2
        assert [z for z, _ in prism] == [0.0, 2.0]

    def test_get_contours_at(self):
        s = Structure()
        s.push(1.23, _square(0, 0, 1))
        assert s.get_contours_at(1.24) is None
        found = s.get_contours_at(1.23)
        assert found is not None
        assert len(found) == 1
        assert found[0] == _square(0, 0, 1)

    @pytest.mark.parametrize("order", [(0, 1, 2), (2, 1, 0), (1, 0, 2), (0, 2, 1)])
    @pytest.mark.parametrize("offset", [0.0, 0.5 * ELEVATION_EPSILON, -0.5 * ELEVATION_EPSILON])
    def test_interleaved_elevations(self, order, offset):
        items = [(0.0, _square(0, 0, 1)), (1.0, _square(2, 2, 1)), (0.0, _square(4, 4, 1))]
        s = Structure()
        for k in order:
            s.push(*items[k])
        expected = [items[k][1] for k in order if items[k][0] == 0.0]
        assert s.get_contours_at(0.0 + offset) == expected
        assert s.get_contours_at(1.0 + offset) == [items[1][1]]
        assert s.get_contours_at(0.5 + offset) is None
        assert s.get_contours_at(3.0 * ELEVATION_EPSILON) is None

    def test_several_contours_on_one_plane(self):
        s = Structure()
        s.push(0.0, _square(0, 0, 1))
        s.push(0.0, _square(5, 5, 1))
        assert len(s.get_contours_at(0.0)) == 2

    def test_elevations_sorted_and_merged(self):
        s = Structure()
        s.push(2.0, _square(0, 0, 1))
        s.push(0.0, _square(0, 0, 1))
        s.push(2.0 + 1e-9, _square(0, 0, 1))
        assert s.elevations() == [0.0, 2.0]

    def test_bounding_box(self):
        s = Structure()
        s.push(-1.0, _square(2, 3, 4))
        s.push(5.0, _square(-1, 0, 2))
        lo, hi = s.bounding_box()
        npt.assert_allclose(lo, (-1, 0, -1))
        npt.assert_allclose(hi, (6, 7, 5))

    def test_bounding_box_empty(self):
        with pytest.raises(ValueError):
            Structure().bounding_box()


class TestAreaVolume:
    def test_area_at(self, prism):
        assert prism.area_at(0.0) == pytest.approx(100.0)
        assert prism.area_at(1.0) == 0.0

    def test_hole_subtracts(self):
        s = Structure()
        s.push(0.0, _square(0, 0, 10))
        s.push(0.0, _square(2, 2, 2))
        assert s.area_at(0.0) == pytest.approx(96.0)

    def test_volume(self, prism):
        assert prism.volume() == pytest.approx(200.0)

    def test_tapered_volume(self):
        s = Structure()
        s.push(0.0, _square(0, 0, 10))
        s.push(1.0, _square(4, 4, 2))
        assert s.volume() == pytest.approx(52.0)

    def test_single_plane_has_no_volume(self):
        s = Structure()
        s.push(0.0, _square(0, 0, 10))
        assert s.volume() == 0.0


class TestToMesh:
    def test_mesh_within_bounds(self, prism):
        surface = prism.to_mesh()
        assert surface.n_triangles > 0
        v = surface.vertices
        # vertices may sit up to half a raster cell outside the contours
        margin = 10.0 / 47
        assert v[:, 0].min() >= -margin
        assert v[:, 0].max() <= 10.0 + margin
        assert v[:, 1].min() >= -margin
        assert v[:, 1].max() <= 10.0 + margin
        assert v[:, 0].min() < 0.5
        assert v[:, 0].max() > 9.5
        assert ((v[:, 2] >= 0.0) & (v[:, 2] <= 2.0)).all()

    def test_mesh_is_valid(self, prism):
        s = prism.to_mesh(min_resolution=20, max_resolution=20)
        i = s.indices
        assert (i[:, 0] != i[:, 1]).all()
        assert (i[:, 1] != i[:, 2]).all()
        assert i.max() < s.n_vertices
        npt.assert_allclose(np.linalg.norm(s.normals, axis=1), 1.0, atol=1e-9)

    def test_large_extent_clamped(self):
        s = Structure()
        s.push(0.0, _square(0, 0, 5000))
        s.push(1.0, _square(0, 0, 5000))
        surface = s.to_mesh(min_resolution=8, max_resolution=16)
        assert surface.n_triangles > 0
        assert surface.vertices[:, 0].max() <= 5000 + 5000 / 13

    def test_z_follows_elevations(self):
        s = Structure()
        s.push(0.0, _square(0, 0, 10))
        s.push(1.0, _square(0, 0, 10))
        s.push(5.0, _square(0, 0, 10))
        zs = set(np.round(s.to_mesh().vertices[:, 2], 9).tolist())
        assert zs <= {0.0, 1.0, 5.0}

    def test_hole_produces_inner_wall(self):
        s = Structure()
        for z in (0.0, 1.0):
            s.push(z, _square(0, 0, 10))
            s.push(z, _square(4, 4, 2))
        v = s.to_mesh().vertices
        inner = (np.abs(v[:, 0] - 5.0) < 1.5) & (np.abs(v[:, 1] - 5.0) < 1.5)
        assert inner.any()

    def test_needs_two_elevations(self):
        s = Structure()
        s.push(0.0, _square(0, 0, 10))
        with pytest.raises(ValueError):
            s.to_mesh()

    def test_zero_extent(self):
        s = Structure()
        s.push(0.0, Contour([(0, 0), (0, 10), (0, 5)]))
        s.push(1.0, Contour([(0, 0), (0, 10), (0, 5)]))
        with pytest.raises(ValueError):
            s.to_mesh()

    @pytest.mark.parametrize("lo,hi", [(3, 10), (50, 40)])
    def test_bad_resolution(self, prism, lo, hi):
        with pytest.raises(ValueError):
            prism.to_mesh(min_resolution=lo, max_resolution=hi)
