"""Dense 3D grid container and lattice sampling."""

from __future__ import annotations

from typing import Callable, Optional, Tuple

import numpy as np
import numpy.typing as npt

from _iso_common import _GridBase
from contour2d.grid import Grid2D

_Array = npt.NDArray[np.floating]
_Bounds3D = Tuple[Tuple[float, float], Tuple[float, float], Tuple[float, float]]
_Resolution3D = Tuple[int, int, int]


class Grid3D(_GridBase):
    """Fixed-size ``nx`` x ``ny`` x ``nz`` grid of numeric cells.

    The flat index of ``(x, y, z)`` is ``nx*ny*z + nx*y + x``, so
    :meth:`as_array` returns a ``(nz, ny, nx)`` view.
    """

    _ndim = 3

    def __init__(self, nx: int, ny: int, nz: int, dtype: npt.DTypeLike = np.float64) -> None:
        super().__init__((nx, ny, nz), dtype)

    @classmethod
    def from_raw_data(
        cls, data: npt.ArrayLike, nx: int, ny: int, nz: int
    ) -> Optional[Grid3D]:
        """Copy *data* into a new grid; ``None`` if ``len(data) != nx*ny*nz``."""
        return cls._from_flat(data, (nx, ny, nz))

    def value_at(self, x: int, y: int, z: int):
        return self._data[self._idx((x, y, z))]

    def set_value_at(self, x: int, y: int, z: int, v) -> None:
        self._data[self._idx((x, y, z))] = v

    # ------------------------------------------------------------------
    # Axis slices
    # ------------------------------------------------------------------

    def slice_xy_at(self, z: int) -> Grid2D:
        """The ``nx`` x ``ny`` plane at height *z*."""
        nx, ny, nz = self._dims
        self._check_axis(z, 2)
        return Grid2D.from_raw_data(self.as_array()[z, :, :], nx, ny)

    def slice_xz_at(self, y: int) -> Grid2D:
        """The ``nx`` x ``nz`` plane at row *y* (z plays the role of y)."""
        nx, ny, nz = self._dims
        self._check_axis(y, 1)
        return Grid2D.from_raw_data(self.as_array()[:, y, :], nx, nz)

    def slice_yz_at(self, x: int) -> Grid2D:
        """The ``ny`` x ``nz`` plane at column *x*."""
        nx, ny, nz = self._dims
        self._check_axis(x, 0)
        return Grid2D.from_raw_data(self.as_array()[:, :, x], ny, nz)

    def _check_axis(self, p: int, axis: int) -> None:
        n = self._dims[axis]
        if not 0 <= p < n:
            raise IndexError(f"coordinate {p} out of range for axis {axis} of size {n}")


def sample_grid_3d(
    func: Callable[[_Array, _Array, _Array], _Array],
    bounds: _Bounds3D,
    resolution: _Resolution3D,
    dtype: npt.DTypeLike = np.float64,
) -> Grid3D:
    """Sample *func* at the nodes of a regular lattice.

    Parameters
    ----------
    func:
        Vectorised scalar field ``f(x, y, z)`` accepting broadcastable arrays.
    bounds:
        ``((x0, x1), (y0, y1), (z0, z1))``; both end points are sampled.
    resolution:
        ``(nx, ny, nz)`` number of nodes along each axis.

    Returns
    -------
    Grid3D
        Grid whose ``value_at(i, j, k)`` is ``func(xs[i], ys[j], zs[k])``.
    """
    (x0, x1), (y0, y1), (z0, z1) = bounds
    nx, ny, nz = resolution

    xs = np.linspace(x0, x1, nx)
    ys = np.linspace(y0, y1, ny)
    zs = np.linspace(z0, z1, nz)

    Z, Y, X = np.meshgrid(zs, ys, xs, indexing="ij")
    values = np.asarray(func(X, Y, Z), dtype=dtype)
    return Grid3D.from_raw_data(values, nx, ny, nz)
