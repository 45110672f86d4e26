"""Shared helpers used by both contour2d and surface3d.

This module provides:

* **Type aliases**: :data:`Point2D`, :data:`Point3D`
* **Float comparison**: :func:`abs_diff_eq`, :func:`relative_eq`
* **Dense grid base**: :class:`_GridBase`

Not meant to be imported directly by end users; import ``Grid2D`` from
``contour2d`` and ``Grid3D`` from ``surface3d`` instead.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import numpy as np
import numpy.typing as npt

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------
Point2D = Tuple[float, float]
Point3D = Tuple[float, float, float]

# Single-precision machine epsilon, the default tolerance for "exactly on
# the isovalue" checks.
F32_EPSILON = float(np.finfo(np.float32).eps)

__all__ = [
    "Point2D", "Point3D", "F32_EPSILON",
    "abs_diff_eq", "relative_eq",
    "_GridBase",
]


# ===========================================================================
# Float comparison
# ===========================================================================

def abs_diff_eq(a: float, b: float, epsilon: float = F32_EPSILON) -> bool:
    """``True`` when ``|a - b| <= epsilon``."""
    return abs(a - b) <= epsilon


def relative_eq(
    a: float,
    b: float,
    epsilon: float = F32_EPSILON,
    max_relative: float = F32_EPSILON,
) -> bool:
    """Absolute-then-relative float equality.

    Values closer than *epsilon* are equal; otherwise the difference is
    compared against *max_relative* times the larger magnitude.
    """
    if a == b:
        return True
    diff = abs(a - b)
    if diff <= epsilon:
        return True
    return diff <= max(abs(a), abs(b)) * max_relative


# ===========================================================================
# Dense grid
# ===========================================================================

class _GridBase:
    """Dense, zero-initialised N-D grid stored as a flat row-major array.

    The first dimension varies fastest: in 3-D the flat index of
    ``(x, y, z)`` is ``nx*ny*z + nx*y + x``.  Subclasses fix the number of
    dimensions and expose coordinate-wise accessors.
    """

    _ndim = 0

    def __init__(self, dims: Sequence[int], dtype: npt.DTypeLike = np.float64) -> None:
        dims = tuple(int(n) for n in dims)
        if len(dims) != self._ndim:
            raise ValueError(f"expected {self._ndim} dimensions, got {len(dims)}")
        if any(n < 0 for n in dims):
            raise ValueError(f"grid dimensions must be non-negative, got {dims}")
        self._dims = dims
        self._data = np.zeros(int(np.prod(dims)), dtype=dtype)

    @classmethod
    def _from_flat(cls, data: npt.ArrayLike, dims: Sequence[int]) -> Optional["_GridBase"]:
        arr = np.array(data).ravel()
        if arr.size != int(np.prod(dims)):
            return None
        grid = cls.__new__(cls)
        grid._dims = tuple(int(n) for n in dims)
        grid._data = arr
        return grid

    @property
    def dim(self) -> Tuple[int, ...]:
        """Grid dimensions ``(nx, ny[, nz])``."""
        return self._dims

    @property
    def data(self) -> np.ndarray:
        """Flat view of the cell values (x fastest)."""
        return self._data

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def as_array(self) -> np.ndarray:
        """Writable view shaped with the slowest axis first, e.g. ``(ny, nx)``."""
        return self._data.reshape(self._dims[::-1])

    def _idx(self, pos: Sequence[int]) -> int:
        index = 0
        stride = 1
        for axis, (p, n) in enumerate(zip(pos, self._dims)):
            if not 0 <= p < n:
                raise IndexError(
                    f"coordinate {p} out of range for axis {axis} of size {n}"
                )
            index += stride * p
            stride *= n
        return index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _GridBase) or type(other) is not type(self):
            return NotImplemented
        return self._dims == other._dims and bool(np.array_equal(self._data, other._data))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dim={self._dims}, dtype={self._data.dtype})"
