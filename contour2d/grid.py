"""Dense 2D grid container."""

from __future__ import annotations

from typing import Optional

import numpy as np
import numpy.typing as npt

from _iso_common import _GridBase


class Grid2D(_GridBase):
    """Fixed-size ``nx`` x ``ny`` grid of numeric cells.

    Parameters
    ----------
    nx, ny:
        Number of cells along x and y.
    dtype:
        Element type of the cells (``uint8`` for masks, a float type for
        scalar fields).

    Examples
    --------
    >>> g = Grid2D(3, 2, dtype=np.uint8)
    >>> g.set_value_at(2, 1, 7)
    >>> int(g.value_at(2, 1))
    7
    >>> g.as_array().shape
    (2, 3)
    """

    _ndim = 2

    def __init__(self, nx: int, ny: int, dtype: npt.DTypeLike = np.float64) -> None:
        super().__init__((nx, ny), dtype)

    @classmethod
    def from_raw_data(cls, data: npt.ArrayLike, nx: int, ny: int) -> Optional[Grid2D]:
        """Copy *data* (row-major, x fastest) into a new grid.

        Returns ``None`` when ``len(data) != nx * ny``.
        """
        return cls._from_flat(data, (nx, ny))

    @property
    def width(self) -> int:
        return self._dims[0]

    @property
    def height(self) -> int:
        return self._dims[1]

    def value_at(self, x: int, y: int):
        return self._data[self._idx((x, y))]

    def set_value_at(self, x: int, y: int, v) -> None:
        self._data[self._idx((x, y))] = v
