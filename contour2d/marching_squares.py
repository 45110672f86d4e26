"""Marching squares over a single 2D slice.

Each 2x2 window of samples is a cell.  Its corners are numbered

::

    0 ---- 1        (x, y+1) ---- (x+1, y+1)
    |      |           |              |
    3 ---- 2        (x, y)   ---- (x+1, y)

and corner *j* sets bit *j* of the cell code when its value is above the
isovalue.  Segments join the midpoints of the cell edges (0 left, 1 top,
2 right, 3 bottom).  The saddle codes 5 and 10 always yield two
segments.  Vertices are not shared between cells.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np
import numpy.typing as npt

from .grid import Grid2D

__all__ = ["Slice", "marching_squares"]

# Edge pairs per cell code, two pairs for the saddle cases.
_SEGMENT_TABLE: Tuple[Tuple[int, ...], ...] = (
    (),
    (0, 1),
    (1, 2),
    (0, 2),
    (2, 3),
    (0, 3, 1, 2),
    (1, 3),
    (0, 3),
    (0, 3),
    (1, 3),
    (0, 1, 2, 3),
    (2, 3),
    (0, 2),
    (1, 2),
    (0, 1),
    (),
)

# Edge midpoints relative to the cell's lower-left sample.
_EDGE_OFFSETS = np.array(
    [[0.0, 0.5], [0.5, 1.0], [1.0, 0.5], [0.5, 0.0]], dtype=np.float64
)


class Slice:
    """A 2D scalar field with physical sample spacing.

    Parameters
    ----------
    dim:
        ``(width, height)`` in samples.
    spacing:
        ``(sx, sy)`` physical distance between neighbouring samples.
    data:
        ``width * height`` values, x fastest.
    """

    def __init__(
        self,
        dim: Tuple[int, int],
        spacing: Tuple[float, float],
        data: npt.ArrayLike,
    ) -> None:
        w, h = (int(n) for n in dim)
        arr = np.asarray(data, dtype=np.float64).ravel()
        if arr.size != w * h:
            raise ValueError(f"slice data has {arr.size} values, expected {w}*{h}")
        self.dim = (w, h)
        self.spacing = (float(spacing[0]), float(spacing[1]))
        self.data = arr

    @classmethod
    def from_grid(cls, grid: Grid2D, spacing: Tuple[float, float] = (1.0, 1.0)) -> Slice:
        return cls(grid.dim, spacing, grid.data)

    @property
    def width(self) -> int:
        return self.dim[0]

    @property
    def height(self) -> int:
        return self.dim[1]

    def as_array(self) -> np.ndarray:
        """``(height, width)`` view of the samples."""
        return self.data.reshape(self.height, self.width)

    def to_physical(self, segments: npt.ArrayLike) -> np.ndarray:
        """Scale grid-cell segment coordinates by the sample spacing."""
        return np.asarray(segments, dtype=np.float64) * np.asarray(self.spacing)

    def __repr__(self) -> str:
        return f"Slice(dim={self.dim}, spacing={self.spacing})"


def _cell_codes(values: np.ndarray, isovalue: float) -> np.ndarray:
    above = (values > isovalue).astype(np.uint8)
    return (
        above[1:, :-1]
        | (above[1:, 1:] << 1)
        | (above[:-1, 1:] << 2)
        | (above[:-1, :-1] << 3)
    )


def marching_squares(isovalue: float, slc: Slice) -> np.ndarray:
    """Line segments along the *isovalue* contour of *slc*.

    Returns
    -------
    np.ndarray
        ``(S, 2, 2)`` array of segments ``[[x0, y0], [x1, y1]]`` in
        grid-cell coordinates, cells visited row by row.
    """
    if slc.width < 2 or slc.height < 2:
        return np.empty((0, 2, 2), dtype=np.float64)

    codes = _cell_codes(slc.as_array(), isovalue)

    segments = []
    for y, x in zip(*np.nonzero((codes != 0) & (codes != 15))):
        origin = np.array([x, y], dtype=np.float64)
        edges = _SEGMENT_TABLE[codes[y, x]]
        for k in range(0, len(edges), 2):
            segments.append((origin + _EDGE_OFFSETS[edges[k]],
                             origin + _EDGE_OFFSETS[edges[k + 1]]))

    if not segments:
        return np.empty((0, 2, 2), dtype=np.float64)
    return np.array(segments, dtype=np.float64)
