"""Marching cubes (MC33) isosurface extraction.

:func:`marching_cubes` walks every cell of a regular scalar grid, resolves
the topology of the cell with the MC33 face and interior tests and emits
triangles whose vertices sit on the cell edges (or, for some ambiguous
configurations, at the cell centre).

Vertices on an edge shared by neighbouring cells are created once.  Five
per-row index buffers hold the vertices of the edges a later cell may
need:

``dx`` / ``ux``
    x-edges on the lower / upper z plane of the current layer,
``dy`` / ``uy``
    y-edges on the lower / upper z plane,
``lz``
    z-edges between the two planes.

After each layer the lower and upper buffers swap roles.

Coordinates of the returned vertices are grid indices: ``(0, 0, 0)`` is
the first sample and ``(nx-1, ny-1, nz-1)`` the last.  Normals point from
high to low field values.
"""

from __future__ import annotations

import logging
from math import sqrt
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np
import numpy.typing as npt

from _iso_common import relative_eq
from ._mc33 import _resolve_case, _triangles
from .grid import Grid3D

logger = logging.getLogger(__name__)

__all__ = ["Surface", "marching_cubes", "extract_isosurface"]

# Per edge: (corner a, corner b, offset of corner a from the cell origin,
# axis from a to b).
_EDGES = (
    (0, 1, (0, 0, 0), 1),
    (1, 2, (0, 1, 0), 2),
    (3, 2, (0, 0, 1), 1),
    (0, 3, (0, 0, 0), 2),
    (4, 5, (1, 0, 0), 1),
    (5, 6, (1, 1, 0), 2),
    (7, 6, (1, 0, 1), 1),
    (4, 7, (1, 0, 0), 2),
    (0, 4, (0, 0, 0), 0),
    (1, 5, (0, 1, 0), 0),
    (2, 6, (0, 1, 1), 0),
    (3, 7, (0, 0, 1), 0),
)

# Per edge: (buffer, row offset, column offset).
_SLOTS = (
    ("dy", 0, 0),
    ("lz", 1, 0),
    ("uy", 0, 0),
    ("lz", 0, 0),
    ("dy", 0, 1),
    ("lz", 1, 1),
    ("uy", 0, 1),
    ("lz", 0, 1),
    ("dx", 0, 0),
    ("dx", 1, 0),
    ("ux", 1, 0),
    ("ux", 0, 0),
)

_CENTRE = 12


def _already_created(edge: int, x: int, y: int, z: int) -> bool:
    """Whether an earlier cell has created the vertex on *edge*."""
    if edge == 0:
        return bool(z or x)
    if edge in (1, 2):
        return bool(x)
    if edge == 3:
        return bool(y or x)
    if edge == 4:
        return bool(z)
    if edge == 7:
        return bool(y)
    if edge == 8:
        return bool(z or y)
    if edge == 9:
        return bool(z)
    if edge == 11:
        return bool(y)
    # 5, 6 and 10 are always new
    return False


# ===========================================================================
# Surface
# ===========================================================================

class Surface:
    """Indexed triangle mesh with per-vertex unit normals.

    Attributes
    ----------
    vertices : (N, 3) float64 array
    normals : (N, 3) float64 array, index-aligned with ``vertices``
    indices : (T, 3) int64 array of vertex indices, pairwise distinct per row
    """

    def __init__(
        self,
        vertices: Optional[npt.ArrayLike] = None,
        normals: Optional[npt.ArrayLike] = None,
        indices: Optional[npt.ArrayLike] = None,
    ) -> None:
        self.vertices = np.asarray(
            vertices if vertices is not None else np.empty((0, 3)), dtype=np.float64
        ).reshape(-1, 3)
        self.normals = np.asarray(
            normals if normals is not None else np.empty((0, 3)), dtype=np.float64
        ).reshape(-1, 3)
        self.indices = np.asarray(
            indices if indices is not None else np.empty((0, 3)), dtype=np.int64
        ).reshape(-1, 3)
        if len(self.vertices) != len(self.normals):
            raise ValueError(
                f"{len(self.vertices)} vertices but {len(self.normals)} normals"
            )

    @property
    def n_vertices(self) -> int:
        return len(self.vertices)

    @property
    def n_triangles(self) -> int:
        return len(self.indices)

    def map_vertices(self, func: Callable[[np.ndarray], npt.ArrayLike]) -> Surface:
        """New surface with ``func(vertices)`` as vertex positions.

        *func* receives the whole ``(N, 3)`` array and must return an array
        of the same shape.  Normals and indices are shared unchanged.
        """
        return Surface(func(self.vertices.copy()), self.normals, self.indices)

    def triangle_vertices(self) -> np.ndarray:
        """``(3T, 3)`` float32 corner positions, three rows per triangle."""
        return self.vertices[self.indices.ravel()].astype(np.float32)

    def triangle_normals(self) -> np.ndarray:
        """``(3T, 3)`` float32 corner normals aligned with :meth:`triangle_vertices`."""
        return self.normals[self.indices.ravel()].astype(np.float32)

    def __repr__(self) -> str:
        return f"Surface(n_vertices={self.n_vertices}, n_triangles={self.n_triangles})"


# ===========================================================================
# Extractor
# ===========================================================================

def _cell_codes(negative: np.ndarray) -> np.ndarray:
    """8-bit corner sign code of every cell of a ``(nz, ny, nx)`` mask."""
    n = negative.astype(np.int32)
    return (
        (n[:-1, :-1, :-1] << 7)
        | (n[:-1, 1:, :-1] << 6)
        | (n[1:, 1:, :-1] << 5)
        | (n[1:, :-1, :-1] << 4)
        | (n[:-1, :-1, 1:] << 3)
        | (n[:-1, 1:, 1:] << 2)
        | (n[1:, 1:, 1:] << 1)
        | n[1:, :-1, 1:]
    )


class _MarchingCubes:
    """State of a single extraction: field, edge buffers and output lists."""

    def __init__(self, field: np.ndarray, isovalue: float) -> None:
        nz, ny, nx = field.shape
        self.nx, self.ny, self.nz = nx, ny, nz
        self.isovalue = float(isovalue)
        self._field = field
        self._f = field.tolist()

        self._buffers: Dict[str, List[List[int]]] = {
            "dx": [[-1] * (nx - 1) for _ in range(ny)],
            "ux": [[-1] * (nx - 1) for _ in range(ny)],
            "dy": [[-1] * nx for _ in range(ny - 1)],
            "uy": [[-1] * nx for _ in range(ny - 1)],
            "lz": [[-1] * nx for _ in range(ny)],
        }
        self._corners: Dict[Tuple[int, int, int], int] = {}

        self._vertices: List[Tuple[float, float, float]] = []
        self._normals: List[Tuple[float, float, float]] = []
        self._indices: List[Tuple[int, int, int]] = []

    # ------------------------------------------------------------------
    # Sweep
    # ------------------------------------------------------------------

    def run(self) -> Surface:
        values = self.isovalue - self._field
        codes = _cell_codes(values < 0)
        v = values.tolist()
        buffers = self._buffers

        for z in range(self.nz - 1):
            layer = codes[z]
            ys, xs = np.nonzero((layer != 0) & (layer != 0xFF))
            v0, v1 = v[z], v[z + 1]
            for y, x in zip(ys.tolist(), xs.tolist()):
                corners = (
                    v0[y][x], v0[y + 1][x], v1[y + 1][x], v1[y][x],
                    v0[y][x + 1], v0[y + 1][x + 1], v1[y + 1][x + 1], v1[y][x + 1],
                )
                self._march_cell(x, y, z, int(layer[y, x]), corners)
            buffers["dx"], buffers["ux"] = buffers["ux"], buffers["dx"]
            buffers["dy"], buffers["uy"] = buffers["uy"], buffers["dy"]

        return Surface(self._vertices, self._normals, self._indices)

    def _march_cell(self, x: int, y: int, z: int, code: int, v: Sequence[float]) -> None:
        pcase, m = _resolve_case(code, v)
        p: List[Optional[int]] = [None] * 13
        for tri in _triangles(pcase):
            for c in tri:
                if p[c] is None:
                    p[c] = self._vertex(c, x, y, z, v)
            t2, t1, t0 = (p[c] for c in tri)
            # zero-area triangles are dropped
            if t0 != t1 and t0 != t2 and t1 != t2:
                self._indices.append((t0, t1, t2) if m else (t1, t0, t2))

    # ------------------------------------------------------------------
    # Vertices
    # ------------------------------------------------------------------

    def _vertex(self, c: int, x: int, y: int, z: int, v: Sequence[float]) -> int:
        if c == _CENTRE:
            return self._centre_vertex(x, y, z, v)

        key, dr, dc = _SLOTS[c]
        buf = self._buffers[key]
        if _already_created(c, x, y, z):
            return buf[y + dr][x + dc]
        index = self._edge_vertex(c, x, y, z, v)
        buf[y + dr][x + dc] = index
        return index

    def _edge_vertex(self, c: int, x: int, y: int, z: int, v: Sequence[float]) -> int:
        a, b, (ox, oy, oz), axis = _EDGES[c]
        na = (x + ox, y + oy, z + oz)
        nb = list(na)
        nb[axis] += 1
        nb = tuple(nb)

        va, vb = v[a], v[b]
        # a corner exactly on the isovalue is shared by all edges through it
        if relative_eq(va, 0.0):
            return self._corner_vertex(na)
        if relative_eq(vb, 0.0):
            return self._corner_vertex(nb)

        t = va / (va - vb)
        ga = self._gradient(*na)
        gb = self._gradient(*nb)
        pos = [float(na[0]), float(na[1]), float(na[2])]
        pos[axis] += t
        normal = [ga[i] * (1.0 - t) + gb[i] * t for i in range(3)]
        normal[axis] = vb - va
        return self._store(pos, normal)

    def _corner_vertex(self, node: Tuple[int, int, int]) -> int:
        index = self._corners.get(node)
        if index is None:
            index = self._store([float(n) for n in node], self._gradient(*node))
            self._corners[node] = index
        return index

    def _centre_vertex(self, x: int, y: int, z: int, v: Sequence[float]) -> int:
        normal = [
            v[4] + v[5] + v[6] + v[7] - v[0] - v[1] - v[2] - v[3],
            v[1] + v[2] + v[5] + v[6] - v[0] - v[3] - v[4] - v[7],
            v[2] + v[3] + v[6] + v[7] - v[0] - v[1] - v[4] - v[5],
        ]
        return self._store([x + 0.5, y + 0.5, z + 0.5], normal)

    def _gradient(self, x: int, y: int, z: int) -> List[float]:
        """Negated field gradient at a sample, one-sided on the boundary."""
        f = self._f
        nx, ny, nz = self.nx, self.ny, self.nz

        if x == 0:
            gx = f[z][y][0] - f[z][y][1]
        elif x == nx - 1:
            gx = f[z][y][x - 1] - f[z][y][x]
        else:
            gx = 0.5 * (f[z][y][x - 1] - f[z][y][x + 1])

        if y == 0:
            gy = f[z][0][x] - f[z][1][x]
        elif y == ny - 1:
            gy = f[z][y - 1][x] - f[z][y][x]
        else:
            gy = 0.5 * (f[z][y - 1][x] - f[z][y + 1][x])

        if z == 0:
            gz = f[0][y][x] - f[1][y][x]
        elif z == nz - 1:
            gz = f[z - 1][y][x] - f[z][y][x]
        else:
            gz = 0.5 * (f[z - 1][y][x] - f[z + 1][y][x])

        return [gx, gy, gz]

    def _store(self, pos: Sequence[float], normal: Sequence[float]) -> int:
        gx, gy, gz = normal
        length = sqrt(gx * gx + gy * gy + gz * gz)
        if length == 0.0:
            logger.debug("zero gradient at %s, using +z normal", tuple(pos))
            unit = (0.0, 0.0, 1.0)
        else:
            unit = (gx / length, gy / length, gz / length)
        self._vertices.append((pos[0], pos[1], pos[2]))
        self._normals.append(unit)
        return len(self._vertices) - 1


# ===========================================================================
# Public API
# ===========================================================================

def marching_cubes(
    data: npt.ArrayLike, isovalue: float, nx: int, ny: int, nz: int
) -> Surface:
    """Extract the *isovalue* surface of a scalar field.

    Parameters
    ----------
    data:
        ``nx * ny * nz`` samples, x fastest then y then z.
    isovalue:
        Threshold; samples above it are inside.
    nx, ny, nz:
        Grid size, each at least 2.

    Returns
    -------
    Surface
        Mesh in grid-index coordinates.

    Raises
    ------
    ValueError
        If a dimension is below 2 or ``len(data) != nx * ny * nz``.
    """
    if nx < 2 or ny < 2 or nz < 2:
        raise ValueError(f"grid dimensions must be at least 2, got ({nx}, {ny}, {nz})")
    field = np.asarray(data, dtype=np.float64).ravel()
    if field.size != nx * ny * nz:
        raise ValueError(
            f"data has {field.size} values, expected {nx}*{ny}*{nz} = {nx * ny * nz}"
        )

    surface = _MarchingCubes(field.reshape(nz, ny, nx), isovalue).run()
    logger.debug(
        "marching cubes on %dx%dx%d at %g: %d vertices, %d triangles",
        nx, ny, nz, isovalue, surface.n_vertices, surface.n_triangles,
    )
    return surface


def extract_isosurface(grid: Grid3D, isovalue: float) -> Surface:
    """:func:`marching_cubes` over the cells of *grid*."""
    nx, ny, nz = grid.dim
    return marching_cubes(grid.data, isovalue, nx, ny, nz)
