"""Stacks of planar contours and their conversion to a surface mesh.

A :class:`Structure` collects closed contours drawn on parallel planes,
each tagged with its elevation ``z``.  :meth:`Structure.to_mesh` burns
every plane into a binary mask, stacks the masks into a volume and runs
:func:`~surface3d.marching_cubes.marching_cubes` on it at ``0.5``, the
midpoint between outside (0) and inside (1).  Vertices are finally mapped
back from raster indices to the structure's own coordinates.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

import numpy as np

from _iso_common import Point3D, abs_diff_eq
from contour2d.contour import Contour
from contour2d.grid import Grid2D
from contour2d.raster import fill_contour
from .marching_cubes import Surface, marching_cubes

logger = logging.getLogger(__name__)

# Elevations closer than this are the same plane.
ELEVATION_EPSILON = 1e-6
# Bounds on the raster size along x and y.
MIN_RESOLUTION = 50
MAX_RESOLUTION = 1024

__all__ = [
    "ELEVATION_EPSILON", "MIN_RESOLUTION", "MAX_RESOLUTION",
    "Structure",
]


class Structure:
    """Ordered collection of ``(elevation, contour)`` pairs.

    Elevations may be pushed in any order and a plane may hold several
    contours; nested contours on one plane describe holes.

    Examples
    --------
    >>> s = Structure()
    >>> square = Contour([(0, 0), (10, 0), (10, 10), (0, 10)])
    >>> s.push(0.0, square)
    >>> s.push(2.0, square)
    >>> s.elevations()
    [0.0, 2.0]
    >>> s.volume()
    200.0
    """

    def __init__(self) -> None:
        self._items: List[Tuple[float, Contour]] = []

    def push(self, z: float, contour: Contour) -> None:
        self._items.append((float(z), contour))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Tuple[float, Contour]]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Structure(n_contours={len(self)})"

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def elevations(self, epsilon: float = ELEVATION_EPSILON) -> List[float]:
        """Distinct elevations in ascending order."""
        levels: List[float] = []
        for z in sorted(z for z, _ in self._items):
            if not levels or not abs_diff_eq(z, levels[-1], epsilon):
                levels.append(z)
        return levels

    def get_contours_at(
        self, z: float, epsilon: float = ELEVATION_EPSILON
    ) -> Optional[List[Contour]]:
        """Contours whose elevation is within *epsilon* of *z*, or ``None``."""
        found = [c for zc, c in self._items if abs_diff_eq(zc, z, epsilon)]
        return found or None

    def bounding_box(self) -> Tuple[Point3D, Point3D]:
        """``((xmin, ymin, zmin), (xmax, ymax, zmax))`` over all contours.

        Raises
        ------
        ValueError
            If the structure holds no points.
        """
        pts = [c.points for _, c in self._items if len(c)]
        if not pts:
            raise ValueError("bounding box of an empty structure is undefined")
        xy = np.concatenate(pts)
        zs = [z for z, c in self._items if len(c)]
        lo = xy.min(axis=0)
        hi = xy.max(axis=0)
        return (
            (float(lo[0]), float(lo[1]), min(zs)),
            (float(hi[0]), float(hi[1]), max(zs)),
        )

    # ------------------------------------------------------------------
    # Area and volume
    # ------------------------------------------------------------------

    def area_at(self, z: float, epsilon: float = ELEVATION_EPSILON) -> float:
        """Enclosed area on the plane at *z*; nested contours subtract."""
        contours = self.get_contours_at(z, epsilon) or []
        total = 0.0
        for i, c in enumerate(contours):
            if len(c) == 0:
                continue
            probe = tuple(c.points[0])
            depth = sum(
                1 for j, other in enumerate(contours) if j != i and other.contains(probe)
            )
            total += -c.area() if depth % 2 else c.area()
        return total

    def volume(self, epsilon: float = ELEVATION_EPSILON) -> float:
        """Enclosed volume, integrating plane areas with the trapezoidal rule.

        A structure with fewer than two distinct elevations has no volume.
        """
        levels = self.elevations(epsilon)
        if len(levels) < 2:
            return 0.0
        areas = [self.area_at(z, epsilon) for z in levels]
        return float(sum(
            0.5 * (areas[k] + areas[k + 1]) * (levels[k + 1] - levels[k])
            for k in range(len(levels) - 1)
        ))

    # ------------------------------------------------------------------
    # Meshing
    # ------------------------------------------------------------------

    def to_mesh(
        self,
        min_resolution: int = MIN_RESOLUTION,
        max_resolution: int = MAX_RESOLUTION,
        epsilon: float = ELEVATION_EPSILON,
    ) -> Surface:
        """Triangulate the surface enclosing the stacked contours.

        Parameters
        ----------
        min_resolution, max_resolution:
            Bounds on the raster size per axis; the size is otherwise the
            bounding-box extent plus one.
        epsilon:
            Tolerance used to group contours into planes.

        Returns
        -------
        Surface
            Mesh in the structure's coordinates; ``z`` is interpolated
            between the two elevations that bracket each vertex.

        Raises
        ------
        ValueError
            If there are fewer than two distinct elevations, if the x or y
            extent is zero, or if the resolution bounds are unusable.
        """
        if min_resolution < 4 or max_resolution < min_resolution:
            raise ValueError(
                f"invalid resolution bounds ({min_resolution}, {max_resolution})"
            )
        (xmin, ymin, _), (xmax, ymax, _) = self.bounding_box()
        levels = self.elevations(epsilon)
        if len(levels) < 2:
            raise ValueError(f"need at least two distinct elevations, got {len(levels)}")
        xext = xmax - xmin
        yext = ymax - ymin
        if xext <= 0 or yext <= 0:
            raise ValueError("contours have zero extent along x or y")

        w = int(min(max(xext + 1, min_resolution), max_resolution))
        h = int(min(max(yext + 1, min_resolution), max_resolution))
        sx = (w - 3) / xext
        sy = (h - 3) / yext

        def to_raster(p):
            return ((p[0] - xmin) * sx + 1.0, (p[1] - ymin) * sy + 1.0)

        masks = []
        for z in levels:
            mask = np.zeros((h, w), dtype=np.uint8)
            for contour in self.get_contours_at(z, epsilon):
                grid = fill_contour(Grid2D(w, h, dtype=np.uint8), contour.transform_points(to_raster))
                mask ^= grid.as_array()
            masks.append(mask)
        logger.debug("rasterized %d planes at %dx%d", len(masks), w, h)

        volume = np.stack(masks).astype(np.float32)
        surface = marching_cubes(volume.ravel(), 0.5, w, h, len(levels))

        zs = np.arange(len(levels), dtype=np.float64)

        def to_world(v: np.ndarray) -> np.ndarray:
            v[:, 0] = (v[:, 0] - 1.0) / sx + xmin
            v[:, 1] = (v[:, 1] - 1.0) / sy + ymin
            v[:, 2] = np.interp(v[:, 2], zs, levels)
            return v

        return surface.map_vertices(to_world)
