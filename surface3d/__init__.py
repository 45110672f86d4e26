"""
surface3d: Isosurface Extraction
================================

Triangle meshes from 3D scalar fields and from stacks of planar contours.

Implemented features
--------------------
- Dense grids: :class:`Grid3D`, lattice sampling with :func:`sample_grid_3d`
- MC33 marching cubes with face and interior ambiguity tests:
  :func:`marching_cubes`, :func:`extract_isosurface`
- Indexed meshes with unit normals: :class:`Surface`
- Contour stacks: :class:`Structure` (``to_mesh``, ``volume``)

Quick start
-----------

Scalar field::

    import numpy as np
    from surface3d import sample_grid_3d, extract_isosurface

    grid = sample_grid_3d(
        lambda x, y, z: x**2 + y**2 + z**2,
        bounds=((-1, 1), (-1, 1), (-1, 1)),
        resolution=(32, 32, 32),
    )
    mesh = extract_isosurface(grid, 0.5)
    print(mesh.n_vertices, mesh.n_triangles)

Contour stack::

    from contour2d import Contour
    from surface3d import Structure

    s = Structure()
    square = Contour([(0, 0), (40, 0), (40, 40), (0, 40)])
    for z in (0.0, 1.0, 2.0):
        s.push(z, square)
    mesh = s.to_mesh()
"""

from .grid import Grid3D, sample_grid_3d
from .marching_cubes import Surface, marching_cubes, extract_isosurface
from .structure import (
    ELEVATION_EPSILON,
    MIN_RESOLUTION,
    MAX_RESOLUTION,
    Structure,
)

__version__ = "0.1.0"

__all__ = [
    # Grid
    "Grid3D",
    "sample_grid_3d",

    # Marching cubes
    "Surface",
    "marching_cubes",
    "extract_isosurface",

    # Contour stacks
    "ELEVATION_EPSILON",
    "MIN_RESOLUTION",
    "MAX_RESOLUTION",
    "Structure",
]
