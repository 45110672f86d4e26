"""
contour2d: 2D Grids, Contours and Slice Contouring
==================================================

Building blocks for turning drawn outlines into raster masks and for
tracing iso-lines through single slices of a scalar field.

Implemented features
--------------------
- Dense grids: :class:`Grid2D` (bounds-checked, x fastest)
- Segment predicates: :func:`relative_to`, :func:`is_on`,
  :func:`segments_intersect`
- Validated outlines: :class:`ContourBuilder` -> :class:`Contour`
- Scan-line fill: :func:`fill_contour`, :func:`bresenham_line`
- Marching squares: :func:`marching_squares` over a :class:`Slice`

Quick start
-----------

::

    import numpy as np
    from contour2d import ContourBuilder, Grid2D, fill_contour

    builder = ContourBuilder()
    for p in [(5, 5), (40, 8), (30, 25), (8, 20)]:
        if builder.try_append(p):
            builder.append(p)
    contour = builder.close()

    mask = fill_contour(Grid2D(50, 30, dtype=np.uint8), contour)
    print(mask.as_array().sum(), contour.area())
"""

from .grid import Grid2D
from .geometry import (
    LineSegment,
    PointSegmentRelation,
    relative_to,
    is_on,
    segments_intersect,
)
from .contour import (
    APPEND_EPSILON,
    INTERSECT_EPSILON,
    CLOSE_EPSILON,
    Contour,
    ContourBuilder,
)
from .raster import bresenham_line, fill_contour
from .marching_squares import Slice, marching_squares

__version__ = "0.1.0"

__all__ = [
    # Grid
    "Grid2D",

    # Geometry predicates
    "LineSegment",
    "PointSegmentRelation",
    "relative_to",
    "is_on",
    "segments_intersect",

    # Contours
    "APPEND_EPSILON",
    "INTERSECT_EPSILON",
    "CLOSE_EPSILON",
    "Contour",
    "ContourBuilder",

    # Rasterization
    "bresenham_line",
    "fill_contour",

    # Slice contouring
    "Slice",
    "marching_squares",
]
