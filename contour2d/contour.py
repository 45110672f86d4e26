"""Closed 2D polylines and their incremental, validating builder.

A :class:`ContourBuilder` accepts points one at a time.  Each candidate is
checked before it is committed so that the resulting polyline never
backtracks along its last segment and never crosses itself; closing is
checked the same way for the implicit last -> first segment.  A closed
builder yields an immutable :class:`Contour`.

Example
-------
>>> b = ContourBuilder()
>>> for p in [(0, 0), (10, 0), (10, 10), (0, 10)]:
...     b.append(p)
>>> b.can_close()
True
>>> c = b.close()
>>> c.area()
100.0
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator, List, Sequence, Tuple

import numpy as np
import numpy.typing as npt

from _iso_common import Point2D
from .geometry import LineSegment, PointSegmentRelation, is_on, relative_to, segments_intersect

logger = logging.getLogger(__name__)

# Collinear-overlap tolerance for the segment preceding a candidate point.
APPEND_EPSILON = 3.0
# Crossing tolerance while appending.
INTERSECT_EPSILON = 0.1
# Tolerance for the closing segment tests.
CLOSE_EPSILON = 0.5

__all__ = [
    "APPEND_EPSILON", "INTERSECT_EPSILON", "CLOSE_EPSILON",
    "Contour", "ContourBuilder",
]


def _as_point(p: Sequence[float]) -> Point2D:
    x, y = p
    return (float(x), float(y))


# ===========================================================================
# Contour
# ===========================================================================

class Contour:
    """Immutable, implicitly closed sequence of 2D points.

    The last point connects back to the first.  Instances are normally
    produced by :meth:`ContourBuilder.close`, which guarantees that no two
    non-adjacent segments intersect.
    """

    def __init__(self, points: npt.ArrayLike) -> None:
        pts = np.array(points, dtype=np.float64).reshape(-1, 2)
        pts.setflags(write=False)
        self._points = pts

    @property
    def points(self) -> np.ndarray:
        """Read-only ``(N, 2)`` array of the vertices."""
        return self._points

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point2D]:
        for x, y in self._points:
            yield (float(x), float(y))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Contour):
            return NotImplemented
        return bool(np.array_equal(self._points, other._points))

    def __repr__(self) -> str:
        return f"Contour(n_points={len(self)})"

    def segments(self) -> List[LineSegment]:
        """All edges including the closing one, in order."""
        pts = list(self)
        n = len(pts)
        return [LineSegment(pts[i], pts[(i + 1) % n]) for i in range(n)]

    def transform_points(self, func: Callable[[Point2D], Sequence[float]]) -> Contour:
        """Return a new contour with *func* applied to every vertex."""
        return Contour([func(p) for p in self])

    def bounding_box(self) -> Tuple[Point2D, Point2D]:
        """``((xmin, ymin), (xmax, ymax))``."""
        if len(self) == 0:
            raise ValueError("bounding box of an empty contour is undefined")
        lo = self._points.min(axis=0)
        hi = self._points.max(axis=0)
        return (float(lo[0]), float(lo[1])), (float(hi[0]), float(hi[1]))

    def area(self) -> float:
        """Enclosed area (shoelace formula, always non-negative)."""
        if len(self) < 3:
            return 0.0
        x = self._points[:, 0]
        y = self._points[:, 1]
        return float(abs(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))) * 0.5)

    def contains(self, point: Sequence[float]) -> bool:
        """Even-odd test with a ray cast towards +x."""
        px, py = _as_point(point)
        inside = False
        for (x0, y0), (x1, y1) in self.segments():
            if (y0 > py) != (y1 > py):
                xc = x0 + (py - y0) * (x1 - x0) / (y1 - y0)
                if px < xc:
                    inside = not inside
        return inside


# ===========================================================================
# Builder
# ===========================================================================

class ContourBuilder:
    """Accumulates points into a polyline that can later be closed.

    :meth:`try_append` and :meth:`can_close` are pure queries meant for
    interactive use; :meth:`append` and :meth:`close` commit and raise when
    the corresponding query would have failed.
    """

    def __init__(self) -> None:
        self._points: List[Point2D] = []
        self._closed = False

    @property
    def points(self) -> List[Point2D]:
        """Copy of the points accepted so far."""
        return list(self._points)

    @property
    def closed(self) -> bool:
        return self._closed

    def __len__(self) -> int:
        return len(self._points)

    def _check_open(self) -> None:
        if self._closed:
            raise RuntimeError("contour builder has already been closed")

    # ------------------------------------------------------------------
    # Appending
    # ------------------------------------------------------------------

    def try_append(
        self,
        point: Sequence[float],
        epsilon: float = APPEND_EPSILON,
        intersect_epsilon: float = INTERSECT_EPSILON,
    ) -> bool:
        """``True`` if *point* may be appended.

        A candidate is rejected when it lies on the last segment or beyond
        its start (the polyline would fold back on itself), or when the new
        segment would cross any earlier, non-adjacent segment.
        """
        self._check_open()
        pts = self._points
        if len(pts) < 2:
            return True

        p = _as_point(point)
        last = len(pts) - 1
        rel = relative_to(p, LineSegment(pts[last], pts[last - 1]), epsilon)
        if rel in (PointSegmentRelation.ON, PointSegmentRelation.PAST_B):
            return False

        new_seg = LineSegment(pts[last], p)
        for i in range(last - 1):
            if segments_intersect(new_seg, LineSegment(pts[i], pts[i + 1]), intersect_epsilon):
                return False
        return True

    def append(
        self,
        point: Sequence[float],
        epsilon: float = APPEND_EPSILON,
        intersect_epsilon: float = INTERSECT_EPSILON,
    ) -> None:
        """Commit *point*; raises ``ValueError`` if :meth:`try_append` rejects it."""
        if not self.try_append(point, epsilon, intersect_epsilon):
            logger.debug("rejected point %s after %d points", point, len(self._points))
            raise ValueError(f"point {tuple(point)} would fold back or self-intersect")
        self._points.append(_as_point(point))

    def pop(self) -> Point2D:
        """Remove and return the most recently appended point."""
        self._check_open()
        if not self._points:
            raise IndexError("pop from an empty contour builder")
        return self._points.pop()

    # ------------------------------------------------------------------
    # Closing
    # ------------------------------------------------------------------

    def can_close(self, epsilon: float = CLOSE_EPSILON) -> bool:
        """``True`` if the closing segment (last -> first) is valid."""
        if self._closed:
            return False
        pts = self._points
        n = len(pts)
        if n <= 2:
            return False
        if n == 3:
            return True

        last = n - 1
        closing = LineSegment(pts[last], pts[0])
        if is_on(pts[1], closing, epsilon) or is_on(pts[last - 1], closing, epsilon):
            return False

        closing = closing.reversed()
        for i in range(1, last - 1):
            if segments_intersect(closing, LineSegment(pts[i], pts[i + 1]), epsilon):
                return False
        return True

    def close(self, epsilon: float = CLOSE_EPSILON) -> Contour:
        """Finish the polyline and return it as a :class:`Contour`."""
        self._check_open()
        if not self.can_close(epsilon):
            raise ValueError(f"contour with {len(self._points)} points cannot be closed")
        self._closed = True
        return Contour(self._points)
