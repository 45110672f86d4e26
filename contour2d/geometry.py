"""Point / line-segment relation tests for 2D contour validation.

All predicates are approximate: collinearity is judged against a
caller-supplied *epsilon* expressed in the units of the coordinates, so
callers must pick a tolerance that suits their coordinate scale.

Line equations are solved along the dominant axis of a segment
(``y`` as a function of ``x`` when the segment is wider than tall, ``x``
as a function of ``y`` otherwise), which keeps axis-parallel segments
free of divisions by a zero coordinate delta.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from _iso_common import Point2D


class PointSegmentRelation(Enum):
    """Where a point lies with respect to a segment ``p0 -> p1``."""

    ON = "on"            # collinear and between p0 and p1
    PAST_A = "past_a"    # collinear, beyond p0 (opposite to p1)
    PAST_B = "past_b"    # collinear, beyond p1
    APART = "apart"      # not on the supporting line


class LineSegment(NamedTuple):
    """Ordered pair of 2-D points."""

    p0: Point2D
    p1: Point2D

    def reversed(self) -> LineSegment:
        return LineSegment(self.p1, self.p0)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _offset(point: Point2D, segment: LineSegment) -> float:
    """Signed offset of *point* from the supporting line of *segment*.

    Measured along y when the segment is x-dominant, along x otherwise.
    Zero for a degenerate segment.
    """
    (x0, y0), (x1, y1) = segment
    px, py = point
    dx = x1 - x0
    dy = y1 - y0
    if dx == 0 and dy == 0:
        return 0.0
    if abs(dx) >= abs(dy):
        return py - (y0 + dy / dx * (px - x0))
    return px - (x0 + dx / dy * (py - y0))


def _classify(c: float, a: float, b: float) -> PointSegmentRelation:
    """Position of coordinate *c* relative to the interval from *a* to *b*."""
    if a < b:
        if c > b:
            return PointSegmentRelation.PAST_B
        if c < a:
            return PointSegmentRelation.PAST_A
    else:
        if c > a:
            return PointSegmentRelation.PAST_A
        if c < b:
            return PointSegmentRelation.PAST_B
    return PointSegmentRelation.ON


# ---------------------------------------------------------------------------
# Public predicates
# ---------------------------------------------------------------------------

def relative_to(point: Point2D, segment: LineSegment, epsilon: float) -> PointSegmentRelation:
    """Classify *point* against *segment*.

    The point is collinear when its offset from the supporting line is
    within *epsilon*; containment between the end points is exact.
    """
    (x0, y0), (x1, y1) = segment
    px, py = point
    dx = x1 - x0
    dy = y1 - y0

    if dx == 0 and dy == 0:
        if abs(px - x0) <= epsilon and abs(py - y0) <= epsilon:
            return PointSegmentRelation.ON
        return PointSegmentRelation.APART

    if abs(_offset(point, segment)) > epsilon:
        return PointSegmentRelation.APART

    if abs(dx) >= abs(dy):
        return _classify(px, x0, x1)
    return _classify(py, y0, y1)


def is_on(point: Point2D, segment: LineSegment, epsilon: float) -> bool:
    """``True`` when *point* lies on *segment* (see :func:`relative_to`)."""
    return relative_to(point, segment, epsilon) is PointSegmentRelation.ON


def segments_intersect(a: LineSegment, b: LineSegment, epsilon: float) -> bool:
    """``True`` when segments *a* and *b* cross or touch.

    Touching at an end point and collinear overlap both count as an
    intersection.  Segments whose bounding intervals are disjoint on
    either axis are rejected before any line equation is solved.
    """
    (x0, y0), (x1, y1) = a
    (x2, y2), (x3, y3) = b

    if max(x0, x1) < min(x2, x3) or min(x0, x1) > max(x2, x3):
        return False
    if max(y0, y1) < min(y2, y3) or min(y0, y1) > max(y2, y3):
        return False

    # b's end points strictly on one side of a's line, or vice versa
    s2 = _offset(b[0], a)
    s3 = _offset(b[1], a)
    if (s2 > epsilon and s3 > epsilon) or (s2 < -epsilon and s3 < -epsilon):
        return False
    s0 = _offset(a[0], b)
    s1 = _offset(a[1], b)
    if (s0 > epsilon and s1 > epsilon) or (s0 < -epsilon and s1 < -epsilon):
        return False
    return True
