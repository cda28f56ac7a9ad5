# MIT License (see LICENSE)
"""
Geometric predicates: turn direction and segment intersection.

Every turn decision in the package goes through orientation(), so the
epsilon policy for "collinear" lives in exactly one place. cross() is the
only function that multiplies coordinate differences; it widens its inputs
first (see util.widen) so integer input is exact and float input is
accumulated in extended precision.

Conventions:
- cross(p1, q1, p2, q2) > 0 means direction q2-p2 is counter-clockwise
  from direction q1-p1.
- orientation(p, q, r) compares (q - p) with (r - q).
"""
from __future__ import annotations
from .constants import EPS
from .types import Orientation, Point
from .util import Wide, widen


def cross(p1: Point, q1: Point, p2: Point, q2: Point) -> Wide:
    """
    2D cross product of the direction vectors (q1 - p1) and (q2 - p2).

    Returns the z-component of the 3D cross product; positive when the second
    direction is counter-clockwise from the first, zero when they are
    parallel.
    """
    ax = widen(q1.x) - widen(p1.x)
    ay = widen(q1.y) - widen(p1.y)
    bx = widen(q2.x) - widen(p2.x)
    by = widen(q2.y) - widen(p2.y)
    return ax * by - ay * bx


def orientation(p: Point, q: Point, r: Point, eps: float = EPS) -> Orientation:
    """
    Turn direction of the ordered triple (p, q, r).

    Args:
        p: First point.
        q: Second (pivot) point.
        r: Third point.
        eps: Cross products with magnitude below eps count as collinear.

    Returns:
        Orientation.COLLINEAR, CLOCKWISE or COUNTER_CLOCKWISE.
    """
    val = cross(p, q, q, r)
    if abs(val) < eps:
        return Orientation.COLLINEAR
    return Orientation.COUNTER_CLOCKWISE if val > 0 else Orientation.CLOCKWISE


def on_segment(p: Point, q: Point, r: Point) -> bool:
    """
    True if q lies inside the bounding box of segment p-r (inclusive).

    Only meaningful once orientation(p, q, r) is COLLINEAR, i.e. q is
    already known to be on the line through p and r.
    """
    return bool(
        min(p.x, r.x) <= q.x <= max(p.x, r.x)
        and min(p.y, r.y) <= q.y <= max(p.y, r.y)
    )


def do_intersect(p1: Point, q1: Point, p2: Point, q2: Point, eps: float = EPS) -> bool:
    """
    Test whether segment p1-q1 crosses or touches segment p2-q2.

    The general case is a proper crossing: both endpoints of each segment lie
    strictly on opposite sides of the other segment. Special cases cover an
    endpoint lying on the other segment (touching, collinear overlap).

    Args:
        p1, q1: Endpoints of the first segment.
        p2, q2: Endpoints of the second segment.
        eps: Collinearity tolerance forwarded to orientation().

    Returns:
        True if the segments share at least one point.
    """
    o1 = orientation(p1, q1, p2, eps)
    o2 = orientation(p1, q1, q2, eps)
    o3 = orientation(p2, q2, p1, eps)
    o4 = orientation(p2, q2, q1, eps)

    general = Orientation.COLLINEAR not in (o1, o2, o3, o4)
    if general and o1 != o2 and o3 != o4:
        return True

    # Collinear endpoint lying on the other segment
    if o1 == Orientation.COLLINEAR and on_segment(p1, p2, q1):
        return True
    if o2 == Orientation.COLLINEAR and on_segment(p1, q2, q1):
        return True
    if o3 == Orientation.COLLINEAR and on_segment(p2, p1, q2):
        return True
    if o4 == Orientation.COLLINEAR and on_segment(p2, q1, q2):
        return True

    return False
