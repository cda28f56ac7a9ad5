# MIT License (see LICENSE)
"""
Convex hull construction using Andrew's monotone chain.

The points are sorted lexicographically (x, then y) and two chains are built:
the lower hull scanning left to right and the upper hull scanning right to
left. A point is kept on a chain only if it makes a strict counter-clockwise
turn with the two points before it; collinear and clockwise turns pop the
previous point. The result is therefore counter-clockwise with no collinear
or duplicate vertices.

Complexity: O(n log n) for the sort, O(n) for the scan.
"""
from __future__ import annotations
import logging
from typing import Iterable

from ..constants import EPS
from ..predicates import orientation
from ..types import Orientation, Point, PointLike, as_points

logger = logging.getLogger(__name__)


def _is_ccw_turn(a: Point, b: Point, c: Point, eps: float) -> bool:
    return orientation(a, b, c, eps) == Orientation.COUNTER_CLOCKWISE


def convex_hull(points: Iterable[PointLike], eps: float = EPS) -> list[Point]:
    """
    Compute the convex hull of a point set.

    Args:
        points: Points, (x, y) pairs or an (N, 2) array. Never modified.
        eps: Collinearity tolerance for the turn test.

    Returns:
        Hull vertices in counter-clockwise order, starting from the
        lexicographically smallest point. Inputs with two or fewer points are
        returned unchanged (as a new list). Collinear input gives its two
        extreme points; input made only of coincident points gives one.
    """
    pts = as_points(points)
    n = len(pts)
    if n <= 2:
        return pts

    pts.sort()
    hull: list[Point] = []

    # Lower chain
    for p in pts:
        while len(hull) >= 2 and not _is_ccw_turn(hull[-2], hull[-1], p, eps):
            hull.pop()
        hull.append(p)

    # Upper chain; never pops into the lower chain
    floor = len(hull) + 1
    for p in reversed(pts[:-1]):
        while len(hull) >= floor and not _is_ccw_turn(hull[-2], hull[-1], p, eps):
            hull.pop()
        hull.append(p)

    # Last point repeats the first
    hull.pop()

    if len(hull) == 2 and hull[0].isclose(hull[1], eps):
        logger.debug("convex_hull: %d coincident points collapsed to one", n)
        return hull[:1]
    return hull
