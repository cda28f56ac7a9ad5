# MIT License (see LICENSE)
"""
Closest pair of points by divide and conquer.

Classic O(n log n) scheme:
1. Sort the points once by x (lexicographic) and once by y.
2. Split the x-sorted range at its midpoint and solve both halves.
3. Combine: with d the smaller half result, only points within sqrt(d) of
   the dividing line (the "strip") can form a closer pair. Scanning the
   strip in y order, each point only needs comparing against successors
   whose y-gap is still below sqrt(d), a constant number per point.

The y-ordered list is carried down the recursion as x-ranks (indices into the
x-sorted list). Each level splits it with a single O(n) pass by rank, which
keeps y order without re-sorting and stays correct with duplicate points.

All comparisons use squared distances; the only square root is taken on the
final answer.
"""
from __future__ import annotations
import logging
from typing import Iterable

import numpy as np

from ..types import Point, PointLike, as_points
from ..util import Wide, dist_sq, to_extended, widen

logger = logging.getLogger(__name__)

# Ranges at or below this size are solved by checking every pair
BRUTE_FORCE_SIZE = 3


def _brute_force(xs: list[Point], lo: int, hi: int) -> Wide:
    best = None
    for i in range(lo, hi):
        for j in range(i + 1, hi):
            d = dist_sq(xs[i], xs[j])
            if best is None or d < best:
                best = d
    return best


def _strip_closest(strip: list[Point], d: Wide) -> Wide:
    """
    Smallest squared distance within a y-sorted strip, or d if none is
    smaller.
    """
    best = d
    n = len(strip)
    for i in range(n):
        yi = widen(strip[i].y)
        j = i + 1
        while j < n:
            dy = widen(strip[j].y) - yi
            if dy * dy >= best:
                break
            cand = dist_sq(strip[i], strip[j])
            if cand < best:
                best = cand
            j += 1
    return best


def _closest(xs: list[Point], lo: int, hi: int, by_y: list[int]) -> Wide:
    """
    Smallest squared distance among xs[lo:hi].

    Args:
        xs: All points sorted by x.
        lo, hi: Half-open range of xs to solve.
        by_y: The ranks lo..hi-1 ordered by y coordinate.
    """
    if hi - lo <= BRUTE_FORCE_SIZE:
        return _brute_force(xs, lo, hi)

    mid = lo + (hi - lo) // 2
    left = [i for i in by_y if i < mid]
    right = [i for i in by_y if i >= mid]

    d = min(_closest(xs, lo, mid, left), _closest(xs, mid, hi, right))

    # Points closer to the dividing line than sqrt(d), still in y order
    mid_x = widen(xs[mid].x)
    strip = []
    for i in by_y:
        dx = widen(xs[i].x) - mid_x
        if dx * dx < d:
            strip.append(xs[i])

    return min(d, _strip_closest(strip, d))


def closest_pair(points: Iterable[PointLike]) -> np.longdouble:
    """
    Minimum Euclidean distance between any two of the given points.

    Duplicate points are distinct entries and give a distance of 0.

    Args:
        points: Points, (x, y) pairs or an (N, 2) array. Never modified.

    Returns:
        The smallest pairwise distance, or 0 for fewer than two points.
    """
    pts = as_points(points)
    n = len(pts)
    if n < 2:
        logger.debug("closest_pair: %d point(s), nothing to compare", n)
        return np.longdouble(0)

    xs = sorted(pts)
    by_y = sorted(range(n), key=lambda i: xs[i].y)

    best = _closest(xs, 0, n, by_y)
    return np.sqrt(to_extended(best))
