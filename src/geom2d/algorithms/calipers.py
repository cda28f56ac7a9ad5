# MIT License (see LICENSE)
"""
Polygon diameter by rotating calipers.

The farthest pair of a point set is always a pair of convex hull vertices,
and more specifically an antipodal pair: two vertices touched at the same
time by two parallel supporting lines. Walking the hull edges in order, the
vertex antipodal to the current edge only ever moves forward, so every
antipodal pair is visited in one O(h) sweep after the O(n log n) hull.

The sweep relies on the hull being strictly convex (no collinear vertices),
which convex_hull guarantees.
"""
from __future__ import annotations
import logging
from typing import Iterable

import numpy as np

from ..constants import EPS
from ..predicates import cross
from ..types import PointLike
from ..util import dist_sq, distance, to_extended
from .hull import convex_hull

logger = logging.getLogger(__name__)


def polygon_diameter(points: Iterable[PointLike], eps: float = EPS) -> np.longdouble:
    """
    Largest distance between any two of the given points.

    Args:
        points: Points, (x, y) pairs or an (N, 2) array; need not be a hull
            or be ordered. Never modified.
        eps: Collinearity tolerance used while building the hull.

    Returns:
        The diameter, or 0 for fewer than two points (or all points
        coincident).
    """
    hull = convex_hull(points, eps)
    n = len(hull)
    if n < 2:
        logger.debug("polygon_diameter: hull has %d vertex, diameter is 0", n)
        return np.longdouble(0)
    if n == 2:
        return distance(hull[0], hull[1])

    best = 0
    j = 1
    for i in range(n):
        a = hull[i]
        b = hull[(i + 1) % n]

        # Advance j until edge j points against edge i
        while cross(a, b, hull[j], hull[(j + 1) % n]) > 0:
            j = (j + 1) % n

        best = max(best, dist_sq(a, hull[j]), dist_sq(b, hull[j]))

    return np.sqrt(to_extended(best))
