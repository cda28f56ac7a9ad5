# MIT License (see LICENSE)
"""
Simple polygon queries: point containment and area.

Polygons are sequences of vertices in either winding, implicitly closed
(the last vertex connects back to the first). Both routines assume a simple,
non-self-intersecting polygon and degrade to False / 0 below three vertices.
"""
from __future__ import annotations
import logging
from typing import Iterable

import numpy as np

from ..constants import EPS
from ..predicates import do_intersect, on_segment, orientation
from ..types import Orientation, Point, PointLike, as_points
from ..util import to_extended, widen

logger = logging.getLogger(__name__)


def _ray_end(polygon: list[Point], p: Point) -> Point:
    """
    Far endpoint of the horizontal ray cast from p.

    Placed one bounding-box width beyond the rightmost x, so it is outside the
    polygon while staying at the magnitude of the input coordinates.
    """
    xs = [widen(v.x) for v in polygon]
    xs.append(widen(p.x))
    hi, lo = max(xs), min(xs)
    return Point(hi + (hi - lo) + 1, p.y)


def is_inside(polygon: Iterable[PointLike], point: PointLike, eps: float = EPS) -> bool:
    """
    Test whether a point lies inside a simple polygon or on its boundary.

    Casts a horizontal ray from the point towards +x and counts the polygon
    edges it crosses; an odd count means inside. A point lying on an edge is
    reported as inside immediately.

    Edges are counted with a half-open rule (exactly one endpoint strictly
    above the ray), so a ray passing through a vertex counts once and a ray
    running along a horizontal edge does not count that edge.

    Args:
        polygon: Vertices of a simple polygon, any winding.
        point: Query point.
        eps: Collinearity tolerance forwarded to the predicates.

    Returns:
        True if inside or on the boundary, False otherwise (including
        polygons with fewer than three vertices).
    """
    poly = as_points(polygon)
    n = len(poly)
    if n < 3:
        logger.debug("is_inside: polygon has %d vertices, need at least 3", n)
        return False

    p = as_points([point])[0]
    far = _ray_end(poly, p)

    count = 0
    for i in range(n):
        a = poly[i]
        b = poly[(i + 1) % n]

        if orientation(a, p, b, eps) == Orientation.COLLINEAR and on_segment(a, p, b):
            return True

        if (a.y > p.y) != (b.y > p.y) and do_intersect(a, b, p, far, eps):
            count += 1

    return count % 2 == 1


def signed_area(polygon: Iterable[PointLike]) -> np.longdouble:
    """
    Signed area via the shoelace formula.

    Positive for counter-clockwise winding, negative for clockwise, 0 for
    fewer than three vertices or a degenerate (collinear) loop.
    """
    poly = as_points(polygon)
    n = len(poly)
    if n < 3:
        logger.debug("signed_area: polygon has %d vertices, need at least 3", n)
        return np.longdouble(0)

    acc = 0
    for i in range(n):
        a = poly[i]
        b = poly[(i + 1) % n]
        acc += widen(a.x) * widen(b.y) - widen(b.x) * widen(a.y)
    return to_extended(acc) / 2


def polygon_area(polygon: Iterable[PointLike]) -> np.longdouble:
    """
    Unsigned area of a simple polygon (shoelace formula).

    Winding does not affect the result. Returns 0 for fewer than three
    vertices.
    """
    return abs(signed_area(polygon))
