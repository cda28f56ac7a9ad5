# MIT License (see LICENSE)
"""
Algorithms built on the geometric predicates.

This subpackage provides:
    - Convex hull: Andrew's monotone chain.
    - Polygon queries: ray-casting containment, shoelace area.
    - Closest pair: divide and conquer over x-sorted ranges.
    - Diameter: rotating calipers over the convex hull.

Typical usage:
    from geom2d.algorithms import convex_hull, polygon_diameter

    hull = convex_hull([(0, 0), (4, 0), (4, 4), (0, 4), (2, 2)])
    width = polygon_diameter(hull)
"""
from .hull import convex_hull
from .polygon import is_inside, polygon_area, signed_area
from .closest import closest_pair
from .calipers import polygon_diameter

__all__ = [
    # Hull
    "convex_hull",
    # Polygon queries
    "is_inside",
    "polygon_area",
    "signed_area",
    # Distances
    "closest_pair",
    "polygon_diameter",
]
