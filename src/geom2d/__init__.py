# MIT License (see LICENSE)
"""
geom2d - Planar computational-geometry primitives.

This package provides numerically tolerant 2D geometric queries over any
real coordinate type (Python or numpy integers and floats). Integer input is
handled exactly; floating input is compared against a small, overridable
tolerance.

Main entry points:
    - Point: Immutable coordinate pair.
    - orientation, on_segment, do_intersect: Geometric predicates.
    - convex_hull: Counter-clockwise hull without collinear vertices.
    - is_inside: Point-in-polygon test (boundary counts as inside).
    - polygon_area: Shoelace area of a simple polygon.
    - closest_pair: Minimum pairwise distance.
    - polygon_diameter: Maximum pairwise distance (rotating calipers).

Submodules:
    - predicates: Orientation and segment intersection.
    - algorithms: Hull, polygon queries, closest pair, diameter.
    - util: Widened arithmetic and distance helpers.
    - constants: Default tolerance (EPS).

Example:
    from geom2d import polygon_area, is_inside

    square = [(0, 0), (4, 0), (4, 4), (0, 4)]
    polygon_area(square)      # 16.0
    is_inside(square, (2, 2)) # True
"""
import logging

from .constants import EPS
from .types import Point, Orientation, as_points
from .util import dist_sq, distance
from .predicates import cross, orientation, on_segment, do_intersect
from .algorithms import (
    convex_hull,
    is_inside,
    polygon_area,
    signed_area,
    closest_pair,
    polygon_diameter,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Types
    "Point",
    "Orientation",
    "as_points",
    "EPS",
    # Predicates
    "cross",
    "orientation",
    "on_segment",
    "do_intersect",
    # Algorithms
    "convex_hull",
    "is_inside",
    "polygon_area",
    "signed_area",
    "closest_pair",
    "polygon_diameter",
    # Distances
    "dist_sq",
    "distance",
]
