# MIT License (see LICENSE)
"""
Numeric helpers for widened arithmetic and point distances.

Coordinates may be Python ints/floats or numpy scalars of any width. Before
any product is formed, values are widened so intermediate results neither
overflow (np.int32 * np.int32) nor lose more precision than necessary:

- integers become Python ints (unbounded, exact),
- everything else becomes numpy.longdouble (extended precision where the
  platform provides it).

Final scalar results (areas, distances) are returned as numpy.longdouble.
"""
from __future__ import annotations
import numbers
from typing import TYPE_CHECKING, Union

import numpy as np

if TYPE_CHECKING:
    from .types import Point

# Widened scalar: exact int or extended-precision float
Wide = Union[int, np.longdouble]


def is_integral(v) -> bool:
    """True for Python and numpy integers (bool excluded)."""
    return isinstance(v, (numbers.Integral, np.integer)) and not isinstance(v, (bool, np.bool_))


def widen(v) -> Wide:
    """
    Widen a coordinate (or coordinate difference) for accumulation.

    Integers become Python ints so products stay exact; anything else
    becomes numpy.longdouble.
    """
    if is_integral(v):
        return int(v)
    return np.longdouble(v)


def to_extended(v) -> np.longdouble:
    """Convert a widened accumulator to an extended-precision result."""
    return np.longdouble(v)


def dist_sq(p: Point, q: Point) -> Wide:
    """
    Squared Euclidean distance between two points.

    Avoids sqrt so callers can compare distances exactly for integer input.
    """
    dx = widen(p.x) - widen(q.x)
    dy = widen(p.y) - widen(q.y)
    return dx * dx + dy * dy


def distance(p: Point, q: Point) -> np.longdouble:
    """Euclidean distance between two points."""
    return np.sqrt(to_extended(dist_sq(p, q)))
