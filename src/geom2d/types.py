# MIT License (see LICENSE)
"""
Core type definitions for planar geometry.

Defines the fundamental value types shared by every algorithm:
- Point: an immutable (x, y) coordinate pair over any real numeric type.
- Orientation: the turn direction formed by three ordered points.
- as_points: normalisation of caller input (pairs, Points, numpy arrays).

A polygon is simply a sequence of Points interpreted as a closed loop
(last vertex connects back to the first, no closing duplicate).
"""
from __future__ import annotations
import numbers
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, Sequence, Union

import numpy as np

from .constants import EPS
from .util import is_integral, widen


class Orientation(IntEnum):
    """Turn direction of an ordered point triple (p, q, r)."""
    COLLINEAR = 0
    CLOCKWISE = 1
    COUNTER_CLOCKWISE = 2


def _check_coordinate(name: str, v) -> None:
    if isinstance(v, (bool, np.bool_)) or not isinstance(v, (numbers.Real, np.integer, np.floating)):
        raise TypeError(f"Point.{name} must be a real number, got {type(v).__name__}")


# Any real scalar: Python int/float or a numpy integer/floating scalar
Coordinate = Union[numbers.Real, np.integer, np.floating]


@dataclass(frozen=True, eq=False)
class Point:
    """
    A point in the plane.

    Coordinates keep the type they were given (int, float, numpy scalar);
    arithmetic on them is widened by the algorithms, never here.

    Equality:
        Exact when all four coordinates involved are integers. Otherwise two
        points are equal when both |dx| and |dy| are below EPS. Use
        isclose() to compare with a different tolerance.

    Ordering:
        Lexicographic, x first then y. It exists for sorting only and has no
        geometric meaning.

    Points compare with a tolerance, so they are deliberately unhashable.

    Attributes:
        x: Horizontal coordinate.
        y: Vertical coordinate.
    """
    x: Coordinate
    y: Coordinate

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        _check_coordinate("x", self.x)
        _check_coordinate("y", self.y)

    def isclose(self, other: Point, eps: float = EPS) -> bool:
        """
        Compare two points, exactly for integer coordinates and within
        eps otherwise.
        """
        coords = (self.x, self.y, other.x, other.y)
        if all(is_integral(c) for c in coords):
            return self.x == other.x and self.y == other.y
        return bool(abs(widen(self.x) - widen(other.x)) < eps
                    and abs(widen(self.y) - widen(other.y)) < eps)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.isclose(other)

    def __lt__(self, other: Point) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        if self.x != other.x:
            return bool(self.x < other.x)
        return bool(self.y < other.y)

    def __iter__(self) -> Iterator:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def to_array(self) -> np.ndarray:
        """Return the point as a float64 numpy array of shape (2,)."""
        return np.array([self.x, self.y], dtype=np.float64)


# Anything as_points() understands
PointLike = Union[Point, Sequence[float], np.ndarray]
Polygon = Sequence[Point]


def as_points(data: Iterable[PointLike] | np.ndarray) -> list[Point]:
    """
    Normalise caller input into a fresh list of Points.

    Accepts Points, (x, y) pairs, or an (N, 2) numpy array. The returned list
    is always new, so algorithms may sort or partition it without touching
    the caller's sequence.

    Raises:
        ValueError: If an array is not shaped (N, 2) or a pair does not have
            exactly two coordinates.
        TypeError: If a coordinate is not a real number.
    """
    if isinstance(data, np.ndarray):
        if data.size == 0:
            return []
        if data.ndim != 2 or data.shape[1] != 2:
            raise ValueError(f"Point array must have shape (N, 2), got {data.shape}")
        return [Point(row[0], row[1]) for row in data]

    points: list[Point] = []
    for item in data:
        if isinstance(item, Point):
            points.append(item)
            continue
        if len(item) != 2:
            raise ValueError(f"Expected an (x, y) pair, got {len(item)} values: {item!r}")
        points.append(Point(item[0], item[1]))
    return points
