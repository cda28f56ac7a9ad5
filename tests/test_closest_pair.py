import itertools
import math

import numpy as np
import pytest
from geom2d.algorithms.closest import closest_pair
from geom2d.types import Point


def brute_force(coords):
    return min(math.dist(a, b) for a, b in itertools.combinations(coords, 2))


def test_right_triangle():
    """Pairwise distances are 3, 4 and 5."""
    assert closest_pair([(0, 0), (3, 0), (0, 4)]) == pytest.approx(3.0)


def test_fewer_than_two_points():
    assert closest_pair([]) == 0
    assert closest_pair([(7, 7)]) == 0
    assert isinstance(closest_pair([]), np.longdouble)


def test_two_points():
    assert closest_pair([Point(1, 1), Point(4, 5)]) == pytest.approx(5.0)


def test_duplicates_give_zero():
    assert closest_pair([(1, 1), (5, 5), (1, 1), (9, 0)]) == 0
    assert closest_pair([(2.5, 2.5)] * 6) == 0


def test_shared_x_coordinates():
    """Every point on one vertical line; the split falls between equal x."""
    ys = [0, 10, 3, 7, 20, 14, 30, 26]
    assert closest_pair([(0, y) for y in ys]) == pytest.approx(3.0)


def test_grid_with_one_close_pair():
    coords = [(10 * i, 10 * j) for i in range(8) for j in range(8)]
    coords.append((33, 44))
    assert closest_pair(coords) == pytest.approx(math.dist((33, 44), (30, 40)))


def test_int32_input_does_not_overflow():
    arr = np.array([[0, 0], [2**20, 2**20], [2**21, 0]], dtype=np.int32)
    assert closest_pair(arr) == pytest.approx(2**20 * math.sqrt(2))


def test_input_not_modified():
    points = [Point(5, 0), Point(0, 0), Point(3, 3), Point(1, 7)]
    before = list(points)
    closest_pair(points)
    assert points == before


@pytest.mark.parametrize("n", [2, 3, 4, 5, 8, 13, 31, 64, 150])
def test_matches_brute_force_integers(n):
    rng = np.random.default_rng(n)
    coords = [tuple(c) for c in rng.integers(-40, 40, size=(n, 2)).tolist()]
    assert closest_pair(coords) == pytest.approx(brute_force(coords))


@pytest.mark.parametrize("seed", range(5))
def test_matches_brute_force_floats(seed):
    rng = np.random.default_rng(seed)
    arr = rng.normal(scale=100.0, size=(120, 2))
    assert closest_pair(arr) == pytest.approx(brute_force(arr.tolist()), rel=1e-9)
