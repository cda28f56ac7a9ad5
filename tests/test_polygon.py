import numpy as np
import pytest
from geom2d.algorithms.hull import convex_hull
from geom2d.algorithms.polygon import is_inside, polygon_area, signed_area
from geom2d.types import Point

SQUARE = [(0, 0), (4, 0), (4, 4), (0, 4)]
# L shape: 4x1 foot plus 1x3 upright, area 7
L_SHAPE = [(0, 0), (4, 0), (4, 1), (1, 1), (1, 4), (0, 4)]


def test_square_area():
    assert polygon_area(SQUARE) == 16
    assert signed_area(SQUARE) == 16
    # Clockwise winding: same magnitude, negative sign
    assert polygon_area(SQUARE[::-1]) == 16
    assert signed_area(SQUARE[::-1]) == -16


def test_area_results_are_extended_precision():
    assert isinstance(polygon_area(SQUARE), np.longdouble)
    assert isinstance(polygon_area([(0, 0)]), np.longdouble)


def test_concave_and_float_areas():
    assert polygon_area(L_SHAPE) == 7
    assert polygon_area([(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)]) == pytest.approx(0.5)
    tri = np.array([[0.5, 0.5], [3.5, 0.5], [0.5, 4.5]])
    assert polygon_area(tri) == pytest.approx(6.0)


def test_area_degenerate():
    assert polygon_area([]) == 0
    assert polygon_area([(1, 1), (2, 2)]) == 0
    # Collinear loop encloses nothing
    assert polygon_area([(0, 0), (1, 1), (2, 2)]) == 0


def test_area_large_integer_coordinates():
    big = 10**6
    square = [(big, big), (2 * big, big), (2 * big, 2 * big), (big, 2 * big)]
    assert polygon_area(square) == big * big


@pytest.mark.parametrize("point, expected", [
    ((2, 2), True),
    ((5, 5), False),
    ((1, 3), True),
    ((-1, 2), False),
    # Boundary counts as inside
    ((0, 2), True),
    ((2, 0), True),
    ((4, 4), True),
    ((0, 0), True),
])
def test_is_inside_square(point, expected):
    assert is_inside(SQUARE, point) is expected
    assert is_inside(SQUARE[::-1], point) is expected


@pytest.mark.parametrize("point, expected", [
    ((0.5, 3.0), True),
    ((3.0, 0.5), True),
    ((3.0, 3.0), False),   # in the notch
    ((1.0, 2.0), True),    # on the inner edge
    ((2.0, 1.0), True),
])
def test_is_inside_concave(point, expected):
    assert is_inside(L_SHAPE, point) is expected


def test_ray_through_vertex_counts_once():
    diamond = [(0, -2), (2, 0), (0, 2), (-2, 0)]
    assert is_inside(diamond, (0, 0))
    assert is_inside(diamond, (1, 0))
    assert not is_inside(diamond, (3, 0))
    assert not is_inside(diamond, (-3, 0))


def test_ray_along_horizontal_edge():
    """
    The ray from (2, 2) runs along the bottom of the step between x=4 and
    x=6; that edge must not end the test early or be counted.
    """
    step = [(0, 0), (4, 0), (4, 2), (6, 2), (6, 4), (0, 4)]
    assert is_inside(step, (2, 2))
    assert is_inside(step, (5, 2))
    assert is_inside(step, (5, 3))
    assert not is_inside(step, (5, 1))
    assert not is_inside(step, (7, 2))


def test_is_inside_degenerate():
    assert not is_inside([], (0, 0))
    assert not is_inside([(0, 0), (1, 1)], (0, 0))


def test_is_inside_float_polygon():
    poly = [Point(0.0, 0.0), Point(2.5, 0.0), Point(2.5, 1.5), Point(0.0, 1.5)]
    assert is_inside(poly, Point(1.25, 0.75))
    assert is_inside(poly, Point(2.5, 1.0))
    assert not is_inside(poly, Point(2.5 + 1e-6, 1.0))


def test_centroid_inside_far_point_outside():
    rng = np.random.default_rng(31)
    for _ in range(20):
        hull = convex_hull(rng.uniform(-100, 100, size=(30, 2)))
        xs = [p.x for p in hull]
        ys = [p.y for p in hull]
        centroid = (sum(xs) / len(xs), sum(ys) / len(ys))
        assert is_inside(hull, centroid)
        assert not is_inside(hull, (max(xs) + 50.0, max(ys) + 50.0))
        assert not is_inside(hull, (min(xs) - 1.0, centroid[1]))


def test_tolerance_widens_boundary():
    """
    (2, 2 + 1e-7) sits just outside the hypotenuse x + y = 4; a looser
    tolerance treats it as lying on that edge.
    """
    triangle = [(0.0, 0.0), (4.0, 0.0), (0.0, 4.0)]
    point = (2.0, 2.0 + 1e-7)
    assert not is_inside(triangle, point)
    assert is_inside(triangle, point, eps=1e-6)
