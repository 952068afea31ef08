"""Tests for utils/geometry.py."""
import math
import sys

import pytest

from config import VERTICAL_SLOPE
from models.point import Point
from utils.geometry import distance, slope, is_vertical


# --- distance ---

@pytest.mark.parametrize("p, q", [
    (Point(0, 0), Point(3, 4)),
    (Point(-2, 5), Point(7, -1)),
    (Point(1, 1), Point(2, 2)),
])
def test_distance_symmetric(p, q):
    assert distance(p, q) == distance(q, p)


def test_distance_values():
    assert distance(Point(0, 0), Point(3, 4)) == 5.0
    assert distance(Point(1, 1), Point(2, 2)) == pytest.approx(math.sqrt(2))


def test_distance_to_self_is_zero():
    assert distance(Point(9, -3), Point(9, -3)) == 0.0


# --- slope ---

def test_slope_formula():
    p, q = Point(1, 2), Point(4, 8)
    assert slope(p, q) == (8 - 2) / (4 - 1)
    assert slope(q, p) == (2 - 8) / (1 - 4)


def test_slope_same_line_both_orders():
    p, q = Point(0, 0), Point(2, -1)
    assert slope(p, q) == slope(q, p) == -0.5


def test_slope_horizontal_is_zero():
    assert slope(Point(0, 3), Point(5, 3)) == 0


def test_vertical_slope_is_signed_sentinel():
    assert VERTICAL_SLOPE == sys.float_info.max
    assert slope(Point(2, 0), Point(2, 5)) == VERTICAL_SLOPE
    assert slope(Point(2, 5), Point(2, 0)) == -VERTICAL_SLOPE


def test_is_vertical():
    assert is_vertical(slope(Point(2, 0), Point(2, 5)))
    assert is_vertical(slope(Point(2, 5), Point(2, 0)))
    assert not is_vertical(0.0)
    assert not is_vertical(1e300)
