"""Shared test fixtures for the raster line primitives."""
import pytest

from models.point import Point
from models.line import Line


def grow(seed, *points):
    """Line seeded at seed, grown through points in order."""
    line = Line(Point(*seed))
    for p in points:
        line.addPoint(Point(*p))
    return line


@pytest.fixture
def seed():
    """Degenerate line at (5, 5)."""
    return Line(Point(5, 5))


@pytest.fixture
def horizontal():
    """(0, 0) -> (3, 0), grown rightwards."""
    return grow((0, 0), (1, 0), (2, 0), (3, 0))


@pytest.fixture
def vertical():
    """(2, 1) -> (2, 3), grown downwards."""
    return grow((2, 1), (2, 2), (2, 3))


@pytest.fixture
def diagonal():
    """(0, 0) -> (2, 2)."""
    return grow((0, 0), (1, 1), (2, 2))
