"""Tests for models/point.py."""
import dataclasses

import pytest

from models.point import Point


def test_default_is_origin():
    assert Point() == Point(0, 0)


def test_equality_is_exact():
    assert Point(3, 4) == Point(3, 4)
    assert Point(3, 4) != Point(4, 3)
    assert Point(3, 4).equals(Point(3, 4))
    assert not Point(3, 4).equals(Point(3, 5))


def test_describe():
    assert Point(3, -4).describe() == "(3, -4)"
    assert str(Point()) == "(0, 0)"


def test_immutable_and_hashable():
    p = Point(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 5
    assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2


def test_as_tuple():
    assert Point(7, 8).as_tuple() == (7, 8)
