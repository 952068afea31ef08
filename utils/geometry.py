"""
This module provides:
    - distance
    - slope        (signed vertical surrogate from config)
    - is_vertical
"""

import math

from config import get_active_params


# ----------------------------------------------------------------------
#  EUCLIDEAN DISTANCE
# ----------------------------------------------------------------------

def distance(p, q):
    """
    Euclidean distance between Points p and q.
    """
    return math.dist(p.as_tuple(), q.as_tuple())


# ----------------------------------------------------------------------
#  SLOPE WITH VERTICAL SURROGATE
# ----------------------------------------------------------------------

def slope(p, q):
    """
    Slope of the line through Points p and q.

    A vertical line (p.x == q.x) would have slope +inf or -inf. It is
    represented by +VERTICAL_SLOPE when q lies at or above p on the Y
    axis and -VERTICAL_SLOPE when it lies below. Test for it with
    is_vertical(), never with a tolerance.
    """
    if p.x == q.x:
        vertical = get_active_params()["VERTICAL_SLOPE"]
        return vertical if q.y >= p.y else -vertical
    return (q.y - p.y) / (q.x - p.x)


def is_vertical(s):
    """True if s is the vertical-slope sentinel (either sign)."""
    return abs(s) == get_active_params()["VERTICAL_SLOPE"]
