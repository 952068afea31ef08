"""
Utility wrapper around the pybresenham library.

This module provides:
    • bres_line(x1, y1, x2, y2)

Returns lists of (x, y) integer pixel coordinates.
"""

from typing import List, Tuple

import pybresenham as bres


def bres_line(x1: int, y1: int, x2: int, y2: int) -> List[Tuple[int, int]]:
    """
    Returns the integer pixel coordinates of the Bresenham line from
    (x1, y1) to (x2, y2), endpoints included.
    """
    return [(int(x), int(y)) for x, y in bres.line(x1, y1, x2, y2)]
