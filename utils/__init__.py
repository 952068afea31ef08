"""
Utility Functions

Provides grid geometry operations and the Bresenham wrapper used by Line.
"""

from .geometry import distance, slope, is_vertical
from .bresenham_utils import bres_line

__all__ = [
    "distance",
    "slope",
    "is_vertical",
    "bres_line",
]
