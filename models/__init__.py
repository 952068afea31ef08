"""
Data Models

Defines the core data structures:
- Point
- Line
"""

from .point import Point
from .line import Line, AdjacencyError

__all__ = ["Point", "Line", "AdjacencyError"]
