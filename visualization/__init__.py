"""
Visualization Tools

Provides diagnostic rendering utilities for accumulated Lines.
"""

from .draw_lines import draw_lines, build_line_id_map

__all__ = [
    "draw_lines",
    "build_line_id_map",
]
