"""
Visualization utilities for rendering accumulated line segments.

This module provides:
    • draw_lines(img, lines, color, thickness)
    • build_line_id_map(lines, shape_hw)

Both are diagnostic sinks: they read Lines, they never grow them.
"""

import logging
from typing import List, Optional, Tuple

import cv2
import numpy as np

from config import get_active_params
from models.line import Line


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------
#  Draw a list of line segments
# ---------------------------------------------------------------------

def draw_lines(
    image: np.ndarray,
    lines: List[Line],
    color: Optional[Tuple[int, int, int]] = None,
    thickness: Optional[int] = None
):
    """
    Draws Line objects onto an image.

    Proper lines are drawn with cv2.line; degenerate lines only mark their
    seed pixel, in DEGENERATE_COLOR.

    Args:
        image: BGR numpy array (modified in-place)
        lines: list of Line objects
        color: (B, G, R), defaults to LINE_COLOR
        thickness: pixel width, defaults to LINE_THICKNESS
    """
    params = get_active_params()
    if color is None:
        color = params["LINE_COLOR"]
    if thickness is None:
        thickness = params["LINE_THICKNESS"]

    h, w = image.shape[:2]

    for ln in lines:
        if ln.isDegenerate():
            x, y = ln.getStart().as_tuple()
            if 0 <= x < w and 0 <= y < h:
                image[y, x] = params["DEGENERATE_COLOR"]
            continue

        cv2.line(
            image,
            ln.getStart().as_tuple(),
            ln.getEnd().as_tuple(),
            color,
            thickness
        )

    return image


# ---------------------------------------------------------------------
#  Pixel-wise map of line indices
# ---------------------------------------------------------------------

def build_line_id_map(lines: List[Line], shape_hw: Tuple[int, int]) -> np.ndarray:
    """
    Builds a pixel-wise map of line IDs.

    Every pixel covered by lines[i] receives i + 1. If lines overlap,
    later IDs overwrite earlier ones. Pixels outside the image are skipped.

    Returns
    -------
    np.ndarray
        int32 map where pixel values = line ID, or 0 if no line hit.
    """
    h, w = shape_hw
    line_id_map = np.zeros((h, w), dtype=np.int32)

    for line_id, line in enumerate(lines, start=1):
        for x, y in line.pixels():
            if 0 <= x < w and 0 <= y < h:
                line_id_map[y, x] = line_id
            else:
                logger.debug("Pixel (%d, %d) of line %d is outside the image", x, y, line_id)

    return line_id_map
