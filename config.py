"""
Configuration file for the raster line-segment primitives.

Holds the geometric constants, the diagnostic drawing colors and the
logging setup. Modules should read values using the get_active_params()
function.
"""

import logging
import math
import os
import sys


# ---------------------------------------------------------------
# GEOMETRY
# ---------------------------------------------------------------

# Points within this distance of a degenerate line's seed are adjacent
# (the 8-neighbourhood of a grid cell)
ADJACENCY_RADIUS = math.sqrt(2)

# Our "infinite": slope of a vertical line, signed by direction
VERTICAL_SLOPE = sys.float_info.max

# Slopes of growable lines are 0, +1 or -1, so collinearity is exact
COLLINEAR_TOLERANCE = 1e-9


# ---------------------------------------------------------------
# VISUALIZATION COLORS
# ---------------------------------------------------------------

LINE_COLOR = (0, 255, 0)          # proper lines - green
DEGENERATE_COLOR = (0, 0, 255)    # single-point lines - red
LINE_THICKNESS = 1


# ---------------------------------------------------------------
# LOGGING
# ---------------------------------------------------------------

LOG_LEVEL = os.environ.get("RASTER_LINES_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters as one dictionary, so that
    models and utilities only import a single accessor.
    """
    return {
        "ADJACENCY_RADIUS": ADJACENCY_RADIUS,
        "VERTICAL_SLOPE": VERTICAL_SLOPE,
        "COLLINEAR_TOLERANCE": COLLINEAR_TOLERANCE,
        "LINE_COLOR": LINE_COLOR,
        "DEGENERATE_COLOR": DEGENERATE_COLOR,
        "LINE_THICKNESS": LINE_THICKNESS,
        "LOG_LEVEL": LOG_LEVEL,
    }


def configure_logging(level=None):
    """
    Install a root handler using LOG_FORMAT.

    level: logging level name or number; defaults to LOG_LEVEL.
    """
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
