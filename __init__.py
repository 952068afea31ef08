"""
Raster Lines Package

Discrete-geometry primitives for accumulating straight runs of adjacent
pixels found by a line/edge-detection process:

- Point and Line models
- Grid geometry utilities (distance, slope)
- Diagnostic visualization
"""
__all__ = [
    "config",
    "models",
    "utils",
    "visualization",
]
