"""
Vent Lines Package

Counts where hydrothermal vent lines overlap on an integer grid:

- Coordinate & segment parsing
- Segment rasterization (horizontal, vertical, 45° diagonal)
- Overlap accumulation & danger-zone reduction
- Grid rendering and heat-map output
"""
__all__ = [
    "config",
    "main",
    "models",
    "rasterization",
    "utils",
    "visualization",
]
