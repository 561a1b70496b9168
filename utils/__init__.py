"""
Utility Functions

Provides axis stepping and bounding-box helpers used by the rasterizer
and renderer. Text/image I/O used by the driver lives in utils.text_io
and is imported from there, so the rasterizer does not pull in OpenCV.
"""

from .geometry import step_direction, inclusive_range, bounding_box

__all__ = [
    "step_direction",
    "inclusive_range",
    "bounding_box",
]
