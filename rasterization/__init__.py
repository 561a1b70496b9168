"""
Rasterization Package

Turns parsed segments into lattice points and overlap counts:
- Orientation classification
- Segment expansion
- Overlap accumulation & danger-zone reduction
"""

from .orientation import Orientation, classify
from .rasterizer import expand
from .accumulator import (
    OverlapMap,
    accumulate,
    merge_overlap_maps,
    danger_zone,
    find_unsupported,
)

__all__ = [
    "Orientation",
    "classify",
    "expand",
    "OverlapMap",
    "accumulate",
    "merge_overlap_maps",
    "danger_zone",
    "find_unsupported",
]
