"""
Overlap accumulation and the danger-zone reduction.

This module provides:
    • accumulate(segments, include_diagonals)
    • merge_overlap_maps(maps)
    • danger_zone(overlap_map)
    • find_unsupported(segments)
"""

from collections import Counter
from typing import Dict, Iterable, List

from models.coordinate import Coordinate
from models.segment import Segment
from rasterization.orientation import Orientation, classify
from rasterization.rasterizer import expand


# Coordinate -> number of segments covering it
OverlapMap = Dict[Coordinate, int]


# ========================================================================
# 1. FOLD SEGMENTS INTO AN OVERLAP MAP
# ========================================================================

def accumulate(segments: Iterable[Segment], include_diagonals: bool = True) -> Counter:
    """
    Counts, for every lattice point, how many segments cover it.

    Each segment contributes each of its points exactly once, so the
    result does not depend on segment order.

    include_diagonals=False keeps only horizontal and vertical segments.
    """
    overlap = Counter()

    for seg in segments:
        if not include_diagonals and not classify(seg).axis_aligned:
            continue
        overlap.update(expand(seg))

    return overlap


def merge_overlap_maps(maps: Iterable[OverlapMap]) -> Counter:
    """
    Sums partial overlap maps. accumulate(a + b) equals
    merge_overlap_maps([accumulate(a), accumulate(b)]).
    """
    merged = Counter()
    for m in maps:
        merged.update(m)
    return merged


# ========================================================================
# 2. REDUCTIONS
# ========================================================================

def danger_zone(overlap_map: OverlapMap, threshold: int = 2) -> int:
    """Number of points covered by `threshold` (default two) or more segments."""
    return sum(1 for count in overlap_map.values() if count >= threshold)


def find_unsupported(segments: Iterable[Segment]) -> List[Segment]:
    """
    Segments that expand() silently drops because they are neither
    axis-aligned nor exactly 45 degrees.
    """
    return [seg for seg in segments if classify(seg) is Orientation.UNSUPPORTED]
