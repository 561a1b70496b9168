"""
Segment rasterizer.

This module provides:
    • expand(segment)

Converts a Segment into the ordered list of lattice points it covers.
Pure function: no state, no I/O.
"""

from typing import List

from models.coordinate import Coordinate
from models.segment import Segment
from rasterization.orientation import Orientation, classify
from utils.geometry import inclusive_range, step_direction


def expand(segment: Segment) -> List[Coordinate]:
    """
    Returns every lattice point covered by the segment.

    Ordering
    --------
    HORIZONTAL / VERTICAL : ascending along the varying axis,
                            whichever endpoint comes first
    DIAGONAL              : walks from start to end, one unit per axis
                            per step, each axis in its own direction
    UNSUPPORTED           : empty list (not an error)
    """
    start, end = segment.start, segment.end

    if start == end:
        return [start]

    orientation = classify(segment)

    if orientation is Orientation.HORIZONTAL:
        return [Coordinate(x, start.y) for x in inclusive_range(start.x, end.x)]

    if orientation is Orientation.VERTICAL:
        return [Coordinate(start.x, y) for y in inclusive_range(start.y, end.y)]

    if orientation is Orientation.DIAGONAL:
        sx = step_direction(start.x, end.x)
        sy = step_direction(start.y, end.y)
        return [
            Coordinate(start.x + i * sx, start.y + i * sy)
            for i in range(abs(segment.dx) + 1)
        ]

    # Orientation.UNSUPPORTED
    return []
