"""
This module provides:
    - step_direction
    - inclusive_range
    - bounding_box
"""

from typing import Iterable, Tuple

from models.coordinate import Coordinate


# ----------------------------------------------------------------------
#  AXIS STEPPING
# ----------------------------------------------------------------------

def step_direction(a: int, b: int) -> int:
    """
    Unit step that walks from a towards b:
        +1 if b > a, -1 if b < a, 0 if equal
    """
    return (b > a) - (b < a)


def inclusive_range(a: int, b: int) -> range:
    """
    Every integer between a and b, both ends included, ascending.
    The order of a and b does not matter.
    """
    return range(min(a, b), max(a, b) + 1)


# ----------------------------------------------------------------------
#  BOUNDING BOX
# ----------------------------------------------------------------------

def bounding_box(coords: Iterable[Coordinate]) -> Tuple[int, int, int, int]:
    """
    Returns (min_x, min_y, max_x, max_y) anchored at the origin:
    the box always contains (0, 0), so for non-negative input the
    minimum is 0 on both axes.

    Empty input gives (0, 0, 0, 0).
    """
    min_x = min_y = max_x = max_y = 0
    for c in coords:
        min_x = min(min_x, c.x)
        min_y = min(min_y, c.y)
        max_x = max(max_x, c.x)
        max_y = max(max_y, c.y)
    return min_x, min_y, max_x, max_y
