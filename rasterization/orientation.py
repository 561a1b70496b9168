from enum import Enum

from models.segment import Segment


class Orientation(Enum):
    """Shape of a segment as seen by the rasterizer."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL = "diagonal"        # exactly 45 degrees
    UNSUPPORTED = "unsupported"  # any other slope

    @property
    def axis_aligned(self) -> bool:
        return self in (Orientation.HORIZONTAL, Orientation.VERTICAL)


def classify(segment: Segment) -> Orientation:
    """
    Tags a segment from its endpoint deltas.

    Checks run in order, so a single-point segment (dx == dy == 0)
    is HORIZONTAL.
    """
    dx, dy = segment.dx, segment.dy

    if dy == 0:
        return Orientation.HORIZONTAL
    if dx == 0:
        return Orientation.VERTICAL
    if abs(dx) == abs(dy):
        return Orientation.DIAGONAL
    return Orientation.UNSUPPORTED
