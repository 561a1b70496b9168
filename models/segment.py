from dataclasses import dataclass
from typing import List

from models.coordinate import Coordinate
from models.errors import FormatError, ParseError


SEPARATOR = " -> "


@dataclass(frozen=True)
class Segment:
    """
    A vent line between two lattice points.

    The endpoints may come in either order along an axis; start and end
    are kept exactly as written so the rasterizer can walk from one to
    the other.
    """

    start: Coordinate
    end: Coordinate

    # ------------------------------------------------------------
    # Text form
    # ------------------------------------------------------------
    @classmethod
    def parse(cls, text: str) -> "Segment":
        """
        "x1,y1 -> x2,y2" → Segment

        Raises FormatError when the separator is missing and lets
        ParseError / FormatError from either coordinate propagate.
        """
        parts = text.split(SEPARATOR)
        if len(parts) != 2:
            raise FormatError(f"expected 'x1,y1{SEPARATOR}x2,y2', got {text!r}")
        return cls(Coordinate.parse(parts[0]), Coordinate.parse(parts[1]))

    def format(self) -> str:
        return f"{self.start.format()}{SEPARATOR}{self.end.format()}"

    def __str__(self):
        return self.format()

    # ------------------------------------------------------------
    # Endpoint deltas
    # ------------------------------------------------------------
    @property
    def dx(self) -> int:
        return self.end.x - self.start.x

    @property
    def dy(self) -> int:
        return self.end.y - self.start.y

    def reversed(self) -> "Segment":
        return Segment(self.end, self.start)


def parse_segments(text: str) -> List[Segment]:
    """
    Parses a block of text, one segment per line. Blank lines are skipped.

    Fail-fast: the first malformed line aborts the whole parse. The error
    is re-raised as the same type with the 1-based line number prepended.
    """
    segments = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            segments.append(Segment.parse(line))
        except ParseError as exc:
            raise type(exc)(f"line {lineno}: {exc}") from exc
    return segments
