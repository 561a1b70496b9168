import re
from dataclasses import dataclass

from models.errors import FormatError, ParseError


_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(field: str, text: str) -> int:
    """Strict base-10 integer with optional sign; surrounding blanks allowed."""
    field = field.strip()
    if not _INTEGER.fullmatch(field):
        raise ParseError(f"invalid integer {field!r} in coordinate {text!r}")
    return int(field)


@dataclass(frozen=True)
class Coordinate:
    """
    A lattice point in integer 2-D space.

    Frozen dataclass: equality compares both fields and the hash is
    derived from the same fields, so coordinates can key an overlap map.
    """

    x: int
    y: int

    # ------------------------------------------------------------
    # Text form
    # ------------------------------------------------------------
    @classmethod
    def parse(cls, text: str) -> "Coordinate":
        """
        "x,y" → Coordinate(x, y)

        Also accepts the "x, y" form produced by format().
        """
        parts = text.split(",")
        if len(parts) != 2:
            raise FormatError(f"expected 'x,y', got {text!r}")
        return cls(_parse_int(parts[0], text), _parse_int(parts[1], text))

    def format(self) -> str:
        return f"{self.x}, {self.y}"

    def __str__(self):
        return self.format()
