"""
Data Models

Defines the core value types:
- Coordinate
- Segment
- ParseError / FormatError
"""

from .errors import ParseError, FormatError
from .coordinate import Coordinate
from .segment import Segment, parse_segments

__all__ = ["Coordinate", "Segment", "parse_segments", "ParseError", "FormatError"]
