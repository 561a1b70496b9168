"""
Exceptions raised while reading vent-line text.

Both are raised at the parse seam and propagate unchanged through the
rest of the pipeline; only main.py catches them.
"""


class ParseError(ValueError):
    """A numeric field is not a valid base-10 integer."""


class FormatError(ParseError):
    """
    The text does not have the expected shape:
      - a segment line without the " -> " separator
      - a coordinate without exactly one comma
    """
