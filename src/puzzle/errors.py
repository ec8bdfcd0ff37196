"""Exceptions raised while building puzzles and parsing solutions."""

from typing import Optional, Tuple


class PuzzleError(Exception):
    """Base class for malformed level data."""


class UnknownBuildingEncoding(PuzzleError):
    """A character that does not encode any building type."""

    def __init__(self, char: str, position: Optional[Tuple[int, int]] = None):
        self.char = char
        self.position = position
        loc_str = f" at {position}" if position is not None else ""
        super().__init__(f"Unknown building encoding {char!r}{loc_str}")


class MalformedGrid(PuzzleError):
    """A puzzle grid that is empty, ragged or contains unknown terrain."""
