"""Solution parsing utilities."""

import re
import textwrap
from typing import List, Sequence, Union

from .errors import UnknownBuildingEncoding
from .models import BuildingType, Placement, Position, Solution


# Terrain and empty-cell markers that never encode a building
BACKGROUND_CHARS = frozenset(".gx")


def split_rows(text: str) -> List[str]:
    """
    Split a one-string solution on newlines or '/'.

    Common indentation and surrounding blank lines are removed; empty rows in
    between are kept so later rows keep their index.
    """
    text = textwrap.dedent(text).strip("\n")
    if not text:
        return []
    return re.split(r"[\n/]", text)


def parse_solution(rows: Union[str, Sequence[str]]) -> Solution:
    """
    Parse a textual grid into placements.

    Cells are scanned row by row, left to right. Background characters
    ('.', 'g', 'x') are skipped and every other character must encode a
    building. Rows may differ in length and positions are not checked
    against any puzzle.

    Raises:
        UnknownBuildingEncoding: If a character is neither background nor a building
    """
    if isinstance(rows, str):
        rows = split_rows(rows)

    placements: List[Placement] = []
    for row, line in enumerate(rows):
        for column, char in enumerate(line):
            if char in BACKGROUND_CHARS:
                continue
            try:
                building = BuildingType.from_char(char)
            except UnknownBuildingEncoding:
                raise UnknownBuildingEncoding(char, (row, column)) from None
            placements.append(Placement(building=building, position=Position(row, column)))

    return Solution(placements=tuple(placements))
