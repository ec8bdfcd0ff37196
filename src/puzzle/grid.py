"""Grid building and neighbor utilities."""

from typing import Dict, Iterator, Sequence, Tuple

from .errors import MalformedGrid
from .models import CellType, Field2D, NeighborMode, Position, Puzzle


# (row, column) offsets probed around a placement
ORTHOGONAL_OFFSETS: Tuple[Tuple[int, int], ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))

# Row and column tables of the first release, zipped: two diagonals and the
# placement's own cell twice.
LEGACY_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(zip((1, 0, -1, 0), (1, 0, -1, 0)))

NEIGHBOR_OFFSETS: Dict[str, Tuple[Tuple[int, int], ...]] = {
    "orthogonal": ORTHOGONAL_OFFSETS,
    "legacy": LEGACY_OFFSETS,
}


def field_from_size(rows: int, columns: int) -> Field2D:
    """A rows x columns grid of grass."""
    if rows <= 0 or columns <= 0:
        raise MalformedGrid(f"Grid dimensions must be positive: {rows}x{columns}")
    return tuple(tuple(CellType.GRASS for _ in range(columns)) for _ in range(rows))


def field_from_rows(rows: Sequence[str]) -> Field2D:
    """
    Build a grid from terrain characters, one string per row.

    'g' and '.' are grass, 'x' is a hole. Row lengths are checked when the
    grid is handed to Puzzle.
    """
    return tuple(tuple(CellType.from_char(char) for char in row) for row in rows)


def render_field(field: Field2D) -> str:
    """Render the grid one row per line, newline terminated."""
    return "".join("".join(cell.to_char() for cell in row) + "\n" for row in field)


def neighbors(
    puzzle: Puzzle,
    position: Position,
    mode: NeighborMode = "orthogonal",
) -> Iterator[Position]:
    """Yield the probed positions around position that lie on the board."""
    for d_row, d_column in NEIGHBOR_OFFSETS[mode]:
        row, column = position.row + d_row, position.column + d_column
        if puzzle.in_bounds(row, column):
            yield Position(row, column)


def on_edge(puzzle: Puzzle, position: Position) -> bool:
    """True if position is on the first or last row or column."""
    return (
        position.row in (0, puzzle.rows() - 1)
        or position.column in (0, puzzle.columns() - 1)
    )
