"""Data models for puzzles, solutions and validation results."""

from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Literal, Mapping, NamedTuple, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import MalformedGrid, UnknownBuildingEncoding


class BuildingType(str, Enum):
    """Buildings a player places on the board, valued by their encoding."""
    HOUSE = "1"
    TRASH = "T"
    HERMIT = "H"

    def to_char(self) -> str:
        return self.value

    @classmethod
    def from_char(cls, char: str) -> "BuildingType":
        """
        Decode a single solution character.

        Raises:
            UnknownBuildingEncoding: If no building uses this character
        """
        try:
            return cls(char)
        except ValueError:
            raise UnknownBuildingEncoding(char) from None

    @property
    def label(self) -> str:
        """Display name, e.g. 'House'."""
        return self.name.title()

    @property
    def asset_name(self) -> str:
        """Key the renderer uses to look up this building's sprite."""
        return f"{self.name.lower()}.png"


class CellType(str, Enum):
    """Terrain of a single board cell, valued by its display character."""
    GRASS = "g"
    HOLE = "x"

    def to_char(self) -> str:
        return self.value

    @classmethod
    def from_char(cls, char: str) -> "CellType":
        # '.' is the solution parser's background marker, read as plain grass.
        if char == ".":
            return cls.GRASS
        try:
            return cls(char)
        except ValueError:
            raise MalformedGrid(f"Unknown terrain character {char!r}") from None


class Position(NamedTuple):
    """A (row, column) board coordinate."""
    row: int
    column: int


Field2D = Tuple[Tuple[CellType, ...], ...]


class Puzzle(BaseModel):
    """
    A rectangular board plus the buildings a solution must place on it.

    The grid is checked when the puzzle is built: it must have at least one
    row and one column, and every row must have the same length.

    Attributes:
        field: Rows of terrain cells
        building_count: Required count per building type; absent means zero
    """

    model_config = ConfigDict(frozen=True)

    field: Field2D
    building_count: Mapping[BuildingType, int] = Field(default_factory=dict)

    @field_validator("field")
    @classmethod
    def check_rectangular(cls, field: Field2D) -> Field2D:
        if not field:
            raise MalformedGrid("Puzzle grid has no rows")
        width = len(field[0])
        if width == 0:
            raise MalformedGrid("Puzzle grid has no columns")
        for index, row in enumerate(field):
            if len(row) != width:
                raise MalformedGrid(
                    f"Row {index} has {len(row)} cells, expected {width}"
                )
        return field

    @field_validator("building_count")
    @classmethod
    def normalize_counts(cls, counts: Mapping[BuildingType, int]) -> Mapping[BuildingType, int]:
        for building, count in counts.items():
            if count < 0:
                raise ValueError(f"Negative count {count} for {building.label}")
        # Enum order keeps rendering and status lines deterministic.
        return MappingProxyType({b: counts[b] for b in BuildingType if counts.get(b, 0) > 0})

    def __hash__(self) -> int:
        return hash((self.field, tuple(self.building_count.items())))

    def rows(self) -> int:
        return len(self.field)

    def columns(self) -> int:
        return len(self.field[0])

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows() and 0 <= column < self.columns()

    def cell(self, row: int, column: int) -> CellType:
        """Terrain at (row, column); raises IndexError outside the board."""
        if not self.in_bounds(row, column):
            raise IndexError(f"Cell {(row, column)} is outside a {self.rows()}x{self.columns()} board")
        return self.field[row][column]

    def __str__(self) -> str:
        from .grid import render_field

        counts = ", ".join(f"{b.label}: {n}" for b, n in self.building_count.items())
        return f"{render_field(self.field)}{{{counts}}}"


class Placement(BaseModel):
    """A building and where it sits; no position means it is still unplaced."""

    model_config = ConfigDict(frozen=True)

    building: BuildingType
    position: Optional[Position] = None

    @property
    def placed(self) -> bool:
        return self.position is not None

    @property
    def row(self) -> Optional[int]:
        return self.position.row if self.position is not None else None

    @property
    def column(self) -> Optional[int]:
        return self.position.column if self.position is not None else None


class Solution(BaseModel):
    """
    An ordered sequence of placements.

    Order is the parse order and only matters for reporting violation indices.
    """

    model_config = ConfigDict(frozen=True)

    placements: Tuple[Placement, ...] = ()

    @classmethod
    def unplaced(cls, puzzle: Puzzle) -> "Solution":
        """Starting inventory for a puzzle: every required building, none placed."""
        placements = []
        for building, count in puzzle.building_count.items():
            placements.extend([Placement(building=building)] * count)
        return cls(placements=tuple(placements))

    def building_count(self) -> Dict[BuildingType, int]:
        """Number of placed buildings per type; absent types were not placed."""
        counts: Dict[BuildingType, int] = {}
        for placement in self.placements:
            if placement.placed:
                counts[placement.building] = counts.get(placement.building, 0) + 1
        return counts

    def with_position(self, index: int, position: Optional[Position]) -> "Solution":
        """Return a copy with one placement moved, or unplaced when position is None."""
        if not 0 <= index < len(self.placements):
            raise IndexError(f"Placement {index} is outside a solution of {len(self.placements)}")
        placements = list(self.placements)
        placements[index] = Placement(building=placements[index].building, position=position)
        return Solution(placements=tuple(placements))


class ViolationType(str, Enum):
    """Spatial rules a single placement can break."""
    NO_GRASS = "no_grass"
    NEXT_TO_TRASH = "next_to_trash"
    NOT_ON_EDGE = "not_on_edge"


class PlacementViolation(BaseModel):
    """A rule broken by the placement at building_index in the solution."""
    building_index: int = Field(..., ge=0)
    building: BuildingType
    violation: ViolationType


class BuildingCountMismatch(BaseModel):
    """A building type placed a different number of times than required."""
    building: BuildingType
    required: int
    placed: int


class ValidationResult(BaseModel):
    """Result of validating a solution against a puzzle."""
    building_missing: bool = False
    placement_violations: List[PlacementViolation] = Field(default_factory=list)
    count_mismatches: List[BuildingCountMismatch] = Field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.building_missing and not self.placement_violations

    def __str__(self) -> str:
        from .status import format_validation_result

        return format_validation_result(self)


NeighborMode = Literal["orthogonal", "legacy"]


class ValidatorConfig(BaseModel):
    """
    Rule switches for validate_solution.

    neighbor_mode "legacy" probes the offsets the first release of the game
    used, (1, 1), (0, 0), (-1, -1), (0, 0), instead of the four orthogonal
    neighbors. The two extra rules are off unless enabled.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    neighbor_mode: NeighborMode = "orthogonal"
    hermit_on_edge: bool = False
    house_away_from_trash: bool = False
