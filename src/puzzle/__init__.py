"""Village puzzle model and solution validation."""

from .errors import PuzzleError, UnknownBuildingEncoding, MalformedGrid
from .models import (
    BuildingType,
    CellType,
    Position,
    Puzzle,
    Placement,
    Solution,
    ViolationType,
    PlacementViolation,
    BuildingCountMismatch,
    ValidationResult,
    ValidatorConfig,
)
from .grid import field_from_size, field_from_rows, render_field, neighbors, on_edge
from .parsing import parse_solution, split_rows
from .validate import validate_solution, check_building_counts, check_placements
from .levels import first_level, second_level, get_level, LEVELS
from .status import format_validation_result, available_buildings_texts

__all__ = [
    # Errors
    "PuzzleError",
    "UnknownBuildingEncoding",
    "MalformedGrid",
    # Models
    "BuildingType",
    "CellType",
    "Position",
    "Puzzle",
    "Placement",
    "Solution",
    "ViolationType",
    "PlacementViolation",
    "BuildingCountMismatch",
    "ValidationResult",
    "ValidatorConfig",
    # Grid utilities
    "field_from_size",
    "field_from_rows",
    "render_field",
    "neighbors",
    "on_edge",
    # Parsing
    "parse_solution",
    "split_rows",
    # Validation
    "validate_solution",
    "check_building_counts",
    "check_placements",
    # Levels
    "first_level",
    "second_level",
    "get_level",
    "LEVELS",
    # Status text
    "format_validation_result",
    "available_buildings_texts",
]
