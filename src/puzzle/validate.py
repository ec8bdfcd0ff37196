"""
Solution validation for village puzzles.

Validates, in order:
1. Building counts (the solution places exactly the required buildings)
2. Placement rules, checked only when the counts match:
   - houses need grass on a neighboring cell
   - houses must not border trash (optional)
   - hermits must sit on the board edge (optional)
"""

from typing import List, Optional

from .grid import neighbors, on_edge
from .models import (
    BuildingCountMismatch,
    BuildingType,
    CellType,
    Placement,
    PlacementViolation,
    Puzzle,
    Solution,
    ValidationResult,
    ValidatorConfig,
    ViolationType,
)


def check_building_counts(solution: Solution, puzzle: Puzzle) -> List[BuildingCountMismatch]:
    """Compare placed building counts with the puzzle's requirement, absent meaning zero."""
    placed = solution.building_count()
    mismatches: List[BuildingCountMismatch] = []

    for building in BuildingType:
        required_count = puzzle.building_count.get(building, 0)
        placed_count = placed.get(building, 0)
        if required_count != placed_count:
            mismatches.append(BuildingCountMismatch(
                building=building,
                required=required_count,
                placed=placed_count,
            ))

    return mismatches


def has_grass_nearby(placement: Placement, puzzle: Puzzle, config: ValidatorConfig) -> bool:
    """True if any probed in-bounds neighbor of the placement is grass."""
    return any(
        puzzle.cell(*position) == CellType.GRASS
        for position in neighbors(puzzle, placement.position, config.neighbor_mode)
    )


def check_placements(
    solution: Solution,
    puzzle: Puzzle,
    config: ValidatorConfig,
) -> List[PlacementViolation]:
    """Check every placed building against the spatial rules, in placement order."""
    violations: List[PlacementViolation] = []

    trash_cells = {
        p.position for p in solution.placements
        if p.placed and p.building == BuildingType.TRASH
    }

    for index, placement in enumerate(solution.placements):
        if not placement.placed:
            continue

        found: List[ViolationType] = []

        if placement.building == BuildingType.HOUSE:
            if not has_grass_nearby(placement, puzzle, config):
                found.append(ViolationType.NO_GRASS)
            if config.house_away_from_trash and any(
                position in trash_cells
                for position in neighbors(puzzle, placement.position)
            ):
                found.append(ViolationType.NEXT_TO_TRASH)

        elif placement.building == BuildingType.HERMIT:
            if config.hermit_on_edge and not on_edge(puzzle, placement.position):
                found.append(ViolationType.NOT_ON_EDGE)

        violations.extend(
            PlacementViolation(building_index=index, building=placement.building, violation=v)
            for v in found
        )

    return violations


def validate_solution(
    solution: Solution,
    puzzle: Puzzle,
    config: Optional[ValidatorConfig] = None,
) -> ValidationResult:
    """
    Validate a solution against a puzzle.

    A count mismatch short-circuits: the result then has building_missing set,
    the per-type mismatches and no placement violations. Otherwise every
    broken placement rule is reported.

    Returns a ValidationResult; rule failures are never raised.
    """
    config = config or ValidatorConfig()

    mismatches = check_building_counts(solution, puzzle)
    if mismatches:
        return ValidationResult(building_missing=True, count_mismatches=mismatches)

    return ValidationResult(
        building_missing=False,
        placement_violations=check_placements(solution, puzzle, config),
    )
