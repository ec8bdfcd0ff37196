"""Player-facing status text for puzzles and validation results."""

from typing import Dict, List

from .models import PlacementViolation, Puzzle, Solution, ValidationResult, ViolationType


STATUS_PREFIX = "Solution status:"

VIOLATION_MESSAGES: Dict[ViolationType, str] = {
    ViolationType.NO_GRASS: "has no grass nearby",
    ViolationType.NEXT_TO_TRASH: "is next to trash",
    ViolationType.NOT_ON_EDGE: "is not on the edge of the board",
}


def format_violation(violation: PlacementViolation) -> str:
    """One line per violation; buildings are numbered from 1."""
    return (
        f"Building {violation.building_index + 1} ({violation.building.label}) "
        f"{VIOLATION_MESSAGES[violation.violation]}"
    )


def format_validation_result(result: ValidationResult) -> str:
    """
    Render a validation result as the status text shown under the board.

    Examples:
        Solution status: valid
        Solution status: buildings missing (House: 4/5)
        Solution status: 1 placement problem
        - Building 3 (House) has no grass nearby
    """
    if result.building_missing:
        counts = ", ".join(
            f"{m.building.label}: {m.placed}/{m.required}" for m in result.count_mismatches
        )
        suffix = f" ({counts})" if counts else ""
        return f"{STATUS_PREFIX} buildings missing{suffix}"

    if not result.placement_violations:
        return f"{STATUS_PREFIX} valid"

    num = len(result.placement_violations)
    lines = [f"{STATUS_PREFIX} {num} placement problem{'s' if num > 1 else ''}"]
    lines.extend(f"- {format_violation(v)}" for v in result.placement_violations)
    return "\n".join(lines)


def available_buildings_texts(puzzle: Puzzle, solution: Solution) -> List[str]:
    """
    One inventory line per required building type, e.g. '1: House: 3/5'.

    Lines follow the puzzle's building order, so the n-th line belongs to the
    n-th inventory widget.
    """
    placed = solution.building_count()
    return [
        f"{index}: {building.label}: {placed.get(building, 0)}/{required}"
        for index, (building, required) in enumerate(puzzle.building_count.items(), start=1)
    ]
