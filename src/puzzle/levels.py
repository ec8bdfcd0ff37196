"""Built-in levels, each a fresh (Puzzle, Solution) pair."""

from typing import Callable, Dict, Tuple

from .grid import field_from_size
from .models import BuildingType, Puzzle, Solution
from .parsing import parse_solution


Level = Tuple[Puzzle, Solution]


def first_level() -> Level:
    puzzle = Puzzle(
        field=field_from_size(3, 3),
        building_count={BuildingType.HOUSE: 5, BuildingType.TRASH: 1},
    )
    solution = parse_solution([
        "1gT",
        "11g",
        "g11",
    ])
    return puzzle, solution


def second_level() -> Level:
    puzzle = Puzzle(
        field=field_from_size(3, 3),
        building_count={BuildingType.HOUSE: 4, BuildingType.HERMIT: 4},
    )
    solution = parse_solution([
        "H1H",
        "1g1",
        "H1H",
    ])
    return puzzle, solution


LEVELS: Dict[str, Callable[[], Level]] = {
    "first_level": first_level,
    "second_level": second_level,
}


def get_level(name: str) -> Level:
    """
    Build a level by name.

    Raises:
        KeyError: If no level has this name
    """
    if name not in LEVELS:
        raise KeyError(f"Unknown level '{name}' (known: {', '.join(LEVELS)})")
    return LEVELS[name]()
