"""
Command line entry point for validating village puzzle levels.

Usage:
    python -m src.main
    python -m src.main rules.yaml --level second_level --verbose
    python -m src.main --level first_level --solution "1gT/11g/g11"
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from .puzzle import (
    LEVELS,
    PuzzleError,
    ValidatorConfig,
    available_buildings_texts,
    get_level,
    parse_solution,
    validate_solution,
)


def load_config(config_path: str) -> ValidatorConfig:
    """Load validator rules from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return ValidatorConfig(**(data or {}))


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Validate a village puzzle solution",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example rules.yaml:
  neighbor_mode: orthogonal   # or: legacy
  hermit_on_edge: true
  house_away_from_trash: true

Exit status is 0 for a valid solution, 2 for an invalid one and 1 on errors.
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML file with validator rules (default: built-in rules)"
    )
    parser.add_argument(
        "--level", "-l",
        default="first_level",
        help=f"Level to validate (one of: {', '.join(LEVELS)}; default: first_level)"
    )
    parser.add_argument(
        "--solution", "-s",
        help="Solution rows separated by '/', replacing the level's own solution"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print the puzzle and rules before the result"
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else ValidatorConfig()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    try:
        puzzle, solution = get_level(args.level)
        if args.solution:
            solution = parse_solution(args.solution)
    except (KeyError, PuzzleError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Level: {args.level}")
        print(f"Rules: {config.model_dump()}")
        print(puzzle)
        print()

    result = validate_solution(solution, puzzle, config)

    for line in available_buildings_texts(puzzle, solution):
        print(line)
    print(result)

    return 0 if result.valid else 2


if __name__ == "__main__":
    sys.exit(main())
