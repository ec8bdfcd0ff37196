"""
Test suite for solution validation.

Covers:
- Count reconciliation (short-circuits placement checks)
- NO_GRASS in orthogonal and legacy neighbor modes
- Optional rules (NEXT_TO_TRASH, NOT_ON_EDGE)
- Built-in levels
"""

import pytest

from src.puzzle import (
    BuildingCountMismatch,
    BuildingType,
    PlacementViolation,
    Position,
    Puzzle,
    Solution,
    ValidatorConfig,
    ViolationType,
    field_from_rows,
    field_from_size,
    first_level,
    neighbors,
    on_edge,
    parse_solution,
    second_level,
    validate_solution,
)


LEGACY = ValidatorConfig(neighbor_mode="legacy")


def enclosed_house_level():
    """Two houses; the one at (1, 2) is surrounded by holes."""
    puzzle = Puzzle(
        field=field_from_rows([
            "gxxx",
            "gxgx",
            "gxxx",
        ]),
        building_count={BuildingType.HOUSE: 2},
    )
    solution = parse_solution([
        "1...",
        "..1.",
        "....",
    ])
    return puzzle, solution


class TestBuiltInLevels:
    """Test the embedded levels."""

    def test_first_level_valid(self):
        puzzle, solution = first_level()
        result = validate_solution(solution, puzzle)
        assert result.building_missing is False
        assert result.placement_violations == []
        assert result.valid is True

    def test_second_level_valid(self):
        puzzle, solution = second_level()
        result = validate_solution(solution, puzzle)
        assert result.valid is True

    def test_first_level_valid_in_legacy_mode(self):
        puzzle, solution = first_level()
        assert validate_solution(solution, puzzle, LEGACY).valid is True

    def test_levels_are_fresh(self):
        """Each call builds new values."""
        assert first_level()[0] is not first_level()[0]
        assert first_level() == first_level()

    def test_levels_pass_optional_rules(self):
        """Both levels also satisfy the edge and trash rules."""
        config = ValidatorConfig(hermit_on_edge=True, house_away_from_trash=True)
        for level in (first_level, second_level):
            puzzle, solution = level()
            assert validate_solution(solution, puzzle, config).valid is True


class TestBuildingCounts:
    """Test count reconciliation."""

    def test_missing_house(self):
        """Four houses against five required reports building_missing only."""
        puzzle, _ = first_level()
        solution = parse_solution(["1gT", "11g", "g1."])
        result = validate_solution(solution, puzzle)
        assert result.building_missing is True
        assert result.placement_violations == []
        assert result.count_mismatches == [
            BuildingCountMismatch(building=BuildingType.HOUSE, required=5, placed=4)
        ]
        assert result.valid is False

    def test_mismatch_short_circuits_placement_checks(self):
        """A house without grass is not reported while counts differ."""
        puzzle, solution = enclosed_house_level()
        short = solution.with_position(0, None)
        result = validate_solution(short, puzzle)
        assert result.building_missing is True
        assert result.placement_violations == []

    def test_unrequired_building(self):
        """A building the puzzle does not ask for is a mismatch."""
        puzzle, _ = first_level()
        solution = parse_solution(["1gT", "11H", "g11"])
        result = validate_solution(solution, puzzle)
        assert result.building_missing is True
        assert BuildingCountMismatch(
            building=BuildingType.HERMIT, required=0, placed=1
        ) in result.count_mismatches

    def test_unplaced_buildings_do_not_count(self):
        puzzle, _ = first_level()
        result = validate_solution(Solution.unplaced(puzzle), puzzle)
        assert result.building_missing is True
        assert [(m.building, m.required, m.placed) for m in result.count_mismatches] == [
            (BuildingType.HOUSE, 5, 0),
            (BuildingType.TRASH, 1, 0),
        ]

    def test_order_does_not_matter(self):
        """Same buildings in a different order validate the same."""
        puzzle, solution = first_level()
        reversed_solution = Solution(placements=tuple(reversed(solution.placements)))
        assert validate_solution(reversed_solution, puzzle).valid is True


class TestNoGrass:
    """Test the house-needs-grass rule."""

    def test_enclosed_house(self):
        """A house surrounded by holes is reported with its placement index."""
        puzzle, solution = enclosed_house_level()
        result = validate_solution(solution, puzzle)
        assert result.building_missing is False
        assert result.placement_violations == [
            PlacementViolation(
                building_index=1,
                building=BuildingType.HOUSE,
                violation=ViolationType.NO_GRASS,
            )
        ]

    def test_single_cell_board(self):
        """With every neighbor off the board, the house has no grass."""
        puzzle = Puzzle(field=field_from_size(1, 1), building_count={BuildingType.HOUSE: 1})
        result = validate_solution(parse_solution(["1"]), puzzle)
        assert [v.violation for v in result.placement_violations] == [ViolationType.NO_GRASS]

    def test_horizontal_neighbor_counts(self):
        """Grass to the side is enough in orthogonal mode."""
        puzzle = Puzzle(
            field=field_from_rows(["xgx"]),
            building_count={BuildingType.HOUSE: 1},
        )
        result = validate_solution(parse_solution(["1.."]), puzzle)
        assert result.valid is True

    def test_violations_accumulate(self):
        puzzle = Puzzle(
            field=field_from_rows(["xx", "xx"]),
            building_count={BuildingType.HOUSE: 2},
        )
        result = validate_solution(parse_solution(["1.", ".1"]), puzzle)
        assert [v.building_index for v in result.placement_violations] == [0, 1]

    def test_only_houses_need_grass(self):
        puzzle = Puzzle(
            field=field_from_rows(["xx"]),
            building_count={BuildingType.TRASH: 1, BuildingType.HERMIT: 1},
        )
        result = validate_solution(parse_solution(["TH"]), puzzle)
        assert result.valid is True

    def test_idempotent(self):
        """Validating twice gives identical results."""
        puzzle, solution = enclosed_house_level()
        assert validate_solution(solution, puzzle) == validate_solution(solution, puzzle)


class TestLegacyNeighbors:
    """Test the first-release neighbor offsets."""

    def test_legacy_offsets(self):
        """Legacy mode probes two diagonals and the cell itself."""
        puzzle = Puzzle(field=field_from_size(3, 3))
        probed = list(neighbors(puzzle, Position(1, 1), mode="legacy"))
        assert probed == [Position(2, 2), Position(1, 1), Position(0, 0), Position(1, 1)]

    def test_orthogonal_offsets(self):
        puzzle = Puzzle(field=field_from_size(3, 3))
        probed = set(neighbors(puzzle, Position(0, 0)))
        assert probed == {Position(1, 0), Position(0, 1)}

    def test_legacy_sees_own_cell(self):
        """The enclosed house passes in legacy mode because its own cell is grass."""
        puzzle, solution = enclosed_house_level()
        assert validate_solution(solution, puzzle, LEGACY).valid is True

    def test_legacy_ignores_horizontal_neighbors(self):
        puzzle = Puzzle(
            field=field_from_rows(["xgx"]),
            building_count={BuildingType.HOUSE: 1},
        )
        result = validate_solution(parse_solution(["1.."]), puzzle, LEGACY)
        assert [v.violation for v in result.placement_violations] == [ViolationType.NO_GRASS]

    def test_legacy_house_on_hole(self):
        puzzle = Puzzle(
            field=field_from_rows(["xx", "xx"]),
            building_count={BuildingType.HOUSE: 1},
        )
        result = validate_solution(parse_solution(["1"]), puzzle, LEGACY)
        assert result.placement_violations[0].building_index == 0


class TestOptionalRules:
    """Test the rules that are off by default."""

    def hermit_in_middle(self):
        puzzle = Puzzle(
            field=field_from_size(3, 3),
            building_count={BuildingType.HOUSE: 1, BuildingType.HERMIT: 1},
        )
        return puzzle, parse_solution(["1..", ".H.", "..."])

    def house_by_trash(self):
        puzzle = Puzzle(
            field=field_from_size(3, 3),
            building_count={BuildingType.HOUSE: 1, BuildingType.TRASH: 1},
        )
        return puzzle, parse_solution(["1T.", "...", "..."])

    def test_hermit_rule_off_by_default(self):
        puzzle, solution = self.hermit_in_middle()
        assert validate_solution(solution, puzzle).valid is True

    def test_hermit_not_on_edge(self):
        puzzle, solution = self.hermit_in_middle()
        result = validate_solution(solution, puzzle, ValidatorConfig(hermit_on_edge=True))
        assert result.placement_violations == [
            PlacementViolation(
                building_index=1,
                building=BuildingType.HERMIT,
                violation=ViolationType.NOT_ON_EDGE,
            )
        ]

    def test_trash_rule_off_by_default(self):
        puzzle, solution = self.house_by_trash()
        assert validate_solution(solution, puzzle).valid is True

    def test_house_next_to_trash(self):
        puzzle, solution = self.house_by_trash()
        config = ValidatorConfig(house_away_from_trash=True)
        result = validate_solution(solution, puzzle, config)
        assert [(v.building_index, v.violation) for v in result.placement_violations] == [
            (0, ViolationType.NEXT_TO_TRASH)
        ]

    def test_diagonal_trash_allowed(self):
        puzzle = Puzzle(
            field=field_from_size(3, 3),
            building_count={BuildingType.HOUSE: 1, BuildingType.TRASH: 1},
        )
        solution = parse_solution(["1..", ".T.", "..."])
        config = ValidatorConfig(house_away_from_trash=True)
        assert validate_solution(solution, puzzle, config).valid is True

    def test_rule_order_within_placement(self):
        """NO_GRASS is reported before NEXT_TO_TRASH for the same house."""
        puzzle = Puzzle(
            field=field_from_rows(["xx"]),
            building_count={BuildingType.HOUSE: 1, BuildingType.TRASH: 1},
        )
        config = ValidatorConfig(house_away_from_trash=True)
        result = validate_solution(parse_solution(["1T"]), puzzle, config)
        assert [v.violation for v in result.placement_violations] == [
            ViolationType.NO_GRASS,
            ViolationType.NEXT_TO_TRASH,
        ]

    @pytest.mark.parametrize("position,expected", [
        (Position(0, 0), True),
        (Position(0, 1), True),
        (Position(1, 2), True),
        (Position(2, 1), True),
        (Position(1, 1), False),
    ])
    def test_on_edge(self, position, expected):
        puzzle = Puzzle(field=field_from_size(3, 3))
        assert on_edge(puzzle, position) is expected

    def test_config_rejects_unknown_keys(self):
        with pytest.raises(ValueError):
            ValidatorConfig(neighbour_mode="legacy")

    def test_config_rejects_unknown_mode(self):
        with pytest.raises(ValueError):
            ValidatorConfig(neighbor_mode="diagonal")
