from snakecube.core.constraints import (
    check_coverage,
    check_extent,
    check_joints,
    check_lengths,
    check_path,
    check_solution,
    walk,
)
from snakecube.core.geometry import ORIGIN, Direction, Position
from snakecube.core.model import Move

ONES = [1] * 7
GOOD = [
    Move(Direction.UP, 1, Position(0, 1, 0)),
    Move(Direction.RIGHT, 1, Position(1, 1, 0)),
    Move(Direction.DOWN, 1, Position(1, 0, 0)),
    Move(Direction.OUT, 1, Position(1, 0, 1)),
    Move(Direction.UP, 1, Position(1, 1, 1)),
    Move(Direction.LEFT, 1, Position(0, 1, 1)),
    Move(Direction.DOWN, 1, Position(0, 0, 1)),
]


def test_valid_solution_has_no_problems():
    assert check_solution(2, ONES, GOOD) == []


def test_walk_includes_intermediate_cells():
    moves = [Move(Direction.RIGHT, 2, Position(2, 0, 0)), Move(Direction.UP, 1, Position(2, 1, 0))]
    assert walk(moves) == [ORIGIN, Position(1, 0, 0), Position(2, 0, 0), Position(2, 1, 0)]


def test_lengths_must_follow_placement_order():
    assert check_lengths(3, [1, 2], [Move(Direction.UP, 2, Position(0, 2, 0)), Move(Direction.LEFT, 1, Position(-1, 2, 0))]) == []
    assert len(check_lengths(2, ONES, GOOD[:-1])) == 1


def test_collinear_joint_is_reported():
    moves = [Move(Direction.UP, 1, Position(0, 1, 0)), Move(Direction.UP, 1, Position(0, 2, 0))]
    problems = check_joints(3, [1, 1], moves)
    assert len(problems) == 1
    assert "collinear" in problems[0]


def test_wrong_recorded_position_is_reported():
    moves = list(GOOD)
    moves[2] = Move(Direction.DOWN, 1, Position(5, 5, 5))
    assert check_path(2, ONES, moves) == ["move 2 ends at (1, 0, 0), recorded as (5, 5, 5)"]


def test_revisits_and_gaps_are_reported():
    moves = [Move(Direction.UP, 1, Position(0, 1, 0)), Move(Direction.DOWN, 1, ORIGIN)]
    problems = check_coverage(2, [1, 1], moves)
    assert len(problems) == 2
    assert "more than once" in problems[0]


def test_overlong_path_is_reported():
    moves = [
        Move(Direction.RIGHT, 1, Position(1, 0, 0)),
        Move(Direction.UP, 1, Position(1, 1, 0)),
        Move(Direction.RIGHT, 1, Position(2, 1, 0)),
    ]
    problems = check_extent(2, [1, 1, 1], moves)
    assert any("along x" in p for p in problems)
    assert not any("along y" in p for p in problems)
