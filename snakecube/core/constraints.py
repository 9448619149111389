"""Independent checks that a fold sequence really packs the cube."""

from __future__ import annotations

from typing import Callable, Iterable, List, Sequence

from .bounds import Bounds
from .geometry import ORIGIN, Direction, Position
from .model import Move, placement_order

Check = Callable[[int, Sequence[int], Sequence[Move]], List[str]]


def walk(moves: Iterable[Move]) -> List[Position]:
    """Every cell the chain covers, origin first, in chain order."""
    cells = [ORIGIN]
    pos = ORIGIN
    for move in moves:
        for step in range(1, move.length + 1):
            cells.append(pos + move.direction * step)
        pos = pos + move.direction * move.length
    return cells


def check_lengths(size: int, segments: Sequence[int], moves: Sequence[Move]) -> List[str]:
    expected = placement_order(segments)
    actual = [m.length for m in moves]
    if actual != expected:
        return [f"move lengths {actual} do not match segments {expected}"]
    return []


def check_joints(size: int, segments: Sequence[int], moves: Sequence[Move]) -> List[str]:
    problems = []
    for i in range(1, len(moves)):
        prev, cur = moves[i - 1].direction, moves[i].direction
        if cur.is_collinear(prev):
            problems.append(f"move {i} ({cur}) is collinear with move {i - 1} ({prev})")
    return problems


def check_path(size: int, segments: Sequence[int], moves: Sequence[Move]) -> List[str]:
    problems = []
    pos = ORIGIN
    for i, move in enumerate(moves):
        pos = pos + move.direction * move.length
        if pos != move.position:
            problems.append(f"move {i} ends at {pos}, recorded as {move.position}")
    return problems


def check_coverage(size: int, segments: Sequence[int], moves: Sequence[Move]) -> List[str]:
    cells = walk(moves)
    distinct = set(cells)
    problems = []
    if len(distinct) != len(cells):
        problems.append(f"{len(cells) - len(distinct)} cell(s) visited more than once")
    if len(distinct) != size ** 3:
        problems.append(f"{len(distinct)} distinct cells covered, expected {size ** 3}")
    return problems


def check_extent(size: int, segments: Sequence[int], moves: Sequence[Move]) -> List[str]:
    bounds = Bounds()
    for cell in walk(moves):
        for direction in Direction:
            bounds.update(direction, cell.coordinate_along(direction))
    problems = []
    for low, high in ((Direction.LEFT, Direction.RIGHT), (Direction.DOWN, Direction.UP), (Direction.IN, Direction.OUT)):
        name = "xyz"[high.axis]
        lo, hi = bounds.bound(low), bounds.bound(high)
        if lo < -(size - 1) or hi > size - 1:
            problems.append(f"{name} coordinates {lo}..{hi} leave the padded range")
        width = bounds.extent(high.axis)
        if width > size:
            problems.append(f"path spans {width} cells along {name}, cube side is {size}")
    return problems


CHECKS: Sequence[Check] = (
    check_lengths,
    check_joints,
    check_path,
    check_coverage,
    check_extent,
)


def check_solution(
    size: int,
    segments: Sequence[int],
    moves: Sequence[Move],
    checks: Iterable[Check] = CHECKS,
) -> List[str]:
    """Run every check and collect the problems found; empty means valid."""
    problems: List[str] = []
    for check in checks:
        problems.extend(check(size, segments, moves))
    return problems
