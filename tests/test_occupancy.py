import itertools

import pytest

from snakecube.core.geometry import Direction, Position
from snakecube.core.occupancy import OccupancySet


def _padded_range(size):
    return range(-(size - 1), size)


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5, 6])
def test_index_is_collision_free(size):
    occ = OccupancySet(size)
    seen = set()
    for x, y, z in itertools.product(_padded_range(size), repeat=3):
        idx = occ.index(Position(x, y, z))
        assert idx not in seen
        seen.add(idx)
    assert len(seen) == (2 * size - 1) ** 3


def test_shifted_cube_indices_distinct():
    size = 5
    occ = OccupancySet(size)
    indices = set()
    for x, y, z in itertools.product(range(size), repeat=3):
        indices.add(occ.index(Position(x - 2, y, z - 1)))
    assert len(indices) == size ** 3


def test_mark_is_idempotent():
    occ = OccupancySet(3)
    pos = Position(-2, 1, 2)
    assert not occ.is_occupied(pos)
    occ.mark(pos)
    occ.mark(pos)
    assert occ.is_occupied(pos)
    assert occ.count() == 1
    assert not occ.is_occupied(Position(2, 1, -2))


def test_snapshot_restore_round_trip():
    occ = OccupancySet(4)
    first = [Position(0, 1, 0), Position(1, 1, 0), Position(-3, 3, -3)]
    for pos in first:
        occ.mark(pos)
    token = occ.snapshot()
    before = OccupancySet(4)
    before.restore(token)

    for pos in (Position(3, 3, 3), Position(1, 0, 0), Position(0, 1, 0)):
        occ.mark(pos)
    assert occ != before

    occ.restore(token)
    assert occ == before
    assert occ.count() == len(first)
    assert all(occ.is_occupied(pos) for pos in first)
    assert not occ.is_occupied(Position(3, 3, 3))


def test_snapshot_does_not_share_storage():
    occ = OccupancySet(2)
    token = occ.snapshot()
    occ.mark(Position(1, 0, 0))
    assert occ.snapshot() != token
    occ.restore(token)
    occ.mark(Position(0, 1, 0))
    occ.restore(token)
    assert occ.count() == 0


def test_every_padded_coordinate_can_be_marked():
    occ = OccupancySet(2)
    every = [Position(x, y, z) for x, y, z in itertools.product(_padded_range(2), repeat=3)]
    for pos in every:
        occ.mark(pos)
    assert occ.count() == 27
    assert all(occ.is_occupied(pos) for pos in every)


@pytest.mark.parametrize("direction", list(Direction))
def test_claim_line_marks_the_swept_cells(direction):
    occ = OccupancySet(3)
    start = Position(0, 0, 0) + direction * -1
    assert occ.claim_line(start, direction, 2, Position(2, 2, 2))
    assert occ.count() == 2
    assert occ.is_occupied(Position(0, 0, 0))
    assert occ.is_occupied(direction * 1)
    assert not occ.is_occupied(start)


def test_claim_line_stops_at_forbidden_cell():
    occ = OccupancySet(3)
    assert not occ.claim_line(Position(0, 2, 0), Direction.DOWN, 2, Position(0, 0, 0))
    assert occ.is_occupied(Position(0, 1, 0))
    assert not occ.is_occupied(Position(0, 0, 0))
    assert occ.count() == 1


def test_claim_line_stops_at_occupied_cell():
    occ = OccupancySet(3)
    occ.mark(Position(1, 0, 0))
    assert not occ.claim_line(Position(-1, 0, 0), Direction.RIGHT, 2, Position(2, 2, 2))
    assert occ.is_occupied(Position(0, 0, 0))
    assert occ.count() == 2
    # the line stops at the blocked cell, nothing past it is marked
    assert not occ.is_occupied(Position(2, 0, 0))
