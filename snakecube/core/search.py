"""Backtracking search for a snake-cube fold sequence.

One :class:`SearchState` is threaded through the whole recursion and mutated
in place. Every candidate fold is tried as

1. ``checkpoint()``  - remember occupancy, bounds, heading, position
2. ``claim_cells()`` - mark the cells the segment sweeps over
3. ``commit()``      - record the move and advance
4. ``rollback()``    - put everything back if the subtree fails

so that a sibling branch sees exactly the state it would have seen had the
failed branch never been tried.
"""

from __future__ import annotations

from typing import Callable, Dict, List, NamedTuple, Optional, Sequence, Tuple

from .. import config
from ..logging_utils import get_logger
from .bounds import Bounds
from .geometry import ORIGIN, Direction, Position
from .model import Move, Solution, abbreviate
from .occupancy import OccupancySet, OccupancyToken

logger = get_logger()

Observer = Callable[["SearchState"], None]

# Directions allowed by a joint after each direction, in canonical order.
_FOLLOWERS: Dict[Optional[Direction], Tuple[Direction, ...]] = {
    prev: tuple(d for d in Direction if prev is None or not d.is_collinear(prev))
    for prev in (None, *Direction)
}


class Checkpoint(NamedTuple):
    """Everything needed to undo one candidate fold."""
    occupancy: OccupancyToken
    bounds: Bounds
    position: Position
    direction: Optional[Direction]
    depth: int


class SearchState:
    """Mutable context shared by every frame of one search."""

    def __init__(self, size: int, segments: Sequence[int]) -> None:
        self.size = size
        # The end of the list is the next segment to place.
        self.queue: List[int] = list(segments)
        self.occupancy = OccupancySet(size)
        self.bounds = Bounds()
        self.direction: Optional[Direction] = None
        self.position = ORIGIN
        self.solution: Solution = []
        self.nodes = 0

    def candidates(self) -> Tuple[Direction, ...]:
        """Directions allowed by the joint after the last fold."""
        return _FOLLOWERS[self.direction]

    def checkpoint(self) -> Checkpoint:
        # Bounds are replaced, never mutated, by commit(), so no copy is needed.
        return Checkpoint(
            self.occupancy.snapshot(),
            self.bounds,
            self.position,
            self.direction,
            len(self.solution),
        )

    def claim_cells(self, direction: Direction, length: int) -> bool:
        """Mark every cell swept by the fold; False on the first blocked cell.

        Cells marked before the blocked one stay marked until the caller rolls
        back to its checkpoint.
        """
        return self.occupancy.claim_line(self.position, direction, length, ORIGIN)

    def commit(self, direction: Direction, length: int, new_pos: Position) -> None:
        self.solution.append(Move(direction, length, new_pos))
        self.bounds = self.bounds.extended(direction, new_pos.coordinate_along(direction))
        self.direction = direction
        self.position = new_pos
        self.nodes += 1
        if self.nodes % config.PROGRESS_INTERVAL == 0:
            logger.info("%d folds tried, depth %d", self.nodes, len(self.solution))

    def rollback(self, checkpoint: Checkpoint) -> None:
        del self.solution[checkpoint.depth:]
        self.occupancy.restore(checkpoint.occupancy)
        self.bounds = checkpoint.bounds
        self.position = checkpoint.position
        self.direction = checkpoint.direction

    def __repr__(self) -> str:
        return (
            f"SearchState(size={self.size}, remaining={len(self.queue)}, "
            f"at={self.position}, path={abbreviate(self.solution)!r})"
        )


def search(state: SearchState, observer: Optional[Observer] = None) -> Optional[Solution]:
    """Place the remaining segments; return the moves or None when exhausted."""
    if not state.queue:
        return list(state.solution)

    length = state.queue.pop()

    for direction in state.candidates():
        new_pos = state.position + direction * length
        if state.bounds.exceeds(direction, new_pos.coordinate_along(direction), state.size):
            continue

        saved = state.checkpoint()
        if not state.claim_cells(direction, length):
            state.rollback(saved)
            continue

        state.commit(direction, length, new_pos)
        if observer is not None:
            observer(state)

        found = search(state, observer)
        if found is not None:
            return found

        state.rollback(saved)

    state.queue.append(length)
    return None


def solve(
    size: int,
    segments: Sequence[int],
    observer: Optional[Observer] = None,
) -> Optional[Solution]:
    """Fold ``segments`` into a cube of side ``size``.

    The last segment of ``segments`` is placed first, starting from the origin
    cell. Input is assumed to be validated already (see
    :func:`snakecube.io.parser.validate_puzzle`).
    """
    state = SearchState(size, segments)
    logger.debug("Searching %d segments in a cube of side %d", len(segments), size)
    result = search(state, observer)
    if result is None:
        logger.debug("Search exhausted after %d nodes", state.nodes)
    else:
        logger.debug("Solution %s found after %d nodes", abbreviate(result), state.nodes)
    return result
