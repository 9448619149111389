from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .geometry import Direction, Position


@dataclass(frozen=True)
class Move:
    """One fold: a segment of ``length`` cells laid out along ``direction``."""
    direction: Direction
    length: int
    position: Position

    @property
    def abbreviation(self) -> str:
        return self.direction.abbreviation

    def __str__(self) -> str:
        return f"{self.direction} {self.length} to {self.position}"


Solution = List[Move]


def abbreviate(moves: Iterable[Move]) -> str:
    """Render a move sequence as its direction letters, e.g. ``"URDO"``."""
    return "".join(m.abbreviation for m in moves)


def placement_order(segments: Sequence[int]) -> List[int]:
    """Segment lengths in the order the search places them."""
    return list(reversed(segments))
