"""Bit-addressed set of the cells covered by the chain so far."""

from __future__ import annotations

from typing import Dict, List, Tuple

from ..config import WORD_BITS
from .geometry import Direction, Position

OccupancyToken = Tuple[int, ...]


class OccupancySet:
    """Fixed-capacity bitset over every cell the search can reach.

    The origin may end up anywhere inside the cube, so coordinates range over
    ``[-(size - 1), size - 1]`` on each axis. They are shifted by ``size - 1``
    and linearized over a cube of side ``2 * size - 1``.
    """

    __slots__ = ("size", "side", "_offset", "_strides", "_words")

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("cube size must be positive")
        self.size = size
        self.side = 2 * size - 1
        self._offset = size - 1
        axis_strides = (self.side * self.side, self.side, 1)
        # flat-index step for one cell along each direction
        self._strides: Dict[Direction, int] = {
            d: d.sign() * axis_strides[d.axis] for d in Direction
        }
        bit_count = self.side ** 3
        self._words: List[int] = [0] * ((bit_count + WORD_BITS - 1) // WORD_BITS)

    # Internal utilities -------------------------------------------------
    def _flat(self, pos: Position) -> int:
        off = self._offset
        side = self.side
        return ((pos.x + off) * side + (pos.y + off)) * side + (pos.z + off)

    def index(self, pos: Position) -> Tuple[int, int]:
        """Return ``(word index, bit mask)`` for ``pos``."""
        idx = self._flat(pos)
        return idx // WORD_BITS, 1 << (idx % WORD_BITS)

    # API ----------------------------------------------------------------
    def is_occupied(self, pos: Position) -> bool:
        word, mask = self.index(pos)
        return bool(self._words[word] & mask)

    def mark(self, pos: Position) -> None:
        word, mask = self.index(pos)
        self._words[word] |= mask

    def claim_line(self, start: Position, direction: Direction, length: int, forbidden: Position) -> bool:
        """Mark the ``length`` cells after ``start`` along ``direction``.

        Stops and returns False at the first cell that is occupied or equal to
        ``forbidden``; cells marked before it stay marked.
        """
        words = self._words
        stride = self._strides[direction]
        blocked = self._flat(forbidden)
        idx = self._flat(start)
        for _ in range(length):
            idx += stride
            if idx == blocked:
                return False
            word, bit = divmod(idx, WORD_BITS)
            mask = 1 << bit
            if words[word] & mask:
                return False
            words[word] |= mask
        return True

    def snapshot(self) -> OccupancyToken:
        return tuple(self._words)

    def restore(self, token: OccupancyToken) -> None:
        self._words[:] = token

    def count(self) -> int:
        return sum(bin(word).count("1") for word in self._words)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OccupancySet):
            return NotImplemented
        return self.size == other.size and self._words == other._words

    def __repr__(self) -> str:
        return f"OccupancySet(size={self.size}, occupied={self.count()})"
