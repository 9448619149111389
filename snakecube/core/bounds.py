"""Per-direction extents of the path built so far."""

from __future__ import annotations

from typing import Dict, Optional

from .geometry import Direction

_SIGNS = {d: d.sign() for d in Direction}


class Bounds:
    """Furthest coordinate reached along each of the six directions.

    :meth:`update` is destructive. The search uses :meth:`extended` instead,
    which copies before growing, so a saved reference is a complete undo
    record.
    """

    __slots__ = ("_extent",)

    def __init__(self, extent: Optional[Dict[Direction, int]] = None) -> None:
        self._extent: Dict[Direction, int] = {d: 0 for d in Direction}
        if extent:
            self._extent.update(extent)

    def bound(self, direction: Direction) -> int:
        return self._extent[direction]

    def update(self, direction: Direction, coordinate: int) -> None:
        """Move the bound for ``direction`` out to ``coordinate`` if it lies further."""
        sign = direction.sign()
        if coordinate * sign > self._extent[direction] * sign:
            self._extent[direction] = coordinate

    def extended(self, direction: Direction, coordinate: int) -> "Bounds":
        """Return bounds that reach ``coordinate``; ``self`` if it already does.

        ``self`` is never modified, so earlier references stay valid as undo
        records.
        """
        sign = _SIGNS[direction]
        if coordinate * sign <= self._extent[direction] * sign:
            return self
        grown = Bounds(self._extent)
        grown._extent[direction] = coordinate
        return grown

    def exceeds(self, direction: Direction, coordinate: int, size: int) -> bool:
        """True when reaching ``coordinate`` along ``direction`` would span ``size`` or more cells."""
        return abs(coordinate - self._extent[-direction]) >= size

    def extent(self, axis: int) -> int:
        """Number of cells the path covers along ``axis``."""
        lo = hi = None
        for direction, value in self._extent.items():
            if direction.axis != axis:
                continue
            if direction.sign() > 0:
                hi = value
            else:
                lo = value
        return hi - lo + 1

    def copy(self) -> "Bounds":
        return Bounds(self._extent)

    def as_dict(self) -> Dict[str, int]:
        return {d.name: v for d, v in self._extent.items()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bounds):
            return NotImplemented
        return self._extent == other._extent

    def __repr__(self) -> str:
        return f"Bounds({self.as_dict()})"
