"""Cell positions and the six fold directions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

Vector = Tuple[int, int, int]


@dataclass(frozen=True)
class Position:
    """A unit cell, relative to the origin cell of the chain."""
    x: int
    y: int
    z: int

    def __add__(self, other: Union["Position", "Direction"]) -> "Position":
        if isinstance(other, Direction):
            dx, dy, dz = other.value
        else:
            dx, dy, dz = other.x, other.y, other.z
        return Position(self.x + dx, self.y + dy, self.z + dz)

    def coordinate_along(self, direction: "Direction") -> int:
        """Return the coordinate on the axis ``direction`` moves along."""
        return (self.x, self.y, self.z)[_AXES[direction]]

    def as_tuple(self) -> Vector:
        return (self.x, self.y, self.z)

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"


ORIGIN = Position(0, 0, 0)


class Direction(Enum):
    """Axis-aligned unit vectors, iterated in canonical search order."""
    UP = (0, 1, 0)
    DOWN = (0, -1, 0)
    RIGHT = (1, 0, 0)
    LEFT = (-1, 0, 0)
    OUT = (0, 0, 1)
    IN = (0, 0, -1)

    @property
    def axis(self) -> int:
        return _AXES[self]

    @property
    def abbreviation(self) -> str:
        return _ABBREVIATIONS[self]

    def sign(self) -> int:
        return _SIGNS[self]

    def dot(self, other: "Direction") -> int:
        return sum(a * b for a, b in zip(self.value, other.value))

    def is_collinear(self, other: "Direction") -> bool:
        """True when ``other`` runs along the same axis, either way."""
        return _AXES[self] == _AXES[other]

    def __mul__(self, length: int) -> Position:
        x, y, z = self.value
        return Position(x * length, y * length, z * length)

    __rmul__ = __mul__

    def __neg__(self) -> "Direction":
        return _OPPOSITES[self]

    @classmethod
    def from_vector(cls, vector: Union[Position, Vector]) -> "Direction":
        if isinstance(vector, Position):
            vector = vector.as_tuple()
        return cls(tuple(vector))

    def __str__(self) -> str:
        return self.name


_ABBREVIATIONS = {
    Direction.UP: "U",
    Direction.DOWN: "D",
    Direction.RIGHT: "R",
    Direction.LEFT: "L",
    Direction.OUT: "O",
    Direction.IN: "I",
}

_AXES = {d: next(i for i, c in enumerate(d.value) if c) for d in Direction}

_SIGNS = {d: sum(d.value) for d in Direction}

_OPPOSITES = {d: Direction(tuple(-c for c in d.value)) for d in Direction}
