from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Sequence

import yaml

from ..config import MAX_SEGMENT_LENGTH


class InvalidPuzzleError(ValueError):
    """The puzzle cannot be handed to the search as given."""


@dataclass
class Puzzle:
    size: int
    segments: List[int]
    options: Dict[str, Any] = field(default_factory=dict)

    @property
    def trace(self) -> bool:
        return bool(self.options.get("trace", False))


def validate_puzzle(size: int, segments: Sequence[int]) -> None:
    """Raise InvalidPuzzleError unless ``segments`` can exactly fill the cube."""
    if not segments:
        raise InvalidPuzzleError("No input specified")
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise InvalidPuzzleError(f"Cube size must be positive, got {size}")
    for seg in segments:
        if isinstance(seg, bool) or not isinstance(seg, int) or not 0 < seg <= MAX_SEGMENT_LENGTH:
            raise InvalidPuzzleError(
                f"Segment lengths must be positive integers below {MAX_SEGMENT_LENGTH + 1}, got {seg}"
            )

    # The starting cell is not part of any segment.
    input_sum = sum(segments) + 1
    if input_sum != size ** 3:
        raise InvalidPuzzleError(f"Invalid input sum: expected {size ** 3}, got {input_sum}.")
    for seg in segments:
        if seg >= size:
            raise InvalidPuzzleError(f"Input element {seg} is too large")


def load_puzzle(path: str | Path) -> Puzzle:
    """Load and validate a YAML puzzle description."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise InvalidPuzzleError(f"{path}: expected a mapping with 'size' and 'segments'")
    for key in ("size", "segments"):
        if key not in data:
            raise InvalidPuzzleError(f"{path}: missing '{key}'")

    size = data["size"]
    if not isinstance(data["segments"], list):
        raise InvalidPuzzleError(f"{path}: 'segments' must be a list of lengths")
    segments = list(data["segments"])
    options = data.get("options") or {}
    if not isinstance(options, dict):
        raise InvalidPuzzleError(f"{path}: 'options' must be a mapping")

    validate_puzzle(size, segments)
    return Puzzle(size=size, segments=segments, options=options)
