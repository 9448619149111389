"""Defaults shared across the snakecube package."""

from __future__ import annotations

from typing import Tuple

# ==== Default puzzle ========================================================

# Used by the CLI when no segments are given on the command line.
DEFAULT_SIZE: int = 4

DEFAULT_SEGMENTS: Tuple[int, ...] = (
    1, 3, 1, 1, 1, 1, 1, 1, 1, 1, 1, 2, 1, 3, 1, 1, 1, 3, 2, 1, 1, 1, 1,
    1, 2, 2, 1, 1, 1, 1, 1, 1, 1, 1, 2, 1, 2, 1, 2, 1, 3, 1, 1, 2, 1, 2,
)

# Segment lengths are stored as bytes in puzzle descriptions.
MAX_SEGMENT_LENGTH: int = 255

# ==== Occupancy storage =====================================================

# Width of one storage word in the occupancy bitset.
WORD_BITS: int = 64

# ==== Search ================================================================

# The search logs a progress line at INFO every this many committed folds.
PROGRESS_INTERVAL: int = 500_000

# ==== Logging ===============================================================

LOGGER_NAME: str = "snakecube"

LOG_FORMAT: str = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
