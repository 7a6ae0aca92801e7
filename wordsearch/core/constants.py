"""Shared constants and enumerations for the word-search generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class DictionaryMode(str, Enum):
    """Which word list feeds a round."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    COMBINED = "combined"


class GridSize(str, Enum):
    """Supported board sizes."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class SelectionReason(str, Enum):
    """Why a selected cell chain was rejected."""

    EMPTY_SELECTION = "empty-selection"
    CELL_ALREADY_USED = "cell-already-used"
    DUPLICATE_CELLS = "duplicate-cells"
    OUT_OF_BOUNDS = "out-of-bounds"
    CONTAINS_EMPTY = "contains-empty"
    NOT_NEIGHBOR_CHAIN = "not-neighbor-chain"
    NOT_IN_PLACED_WORDS = "not-in-placed-words"
    NOT_IN_DICTIONARY = "not-in-dictionary"
    ALREADY_FOUND = "already-found"


# Placement only ever grows a path to the right or downward.
RIGHT_DOWN_STEPS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0))
ORTHOGONAL_STEPS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    @property
    def area(self) -> int:
        return self.rows * self.cols

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols


GRID_SIZES: Dict[GridSize, Bounds] = {
    GridSize.SMALL: Bounds(rows=5, cols=5),
    GridSize.MEDIUM: Bounds(rows=6, cols=6),
    GridSize.LARGE: Bounds(rows=7, cols=7),
}

MIN_ATTEMPTS = 25
MAX_ATTEMPTS = 120
ATTEMPTS_PER_CANDIDATE = 3
