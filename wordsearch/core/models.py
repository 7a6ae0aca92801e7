"""Data models supporting the word-search generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple, Optional, Tuple

from .constants import SelectionReason


Row = Tuple[Optional[str], ...]
Grid = Tuple[Row, ...]
MutableGrid = List[List[Optional[str]]]


class CellCoord(NamedTuple):
    """Zero-based board position."""

    row: int
    col: int


def cell_key(row: int, col: int) -> str:
    """Return the ``"row:col"`` key used in used-cell sets."""

    return f"{row}:{col}"


@dataclass(frozen=True)
class WordEntry:
    """Raw entry handed over by the vocabulary provider."""

    id: str
    value: str


@dataclass(frozen=True)
class CandidateWord:
    """A validated dictionary word eligible for placement."""

    id: str
    value_upper: str

    @property
    def length(self) -> int:
        return len(self.value_upper)


@dataclass(frozen=True)
class PlacedWord:
    """A candidate assigned to a concrete snake path."""

    value: str
    path: Tuple[CellCoord, ...]

    @property
    def word_id(self) -> str:
        joined = "|".join(cell_key(row, col) for row, col in self.path)
        return f"{self.value}:{joined}"

    @property
    def cell_keys(self) -> List[str]:
        return [cell_key(row, col) for row, col in self.path]

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "id": self.word_id,
            "value": self.value,
            "path": [[row, col] for row, col in self.path],
        }


@dataclass(frozen=True)
class Board:
    """Finalized board returned to callers; never mutated after creation."""

    grid: Grid
    words: Tuple[PlacedWord, ...] = ()

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def letter(self, row: int, col: int) -> Optional[str]:
        return self.grid[row][col]

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "rows": self.rows,
            "cols": self.cols,
            "grid": [list(row) for row in self.grid],
            "words": [word.to_jsonable() for word in self.words],
        }


@dataclass
class AttemptResult:
    """One randomized placement pass."""

    grid: MutableGrid
    placed_words: List[PlacedWord] = field(default_factory=list)
    filled_cells: int = 0

    def beats(self, other: "AttemptResult") -> bool:
        """More placed words wins; ties go to the fuller grid."""

        if len(self.placed_words) != len(other.placed_words):
            return len(self.placed_words) > len(other.placed_words)
        return self.filled_cells > other.filled_cells


@dataclass(frozen=True)
class SelectionOutcome:
    """Classification of a single selection check."""

    is_valid: bool
    word: Optional[str] = None
    reason: Optional[SelectionReason] = None

    @classmethod
    def rejected(cls, reason: SelectionReason, word: Optional[str] = None) -> "SelectionOutcome":
        return cls(is_valid=False, word=word, reason=reason)

    @classmethod
    def accepted(cls, word: str) -> "SelectionOutcome":
        return cls(is_valid=True, word=word)
