"""Caller-side bookkeeping for one round of play on a fixed board."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set, Tuple

from ..core.models import Board, PlacedWord, SelectionOutcome
from ..utils.logger import get_logger
from .selection import DictionaryItem, classify_selection, item_id, item_surface


LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class FoundWord:
    word_id: str
    value: str
    cell_keys: Tuple[str, ...]
    entry_id: Optional[str] = None


@dataclass
class WordSearchRound:
    """Accumulates found words and consumed cells across gestures.

    The board stays untouched; :meth:`reset` starts the round over without
    regenerating it.
    """

    board: Board
    dictionary: Sequence[DictionaryItem] = ()
    found: List[FoundWord] = field(default_factory=list)
    used_cells: Set[str] = field(default_factory=set)

    @property
    def found_word_ids(self) -> List[str]:
        return [entry.word_id for entry in self.found]

    @property
    def remaining(self) -> List[PlacedWord]:
        found_ids = set(self.found_word_ids)
        return [word for word in self.board.words if word.word_id not in found_ids]

    @property
    def is_complete(self) -> bool:
        return bool(self.board.words) and not self.remaining

    def submit(self, selected_cells: Sequence[Tuple[int, int]]) -> SelectionOutcome:
        outcome, placement = classify_selection(
            self.board,
            selected_cells,
            self.dictionary,
            used_cells=self.used_cells,
            found_word_ids=self.found_word_ids,
        )
        if placement is None:
            return outcome

        entry = FoundWord(
            word_id=placement.word_id,
            value=placement.value,
            cell_keys=tuple(placement.cell_keys),
            entry_id=self._entry_id_for(placement.value),
        )
        self.found.append(entry)
        self.used_cells.update(entry.cell_keys)
        LOGGER.debug(
            "Found '%s' (%d/%d)", entry.value, len(self.found), len(self.board.words)
        )
        return outcome

    def reset(self) -> None:
        self.found.clear()
        self.used_cells.clear()

    def _entry_id_for(self, value: str) -> Optional[str]:
        for item in self.dictionary:
            if item_surface(item) == value:
                return item_id(item)
        return None
