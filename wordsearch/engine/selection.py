"""Validation of a player's selected cell chain against a generated board."""

from __future__ import annotations

from typing import AbstractSet, Iterable, Optional, Sequence, Set, Tuple, Union

from ..core.constants import SelectionReason
from ..core.models import Board, CandidateWord, PlacedWord, SelectionOutcome, WordEntry, cell_key
from ..data.normalization import surface

DictionaryItem = Union[WordEntry, CandidateWord, str]

def check_selection(
    board: Board,
    selected_cells: Sequence[Tuple[int, int]],
    dictionary: Iterable[DictionaryItem],
    used_cells: Optional[AbstractSet[str]] = None,
    found_word_ids: Optional[Iterable[str]] = None,
) -> SelectionOutcome:
    """Classify ``selected_cells`` without touching any state.

    The selection must be an orthogonal neighbor chain in the player's
    order, must not cross empty or already used cells, and must match one
    placed word cell by cell (same cells, same order). ``used_cells`` holds
    ``"row:col"`` keys of earlier finds; ``found_word_ids`` holds the
    :attr:`PlacedWord.word_id` of words already credited.
    """

    outcome, _ = classify_selection(board, selected_cells, dictionary, used_cells, found_word_ids)
    return outcome

def classify_selection(
    board: Board,
    selected_cells: Sequence[Tuple[int, int]],
    dictionary: Iterable[DictionaryItem],
    used_cells: Optional[AbstractSet[str]] = None,
    found_word_ids: Optional[Iterable[str]] = None,
) -> Tuple[SelectionOutcome, Optional[PlacedWord]]:
    """Like :func:`check_selection`, also returning the matched placed word when valid."""

    if not selected_cells:
        return SelectionOutcome.rejected(SelectionReason.EMPTY_SELECTION), None

    keys = [cell_key(row, col) for row, col in selected_cells]
    used = used_cells or frozenset()
    if any(key in used for key in keys):
        return SelectionOutcome.rejected(SelectionReason.CELL_ALREADY_USED), None
    if len(set(keys)) != len(keys):
        return SelectionOutcome.rejected(SelectionReason.DUPLICATE_CELLS), None

    if not all(_in_bounds(board, row, col) for row, col in selected_cells):
        return SelectionOutcome.rejected(SelectionReason.OUT_OF_BOUNDS), None

    letters = []
    for row, col in selected_cells:
        value = board.grid[row][col]
        if value is None:
            return SelectionOutcome.rejected(SelectionReason.CONTAINS_EMPTY), None
        letters.append(value)
    selected_word = "".join(letters)

    for prev, nxt in zip(selected_cells, selected_cells[1:]):
        if not _is_orthogonal_neighbor(prev, nxt):
            return SelectionOutcome.rejected(SelectionReason.NOT_NEIGHBOR_CHAIN), None

    placement = find_placement(board, selected_cells, selected_word)
    if placement is None:
        if selected_word in dictionary_surfaces(dictionary):
            return SelectionOutcome.rejected(SelectionReason.NOT_IN_PLACED_WORDS, selected_word), None
        return SelectionOutcome.rejected(SelectionReason.NOT_IN_DICTIONARY, selected_word), None

    if placement.word_id in set(found_word_ids or ()):
        return SelectionOutcome.rejected(SelectionReason.ALREADY_FOUND, selected_word), None

    return SelectionOutcome.accepted(selected_word), placement

def find_placement(
    board: Board, selected_cells: Sequence[Tuple[int, int]], word: str
) -> Optional[PlacedWord]:
    """Return the placed word laid exactly along ``selected_cells``."""

    for placed in board.words:
        if placed.value != word or len(placed.path) != len(selected_cells):
            continue
        if all(
            (cell[0], cell[1]) == (expected[0], expected[1])
            for cell, expected in zip(selected_cells, placed.path)
        ):
            return placed
    return None

def item_surface(item: DictionaryItem) -> str:
    """Uppercase, trimmed text of a dictionary item."""

    if isinstance(item, CandidateWord):
        return surface(item.value_upper)
    if isinstance(item, WordEntry):
        return surface(item.value)
    return surface(item)

def item_id(item: DictionaryItem) -> Optional[str]:
    if isinstance(item, (CandidateWord, WordEntry)):
        return item.id
    return None

def dictionary_surfaces(dictionary: Iterable[DictionaryItem]) -> Set[str]:
    """Uppercase, trimmed values of every non-blank dictionary item."""

    return {text for text in map(item_surface, dictionary) if text}

def _in_bounds(board: Board, row: int, col: int) -> bool:
    if row < 0 or col < 0:
        return False
    if row >= len(board.grid):
        return False
    return col < len(board.grid[row])

def _is_orthogonal_neighbor(prev: Tuple[int, int], nxt: Tuple[int, int]) -> bool:
    return abs(nxt[0] - prev[0]) + abs(nxt[1] - prev[1]) == 1
