"""Deterministic integrity checks for generated boards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Set

from ..core.constants import RIGHT_DOWN_STEPS, Bounds
from ..core.exceptions import BoardIntegrityError
from ..core.models import Board, CellCoord
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class BoardValidator:
    """Runs invariant checks over a finalized board.

    A failure here is an engine defect, never a consequence of bad input.
    """

    def validate(self, board: Board, bounds: Bounds) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_dimensions(board, bounds)
            self._check_paths(board, bounds)
            self._check_disjoint(board)
            self._check_letters(board)
        except BoardIntegrityError as exc:
            messages.append(str(exc))
            LOGGER.error("Board integrity check failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_dimensions(self, board: Board, bounds: Bounds) -> None:
        if len(board.grid) != bounds.rows:
            raise BoardIntegrityError(
                f"Board has {len(board.grid)} rows, expected {bounds.rows}"
            )
        for index, row in enumerate(board.grid):
            if len(row) != bounds.cols:
                raise BoardIntegrityError(
                    f"Row {index} has {len(row)} cells, expected {bounds.cols}"
                )

    def _check_paths(self, board: Board, bounds: Bounds) -> None:
        for word in board.words:
            if len(word.path) != len(word.value):
                raise BoardIntegrityError(
                    f"Word '{word.value}' has path length {len(word.path)}"
                )
            if len(set(word.path)) != len(word.path):
                raise BoardIntegrityError(f"Word '{word.value}' revisits a cell")
            for row, col in word.path:
                if not bounds.contains(row, col):
                    raise BoardIntegrityError(
                        f"Word '{word.value}' leaves the board at ({row},{col})"
                    )
            for prev, nxt in zip(word.path, word.path[1:]):
                step = (nxt[0] - prev[0], nxt[1] - prev[1])
                if step not in RIGHT_DOWN_STEPS:
                    raise BoardIntegrityError(
                        f"Word '{word.value}' steps {step} between {tuple(prev)} and {tuple(nxt)}"
                    )

    def _check_disjoint(self, board: Board) -> None:
        claimed: Set[CellCoord] = set()
        for word in board.words:
            for cell in word.path:
                key = CellCoord(*cell)
                if key in claimed:
                    raise BoardIntegrityError(
                        f"Cell {tuple(key)} shared by more than one word ('{word.value}')"
                    )
                claimed.add(key)

    def _check_letters(self, board: Board) -> None:
        covered: Set[CellCoord] = set()
        for word in board.words:
            for letter, (row, col) in zip(word.value, word.path):
                if board.grid[row][col] != letter:
                    raise BoardIntegrityError(
                        f"Cell ({row},{col}) holds '{board.grid[row][col]}', expected '{letter}'"
                    )
                covered.add(CellCoord(row, col))
        for r, row in enumerate(board.grid):
            for c, value in enumerate(row):
                if value is None:
                    continue
                if CellCoord(r, c) not in covered:
                    raise BoardIntegrityError(f"Stray letter '{value}' at ({r},{c})")
                if len(value) != 1 or not value.isalpha() or not value.isupper():
                    raise BoardIntegrityError(f"Invalid letter '{value}' at ({r},{c})")
