"""Randomized backtracking placement of candidate words.

Each attempt lays the candidates, longest first, onto a fresh grid as
right/down snake paths. :meth:`PlacementEngine.place_best` repeats the
attempt and keeps the board with the most words (ties: most filled cells).
"""

from __future__ import annotations

import random
from typing import List, Optional, Sequence, Set

from ..core.constants import ATTEMPTS_PER_CANDIDATE, MAX_ATTEMPTS, MIN_ATTEMPTS
from ..core.exceptions import ConfigurationError
from ..core.models import AttemptResult, CandidateWord, CellCoord, PlacedWord
from ..utils.logger import get_logger
from .grid import WordSearchGrid, create_empty_grid


LOGGER = get_logger(__name__)


class PlacementEngine:
    """Places words on a grid; all randomness goes through ``rng``."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        min_attempts: int = MIN_ATTEMPTS,
        max_attempts: int = MAX_ATTEMPTS,
        attempts_per_candidate: int = ATTEMPTS_PER_CANDIDATE,
    ) -> None:
        if min_attempts < 1 or max_attempts < 1 or attempts_per_candidate < 1:
            raise ConfigurationError("Attempt bounds must be positive")
        self.rng = rng or random.Random()
        self.min_attempts = min_attempts
        self.max_attempts = max_attempts
        self.attempts_per_candidate = attempts_per_candidate

    # ------------------------------------------------------------------
    # Public entrypoints
    # ------------------------------------------------------------------
    def attempt_budget(self, candidate_count: int) -> int:
        scaled = min(self.max_attempts, candidate_count * self.attempts_per_candidate)
        return max(self.min_attempts, scaled)

    def place_best(self, candidates: Sequence[CandidateWord], rows: int, cols: int) -> AttemptResult:
        fitting = [word for word in candidates if word.length <= rows * cols]
        if len(fitting) < len(candidates):
            LOGGER.debug(
                "Dropped %d candidates longer than %d cells",
                len(candidates) - len(fitting),
                rows * cols,
            )
        if not fitting:
            LOGGER.info("No candidate fits a %dx%d grid; returning empty board", rows, cols)
            return AttemptResult(grid=create_empty_grid(rows, cols))

        attempts = self.attempt_budget(len(fitting))
        best: Optional[AttemptResult] = None
        for attempt in range(1, attempts + 1):
            current = self.place(fitting, rows, cols)
            LOGGER.debug(
                "Attempt %s/%s placed %s words over %s cells",
                attempt,
                attempts,
                len(current.placed_words),
                current.filled_cells,
            )
            if best is None or current.beats(best):
                best = current
            if len(best.placed_words) == len(fitting):
                LOGGER.debug("All %d candidates placed; stopping after attempt %s", len(fitting), attempt)
                break

        assert best is not None
        LOGGER.info(
            "Best attempt placed %d/%d words, %d/%d cells filled",
            len(best.placed_words),
            len(fitting),
            best.filled_cells,
            rows * cols,
        )
        return best

    def place(self, candidates: Sequence[CandidateWord], rows: int, cols: int) -> AttemptResult:
        """Run one randomized attempt on a fresh grid."""

        grid = WordSearchGrid(rows, cols)
        placed: List[PlacedWord] = []
        placed_values: Set[str] = set()
        all_cells = grid.all_cells()

        for candidate in self.order_for_attempt(candidates):
            word = candidate.value_upper
            if word in placed_values:
                continue
            if len(word) > grid.free_count:
                continue

            path = self._find_path(grid, len(word), all_cells)
            if path is None:
                continue
            grid.place_word(word, path)
            placed_values.add(word)
            placed.append(PlacedWord(value=word, path=tuple(path)))

        return AttemptResult(grid=grid.cells, placed_words=placed, filled_cells=grid.filled_count)

    def order_for_attempt(self, candidates: Sequence[CandidateWord]) -> List[CandidateWord]:
        """Longest words first; equal lengths come out in random order."""

        return sorted(candidates, key=lambda word: (-word.length, self.rng.random()))

    # ------------------------------------------------------------------
    # Path search
    # ------------------------------------------------------------------
    def _find_path(
        self, grid: WordSearchGrid, length: int, all_cells: Sequence[CellCoord]
    ) -> Optional[List[CellCoord]]:
        starts = list(all_cells)
        self.rng.shuffle(starts)
        for start in starts:
            if not grid.is_free(start):
                continue
            path = self._snake_from(grid, length, start)
            if path is not None:
                return path
        return None

    def _snake_from(
        self, grid: WordSearchGrid, length: int, start: CellCoord
    ) -> Optional[List[CellCoord]]:
        if length <= 0 or not grid.is_free(start):
            return None

        path: List[CellCoord] = [start]
        in_path: Set[CellCoord] = {start}

        def extend(current: CellCoord) -> bool:
            if len(path) == length:
                return True
            options = [
                cell
                for cell in grid.right_down_neighbors(current)
                if grid.is_free(cell) and cell not in in_path
            ]
            self.rng.shuffle(options)
            for nxt in options:
                in_path.add(nxt)
                path.append(nxt)
                if extend(nxt):
                    return True
                path.pop()
                in_path.discard(nxt)
            return False

        return path if extend(start) else None
