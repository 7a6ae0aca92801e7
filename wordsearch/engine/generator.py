"""Main word-search generator orchestration.

options -> candidate words -> best of N placement attempts -> finalized board.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Sequence

from ..core.constants import (ATTEMPTS_PER_CANDIDATE, GRID_SIZES, MAX_ATTEMPTS, MIN_ATTEMPTS,
                              Bounds, DictionaryMode, GridSize)
from ..core.exceptions import BoardIntegrityError, ConfigurationError
from ..core.models import Board, WordEntry
from ..data.candidates import build_candidates
from ..utils.logger import get_logger
from .finalizer import finalize_grid
from .placement import PlacementEngine
from .validator import BoardValidator


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    grid_size: GridSize | str = GridSize.SMALL
    mode: DictionaryMode | str = DictionaryMode.PRIMARY
    # Kept for older callers; unplaced cells are always empty.
    allow_empty_cells: bool = True
    seed: Optional[int] = None
    min_attempts: int = MIN_ATTEMPTS
    max_attempts: int = MAX_ATTEMPTS
    attempts_per_candidate: int = ATTEMPTS_PER_CANDIDATE
    check_integrity: bool = True

    def __post_init__(self) -> None:
        try:
            self.grid_size = GridSize(self.grid_size)
        except ValueError as exc:
            raise ConfigurationError(f"Unknown grid size: {self.grid_size!r}") from exc
        try:
            self.mode = DictionaryMode(self.mode)
        except ValueError as exc:
            raise ConfigurationError(f"Unknown dictionary mode: {self.mode!r}") from exc

    def bounds(self) -> Bounds:
        return GRID_SIZES[GridSize(self.grid_size)]

    def to_engine(self) -> PlacementEngine:
        return PlacementEngine(
            rng=random.Random(self.seed),
            min_attempts=self.min_attempts,
            max_attempts=self.max_attempts,
            attempts_per_candidate=self.attempts_per_candidate,
        )


class WordSearchGenerator:
    """High-level orchestrator: candidates, placement, finalization."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        engine: Optional[PlacementEngine] = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.engine = engine or self.config.to_engine()
        self.validator = BoardValidator()

    def generate(
        self,
        primary: Sequence[WordEntry],
        secondary: Sequence[WordEntry] = (),
    ) -> Board:
        bounds = self.config.bounds()
        candidates = build_candidates(self.config.mode, primary, secondary)
        LOGGER.info(
            "Generating %s board (%dx%d) from %d candidates",
            GridSize(self.config.grid_size).value,
            bounds.rows,
            bounds.cols,
            len(candidates),
        )

        best = self.engine.place_best(candidates, bounds.rows, bounds.cols)
        board = Board(
            grid=finalize_grid(best.grid, self.config.allow_empty_cells),
            words=tuple(best.placed_words),
        )

        if self.config.check_integrity:
            validation = self.validator.validate(board, bounds)
            if not validation.ok:
                raise BoardIntegrityError(
                    f"Board validation failed: {validation.messages}"
                )
        LOGGER.info("Board generation completed with %s words", len(board.words))
        return board


def generate_board(
    primary: Sequence[WordEntry],
    secondary: Sequence[WordEntry] = (),
    *,
    grid_size: GridSize | str = GridSize.SMALL,
    mode: DictionaryMode | str = DictionaryMode.PRIMARY,
    allow_empty_cells: bool = True,
    seed: Optional[int] = None,
) -> Board:
    """One-call convenience wrapper around :class:`WordSearchGenerator`."""

    config = GeneratorConfig(
        grid_size=grid_size,
        mode=mode,
        allow_empty_cells=allow_empty_cells,
        seed=seed,
    )
    return WordSearchGenerator(config).generate(primary, secondary)
