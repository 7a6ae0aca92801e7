"""Word-search board generator and selection checker.

This package exposes the public API surface via:

- ``wordsearch.engine.generator.WordSearchGenerator``: builds a board from word lists.
- ``wordsearch.engine.selection.check_selection``: classifies one player selection.
- ``wordsearch.engine.round.WordSearchRound``: tracks found words across a round.
"""

from .core.constants import DictionaryMode, GridSize, SelectionReason
from .core.models import Board, CellCoord, PlacedWord, SelectionOutcome, WordEntry, cell_key
from .engine.generator import GeneratorConfig, WordSearchGenerator, generate_board
from .engine.round import WordSearchRound
from .engine.selection import check_selection

__all__ = [
    "Board",
    "CellCoord",
    "DictionaryMode",
    "GeneratorConfig",
    "GridSize",
    "PlacedWord",
    "SelectionOutcome",
    "SelectionReason",
    "WordEntry",
    "WordSearchGenerator",
    "WordSearchRound",
    "cell_key",
    "check_selection",
    "generate_board",
]

__version__ = "0.1.0"
