"""Working grid used while placing words in a single attempt."""

from __future__ import annotations

from typing import List, Optional, Sequence, Set

from ..core.constants import RIGHT_DOWN_STEPS, Bounds
from ..core.exceptions import BoardIntegrityError
from ..core.models import CellCoord, MutableGrid


class WordSearchGrid:
    """Letters plus the occupancy set of one placement attempt."""

    def __init__(self, rows: int, cols: int) -> None:
        self.bounds = Bounds(rows=rows, cols=cols)
        self.cells: MutableGrid = create_empty_grid(rows, cols)
        self.occupied: Set[CellCoord] = set()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def cell(self, row: int, col: int) -> Optional[str]:
        return self.cells[row][col]

    def is_free(self, cell: CellCoord) -> bool:
        return cell not in self.occupied

    @property
    def filled_count(self) -> int:
        return len(self.occupied)

    @property
    def free_count(self) -> int:
        return self.bounds.area - len(self.occupied)

    def all_cells(self) -> List[CellCoord]:
        return [
            CellCoord(row, col)
            for row in range(self.bounds.rows)
            for col in range(self.bounds.cols)
        ]

    def right_down_neighbors(self, cell: CellCoord) -> List[CellCoord]:
        """Neighbors a snake path may grow into: one step right or one step down."""

        neighbors: List[CellCoord] = []
        for dr, dc in RIGHT_DOWN_STEPS:
            nr, nc = cell.row + dr, cell.col + dc
            if self.bounds.contains(nr, nc):
                neighbors.append(CellCoord(nr, nc))
        return neighbors

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def place_word(self, word: str, path: Sequence[CellCoord]) -> None:
        if len(word) != len(path):
            raise BoardIntegrityError(
                f"Path of length {len(path)} cannot hold '{word}'"
            )
        for letter, cell in zip(word, path):
            if cell in self.occupied:
                raise BoardIntegrityError(f"Cell {tuple(cell)} already occupied")
            self.cells[cell.row][cell.col] = letter
            self.occupied.add(cell)

    def snapshot(self) -> MutableGrid:
        return [list(row) for row in self.cells]


def create_empty_grid(rows: int, cols: int) -> MutableGrid:
    return [[None for _ in range(cols)] for _ in range(rows)]
