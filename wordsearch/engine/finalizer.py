"""Conversion of a working grid into the immutable board grid."""

from __future__ import annotations

from typing import Optional, Sequence

from ..core.models import Grid


def finalize_grid(grid: Sequence[Sequence[Optional[str]]], allow_empty_cells: bool = True) -> Grid:
    """Return a defensive, immutable copy of ``grid``.

    Cells that no placed word covers stay ``None`` so every visible letter
    belongs to a findable word. ``allow_empty_cells`` is accepted for older
    callers and has no effect: unplaced cells are always empty.
    """

    return tuple(tuple(value if value else None for value in row) for row in grid)
