"""Pretty-print helpers for word-search boards."""

from __future__ import annotations

import sys
from collections import Counter

from ..core.models import Board

EMPTY_SYMBOL = "."


def format_board(board: Board) -> str:
    width = board.cols
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(board.grid):
        row_render = " ".join(f"{value or EMPTY_SYMBOL:>2}" for value in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_board(board: Board, *, label: str | None = None, stream=None) -> None:
    """Print the board in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_board(board), file=stream)


def print_board_stats(board: Board, *, stream=None) -> None:
    """Print grid + placement stats for a generated board."""

    stream = stream or sys.stdout
    print(format_board(board), file=stream)

    total_cells = board.rows * board.cols
    letter_cells = sum(1 for row in board.grid for value in row if value is not None)

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {board.rows} x {board.cols} ({total_cells} cells)", file=stream)
    if total_cells:
        print(f"  Letters:       {letter_cells} ({letter_cells / total_cells * 100:.0f}%)", file=stream)
    print(f"  Empty:         {total_cells - letter_cells}", file=stream)

    lengths = [len(word.value) for word in board.words]
    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Placed:        {len(board.words)}", file=stream)
    if lengths:
        dist_parts = [f"{l}:{c}" for l, c in sorted(Counter(lengths).items())]
        print(f"  Length range:  {min(lengths)}-{max(lengths)} (avg {sum(lengths) / len(lengths):.1f})", file=stream)
        print(f"  Distribution:  {' '.join(dist_parts)}", file=stream)
        for word in board.words:
            start = word.path[0]
            print(f"  {word.value:<12} from ({start.row},{start.col})", file=stream)
