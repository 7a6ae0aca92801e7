"""CLI entrypoint for the word-search board generator."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from wordsearch.core.constants import DictionaryMode, GridSize
from wordsearch.core.exceptions import WordSearchError
from wordsearch.core.models import WordEntry
from wordsearch.engine.generator import GeneratorConfig, WordSearchGenerator
from wordsearch.utils.logger import configure_logging
from wordsearch.utils.pretty import print_board_stats


def parse_words_file(path: Path, prefix: str) -> List[WordEntry]:
    """Read entries from a file, one per line. Blank lines and # comments are skipped.

    A line may be ``WORD`` or ``ID<TAB>WORD``; bare words get a positional id.
    """
    entries: List[WordEntry] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        if "\t" in stripped:
            entry_id, value = stripped.split("\t", 1)
            entries.append(WordEntry(id=entry_id.strip(), value=value))
        else:
            entries.append(WordEntry(id=f"{prefix}{len(entries) + 1}", value=stripped))
    return entries


def collect_entries(words: Optional[Sequence[str]], words_file: Optional[Path], prefix: str) -> List[WordEntry]:
    entries = [
        WordEntry(id=f"{prefix}{index}", value=value)
        for index, value in enumerate(words or [], start=1)
    ]
    if words_file:
        entries.extend(parse_words_file(words_file, f"{prefix}f"))
    return entries


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate snake-path word-search boards",
    )
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Primary word list",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one WORD or ID<TAB>WORD entry per line (# comments and blank lines ignored)",
    )
    parser.add_argument(
        "--secondary-words",
        nargs="+",
        metavar="WORD",
        help="Secondary (personal) word list",
    )
    parser.add_argument(
        "--secondary-words-file",
        type=Path,
        metavar="FILE",
        help="File with secondary entries, same format as --words-file",
    )
    parser.add_argument(
        "--mode",
        type=str,
        choices=[m.value for m in DictionaryMode],
        default=DictionaryMode.PRIMARY.value,
        help="Which word list feeds the board",
    )
    parser.add_argument(
        "--size",
        type=str,
        choices=[s.value for s in GridSize],
        default=GridSize.SMALL.value,
        help="Board size (small 5x5, medium 6x6, large 7x7)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--allow-empty-cells",
        action="store_true",
        help="Accepted for compatibility; unplaced cells are always left empty",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Print the board and placement stats instead of JSON",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    primary = collect_entries(args.words, args.words_file, "p")
    secondary = collect_entries(args.secondary_words, args.secondary_words_file, "s")
    if not primary and not secondary:
        parser.error("provide at least --words / --words-file or --secondary-words / --secondary-words-file")

    config = GeneratorConfig(
        grid_size=args.size,
        mode=args.mode,
        allow_empty_cells=args.allow_empty_cells,
        seed=args.seed,
    )
    try:
        board = WordSearchGenerator(config).generate(primary, secondary)
    except WordSearchError as exc:
        parser.exit(1, f"error: {exc}\n")

    if args.pretty:
        print_board_stats(board)
        return 0

    output_text = json.dumps(board.to_jsonable(), ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
