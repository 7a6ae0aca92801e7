"""Candidate word selection and de-duplication."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Set

from ..core.constants import DictionaryMode
from ..core.models import CandidateWord, WordEntry
from ..utils.logger import get_logger
from .normalization import normalize_word


LOGGER = get_logger(__name__)


def select_source(
    mode: DictionaryMode | str,
    primary: Sequence[WordEntry],
    secondary: Sequence[WordEntry],
) -> List[WordEntry]:
    """Pick the word list for ``mode``.

    ``COMBINED`` scans the secondary list first so its entries win on
    duplicates.
    """

    mode = DictionaryMode(mode)
    if mode == DictionaryMode.PRIMARY:
        return list(primary)
    if mode == DictionaryMode.SECONDARY:
        return list(secondary)
    return [*secondary, *primary]


def dictionary_for_mode(
    mode: DictionaryMode | str,
    primary: Sequence[WordEntry],
    secondary: Sequence[WordEntry],
) -> List[WordEntry]:
    """Dictionary a round validates against; mirrors :func:`select_source`."""

    return select_source(mode, primary, secondary)


def normalize_entries(entries: Iterable[WordEntry]) -> List[CandidateWord]:
    """Validate entries and de-duplicate by uppercase value, first seen wins."""

    seen: Set[str] = set()
    result: List[CandidateWord] = []
    rejected = 0
    for entry in entries:
        normalized = normalize_word(entry.value)
        if normalized is None:
            rejected += 1
            continue
        value_upper = normalized.upper()
        if value_upper in seen:
            continue
        seen.add(value_upper)
        result.append(CandidateWord(id=entry.id, value_upper=value_upper))
    if rejected:
        LOGGER.debug("Discarded %d malformed word entries", rejected)
    return result


def build_candidates(
    mode: DictionaryMode | str,
    primary: Sequence[WordEntry],
    secondary: Sequence[WordEntry] = (),
) -> List[CandidateWord]:
    """Return the candidate words for one generation call."""

    candidates = normalize_entries(select_source(mode, primary, secondary))
    LOGGER.debug("Built %d candidate words (mode=%s)", len(candidates), DictionaryMode(mode).value)
    return candidates


__all__ = ["build_candidates", "dictionary_for_mode", "normalize_entries", "select_source"]
