"""Shared helpers for word normalization."""

from __future__ import annotations

import re
from typing import Optional

VALID_WORD_RE = re.compile(r"^[a-z]+$")


def normalize_word(text: Optional[str]) -> Optional[str]:
    """Return the lowercase form of ``text`` or ``None`` when it is not a plain Latin word."""

    if not text:
        return None
    normalized = text.strip().lower()
    if not VALID_WORD_RE.match(normalized):
        return None
    return normalized


def surface(text: Optional[str]) -> str:
    """Uppercase comparison form used for dictionary lookups."""

    if not text:
        return ""
    return text.strip().upper()


__all__ = ["normalize_word", "surface", "VALID_WORD_RE"]
