"""Shared helpers for word normalization."""

from __future__ import annotations

import re
import unicodedata

WORD_RE = re.compile(r"[^A-Za-z]")


def clean_word(text: str) -> str:
    """Return a normalized uppercase ASCII representation of ``text``."""

    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    transformed = [char for char in decomposed if not unicodedata.combining(char)]
    ascii_word = WORD_RE.sub("", "".join(transformed))
    return ascii_word.upper()


__all__ = ["clean_word"]
