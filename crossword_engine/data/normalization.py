"""Shared helpers for word normalization."""

from __future__ import annotations

import re
import unicodedata

WORD_RE = re.compile(r"[^A-Z]")


def clean_word(text: str) -> str:
    """Return a normalized uppercase ASCII representation of ``text``.

    Accents are folded to their base letter and anything that is not a letter
    (spaces, hyphens, digits) is dropped, so ``"Linked list"`` becomes
    ``"LINKEDLIST"``.
    """

    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return WORD_RE.sub("", stripped.upper())


__all__ = ["clean_word"]
