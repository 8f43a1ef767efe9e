"""Text normalization shared by training and classification."""

from __future__ import annotations

import re

_NON_WORD_RE = re.compile(r"[^\w\s]")
_WHITESPACE_RE = re.compile(r"\s+")


def tokenize(text: str) -> list[str]:
    """Split text into lowercase word tokens.

    Punctuation and symbols are removed outright rather than treated as
    separators, so ``"e-mail"`` becomes ``"email"``.

    Args:
        text: Raw transaction description. May be empty.

    Returns:
        Tokens in input order. Empty if the text has no word characters.
    """
    cleaned = _NON_WORD_RE.sub("", text.lower())
    return [token for token in _WHITESPACE_RE.split(cleaned) if token]
