"""
Tokenizer - Split free text into index terms.
"""

from __future__ import annotations

import re

__all__ = ["tokenize", "MIN_TOKEN_LENGTH"]

# Tokens must be longer than this
MIN_TOKEN_LENGTH = 2

_NON_WORD = re.compile(r"[^\w\s]", re.ASCII)


def tokenize(text: str) -> list[str]:
    """
    Convert text to index terms.

    Lower-cases the text, turns every character that is not an ASCII word
    character or whitespace into a separator, and drops tokens of two
    characters or fewer.

    Lower-casing follows Python's Unicode rules, so a non-ASCII letter may
    lower-case to an ASCII letter plus a combining mark, and the mark then
    acts as a separator: ``"İstanbul"`` becomes ``'stanbul'``, not ``'istanbul'``.

    Example:
        >>> tokenize("RSI, Bollinger-Bands & MA")
        ['rsi', 'bollinger', 'bands']
    """
    cleaned = _NON_WORD.sub(" ", text.lower())
    return [word for word in cleaned.split() if len(word) > MIN_TOKEN_LENGTH]
