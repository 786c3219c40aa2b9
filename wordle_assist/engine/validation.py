"""
Word validation.

A word is well-formed iff it is a string of exactly N ASCII letters a-z after
stripping surrounding whitespace and lowercasing. Dictionary lines and typed
guesses both go through normalize_word before they reach the engine, which
itself assumes clean input.
"""

from __future__ import annotations

import string
from typing import Iterable, Set

from .errors import InvalidWord
from .patterns import WORD_LENGTH

_LETTERS = frozenset(string.ascii_lowercase)


def normalize_word(word: str, N: int = WORD_LENGTH) -> str:
    """
    Return the canonical (stripped, lowercase) form of `word`.

    Raises InvalidWord if it isn't exactly N letters a-z. Non-ASCII letters
    are rejected even though str.isalpha() would accept them.
    """
    if not isinstance(word, str):
        raise InvalidWord(word, N, "not a string")
    w = word.strip().lower()
    if len(w) != N:
        raise InvalidWord(word, N, f"got {len(w)} characters")
    if not set(w) <= _LETTERS:
        raise InvalidWord(word, N, "letters a-z only")
    return w


def is_word(word: str, N: int = WORD_LENGTH) -> bool:
    """Non-raising form of normalize_word."""
    try:
        normalize_word(word, N)
    except InvalidWord:
        return False
    return True


def validate_guess(word: str, allowed: Iterable[str], N: int) -> bool:
    """
    Return True if `word` is well-formed and in the `allowed` list.

    Notes:
      - `allowed` can be a large list; a local set is built here for O(1)
        membership. Pass a set if calling this in a loop.
    """
    if not is_word(word, N):
        return False
    allowed_set: Set[str] = allowed if isinstance(allowed, (set, frozenset)) \
        else {a.strip().lower() for a in allowed}
    return normalize_word(word, N) in allowed_set
