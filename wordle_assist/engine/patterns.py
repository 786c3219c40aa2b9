"""
Feedback patterns.

A pattern is a tuple of LetterStatus, one per letter position, so it can be
used directly as a dict key when bucketing candidates.

Token alphabet (what the player types back):
  - 'G' : green  = correct letter in the correct position
  - 'Y' : yellow = correct letter in the wrong position
  - 'B' : black  = letter absent (or present fewer times than guessed)
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from .errors import InvalidPattern

# Word length the tool is built around; everything below takes N explicitly.
WORD_LENGTH = 5


class LetterStatus(Enum):
    ABSENT = "B"
    PRESENT = "Y"
    CORRECT = "G"


Pattern = Tuple[LetterStatus, ...]

_BY_SYMBOL = {s.value: s for s in LetterStatus}

# Base-3 digit per status, used for dense integer codes
_TRIT = {LetterStatus.ABSENT: 0, LetterStatus.PRESENT: 1, LetterStatus.CORRECT: 2}


def all_correct(N: int = WORD_LENGTH) -> Pattern:
    """The winning pattern for a word of length N."""
    return (LetterStatus.CORRECT,) * N


def parse_pattern(token: str, N: int = WORD_LENGTH) -> Pattern:
    """
    Parse a player feedback token such as "BYBGG" into a Pattern.

    Case-insensitive; surrounding whitespace is ignored.
    Raises InvalidPattern on wrong length or any symbol outside G/Y/B.
    """
    if not isinstance(token, str):
        raise InvalidPattern(token, N, "not a string")
    t = token.strip().upper()
    if len(t) != N:
        raise InvalidPattern(token, N, f"got {len(t)} characters")
    bad = sorted({ch for ch in t if ch not in _BY_SYMBOL})
    if bad:
        raise InvalidPattern(token, N, f"unknown symbol(s) {''.join(bad)}")
    return tuple(_BY_SYMBOL[ch] for ch in t)


def as_pattern(observed, N: int = WORD_LENGTH) -> Pattern:
    """
    Accept either a token ("BYBGG") or a sequence of LetterStatus of length N.

    Anything else (including sequences of plain strings) raises InvalidPattern.
    """
    if isinstance(observed, str):
        return parse_pattern(observed, N)
    try:
        patt = tuple(observed)
    except TypeError:
        raise InvalidPattern(observed, N, "not a token or a sequence") from None
    if not all(isinstance(s, LetterStatus) for s in patt):
        raise InvalidPattern(patt, N, "elements must be LetterStatus")
    if len(patt) != N:
        raise InvalidPattern(format_pattern(patt), N, f"got {len(patt)} positions")
    return patt


def format_pattern(pattern: Pattern) -> str:
    """Pattern -> token string, e.g. (CORRECT, ABSENT, ...) -> "GB..."."""
    return "".join(s.value for s in pattern)


def pattern_code(pattern: Pattern) -> int:
    """
    Encode a pattern as a little-endian base-3 integer in [0, 3**N).

    Example: "GBBBB" -> 2, "BGBBB" -> 6, all-G of length 5 -> 242.
    """
    code = 0
    power = 1
    for s in pattern:
        code += _TRIT[s] * power
        power *= 3
    return code
