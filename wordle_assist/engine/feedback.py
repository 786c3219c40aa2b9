"""
Feedback coloring for a single (guess, candidate) pair.

Algorithm (two-pass, duplicate-safe):
  1) First pass marks exact positional matches CORRECT and counts the
     candidate's remaining (non-matched) letters.
  2) Second pass marks a guess letter PRESENT only while that letter still
     has remaining count, consuming one instance each time; else ABSENT.

So a letter that appears once in the candidate but twice in the guess gets at
most one CORRECT/PRESENT between them, exact matches first, then left to right.

Coloring is guess-relative: feedback(a, b) != feedback(b, a) in general.
"""

from __future__ import annotations

from collections import Counter

from .errors import InvalidWord
from .patterns import LetterStatus, Pattern

_ABSENT = LetterStatus.ABSENT
_PRESENT = LetterStatus.PRESENT
_CORRECT = LetterStatus.CORRECT


def feedback(guess: str, candidate: str) -> Pattern:
    """
    Pattern the game would show if `guess` were played and `candidate` were
    the hidden answer.

    Both words are expected to be normalised already (lowercase, N letters);
    this runs in the innermost scoring loop, so it only checks lengths.

    Examples:
      feedback("belle", "level") -> BGYYY
      feedback("abcde", "aabbb") -> GYBBB
    """
    if len(guess) != len(candidate):
        raise InvalidWord(guess, len(candidate), "length differs from candidate")

    status = [_ABSENT] * len(guess)

    # Pass 1: greens, and what's left of the candidate
    remaining: Counter = Counter()
    for i, (g, c) in enumerate(zip(guess, candidate)):
        if g == c:
            status[i] = _CORRECT
        else:
            remaining[c] += 1

    # Pass 2: yellows capped by remaining multiplicity
    for i, g in enumerate(guess):
        if status[i] is _CORRECT:
            continue
        if remaining[g] > 0:
            status[i] = _PRESENT
            remaining[g] -= 1

    return tuple(status)
