"""
Candidate filtering given observed feedback.

Given:
  - the current candidate set
  - a played guess and the pattern the player saw

Return:
  - the candidates that would have produced exactly that feedback.

This is the step that turns feedback into a shrinking candidate set. It is a
pure filter: the caller decides what to do with the result (including an
empty one, which means the feedback contradicts every remaining word).
"""

from __future__ import annotations

from typing import Iterable, List

from .feedback import feedback
from .patterns import Pattern, as_pattern


def eliminate(candidates: Iterable[str], guess: str, observed: Pattern) -> List[str]:
    """
    Keep the candidates c with feedback(guess, c) == observed (order preserved).

    The result is always a subset of `candidates`, and running it again with
    the same guess and pattern returns it unchanged. A pattern whose length
    differs from the guess raises InvalidPattern.
    """
    observed = as_pattern(observed, len(guess))
    return [c for c in candidates if feedback(guess, c) == observed]
