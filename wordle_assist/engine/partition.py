"""
Partition scoring (expected remaining candidates).

For guess g, the CURRENT candidates split into buckets by the pattern g would
produce against each of them. With bucket sizes {c_i} over n candidates:

    penalty(g)       = sum_i c_i^2        (all-correct bucket excluded)
    expected_left(g) = penalty(g) / n

Lower is better. Minimising the sum of squares favours guesses that split the
candidates into many small, even buckets; it approximates expected-information
ranking without logarithms. The all-correct bucket is left out because hitting
it ends the game.

Keep this exact formula: precomputed opening scores were derived from it.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

from .errors import NoConsistentCandidates
from .feedback import feedback
from .patterns import all_correct


def partition(guess: str, candidates: Iterable[str]) -> Counter:
    """Map each distinct Pattern to how many candidates produce it."""
    buckets: Counter = Counter()
    _feedback = feedback
    for c in candidates:
        buckets[_feedback(guess, c)] += 1
    return buckets


def penalty(guess: str, candidates: Iterable[str]) -> int:
    """Sum of squared bucket sizes, ignoring the winning bucket."""
    win = all_correct(len(guess))
    return sum(n * n for patt, n in partition(guess, candidates).items() if patt != win)


def expected_left(guess: str, candidates: Sequence[str]) -> float:
    """
    Score of `guess` against the candidate set; 0 only when candidates == [guess].

    Raises NoConsistentCandidates for an empty candidate set.
    """
    n = len(candidates)
    if n == 0:
        raise NoConsistentCandidates("cannot score a guess against an empty candidate set")
    return penalty(guess, candidates) / n
