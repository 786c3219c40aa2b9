"""
Random Consistent baseline.

Plays a uniformly random word from the CURRENT candidate set (seeded RNG), so
every guess could still be the answer but no attempt is made to split the
candidates well. Benchmarks compare expected_left against it.
"""

from __future__ import annotations

from typing import List

from .base import BaseSolver, register
from wordle_assist.engine import NoConsistentCandidates


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.1.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        if not candidates:
            raise NoConsistentCandidates("random_consistent: candidate set is empty")
        return candidates[self.rng.randrange(len(candidates))]
