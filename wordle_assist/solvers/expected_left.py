"""
Expected Remaining Candidates (ERC), the solver's main heuristic.

For guess g, CURRENT candidates partition into buckets of sizes {c_i}; pick
the g minimising (1/n) * sum c_i^2 over the non-winning buckets. Ties go to
the first word in allowed order (no RNG), so games are reproducible.

Pool: every allowed word is scored. On the first turn a precomputed Opening
is played instead when one was given and the candidate set is untouched; a
PatternMatrix built for the same lists replaces the pure-Python search.
"""

from __future__ import annotations

from typing import List, Optional

from .base import BaseSolver, register
from wordle_assist.engine import best_guess, Opening
from wordle_assist.engine.matrix import PatternMatrix


@register
class ExpectedLeftSolver(BaseSolver):
    id = "expected_left"
    name = "Expected Remaining Candidates"
    version = "2.0.0"

    def __init__(self, *, opening: Optional[Opening] = None,
                 matrix: Optional[PatternMatrix] = None, workers: int = 1):
        super().__init__()
        self.opening = opening
        self.matrix = matrix
        self.workers = workers

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        allowed: List[str] = state["allowed"]

        if self.opening is not None and self.opening.applies(candidates, self.answers):
            self.last_score = self.opening.score
            return self.opening.word

        if self.matrix is not None and self.matrix.matches(allowed, self.answers):
            word, self.last_score = self.matrix.best_guess(candidates)
        else:
            word, self.last_score = best_guess(allowed, candidates, workers=self.workers)
        return word
