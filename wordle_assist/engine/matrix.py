"""
Dense pattern matrix: codes[g, a] = pattern_code(feedback(guesses[g], answers[a])).

Building it costs one feedback() call per (guess, answer) pair, once. After
that a best-guess search is a handful of numpy bincounts per block of guesses
instead of |allowed| x |candidates| Python calls, which is what makes
interactive rounds over a full dictionary fast.

Semantics match engine.selector.best_guess(guesses, candidates) exactly:
same expected_left formula, integer penalties, first minimum in guess order
(numpy.argmin returns the first occurrence).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple

import numpy as np
from tqdm import tqdm

from .errors import EmptyDictionary, InvalidWord, NoConsistentCandidates
from .feedback import feedback
from .patterns import pattern_code

logger = logging.getLogger(__name__)

# Rows scored per bincount; keeps the temporary (rows x 3**N) table small.
BLOCK_ROWS = 1024


def _code_dtype(N: int):
    k = 3 ** N
    if k <= 2 ** 8:
        return np.uint8
    if k <= 2 ** 16:
        return np.uint16
    return np.uint32


class PatternMatrix:
    def __init__(self, guesses: Sequence[str], answers: Sequence[str], codes: np.ndarray):
        self.guesses: List[str] = list(guesses)
        self.answers: List[str] = list(answers)
        if codes.shape != (len(self.guesses), len(self.answers)):
            raise ValueError(
                f"codes shape {codes.shape} != ({len(self.guesses)}, {len(self.answers)})")
        self.codes = codes
        self.N = len(self.guesses[0]) if self.guesses else 0
        self._answer_index = {w: i for i, w in enumerate(self.answers)}

    @classmethod
    def build(cls, guesses: Iterable[str], answers: Iterable[str], *,
              progress: bool = False) -> "PatternMatrix":
        """Compute the full table. `progress` shows a tqdm bar over guesses."""
        guesses = list(guesses)
        answers = list(answers)
        if not guesses or not answers:
            raise EmptyDictionary("pattern matrix needs at least one guess and one answer")
        N = len(guesses[0])
        for w in guesses + answers:
            if len(w) != N:
                raise InvalidWord(w, N, "all words in a matrix must share one length")

        codes = np.empty((len(guesses), len(answers)), dtype=_code_dtype(N))
        logger.info("building %d x %d pattern matrix", len(guesses), len(answers))
        rows = tqdm(guesses, desc="Pattern matrix", unit="guess") if progress else guesses
        for gi, g in enumerate(rows):
            codes[gi] = [pattern_code(feedback(g, a)) for a in answers]
        return cls(guesses, answers, codes)

    def save(self, path: str | Path) -> str:
        """Write guesses, answers and codes to a compressed .npz."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        with p.open("wb") as f:
            np.savez_compressed(
                f,
                codes=self.codes,
                guesses=np.array(self.guesses),
                answers=np.array(self.answers),
            )
        return str(p)

    @classmethod
    def load(cls, path: str | Path) -> "PatternMatrix":
        with np.load(Path(path), allow_pickle=False) as data:
            return cls(data["guesses"].tolist(), data["answers"].tolist(), data["codes"])

    def matches(self, guesses: Sequence[str], answers: Sequence[str]) -> bool:
        """True if this matrix was built for exactly these lists (same order)."""
        return self.guesses == list(guesses) and self.answers == list(answers)

    def _indices(self, candidates: Iterable[str]) -> np.ndarray:
        idx = []
        for c in candidates:
            try:
                idx.append(self._answer_index[c])
            except KeyError:
                raise InvalidWord(c, self.N, "not in the pattern matrix answer list") from None
        return np.asarray(idx, dtype=np.intp)

    def penalties(self, candidates: Iterable[str]) -> np.ndarray:
        """Integer penalty (sum of squared non-winning bucket sizes) per guess."""
        idx = self._indices(candidates)
        if idx.size == 0:
            raise NoConsistentCandidates("no candidates left to score guesses against")

        K = 3 ** self.N
        win = K - 1  # all-correct code: 2 in every base-3 digit
        out = np.empty(len(self.guesses), dtype=np.int64)
        for start in range(0, len(self.guesses), BLOCK_ROWS):
            sub = self.codes[start:start + BLOCK_ROWS][:, idx].astype(np.int64)
            rows = sub.shape[0]
            # Shift each row into its own K-wide band so one bincount counts all rows
            flat = sub + (np.arange(rows, dtype=np.int64) * K)[:, None]
            counts = np.bincount(flat.ravel(), minlength=rows * K).reshape(rows, K)
            counts[:, win] = 0
            out[start:start + rows] = (counts * counts).sum(axis=1)
        return out

    def best_guess(self, candidates: Sequence[str]) -> Tuple[str, float]:
        """Same contract as engine.selector.best_guess(self.guesses, candidates)."""
        if not self.guesses:
            raise EmptyDictionary("no allowed guesses to choose from")
        candidates = list(candidates)
        pens = self.penalties(candidates)
        best = int(np.argmin(pens))
        return self.guesses[best], int(pens[best]) / len(candidates)
