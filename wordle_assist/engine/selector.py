"""
Best-guess selection.

best_guess scans the allowed guesses, scores each against the current
candidates with the partition penalty, and returns the minimum.

Tie-break:
  - the FIRST minimum in `allowed` order wins. Penalties are compared as
    integers, so equal scores really are ties and the result only depends on
    the input order.

Parallel mode splits `allowed` into contiguous chunks, finds each chunk's
first minimum in a worker process, then reduces the chunk results in chunk
order with a strict `<`. That reproduces the sequential answer exactly.

Openings:
  The round-one search over a full dictionary is the expensive one and its
  answer never changes, so it can be precomputed. An Opening is only valid
  while the candidate set is still the full initial answer list.
"""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from itertools import repeat
from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import EmptyDictionary, NoConsistentCandidates
from .partition import penalty

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Opening:
    """A precomputed first guess and its score for one specific dictionary."""
    word: str
    score: float

    def applies(self, candidates: Sequence[str], initial: Optional[Sequence[str]]) -> bool:
        """True only while `candidates` is still the untouched initial list."""
        if initial is None:
            return False
        return list(candidates) == list(initial)

    def fits(self, allowed: Iterable[str], answers: Sequence[str]) -> bool:
        """
        Could this opening have been computed for these lists?

        The word must be a legal guess, and the score is an average bucket
        size, so it can never exceed the number of answers.
        """
        return self.word in set(allowed) and 0 <= self.score <= len(answers)


# Opening for the reference 5-letter list the solver originally shipped with.
# Only valid for that exact list; the CLI uses it when asked to.
DEFAULT_OPENING = Opening("tares", 70.5030)


def _scan(chunk: Sequence[str], candidates: Sequence[str], offset: int) -> Tuple[int, int]:
    """(penalty, global index) of the first minimum inside one chunk."""
    best_pen = None
    best_idx = -1
    for i, g in enumerate(chunk):
        p = penalty(g, candidates)
        if best_pen is None or p < best_pen:
            best_pen, best_idx = p, offset + i
    return best_pen, best_idx


def _chunks(words: List[str], parts: int) -> Tuple[List[List[str]], List[int]]:
    size = -(-len(words) // parts)  # ceil
    chunks, offsets = [], []
    for start in range(0, len(words), size):
        chunks.append(words[start:start + size])
        offsets.append(start)
    return chunks, offsets


def best_guess(
        allowed: Iterable[str],
        candidates: Iterable[str],
        *,
        workers: int = 1,
) -> Tuple[str, float]:
    """
    Return (word, score) for the allowed guess with the lowest expected_left.

    Args:
      allowed    : guess universe; may be a superset of, equal to, or disjoint
                   from `candidates`
      candidates : words still consistent with the feedback so far
      workers    : >1 scores chunks of `allowed` in worker processes

    Raises:
      EmptyDictionary        if `allowed` is empty
      NoConsistentCandidates if `candidates` is empty
    """
    allowed = list(allowed)
    candidates = list(candidates)
    if not allowed:
        raise EmptyDictionary("no allowed guesses to choose from")
    if not candidates:
        raise NoConsistentCandidates("no candidates left to score guesses against")

    if workers > 1 and len(allowed) > 1:
        chunks, offsets = _chunks(allowed, workers)
        logger.debug("scoring %d guesses x %d candidates in %d chunks",
                     len(allowed), len(candidates), len(chunks))
        best: Optional[Tuple[int, int]] = None
        with ProcessPoolExecutor(max_workers=workers) as pool:
            # map() yields in submission order, which keeps the tie-break
            for pen, idx in pool.map(_scan, chunks, repeat(candidates), offsets):
                if best is None or pen < best[0]:
                    best = (pen, idx)
        best_pen, best_idx = best
    else:
        logger.debug("scoring %d guesses x %d candidates",
                     len(allowed), len(candidates))
        best_pen, best_idx = _scan(allowed, candidates, 0)

    return allowed[best_idx], best_pen / len(candidates)
