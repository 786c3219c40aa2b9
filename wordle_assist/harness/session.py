"""
Interactive solving session.

The engine is a set of pure functions; this class is the one place that owns
mutable state across rounds:

  - the candidate set (only ever shrinks)
  - the round counter and the (guess, pattern) history

Each round the caller asks suggest() for a recommendation, the player plays
something (not necessarily the suggestion) and reports the colors, and the
caller passes both to apply().
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from wordle_assist.engine import (
    EmptyDictionary, InvalidWord, NoConsistentCandidates, Opening, Pattern,
    WORD_LENGTH, all_correct, best_guess, eliminate, format_pattern,
    normalize_word, as_pattern, validate_guess,
)
from wordle_assist.engine.matrix import PatternMatrix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Suggestion:
    word: str
    score: float
    precomputed: bool = False  # True when the opening was used


class Session:
    """
    Args:
      allowed  : words the player may guess (must be non-empty)
      answers  : initial candidate answers; defaults to `allowed`
      N        : word length
      opening  : precomputed first-round suggestion for exactly these lists
      workers  : >1 parallelises the best-guess search
      matrix   : PatternMatrix over (allowed, answers) to speed up suggest()
      strict   : reject guesses that are not in `allowed`

    Raises EmptyDictionary when either list is empty.
    """

    def __init__(
            self,
            allowed: Sequence[str],
            answers: Optional[Sequence[str]] = None,
            *,
            N: int = WORD_LENGTH,
            opening: Optional[Opening] = None,
            workers: int = 1,
            matrix: Optional[PatternMatrix] = None,
            strict: bool = False,
    ):
        self.allowed: List[str] = list(allowed)
        self.answers: List[str] = list(answers) if answers is not None else list(self.allowed)
        if not self.allowed:
            raise EmptyDictionary("allowed-guess list is empty")
        if not self.answers:
            raise EmptyDictionary("answer list is empty")
        if matrix is not None and not matrix.matches(self.allowed, self.answers):
            raise ValueError("pattern matrix was built for different word lists")

        self.N = N
        self.opening = opening
        self.workers = workers
        self.matrix = matrix
        self.strict = strict
        self._allowed_set = frozenset(self.allowed)

        self._candidates: List[str] = list(self.answers)
        self.round = 0
        self.history: List[Tuple[str, Pattern]] = []

    @property
    def candidates(self) -> List[str]:
        return list(self._candidates)

    @property
    def solved(self) -> bool:
        return bool(self.history) and self.history[-1][1] == all_correct(self.N)

    def suggest(self) -> Suggestion:
        """Best next guess for the current candidate set."""
        if self.opening is not None and self.opening.applies(self._candidates, self.answers):
            return Suggestion(self.opening.word, self.opening.score, precomputed=True)

        if self.matrix is not None:
            word, score = self.matrix.best_guess(self._candidates)
        else:
            word, score = best_guess(self.allowed, self._candidates, workers=self.workers)
        logger.debug("round %d: suggest %s (%.4f)", self.round + 1, word, score)
        return Suggestion(word, score)

    def apply(self, guess: str, observed: Union[str, Pattern]) -> List[str]:
        """
        Record the feedback for a played guess and prune the candidates.

        `observed` is either a token ("BYBGG") or a Pattern.

        Raises:
          InvalidWord            malformed guess (or not allowed, in strict mode)
          InvalidPattern         malformed feedback
          NoConsistentCandidates nothing left; the session state is unchanged
        """
        word = normalize_word(guess, self.N)
        if self.strict and not validate_guess(word, self._allowed_set, self.N):
            raise InvalidWord(guess, self.N, "not in the allowed-guess list")
        patt = as_pattern(observed, self.N)

        remaining = eliminate(self._candidates, word, patt)
        if not remaining:
            raise NoConsistentCandidates(
                f"no word in the dictionary gives {format_pattern(patt)} for {word!r}; "
                "check the feedback you entered"
            )

        logger.info("round %d: %s %s -> %d of %d candidates left",
                    self.round + 1, word, format_pattern(patt),
                    len(remaining), len(self._candidates))
        self._candidates = remaining
        self.history.append((word, patt))
        self.round += 1
        return self.candidates
