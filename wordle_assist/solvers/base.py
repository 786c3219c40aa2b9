from __future__ import annotations
import random
from typing import Dict, List, Optional, Type

# id -> solver class, filled by @register at import time
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """Class decorator: make a BaseSolver subclass available to create_solver()."""
    if not (isinstance(cls, type) and issubclass(cls, BaseSolver)):
        raise TypeError(f"{cls!r} is not a BaseSolver subclass")
    sid = getattr(cls, "id", None)
    if not sid or sid == BaseSolver.id:
        raise ValueError(f"{cls.__name__} must define its own non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


class BaseSolver:
    """
    A solver proposes one guess per turn from a state dict:

      - "turn":       1-based turn number
      - "candidates": words still consistent with the feedback so far
      - "allowed":    guess universe (already length N)
      - "history":    list of (guess, Pattern)
      - "N":          word length

    Solvers that rank guesses by a score leave it in `last_score` after each
    next_guess() call; others leave it None.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.N: int = 5
        self.allowed: List[str] = []
        self.answers: List[str] = []
        self.rng = random.Random()
        self.last_score: Optional[float] = None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id} v{self.version}>"

    def reset(self, *, allowed: List[str], answers: List[str], N: int,
              seed: int | None = None) -> None:
        """Start a new game over these lists; `seed` fixes any RNG tie-breaks."""
        self.allowed = list(allowed)
        self.answers = list(answers)
        self.N = int(N)
        self.last_score = None
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")
