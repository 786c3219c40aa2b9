from __future__ import annotations
from typing import List
from .base import BaseSolver, REGISTRY, register

from . import random_consistent  # noqa: F401
from . import expected_left  # noqa: F401


def create_solver(solver_id: str, **kwargs) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id. Keyword arguments go to
    the solver's constructor (e.g. opening/matrix for expected_left).
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
