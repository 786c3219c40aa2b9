"""
Self-play harness primitives.

- run_case:  play one game (one hidden answer) with a given solver.
- run_batch: play many games in sequence (optionally a sample prefix).

The hidden answer is known here, so feedback is computed by the engine rather
than typed by a player; everything else (candidate pruning, turn budget) is
the same loop the interactive Session runs.
"""

from __future__ import annotations
import time
from typing import Dict, List, Iterable, Optional, Tuple
from wordle_assist.engine import feedback, eliminate, all_correct, Pattern

# Wordle's turn budget; benchmarks may raise it to measure how long losses take.
WORDLE_MAX_TURNS = 6


def _check_turns(max_turns: int) -> None:
    if max_turns < 1:
        raise ValueError(f"max_turns must be >= 1; got {max_turns}")


def run_case(
        solver,
        answer: str,
        *,
        allowed: Iterable[str],
        answers: Iterable[str],
        N: int,
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Execute one game until the solver wins or the turn budget is exhausted.

    Args:
        solver:        an object implementing BaseSolver with next_guess(state)
        answer:        the hidden word for this case
        allowed:       all words permitted as guesses
        answers:       the answer pool (initial candidate set)
        N:             word length
        max_turns:     turn budget (Wordle: 6)
        seed:          RNG seed to make solver tie-breaks reproducible

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, Pattern)]), remaining (list[int]),
            scores (list[float | None], solver score per guess), answer (str)
    """
    _check_turns(max_turns)
    allowed = [w for w in allowed if len(w) == N]
    answers = [w for w in answers if len(w) == N]

    solver.reset(allowed=allowed, answers=answers, N=N, seed=seed)

    history: List[Tuple[str, Pattern]] = []
    remaining: List[int] = []
    scores: List[Optional[float]] = []
    candidates = list(answers)
    win = all_correct(N)

    t0 = time.perf_counter()
    for turn in range(1, max_turns + 1):
        state = {
            "turn": turn,
            "history": list(history),
            "candidates": candidates,
            "allowed": allowed,
            "N": N,
        }
        guess = solver.next_guess(state)
        scores.append(getattr(solver, "last_score", None))

        patt = feedback(guess, answer)
        history.append((guess, patt))

        if patt == win:
            return {
                "success": True, "guesses": turn,
                "time_ms": (time.perf_counter() - t0) * 1000.0,
                "history": history, "remaining": remaining, "scores": scores, "answer": answer,
            }

        candidates = eliminate(candidates, guess, patt)
        remaining.append(len(candidates))

    return {
        "success": False, "guesses": max_turns,
        "time_ms": (time.perf_counter() - t0) * 1000.0,
        "history": history, "remaining": remaining, "scores": scores, "answer": answer,
    }


def run_batch(
        solver,
        answers: List[str],
        *,
        allowed: List[str],
        N: int,
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers (after filtering to length N) are played.

    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible but not identical across cases.
    """
    _check_turns(max_turns)

    pool = [w for w in answers if len(w) == N]
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, ans in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(
            solver, ans, allowed=allowed, answers=answers, N=N,
            max_turns=max_turns, seed=case_seed,
        ))
    return out
