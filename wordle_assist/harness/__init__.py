from .core import run_case, run_batch, WORDLE_MAX_TURNS
from .session import Session, Suggestion
from .io import write_csv, write_manifest, summarize

__all__ = [
    "run_case", "run_batch", "WORDLE_MAX_TURNS",
    "Session", "Suggestion",
    "write_csv", "write_manifest", "summarize",
]
