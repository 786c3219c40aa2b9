"""
I/O utilities for benchmark runs.

Responsibilities:
- write_csv:     flatten per-game results into a tidy CSV (one row per game).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

from wordle_assist.engine import format_pattern


def write_csv(results: List[Dict], path: str, max_turns: int, N: int) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      solver, N, answer, success, guesses, time_ms,
      guess_1, patt_1, left_1, ..., guess_max_turns, patt_max_turns, left_max_turns

    `left_i` is the candidate count after turn i (empty on the winning turn).
    Patterns are written as G/Y/B tokens.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "N", "answer", "success", "guesses", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"patt_{i}", f"left_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "N": N,
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            hist = r.get("history", [])
            left = r.get("remaining", [])
            for i in range(1, max_turns + 1):
                if i <= len(hist):
                    g, patt = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"patt_{i}"] = format_pattern(patt)
                else:
                    row[f"guess_{i}"] = ""
                    row[f"patt_{i}"] = ""
                row[f"left_{i}"] = left[i - 1] if i <= len(left) else ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dataset validation summary.

    Typical keys: run_id, git_commit, config, wordlists, num_cases, solver_id,
    summary.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def summarize(results: List[Dict]) -> Dict:
    """Win rate and mean guesses over wins, for manifests and console output."""
    n = len(results)
    wins = [r["guesses"] for r in results if r["success"]]
    return {
        "games": n,
        "wins": len(wins),
        "win_rate": (len(wins) / n) if n else 0.0,
        "mean_guesses": (sum(wins) / len(wins)) if wins else None,
    }


def timestamp_id() -> str:
    """
    Compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
