"""
Dataset validator for wordle_assist.

What this module does:
- Validate an answers list and (optionally) a separate allowed-guesses list.
  With a single list it plays both roles, which is how the interactive
  solver is usually run.
- Enforce formatting rules (lowercase, a-z only, exact length N, one per line).
- Count invalid lines and duplicates; compute SHA-256 of the raw files.
- Check that answers ⊆ allowed.
- Return a machine-readable dict (for manifests) and a one-line summary.

Typical use:
    from wordle_assist.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists(5, "data/answers_5.txt", "data/allowed_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import hashlib

from wordle_assist.engine.validation import is_word


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str
    exists: bool
    count: int           # valid words, duplicates included
    sha256: str          # of the raw bytes; empty if missing
    unique_count: int
    invalid_lines: int   # blank lines count as invalid


@dataclass
class ValidationReport:
    N: int
    answers: FileReport
    allowed: FileReport
    shared_list: bool    # one file used for both roles
    answers_subset_allowed: bool
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """(valid_words, invalid_count). Valid means already lowercase a-z, length N."""
    valid: List[str] = []
    invalid = 0
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w == w.lower() and is_word(w, N):
                valid.append(w)
            else:
                invalid += 1
    return valid, invalid


def _file_report(path: Path, N: int, issues: List[str], label: str) -> Tuple[FileReport, set]:
    if not path.exists():
        issues.append(f"{label} file not found: {path}")
        return FileReport(str(path), False, 0, "", 0, 0), set()

    words, invalid = _load_and_check(path, N)
    unique = set(words)
    rep = FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(unique),
        invalid_lines=invalid,
    )
    if rep.count == 0:
        issues.append(f"{label} file contains 0 valid words")
    if invalid:
        issues.append(f"{label} has {invalid} invalid line(s)")
    if rep.count != rep.unique_count:
        issues.append(f"{label} contains {rep.count - rep.unique_count} duplicate line(s)")
    return rep, unique


def validate_wordlists(N: int, answers_path: str, allowed_path: Optional[str] = None) -> Dict:
    """
    Validate the answers/allowed word lists for length N.

    Parameters
    ----------
    N : int
        Word length.
    answers_path : str
        Candidate-answer list (one word per line).
    allowed_path : str, optional
        Allowed guesses; should be a superset of answers. Defaults to the
        answers list itself.

    Returns
    -------
    Dict
        JSON-serializable ValidationReport. `passed` is strict: both lists
        non-empty, no invalid lines, answers ⊆ allowed. Duplicates are
        reported in `issues` but do not fail validation (loading drops them).
    """
    issues: List[str] = []
    shared = allowed_path is None or Path(allowed_path) == Path(answers_path)

    ans_rep, ans_set = _file_report(Path(answers_path), N, issues, "answers")
    if shared:
        all_rep, all_set = ans_rep, ans_set
    else:
        all_rep, all_set = _file_report(Path(allowed_path), N, issues, "allowed")

    both_exist = ans_rep.exists and all_rep.exists
    subset_ok = both_exist and ans_set.issubset(all_set)
    if both_exist and not subset_ok:
        missing = sorted(ans_set - all_set)[:5]
        issues.append(f"answers not subset of allowed (e.g., {missing})")

    passed = (
            subset_ok
            and ans_rep.invalid_lines == 0
            and all_rep.invalid_lines == 0
            and ans_rep.count > 0
            and all_rep.count > 0
    )

    rep = ValidationReport(
        N=N,
        answers=ans_rep,
        allowed=all_rep,
        shared_list=shared,
        answers_subset_allowed=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    One-liner for the console.

    Example:
        N=5 | answers=2315 (uniq=2315, sha=abc123...) | allowed=10657 (uniq=10657, sha=def456...) | answers⊆allowed=True | OK
    """
    a = report["answers"]
    status = "OK" if report["passed"] else "FAIL"
    a_sha = (a.get("sha256") or "")[:12]
    head = f"N={report['N']} | answers={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
    if report.get("shared_list"):
        return head + f"| allowed=answers | {status}"
    b = report["allowed"]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        head
        + f"| allowed={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        + f"| answers⊆allowed={report['answers_subset_allowed']} | {status}"
    )
