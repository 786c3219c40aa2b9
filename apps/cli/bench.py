# apps/cli/bench.py
"""
Self-play benchmark.

This script:
  1) Validates the word lists (prints counts + SHA, checks answers ⊆ allowed).
  2) Loads the lists and instantiates the requested solver.
  3) Plays every answer (or a seeded sample) with a live progress indicator
     and writes:
       - CSV:  per-game results + guess/pattern/remaining history columns
       - JSON: manifest with config, word-list hashes, git commit, summary
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from wordle_assist.datasets import (
    validate_wordlists, pretty_summary, load_words, opening_key, load_opening,
)
from wordle_assist.engine import EmptyDictionary, InvalidWord
from wordle_assist.engine.matrix import PatternMatrix
from wordle_assist.harness import run_case, summarize, write_csv, write_manifest, WORDLE_MAX_TURNS
from wordle_assist.harness.io import timestamp_id, git_commit_or_unknown
from wordle_assist.solvers import create_solver, get_solver_ids


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, validate datasets, run the batch with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordle-assist: self-play benchmark")
    ap.add_argument("--solver", default="expected_left",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--answers", default="data/words_5.txt",
                    help="answer pool (one word per line)")
    ap.add_argument("--allowed", help="allowed guesses (defaults to the answer pool)")
    ap.add_argument("--sample", type=int, help="play only a seeded sample of answers")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed")
    ap.add_argument("--max-turns", type=int, default=WORDLE_MAX_TURNS, help="turn budget")
    ap.add_argument("--opening-cache", metavar="PATH",
                    help="opening cache; expected_left plays the cached opening on turn 1")
    ap.add_argument("--matrix", action="store_true",
                    help="expected_left searches with a prebuilt pattern matrix")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["bar", "plain", "off"], default="bar",
                    help="progress display on stderr")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)
    if args.sample is not None and args.sample < 1:
        ap.error(f"--sample must be >= 1; got {args.sample}")

    logging.basicConfig(level=args.log_level, stream=sys.stderr,
                        format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate and summarise
    rep = validate_wordlists(args.N, args.answers, args.allowed)
    print(pretty_summary(rep))

    # 2) Load
    try:
        answers = load_words(args.answers, args.N)
        allowed = load_words(args.allowed, args.N) if args.allowed else answers
    except (FileNotFoundError, InvalidWord, EmptyDictionary) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    # 3) Solver
    kwargs = {}
    if args.solver == "expected_left":
        if args.opening_cache:
            kwargs["opening"] = load_opening(args.opening_cache, opening_key(allowed, answers))
        if args.matrix:
            kwargs["matrix"] = PatternMatrix.build(allowed, answers, progress=args.progress == "bar")
    solver = create_solver(args.solver, **kwargs)

    # 4) Cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    if args.sample is not None and args.sample < len(answers):
        pool = list(answers)
        rng.shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = list(answers)
    total = len(cases)

    # 5) Run
    results = []
    start = time.time()
    last_print = 0.0
    iterator = tqdm(cases, ncols=80, desc="Playing", unit="game") if args.progress == "bar" else cases

    for idx, ans in enumerate(iterator, 1):
        r = run_case(solver, ans, allowed=allowed, answers=answers, N=args.N,
                     max_turns=args.max_turns, seed=args.seed + idx)
        r["solver_id"] = solver.id
        results.append(r)

        if args.progress == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if args.progress == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # 6) Outputs
    summary = summarize(results)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=args.max_turns, N=args.N)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "num_cases": len(results),
        "solver_id": solver.id,
        "summary": summary,
    }, str(manifest_path))

    mean = summary["mean_guesses"]
    print(f"{solver.id}: won {summary['wins']}/{summary['games']}"
          + (f", mean {mean:.3f} guesses" if mean is not None else ""))
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
