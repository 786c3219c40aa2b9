# apps/cli/opening.py
"""
Precompute the best first guess for a dictionary and store it in the opening
cache used by `apps.cli.solve --opening-cache`.

Usage:
    python -m apps.cli.opening --words data/words_5.txt --cache data/openings.json --workers 8
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import List, Optional

from wordle_assist.datasets import (
    load_words, opening_key, load_opening, save_opening, validate_wordlists, pretty_summary,
)
from wordle_assist.engine import EmptyDictionary, InvalidWord, Opening, best_guess
from wordle_assist.engine.matrix import PatternMatrix


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="wordle-assist: precompute the opening guess")
    ap.add_argument("--words", default="data/words_5.txt", help="candidate answers")
    ap.add_argument("--allowed", help="allowed guesses, if different from --words")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--cache", default="data/openings.json", help="opening cache (JSON)")
    ap.add_argument("--workers", type=int, default=1, help="processes for the search")
    ap.add_argument("--matrix", action="store_true",
                    help="search with a pattern matrix instead of pure Python")
    ap.add_argument("--force", action="store_true", help="recompute even if cached")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, stream=sys.stderr,
                        format="%(levelname)s %(name)s: %(message)s")

    print(pretty_summary(validate_wordlists(args.N, args.words, args.allowed)))
    try:
        answers = load_words(args.words, args.N)
        allowed = load_words(args.allowed, args.N) if args.allowed else answers
    except (FileNotFoundError, InvalidWord, EmptyDictionary) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    key = opening_key(allowed, answers)
    cached = None if args.force else load_opening(args.cache, key)
    if cached is not None:
        print(f"Best word: {cached.word}, exp: {cached.score:.4f} (cached)")
        return 0

    t0 = time.perf_counter()
    if args.matrix:
        word, score = PatternMatrix.build(allowed, answers, progress=True).best_guess(answers)
    else:
        word, score = best_guess(allowed, answers, workers=args.workers)
    elapsed = time.perf_counter() - t0

    save_opening(args.cache, key, Opening(word, score))
    print(f"Best word: {word}, exp: {score:.4f} ({elapsed:.1f}s)")
    print(f"Wrote: {args.cache}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
