# apps/cli/solve.py
"""
Interactive solver.

Each round:
  1) prints the recommended guess:      Best word: tares, exp: 70.5030
  2) reads the word you played          (one line)
  3) reads the colors the game showed   (one line, G/Y/B per letter)
  4) prints how many candidates are left and lists them.

Usage:
    python -m apps.cli.solve --words data/words_5.txt
    python -m apps.cli.solve --words data/answers_5.txt --allowed data/allowed_5.txt \
        --opening-cache data/openings.json --matrix cache/pattern_5.npz

Bad input (wrong length, unknown symbols) is reported on stderr and the round
is asked again. Feedback that no remaining word could produce is reported
and ignored. Ctrl-D (EOF) quits.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from wordle_assist.datasets import load_words, opening_key, load_opening, save_opening
from wordle_assist.engine import (
    DEFAULT_OPENING, EmptyDictionary, InvalidPattern, InvalidWord, NoConsistentCandidates,
    Opening, best_guess, normalize_word,
)
from wordle_assist.engine.matrix import PatternMatrix
from wordle_assist.harness import Session

logger = logging.getLogger("wordle_assist.cli.solve")


def _parse_opening(text: str, N: int) -> Opening:
    """'tares:70.503' -> Opening('tares', 70.503)."""
    word, sep, score = text.partition(":")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected WORD:SCORE, got {text!r}")
    try:
        return Opening(normalize_word(word, N), float(score))
    except (InvalidWord, ValueError) as e:
        raise argparse.ArgumentTypeError(f"bad opening {text!r}: {e}") from e


def _resolve_opening(args, allowed: List[str], answers: List[str]) -> Optional[Opening]:
    """--opening beats --default-opening beats the cache (filled on a miss)."""
    if args.opening or args.default_opening:
        opening = _parse_opening(args.opening, args.N) if args.opening else DEFAULT_OPENING
        if not opening.fits(allowed, answers):
            raise argparse.ArgumentTypeError(
                f"opening {opening.word}:{opening.score:.4f} cannot belong to this dictionary "
                f"({len(answers)} answers); drop it or use --opening-cache to compute one"
            )
        return opening
    if args.opening_cache:
        key = opening_key(allowed, answers)
        cached = load_opening(args.opening_cache, key)
        if cached is not None:
            return cached
        print("Computing opening (cached for next time)...", file=sys.stderr)
        word, score = best_guess(allowed, answers, workers=args.workers)
        opening = Opening(word, score)
        save_opening(args.opening_cache, key, opening)
        return opening
    return None


def _load_matrix(path: str, allowed: List[str], answers: List[str]) -> PatternMatrix:
    p = Path(path)
    if p.exists():
        m = PatternMatrix.load(p)
        if m.matches(allowed, answers):
            return m
        logger.warning("%s was built for other word lists; rebuilding", p)
    m = PatternMatrix.build(allowed, answers, progress=True)
    m.save(p)
    return m


def _read_line(stream: TextIO) -> Optional[str]:
    """Next line without its newline, or None at EOF."""
    line = stream.readline()
    if line == "":
        return None
    return line.strip()


def play(session: Session, *, stdin: Optional[TextIO] = None, out: Optional[TextIO] = None,
         err: Optional[TextIO] = None, show: Optional[int] = None) -> int:
    """Run the prompt loop until solved or EOF. Returns the exit status."""
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    err = err or sys.stderr
    while True:
        s = session.suggest()
        print(f"Best word: {s.word}, exp: {s.score:.4f}", file=out)

        while True:
            guess = _read_line(stdin)
            if guess is None:
                return 0
            if not guess:
                continue
            token = _read_line(stdin)
            if token is None:
                return 0
            try:
                left = session.apply(guess, token)
            except (InvalidWord, InvalidPattern) as e:
                print(f"error: {e}; enter the guess and its colors again", file=err)
                continue
            except NoConsistentCandidates as e:
                print(f"error: {e}", file=err)
                continue
            break

        print(f"Possible words left: {len(left)}", file=out)
        listed = left if show is None else left[:show]
        for w in listed:
            print(w, file=out)
        if len(listed) < len(left):
            print(f"... and {len(left) - len(listed)} more", file=out)

        if session.solved:
            print(f"Solved in {session.round} guesses.", file=out)
            return 0


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="wordle-assist: interactive solver")
    ap.add_argument("--words", default="data/words_5.txt",
                    help="candidate answers, one per line (also the guess list unless --allowed)")
    ap.add_argument("--allowed", help="allowed guesses, if different from --words")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--opening", metavar="WORD:SCORE",
                    help="precomputed first suggestion for this dictionary")
    ap.add_argument("--default-opening", action="store_true",
                    help=f"use the built-in opening ({DEFAULT_OPENING.word}); "
                         "only valid for the reference word list")
    ap.add_argument("--opening-cache", metavar="PATH",
                    help="JSON cache of openings keyed by word-list digest")
    ap.add_argument("--matrix", metavar="PATH",
                    help="pattern-matrix .npz to load (built and saved if missing)")
    ap.add_argument("--workers", type=int, default=1,
                    help="processes for the best-guess search")
    ap.add_argument("--strict", action="store_true",
                    help="reject played words that are not in the guess list")
    ap.add_argument("--show", type=int, help="list at most this many remaining words")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, stream=sys.stderr,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        answers = load_words(args.words, args.N)
        allowed = load_words(args.allowed, args.N) if args.allowed else answers
        opening = _resolve_opening(args, allowed, answers)
        matrix = _load_matrix(args.matrix, allowed, answers) if args.matrix else None
        session = Session(allowed, answers, N=args.N, opening=opening, workers=args.workers,
                          matrix=matrix, strict=args.strict)
    except (FileNotFoundError, InvalidWord, EmptyDictionary, argparse.ArgumentTypeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(f"Loaded {len(answers)} answers, {len(allowed)} allowed guesses.", file=sys.stderr)
    return play(session, show=args.show)


if __name__ == "__main__":
    sys.exit(main())
