"""
Turn a raw word list into one the solver will load.

- Lowercases and strips every line.
- Keeps only N-letter a-z tokens (reports how many lines were dropped).
- Removes duplicates, preserving first-seen order.
- Optional alphabetical sort afterwards.
- Overwrites in place by default, or writes to --out.

Usage:
    python -m script.clean_wordlist --in raw/words.txt --out data/words_5.txt --N 5
"""

import argparse
from pathlib import Path
from typing import List, Tuple

from wordle_assist.datasets import read_lines, write_lines
from wordle_assist.engine import is_word


def clean(lines: List[str], N: int) -> Tuple[List[str], int]:
    """(kept words, dropped malformed line count). Blank lines are not counted."""
    seen, out, dropped = set(), [], 0
    for raw in lines:
        w = raw.strip().lower()
        if not w:
            continue
        if not is_word(w, N):
            dropped += 1
            continue
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out, dropped


def main():
    ap = argparse.ArgumentParser(description="Normalise a word list for wordle-assist.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--N", type=int, default=5, help="word length to keep")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    words, dropped = clean(lines, args.N)
    if args.sort:
        words = sorted(words)

    write_lines(words, outp)
    print(f"Input: {inp} ({len(lines)} lines, {dropped} malformed) -> Output: {outp} ({len(words)} words)")


if __name__ == "__main__":
    main()
