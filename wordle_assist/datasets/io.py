from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import Iterable, List

from wordle_assist.engine.errors import EmptyDictionary, InvalidWord
from wordle_assist.engine.patterns import WORD_LENGTH
from wordle_assist.engine.validation import normalize_word

logger = logging.getLogger(__name__)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_words(p: Path | str, N: int = WORD_LENGTH) -> List[str]:
    """
    Load a one-word-per-line dictionary for the engine.

    - blank lines are skipped
    - every other line must normalise to N letters a-z, else InvalidWord
      (the message names the file and line)
    - duplicates are dropped, first occurrence kept
    - nothing left -> EmptyDictionary
    """
    words: List[str] = []
    seen = set()
    dupes = 0
    for lineno, raw in enumerate(read_lines(p), start=1):
        if not raw.strip():
            continue
        try:
            w = normalize_word(raw, N)
        except InvalidWord as e:
            raise InvalidWord(raw, N, f"{p}:{lineno}") from e
        if w in seen:
            dupes += 1
            continue
        seen.add(w)
        words.append(w)

    if dupes:
        logger.warning("%s: dropped %d duplicate word(s)", p, dupes)
    if not words:
        raise EmptyDictionary(f"{p} contains no {N}-letter words")
    logger.info("loaded %d words from %s", len(words), p)
    return words


def wordlist_digest(words: Iterable[str]) -> str:
    """SHA-256 of the newline-joined list; independent of file formatting."""
    return hashlib.sha256("\n".join(words).encode("utf-8")).hexdigest()
