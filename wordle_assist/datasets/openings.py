"""
Opening cache.

The best first guess for a dictionary never changes, and computing it is the
slowest search of a session. This stores it in a small JSON file keyed by the
digests of the (allowed, answers) lists it was computed for:

    {
      "<sha256(allowed)>:<sha256(answers)>": {"word": "tares", "score": 70.503},
      ...
    }

A cached opening is therefore only ever returned for the exact lists it
belongs to.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Sequence

from wordle_assist.engine.selector import Opening
from .io import wordlist_digest

logger = logging.getLogger(__name__)


def opening_key(allowed: Sequence[str], answers: Sequence[str]) -> str:
    return f"{wordlist_digest(allowed)}:{wordlist_digest(answers)}"


def _read(path: Path) -> Dict:
    if not path.exists():
        return {}
    return json.loads(path.read_text(encoding="utf-8"))


def load_opening(path: str | Path, key: str) -> Optional[Opening]:
    """Return the cached Opening for `key`, or None if absent."""
    entry = _read(Path(path)).get(key)
    if entry is None:
        logger.debug("no cached opening for %s in %s", key[:12], path)
        return None
    return Opening(entry["word"], float(entry["score"]))


def save_opening(path: str | Path, key: str, opening: Opening) -> str:
    """Merge one entry into the cache file (created if missing)."""
    p = Path(path)
    data = _read(p)
    data[key] = {"word": opening.word, "score": opening.score}
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(data, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    logger.info("cached opening %s (%.4f) in %s", opening.word, opening.score, p)
    return str(p)
