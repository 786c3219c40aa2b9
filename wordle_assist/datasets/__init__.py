from .validator import validate_wordlists, pretty_summary
from .io import read_lines, write_lines, load_words, wordlist_digest
from .openings import opening_key, load_opening, save_opening

__all__ = [
    "validate_wordlists", "pretty_summary",
    "read_lines", "write_lines", "load_words", "wordlist_digest",
    "opening_key", "load_opening", "save_opening",
]
