from .errors import (
    WordleAssistError, InvalidWord, InvalidPattern, NoConsistentCandidates, EmptyDictionary,
)
from .patterns import (
    WORD_LENGTH, LetterStatus, Pattern, all_correct, parse_pattern, as_pattern, format_pattern,
    pattern_code,
)
from .feedback import feedback
from .partition import partition, penalty, expected_left
from .selector import best_guess, Opening, DEFAULT_OPENING
from .constraints import eliminate
from .validation import normalize_word, is_word, validate_guess

__all__ = [
    "WordleAssistError", "InvalidWord", "InvalidPattern", "NoConsistentCandidates",
    "EmptyDictionary",
    "WORD_LENGTH", "LetterStatus", "Pattern", "all_correct", "parse_pattern", "as_pattern",
    "format_pattern", "pattern_code",
    "feedback", "partition", "penalty", "expected_left",
    "best_guess", "Opening", "DEFAULT_OPENING",
    "eliminate",
    "normalize_word", "is_word", "validate_guess",
]
