"""
Error taxonomy shared by the engine, the dataset loaders and the session.

  - InvalidWord            : a word that is not exactly N letters a-z
  - InvalidPattern         : a feedback token / pattern of the wrong shape
  - NoConsistentCandidates : the candidate set is (or would become) empty
  - EmptyDictionary        : no allowed guesses / no answers to start from

The two input errors also subclass ValueError so callers that only care about
"bad input" can catch that.
"""


class WordleAssistError(Exception):
    """Base class for every error raised by wordle_assist."""


class InvalidWord(WordleAssistError, ValueError):
    def __init__(self, word, N: int, reason: str = ""):
        self.word = word
        self.N = N
        msg = f"invalid word {word!r}: expected {N} letters a-z"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class InvalidPattern(WordleAssistError, ValueError):
    def __init__(self, token, N: int, reason: str = ""):
        self.token = token
        self.N = N
        msg = f"invalid feedback {token!r}: expected {N} of G/Y/B"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class NoConsistentCandidates(WordleAssistError):
    """Feedback contradicts the dictionary or earlier feedback."""


class EmptyDictionary(WordleAssistError):
    """Raised at startup when a word list has nothing usable in it."""
