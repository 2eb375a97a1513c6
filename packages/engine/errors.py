"""
Exceptions shared by the engine, the lexicon backends and the session.

InputRejected is the only one a player ever sees: it carries a short
machine-readable `reason` code plus the message shown on screen.
"""

from typing import Literal

RejectReason = Literal[
    "not_current",     # chosen word is not a live word
    "no_candidates",   # nothing after the chosen word
    "bad_token",       # candidate not a-z or shorter than 3 letters
    "not_anagram",     # letters are not source + exactly one extra
    "too_long",        # candidate exceeds the lexicon's length limit
    "not_a_word",      # lexicon does not recognise the candidate
    "stem_used",       # stem credited in an earlier turn
    "stem_repeated",   # stem claimed twice within this turn
    "bad_seed",        # starting word is not a valid 3-letter word
]


class InputRejected(ValueError):
    """A turn or starting word was refused. No state was changed."""

    def __init__(self, reason: RejectReason, message: str):
        super().__init__(message)
        self.reason = reason
        self.message = message


class InputLengthExceeded(ValueError):
    """Raised by a lexicon when a word is longer than its configured limit."""


class ResourceInitializationFailure(RuntimeError):
    """A dictionary or morphology resource could not be loaded."""
