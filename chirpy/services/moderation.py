"""
Moderation Service - Chirp Validation and Profanity Filtering

This module implements the chirp pipeline used by POST /api/validate_chirp:
1. ChirpValidator rejects chirps longer than the length limit
2. ProfanityFilter replaces denylisted words with ****

Both classes are stateless after construction and safe to share between
concurrent requests.

Example:
    >>> validator = ChirpValidator(ProfanityFilter(DEFAULT_PROFANE_WORDS))
    >>> validator.validate("fornax SHARBERT Kerfuffle!")
    Accepted(cleaned_body='**** **** ****')
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union


DEFAULT_PROFANE_WORDS = ("kerfuffle", "sharbert", "fornax")

DEFAULT_MAX_LENGTH = 140

CENSORED = "****"


class RejectionReason(str, Enum):
    TOO_LONG = "too_long"
    MALFORMED = "malformed"

    @property
    def message(self) -> str:
        """Fixed, client-facing error message for this reason."""
        return _REJECTION_MESSAGES[self]


_REJECTION_MESSAGES = {
    RejectionReason.TOO_LONG: "Chirp is too long",
    RejectionReason.MALFORMED: "Something went wrong",
}


@dataclass(frozen=True)
class Accepted:
    cleaned_body: str


@dataclass(frozen=True)
class Rejected:
    reason: RejectionReason

    @property
    def message(self) -> str:
        return self.reason.message


ValidationOutcome = Union[Accepted, Rejected]


def strip_non_alphanumeric(word: str) -> str:
    """
    Remove every character that is not a letter or a digit.

    Classification is Unicode-aware, so "Größe!" becomes "Größe".
    """
    return "".join(ch for ch in word if ch.isalnum())


class ProfanityFilter:
    """
    Replaces denylisted words with ****.

    Text is split on single spaces only, so runs of spaces produce empty
    tokens that are joined back unchanged. Each token is compared after
    stripping punctuation and lowercasing; a match replaces the whole
    original token, punctuation included.

    Args:
        words: Denylist. Matching is case-insensitive.
    """

    def __init__(self, words: Iterable[str] = DEFAULT_PROFANE_WORDS):
        self.words = frozenset(w.lower() for w in words)

    def is_profane(self, token: str) -> bool:
        return strip_non_alphanumeric(token).lower() in self.words

    def censor(self, text: str) -> str:
        tokens = text.split(" ")
        return " ".join(
            CENSORED if self.is_profane(token) else token
            for token in tokens
        )


class ChirpValidator:
    """
    Validates a chirp body and censors it.

    The length check runs first and short-circuits: an over-long chirp is
    rejected without being passed to the filter. Length is counted in
    Unicode code points.

    Malformed payloads never reach this class; the route classifies them
    as Rejected(MALFORMED) when the request body cannot be decoded.
    """

    def __init__(
        self,
        profanity_filter: ProfanityFilter,
        max_length: int = DEFAULT_MAX_LENGTH
    ):
        self.profanity_filter = profanity_filter
        self.max_length = max_length

    def validate(self, body: str) -> ValidationOutcome:
        if len(body) > self.max_length:
            return Rejected(RejectionReason.TOO_LONG)
        return Accepted(self.profanity_filter.censor(body))
