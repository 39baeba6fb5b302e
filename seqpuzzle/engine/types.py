"""
Value types shared by generation, validation and suggestion.

  - Triplet:          three ordered uppercase letters (plus diagnostics)
  - SubmissionResult: outcome of validating one word against one Triplet
  - RejectReason:     the rejection kinds, in pipeline order
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Literal, Optional, Tuple

RejectReason = Literal[
    "empty_input",
    "too_short",
    "order_violation",
    "blocked",
    "not_a_real_word",
]

# Pipeline order; validation short-circuits on the first failing check.
REJECT_REASONS: Tuple[str, ...] = (
    "empty_input",
    "too_short",
    "order_violation",
    "blocked",
    "not_a_real_word",
)

_MESSAGES: Dict[str, str] = {
    "empty_input": "Please enter a word",
    "too_short": "Must be 5+ letters long",
    "order_violation": "Word must contain '{letters}' in order",
    "blocked": "That word is not allowed",
    "not_a_real_word": "Not a valid English word",
}


@dataclass(frozen=True)
class Triplet:
    """
    Three ordered uppercase letters the player must use, in order.

    Equality and hashing look at `letters` only; the remaining fields record
    how the triplet was produced and are there for diagnostics and tests.
    """
    letters: str
    source_word: Optional[str] = field(default=None, compare=False)
    indices: Optional[Tuple[int, int, int]] = field(default=None, compare=False)
    rarity: Optional[int] = field(default=None, compare=False)
    hard_mode: Optional[bool] = field(default=None, compare=False)
    fallback: bool = field(default=False, compare=False)

    def __post_init__(self):
        s = self.letters
        if not isinstance(s, str) or len(s) != 3 or not (s.isascii() and s.isalpha() and s.isupper()):
            raise ValueError(f"Triplet needs exactly three uppercase letters A-Z; got {s!r}")

    @classmethod
    def of(cls, letters: str) -> "Triplet":
        """Build a bare triplet from any-case text, e.g. Triplet.of('lin')."""
        return cls(letters.strip().upper())

    def __str__(self) -> str:
        return self.letters


@dataclass(frozen=True)
class SubmissionResult:
    """Either accepted (reason is None) or rejected with one RejectReason."""
    accepted: bool
    word: str                    # trimmed, lower-cased input
    raw: str                     # exactly what the player typed
    triplet: Triplet
    reason: Optional[RejectReason] = None

    @classmethod
    def accept(cls, word: str, raw: str, triplet: Triplet) -> "SubmissionResult":
        return cls(True, word, raw, triplet, None)

    @classmethod
    def reject(cls, reason: RejectReason, word: str, raw: str, triplet: Triplet) -> "SubmissionResult":
        return cls(False, word, raw, triplet, reason)

    @property
    def message(self) -> str:
        if self.accepted:
            return "Correct!"
        return _MESSAGES[self.reason].format(letters=self.triplet.letters)
