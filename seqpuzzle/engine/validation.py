"""
Submission validation.

This module answers the question: "Does this word solve the current triplet?"
Checks run in a fixed order and stop at the first failure, because each
failure maps to a different message for the player:

  1) empty after trimming            -> empty_input
  2) shorter than 5 letters          -> too_short
  3) triplet not in order            -> order_violation
  4) exact match on the blocked list -> blocked
  5) hyphenated, or lexicon says no  -> not_a_real_word

The lexicon is the only step that may touch the network. Whatever goes wrong
there (non-success response, timeout, transport error, or an exception raised
by the lexicon itself) ends up as not_a_real_word; the lexicon's own `check()`
keeps the distinction.

Recording results and advancing levels is the caller's job.
"""

from __future__ import annotations

import logging

from seqpuzzle.config import MIN_ANSWER_LENGTH
from .blocklist import is_blocked
from .matching import is_ordered_subsequence
from .types import SubmissionResult, Triplet

logger = logging.getLogger(__name__)


def _lookup(lexicon, word: str) -> bool:
    """lexicon.lookup(word), with any exception counted as a failed lookup."""
    try:
        return bool(lexicon.lookup(word))
    except Exception as e:
        logger.warning("lexicon lookup raised for %r: %s", word, e)
        return False


def validate_submission(raw: str, triplet: Triplet, lexicon,
                        *, min_length: int = MIN_ANSWER_LENGTH) -> SubmissionResult:
    """
    Validate one player submission against `triplet`.

    Args:
      raw        : exactly what the player typed
      triplet    : the active Triplet
      lexicon    : object with lookup(word) -> bool (see seqpuzzle.lexicon)
      min_length : minimum accepted length (5 in the game)

    Returns:
      SubmissionResult, accepted or carrying the first failing reason.

    Raises:
      ValueError if `raw` is not a string.
    """
    if not isinstance(raw, str):
        raise ValueError(f"submission must be a str; got {type(raw).__name__}")
    word = raw.strip().lower()

    if not word:
        return SubmissionResult.reject("empty_input", word, raw, triplet)

    if len(word) < min_length:
        return SubmissionResult.reject("too_short", word, raw, triplet)

    if not is_ordered_subsequence(word, triplet.letters):
        return SubmissionResult.reject("order_violation", word, raw, triplet)

    if is_blocked(word):
        return SubmissionResult.reject("blocked", word, raw, triplet)

    # Hyphenated entries never go to the lexicon.
    if "-" in word or not _lookup(lexicon, word):
        return SubmissionResult.reject("not_a_real_word", word, raw, triplet)

    logger.debug("accepted %r for %s", word, triplet)
    return SubmissionResult.accept(word, raw, triplet)


class SubmissionValidator:
    """Binds a lexicon so callers only pass (word, triplet)."""

    def __init__(self, lexicon, *, min_length: int = MIN_ANSWER_LENGTH):
        self.lexicon = lexicon
        self.min_length = int(min_length)

    def validate(self, raw: str, triplet: Triplet) -> SubmissionResult:
        return validate_submission(raw, triplet, self.lexicon, min_length=self.min_length)
