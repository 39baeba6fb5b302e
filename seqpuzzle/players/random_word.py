"""
Random Word player.

Strategy:
  - Submit random corpus words of 5+ letters, ignoring the triplet.
  - Give up after `max_tries` submissions on a level.

Notes:
  - Exercises the rejection path; most submissions fail with order_violation.
"""

from __future__ import annotations

from typing import Optional

from seqpuzzle.config import MIN_ANSWER_LENGTH
from .base import BasePlayer, register


@register
class RandomWordPlayer(BasePlayer):
    id = "random_word"
    name = "Random Word"
    version = "1.0.0"
    max_tries = 3

    def next_word(self, state: dict) -> Optional[str]:
        pool = self.corpus.words_at_least(MIN_ANSWER_LENGTH)
        if not pool or state["attempts"] >= self.max_tries:
            return None
        return self.rng.choice(pool).lower()
