"""
Random Match player.

Strategy:
  - Submit a random corpus word (5+ letters) that contains the triplet in order.
  - Never resubmit a word that was already rejected on this level.
  - Give up when no untried match is left.

Notes:
  - A baseline that knows the corpus; it only fails on lexicon or blocklist rejections.
"""

from __future__ import annotations

from typing import List, Optional

from seqpuzzle.config import MIN_ANSWER_LENGTH
from seqpuzzle.engine.matching import filter_matches
from .base import BasePlayer, register


@register
class RandomMatchPlayer(BasePlayer):
    id = "random_match"
    name = "Random Match"
    version = "1.0.0"

    def next_word(self, state: dict) -> Optional[str]:
        tried = {w.upper() for w in state.get("tried", [])}
        pool: List[str] = [
            w for w in filter_matches(self.corpus.words_at_least(MIN_ANSWER_LENGTH), state["letters"])
            if w not in tried
        ]
        if not pool:
            return None
        return self.rng.choice(pool).lower()
