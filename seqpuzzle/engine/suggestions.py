"""
Answer suggestions for a triplet the player gave up on.

Goal: up to `max_words` distinct corpus words that contain the triplet in
order, at least 5 letters long, spread across different lengths, and not
too obscure.

Filtering:
  - length 5..10
  - no run of 3+ consonants (anything outside AEIOU, Y included)
  - no -IUM / -TION / -SION ending

Selection:
  1) group survivors by exact length
  2) walk lengths 5, 6, 7, 8, 9, 10 and take one random word per non-empty group
  3) if still short, take one random word from each unused group (shuffled order)

Fewer than `max_words` (even zero) is a normal outcome, not an error.
"""

from __future__ import annotations

import random
import re
from collections import defaultdict
from typing import Dict, Iterable, List

from seqpuzzle.config import (
    MIN_ANSWER_LENGTH,
    SUGGESTION_BANNED_ENDINGS,
    SUGGESTION_LENGTH_ORDER,
    SUGGESTION_MAX_LENGTH,
    VOWELS,
)
from .matching import is_ordered_subsequence
from .types import Triplet

_CONSONANT_RUN = re.compile("[^" + "".join(sorted(VOWELS)) + "]{3,}")


def has_consonant_cluster(word: str) -> bool:
    """True if `word` has 3+ consecutive letters outside AEIOU."""
    return _CONSONANT_RUN.search(word.upper()) is not None


def is_plausible(word: str, *, min_length: int = MIN_ANSWER_LENGTH,
                 max_length: int = SUGGESTION_MAX_LENGTH) -> bool:
    """Length, consonant-cluster and suffix filters (no ordering check)."""
    w = word.upper()
    if not (min_length <= len(w) <= max_length):
        return False
    if has_consonant_cluster(w):
        return False
    return not w.endswith(SUGGESTION_BANNED_ENDINGS)


def candidate_answers(triplet: Triplet | str, words: Iterable[str]) -> List[str]:
    """All words passing the ordering check and the plausibility filters."""
    letters = str(triplet)
    return [w for w in words if is_ordered_subsequence(w, letters) and is_plausible(w)]


class AnswerSuggester:
    def __init__(self, corpus, *, rng: random.Random | None = None,
                 length_order=SUGGESTION_LENGTH_ORDER):
        self.corpus = corpus
        self.rng = rng or random.Random()
        self.length_order = tuple(length_order)

    def suggest(self, triplet: Triplet | str, max_words: int = 3) -> List[str]:
        """
        Return up to `max_words` distinct suggestions for `triplet`.

        Never more than `max_words`, never duplicates; at most one word per length.
        """
        if max_words <= 0:
            return []

        # Minimum length first so the scan only touches 5+ letter words.
        pool = self.corpus.words_at_least(MIN_ANSWER_LENGTH)
        groups: Dict[int, List[str]] = defaultdict(list)
        for w in candidate_answers(triplet, pool):
            groups[len(w)].append(w)

        picked: List[str] = []
        used_lengths = set()

        for n in self.length_order:
            if len(picked) >= max_words:
                break
            group = groups.get(n)
            if group:
                picked.append(self.rng.choice(group))
                used_lengths.add(n)

        if len(picked) < max_words:
            remaining = [n for n in groups if n not in used_lengths and groups[n]]
            self.rng.shuffle(remaining)
            for n in remaining:
                if len(picked) >= max_words:
                    break
                picked.append(self.rng.choice(groups[n]))

        return picked


def suggest_answers(triplet: Triplet | str, corpus, max_words: int = 3,
                    *, rng: random.Random | None = None) -> List[str]:
    """Functional shortcut for AnswerSuggester(corpus, rng=rng).suggest(...)."""
    return AnswerSuggester(corpus, rng=rng).suggest(triplet, max_words)
