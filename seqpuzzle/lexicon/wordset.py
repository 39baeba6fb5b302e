from __future__ import annotations

from typing import Iterable

from .base import BaseLexicon, LookupOutcome, register


@register
class WordSetLexicon(BaseLexicon):
    """
    Offline lexicon: a word is real iff it's in the given collection
    (case-insensitive). Used by simulations, tests and `play --offline`.
    """
    id = "wordset"
    name = "Word Set"

    def __init__(self, words: Iterable[str] = ()):
        self.words = frozenset(w.strip().lower() for w in words if w.strip())

    def _check(self, word: str) -> LookupOutcome:
        return "found" if word in self.words else "not_found"
