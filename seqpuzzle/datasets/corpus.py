"""
Corpus: the filtered, upper-cased working word list.

Built once from a raw dictionary. A raw word survives if it is:
  - at least 3 letters long
  - alphabetic only (A-Z, either case)
  - not ending in ING / ED / S / ER / EST / LY / ISH (case-insensitive)

Survivors are upper-cased and de-duplicated (first occurrence wins), so the
same raw input always yields the same corpus. The corpus never changes after
construction; generators, validators and suggesters share one instance.

Views of words at or above a minimum length are built in the constructor for
the lengths the generator and suggester ask for (4, 5, 8). Any other length is
filtered on first use and memoized; concurrent first reads compute the same
tuple, so whichever one is stored is equivalent.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Iterable, Iterator, Sequence, Tuple

from seqpuzzle.config import EXCLUDED_SUFFIXES, MIN_CORPUS_WORD_LENGTH, PRECOMPUTED_VIEW_LENGTHS
from .io import read_lines

logger = logging.getLogger(__name__)

ALPHA_ONLY = re.compile(r"^[A-Za-z]+$")


def keep_word(word: str, *, excluded_suffixes: Sequence[str] = EXCLUDED_SUFFIXES,
              min_length: int = MIN_CORPUS_WORD_LENGTH) -> bool:
    """Corpus admission rule for a single raw word (already stripped)."""
    if len(word) < min_length or not ALPHA_ONLY.match(word):
        return False
    return not word.upper().endswith(tuple(s.upper() for s in excluded_suffixes))


class Corpus:
    """Immutable word collection with precomputed minimum-length views."""

    def __init__(self, words: Iterable[str], *,
                 view_lengths: Iterable[int] = PRECOMPUTED_VIEW_LENGTHS):
        self._words: Tuple[str, ...] = tuple(words)
        self._set = frozenset(self._words)
        # min length -> words with len >= min length (corpus order)
        self._views: Dict[int, Tuple[str, ...]] = {}
        for n in view_lengths:
            self._views[n] = tuple(w for w in self._words if len(w) >= n)

    @classmethod
    def build(cls, raw_words: Iterable[str], *,
              excluded_suffixes: Sequence[str] = EXCLUDED_SUFFIXES,
              min_length: int = MIN_CORPUS_WORD_LENGTH) -> "Corpus":
        """
        Preprocess a raw dictionary into a Corpus.

        Empty input gives an empty corpus; generation refuses to run on it
        (CorpusEmpty) rather than failing here.
        """
        suffixes = tuple(s.upper() for s in excluded_suffixes)
        seen = set()
        out = []
        raw_total = 0
        for raw in raw_words:
            raw_total += 1
            w = raw.strip()
            if not keep_word(w, excluded_suffixes=suffixes, min_length=min_length):
                continue
            w = w.upper()
            if w in seen:
                continue
            seen.add(w)
            out.append(w)

        corpus = cls(out)
        logger.info("corpus built: %d of %d raw words kept", len(corpus), raw_total)
        return corpus

    @classmethod
    def from_file(cls, path: Path | str, **kwargs) -> "Corpus":
        """Build from a newline-separated dictionary file."""
        return cls.build(read_lines(path), **kwargs)

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def words_at_least(self, n: int) -> Tuple[str, ...]:
        """Words of length >= n, in corpus order."""
        view = self._views.get(n)
        if view is None:
            view = tuple(w for w in self._words if len(w) >= n)
            self._views[n] = view
        return view

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.upper() in self._set

    def __bool__(self) -> bool:
        return bool(self._words)

    def __repr__(self) -> str:
        return f"Corpus({len(self._words)} words)"
