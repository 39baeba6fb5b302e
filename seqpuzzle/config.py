"""
Fixed configuration for the puzzle core.

Everything here is a plain module constant; components take these as keyword
defaults so tests and CLIs can override them per call.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import FrozenSet, Tuple

# Corpus preprocessing: words ending in any of these are dropped at build time.
EXCLUDED_SUFFIXES: Tuple[str, ...] = ("ING", "ED", "S", "ER", "EST", "LY", "ISH")
MIN_CORPUS_WORD_LENGTH = 3
# Minimum-length views built with the corpus: easy and hard source lengths, answer minimum.
PRECOMPUTED_VIEW_LENGTHS: Tuple[int, ...] = (4, 5, 8)

# Generation
FORBIDDEN_THIRD_LETTERS: FrozenSet[str] = frozenset("SGD")
SAMPLE_SIZE = 10_000
MAX_ATTEMPTS = 1000
HARD_MODE_PROBABILITY = 0.75
ROUND_SIZE = 3
ROUND_SLOT_RETRIES = 100

# Validation / suggestion
MIN_ANSWER_LENGTH = 5
SUGGESTION_MAX_LENGTH = 10
SUGGESTION_LENGTH_ORDER: Tuple[int, ...] = (5, 6, 7, 8, 9, 10)
SUGGESTION_BANNED_ENDINGS: Tuple[str, ...] = ("IUM", "TION", "SION")
VOWELS: FrozenSet[str] = frozenset("AEIOU")

# Remote lexicon
DICTIONARY_API_URL = "https://api.dictionaryapi.dev/api/v2/entries/en/"
LEXICON_TIMEOUT_SEC = 6.0
USER_AGENT = "seqpuzzle/0.1"

# Word list discovery
WORD_LIST_ENV = "SEQPUZZLE_WORD_LIST"
DEFAULT_WORD_LIST = Path("/usr/share/dict/words")


def get_word_list_path(explicit: str | None = None) -> Path:
    """
    Resolve the raw dictionary path: explicit argument, then $SEQPUZZLE_WORD_LIST,
    then the system word list.
    """
    if explicit:
        return Path(explicit)
    p = os.environ.get(WORD_LIST_ENV)
    if p:
        return Path(p)
    if DEFAULT_WORD_LIST.exists():
        return DEFAULT_WORD_LIST
    raise FileNotFoundError(
        f"No word list found. Pass --words, set {WORD_LIST_ENV}, "
        f"or run: python -m script.fetch_wordlist"
    )
