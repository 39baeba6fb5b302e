from __future__ import annotations
from .base import BaseLexicon, LookupOutcome, REGISTRY, register, create_lexicon, get_lexicon_ids

from . import dictionary_api  # noqa: F401
from . import wordset  # noqa: F401

from .dictionary_api import DictionaryApiLexicon
from .wordset import WordSetLexicon

__all__ = [
    "BaseLexicon", "LookupOutcome", "REGISTRY", "register", "create_lexicon", "get_lexicon_ids",
    "DictionaryApiLexicon", "WordSetLexicon",
]
