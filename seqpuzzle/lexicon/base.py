from __future__ import annotations
from typing import Dict, List, Literal, Type

# Outcome of one lookup. Only "found" makes a word real; "unavailable" means the
# lexicon couldn't answer (timeout, transport error) and is kept distinct for tests.
LookupOutcome = Literal["found", "not_found", "unavailable"]

# ---- Global lexicon registry ----
REGISTRY: Dict[str, Type["BaseLexicon"]] = {}


def register(cls: Type["BaseLexicon"]) -> Type["BaseLexicon"]:
    """
    Decorator: @register on a lexicon class adds it to REGISTRY by its `id`.
    """
    lid = getattr(cls, "id", None)
    if not lid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if lid in REGISTRY:
        raise ValueError(f"Duplicate lexicon id: {lid}")
    REGISTRY[lid] = cls
    return cls


# ---- Base class that lexicons inherit ----
class BaseLexicon:
    id = "base"
    name = "Base"

    def check(self, word: str) -> LookupOutcome:
        """Hyphenated words are never looked up."""
        w = word.strip().lower()
        if not w or "-" in w:
            return "not_found"
        return self._check(w)

    def lookup(self, word: str) -> bool:
        return self.check(word) == "found"

    def _check(self, word: str) -> LookupOutcome:
        raise NotImplementedError("Override in subclass")

    def close(self) -> None:
        """Release any resources held by the lexicon (no-op by default)."""

    def __enter__(self):
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def create_lexicon(lexicon_id: str, **kwargs) -> BaseLexicon:
    """
    Factory: instantiate a registered lexicon by id.
    """
    try:
        cls = REGISTRY[lexicon_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown lexicon id: {lexicon_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_lexicon_ids() -> List[str]:
    """
    Return all registered lexicon ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
