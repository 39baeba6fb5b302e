"""
Ordered-letter containment.

`is_ordered_subsequence` is the single ordering primitive: submissions are
accepted with it, rarity counts are computed with it, and suggestions are
filtered with it.

Examples:
  is_ordered_subsequence("PLAIN", "LIN") -> True
  is_ordered_subsequence("LINK",  "LIN") -> True
  is_ordered_subsequence("NAIL",  "LIN") -> False
"""

from __future__ import annotations

from typing import Iterable, List


def is_ordered_subsequence(word: str, pattern: str) -> bool:
    """
    True if the letters of `pattern` appear in `word` in the same relative
    order (not necessarily adjacent). Case-insensitive.
    """
    target = str(pattern).upper()
    if not target:
        return True

    idx = 0
    for ch in word.upper():
        if ch == target[idx]:
            idx += 1
            if idx == len(target):
                return True
    return False


def count_matches(words: Iterable[str], pattern: str) -> int:
    """Number of `words` containing `pattern` as an ordered subsequence."""
    return sum(1 for w in words if is_ordered_subsequence(w, pattern))


def filter_matches(words: Iterable[str], pattern: str) -> List[str]:
    """Words containing `pattern` in order (input order preserved)."""
    return [w for w in words if is_ordered_subsequence(w, pattern)]
