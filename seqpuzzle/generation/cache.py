"""
Rarity cache: triplet letters -> occurrence count.

A count is the number of sampled corpus words containing the triplet as an
ordered subsequence. Entries are added lazily, never evicted and never
recomputed; there are at most 26**3 keys.

One instance per process (or per test). The map is guarded by a lock and
`put` is first-writer-wins, so two generators racing on the same key end up
agreeing on whichever count landed first.
"""

from __future__ import annotations

import threading
from typing import Dict, Optional


def _key(triplet) -> str:
    return str(triplet).upper()


class RarityCache:
    def __init__(self, initial: Dict[str, int] | None = None):
        self._counts: Dict[str, int] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0
        for k, v in (initial or {}).items():
            self._counts[_key(k)] = int(v)

    def get(self, triplet) -> Optional[int]:
        """Cached count, or None if this triplet was never counted."""
        k = _key(triplet)
        with self._lock:
            count = self._counts.get(k)
            if count is None:
                self.misses += 1
            else:
                self.hits += 1
            return count

    def put(self, triplet, count: int) -> int:
        """Store `count` unless a count is already present; return the stored value."""
        k = _key(triplet)
        with self._lock:
            return self._counts.setdefault(k, int(count))

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._counts)

    def __contains__(self, triplet) -> bool:
        with self._lock:
            return _key(triplet) in self._counts

    def __len__(self) -> int:
        with self._lock:
            return len(self._counts)

    def __repr__(self) -> str:
        return f"RarityCache({len(self)} entries, hits={self.hits}, misses={self.misses})"
