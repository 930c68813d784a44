from __future__ import annotations

import threading
from contextlib import nullcontext
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Tuple

Key = Tuple[int, int]

MISSING = object()


@dataclass(frozen=True)
class CacheStats:
    entries: int
    hits: int
    misses: int

    @property
    def hit_rate(self) -> float:
        lookups = self.hits + self.misses
        return self.hits / lookups if lookups else 0.0


def is_cacheable(row: int, column: int) -> bool:
    """Only interior left-half values are stored; the rest are O(1) to derive."""
    return 0 < column <= row // 2


class TriangleCache:
    """Memo table for interior values of one triangle.

    Entries are pure functions of ``(row, column)`` and the triangle's base,
    so they never go stale and are never evicted implicitly.
    """

    def __init__(self, thread_safe: bool = False):
        self._entries: Dict[Key, Any] = {}
        self._lock = threading.RLock() if thread_safe else None
        self.hits = 0
        self.misses = 0

    def guard(self):
        return self._lock if self._lock is not None else nullcontext()

    def lookup(self, row: int, column: int) -> Any:
        """Return the stored value or ``MISSING``, counting the hit or miss."""
        with self.guard():
            value = self._entries.get((row, column), MISSING)
            if value is MISSING:
                self.misses += 1
            else:
                self.hits += 1
            return value

    def peek(self, row: int, column: int, default: Any = None) -> Any:
        with self.guard():
            return self._entries.get((row, column), default)

    def store(self, row: int, column: int, value: Any) -> None:
        if not is_cacheable(row, column):
            raise ValueError(
                f"Only interior left-half values are cached; got ({row}, {column})"
            )
        with self.guard():
            self._entries[(row, column)] = value

    def clear(self) -> None:
        with self.guard():
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def stats(self) -> CacheStats:
        with self.guard():
            return CacheStats(entries=len(self._entries), hits=self.hits, misses=self.misses)

    def __contains__(self, key: Key) -> bool:
        with self.guard():
            return key in self._entries

    def __len__(self) -> int:
        with self.guard():
            return len(self._entries)

    def __iter__(self) -> Iterator[Key]:
        with self.guard():
            return iter(list(self._entries))

