from __future__ import annotations

from collections import OrderedDict
from typing import Callable, Dict, Generic, Hashable, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class HandRankCache(Generic[K, V]):
    """
    Bounded LRU memo for hand ranks.

    Keys are sorted card-id tuples, so the same five cards hit the same
    entry no matter which player or board produced them.
    """
    def __init__(self, capacity: int = 200_000):
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._od: "OrderedDict[K, V]" = OrderedDict()

        # cheap instrumentation
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def __len__(self) -> int:
        return len(self._od)

    def get(self, key: K) -> Optional[V]:
        v = self._od.get(key)
        if v is None:
            self.misses += 1
            return None
        self.hits += 1
        # mark as recently used
        self._od.move_to_end(key, last=True)
        return v

    def get_or_compute(self, key: K, compute: Callable[[K], V]) -> V:
        v = self.get(key)
        if v is not None:
            return v
        v = compute(key)
        self._od[key] = v
        self._evict_if_needed()
        return v

    def _evict_if_needed(self) -> None:
        while len(self._od) > self.capacity:
            self._od.popitem(last=False)  # least recently used
            self.evictions += 1

    def stats(self) -> Dict[str, int]:
        return {
            "entries": len(self._od),
            "hits": self.hits,
            "misses": self.misses,
            "evictions": self.evictions,
        }

    def clear(self) -> None:
        self._od.clear()
        self.hits = self.misses = self.evictions = 0
