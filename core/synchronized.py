"""Thread-safe wrapper around :class:`core.lru.LRUCache`."""

from __future__ import annotations

import threading
from typing import Any, Hashable, Iterator, List, Optional, Tuple

from core.lru import MISS, EvictionCallback, LRUCache
from monitoring.metrics import CacheStats


class SynchronizedLRUCache:
    """LRU cache guarded by a single lock.

    Every operation updates the index and the recency ledger together, so one
    re-entrant lock covers both. Eviction callbacks run while the lock is held.
    """

    def __init__(
        self,
        capacity: int,
        *,
        on_evict: Optional[EvictionCallback] = None,
        name: str = "lru",
    ) -> None:
        self._cache = LRUCache(capacity, on_evict=on_evict, name=name)
        self._lock = threading.RLock()

    @property
    def capacity(self) -> int:
        return self._cache.capacity

    @property
    def name(self) -> str:
        return self._cache.name

    def get(self, key: Hashable, default: Any = None) -> Any:
        with self._lock:
            return self._cache.get(key, default)

    def put(self, key: Hashable, value: Any) -> None:
        with self._lock:
            self._cache.put(key, value)

    def size(self) -> int:
        with self._lock:
            return self._cache.size()

    def peek(self, key: Hashable, default: Any = None) -> Any:
        with self._lock:
            return self._cache.peek(key, default)

    def remove(self, key: Hashable) -> bool:
        with self._lock:
            return self._cache.remove(key)

    def pop(self, key: Hashable, default: Any = MISS) -> Any:
        with self._lock:
            return self._cache.pop(key, default)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def keys(self) -> List[Hashable]:
        with self._lock:
            return self._cache.keys()

    def items(self) -> List[Tuple[Hashable, Any]]:
        with self._lock:
            return self._cache.items()

    def stats(self) -> CacheStats:
        with self._lock:
            return self._cache.stats()

    def check_invariants(self) -> None:
        with self._lock:
            self._cache.check_invariants()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._cache

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.keys())
