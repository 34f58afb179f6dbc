"""Asynchronous cache provider backed by the in-process LRU cache."""

from __future__ import annotations

import asyncio
from typing import Any, Dict, Hashable, Optional

import structlog

from core.lru import LRUCache

logger = structlog.get_logger(__name__)


class InMemoryLRUCache:
    """Coroutine-safe LRU cache for use inside an event loop."""

    def __init__(self, max_size: int = 1000, *, name: str = "in_memory_lru") -> None:
        self.max_size = max_size
        self._cache = LRUCache(max_size, name=name)
        self._lock = asyncio.Lock()

    async def get(self, key: Hashable) -> Optional[Any]:
        """Get value from cache."""
        async with self._lock:
            return self._cache.get(key)

    async def set(self, key: Hashable, value: Any) -> None:
        """Set value in cache."""
        async with self._lock:
            self._cache.put(key, value)

    async def delete(self, key: Hashable) -> None:
        """Delete entry from cache."""
        async with self._lock:
            self._cache.remove(key)

    async def clear(self) -> int:
        """Clear cache entries."""
        async with self._lock:
            count = self._cache.size()
            self._cache.clear()
            logger.info("cache_cleared", cache=self._cache.name, entries=count)
            return count

    async def stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        async with self._lock:
            snapshot = self._cache.stats()

        return {
            "type": "in_memory_lru",
            "max_size": self.max_size,
            "current_size": snapshot.size,
            "hits": snapshot.hits,
            "misses": snapshot.misses,
            "hit_rate": snapshot.hit_rate,
            "evictions": snapshot.evictions,
        }
