"""Striped LRU cache for reducing lock contention across threads."""

from __future__ import annotations

from typing import Any, Hashable, List, Optional

import structlog

from exceptions import InvalidCapacityError
from core.lru import MISS, EvictionCallback, validate_capacity
from core.synchronized import SynchronizedLRUCache
from monitoring.metrics import CacheStats

logger = structlog.get_logger(__name__)


class ShardedLRUCache:
    """Keys partitioned by hash over independent synchronized LRU caches.

    Each shard evicts its own least recently used entry, so eviction order is
    LRU per shard only, not across the whole cache. Operations on a single
    key are linearizable because a key always maps to the same shard.
    """

    def __init__(
        self,
        capacity: int,
        shards: int = 8,
        *,
        on_evict: Optional[EvictionCallback] = None,
        name: str = "sharded_lru",
    ) -> None:
        capacity = validate_capacity(capacity)
        if isinstance(shards, bool) or not isinstance(shards, int) or shards < 1:
            logger.error("invalid_shard_count", shards=repr(shards), capacity=capacity)
            raise InvalidCapacityError(f"Shard count must be a positive integer, got {shards!r}")
        if shards > capacity:
            logger.error("invalid_shard_count", shards=shards, capacity=capacity)
            raise InvalidCapacityError(
                f"Shard count {shards} exceeds capacity {capacity}"
            )

        self._capacity = capacity
        self.name = name
        base, extra = divmod(capacity, shards)
        self._shards: List[SynchronizedLRUCache] = [
            SynchronizedLRUCache(
                base + (1 if i < extra else 0),
                on_evict=on_evict,
                name=f"{name}[{i}]",
            )
            for i in range(shards)
        ]
        logger.info("sharded_cache_created", cache=name, capacity=capacity, shards=shards)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def shard_count(self) -> int:
        return len(self._shards)

    def shard_for(self, key: Hashable) -> SynchronizedLRUCache:
        return self._shards[hash(key) % len(self._shards)]

    def get(self, key: Hashable, default: Any = None) -> Any:
        return self.shard_for(key).get(key, default)

    def put(self, key: Hashable, value: Any) -> None:
        self.shard_for(key).put(key, value)

    def size(self) -> int:
        return sum(shard.size() for shard in self._shards)

    def peek(self, key: Hashable, default: Any = None) -> Any:
        return self.shard_for(key).peek(key, default)

    def remove(self, key: Hashable) -> bool:
        return self.shard_for(key).remove(key)

    def pop(self, key: Hashable, default: Any = MISS) -> Any:
        return self.shard_for(key).pop(key, default)

    def clear(self) -> None:
        for shard in self._shards:
            shard.clear()

    def stats(self) -> CacheStats:
        parts = [shard.stats() for shard in self._shards]
        return CacheStats(
            name=self.name,
            capacity=self._capacity,
            size=sum(p.size for p in parts),
            hits=sum(p.hits for p in parts),
            misses=sum(p.misses for p in parts),
            evictions=sum(p.evictions for p in parts),
        )

    def check_invariants(self) -> None:
        for shard in self._shards:
            shard.check_invariants()

    def __contains__(self, key: object) -> bool:
        return key in self.shard_for(key)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self.size()
