"""Fixed capacity key-value cache with least-recently-used eviction."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterator, List, Optional, Tuple

import structlog

from exceptions import CacheInvariantError, InvalidCapacityError
from core.index import KeyIndex
from core.ledger import RecencyLedger
from monitoring.metrics import CacheStats
from monitoring.telemetry import record_cache_metrics, record_eviction, record_size_change

logger = structlog.get_logger(__name__)


class _Miss:
    """Sentinel returned for lookups of absent keys when passed as the default."""

    _instance: Optional["_Miss"] = None

    def __new__(cls) -> "_Miss":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISS"

    def __bool__(self) -> bool:
        return False


MISS = _Miss()

EvictionCallback = Callable[[Hashable, Any], None]


def validate_capacity(capacity: Any) -> int:
    """Return ``capacity`` if it is a positive int, else raise ``InvalidCapacityError``."""
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        logger.error("invalid_capacity", capacity=repr(capacity))
        raise InvalidCapacityError(f"Capacity must be an integer, got {capacity!r}")
    if capacity <= 0:
        logger.error("invalid_capacity", capacity=capacity)
        raise InvalidCapacityError(f"Capacity must be positive, got {capacity}")
    return capacity


class LRUCache:
    """Bounded cache evicting the entry that has gone longest without access.

    Every ``get`` hit and every ``put`` moves the touched key to the most
    recently used position. Inserting a new key into a full cache evicts
    exactly one entry, the least recently used one. Both operations are O(1).

    Not thread-safe; see :class:`core.synchronized.SynchronizedLRUCache`.
    """

    def __init__(
        self,
        capacity: int,
        *,
        on_evict: Optional[EvictionCallback] = None,
        name: str = "lru",
    ) -> None:
        self._capacity = validate_capacity(capacity)
        self._index = KeyIndex()
        self._ledger = RecencyLedger()
        self._on_evict = on_evict
        self.name = name
        self._hits = 0
        self._misses = 0
        self._evictions = 0
        logger.info("cache_created", cache=name, capacity=capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the value for ``key`` and mark it most recently used.

        On a miss ``default`` is returned and nothing is reordered. Pass
        :data:`MISS` as the default to tell a miss apart from a stored ``None``.
        """
        node = self._index.resolve(key)
        if node is None:
            self._misses += 1
            record_cache_metrics(False, self.name)
            return default

        self._ledger.move_to_front(node)
        self._hits += 1
        record_cache_metrics(True, self.name)
        return node.value

    def put(self, key: Hashable, value: Any) -> None:
        """Insert or update ``key``. Evicts the LRU entry when a new key overflows."""
        node = self._index.resolve(key)
        if node is not None:
            node.value = value
            self._ledger.move_to_front(node)
            return

        evicted = None
        if self._ledger.size() == self._capacity:
            evicted = self._evict()

        self._index.insert(key, self._ledger.push_front(key, value))
        if evicted is None:
            record_size_change(1, self.name)
        elif self._on_evict is not None:
            self._on_evict(evicted[0], evicted[1])

    def size(self) -> int:
        return self._ledger.size()

    def peek(self, key: Hashable, default: Any = None) -> Any:
        """Return the value for ``key`` without changing its recency."""
        node = self._index.resolve(key)
        return default if node is None else node.value

    def remove(self, key: Hashable) -> bool:
        """Delete ``key`` if present. Returns whether an entry was removed."""
        if key not in self._index:
            return False
        self._ledger.remove(self._index.remove(key))
        record_size_change(-1, self.name)
        return True

    def pop(self, key: Hashable, default: Any = MISS) -> Any:
        """Remove ``key`` and return its value.

        Raises ``KeyError`` when the key is absent and no default is given.
        """
        if key not in self._index:
            if default is MISS:
                raise KeyError(key)
            return default
        node = self._index.remove(key)
        self._ledger.remove(node)
        record_size_change(-1, self.name)
        return node.value

    def clear(self) -> None:
        """Drop every entry. Hit, miss and eviction counters are kept."""
        removed = self._ledger.size()
        self._ledger.clear()
        self._index.clear()
        record_size_change(-removed, self.name)

    def keys(self) -> List[Hashable]:
        """Keys ordered from most to least recently used."""
        return [node.key for node in self._ledger]

    def items(self) -> List[Tuple[Hashable, Any]]:
        return [(node.key, node.value) for node in self._ledger]

    def stats(self) -> CacheStats:
        return CacheStats(
            name=self.name,
            capacity=self._capacity,
            size=self._ledger.size(),
            hits=self._hits,
            misses=self._misses,
            evictions=self._evictions,
        )

    def check_invariants(self) -> None:
        """Raise ``CacheInvariantError`` if the index and ledger have drifted."""
        if len(self._index) != self._ledger.size():
            raise CacheInvariantError(
                f"index holds {len(self._index)} keys, ledger holds {self._ledger.size()}"
            )
        if self._ledger.size() > self._capacity:
            raise CacheInvariantError(
                f"size {self._ledger.size()} exceeds capacity {self._capacity}"
            )
        for node in self._ledger:
            if self._index.resolve(node.key) is not node:
                raise CacheInvariantError(f"ledger entry {node.key!r} is not indexed")

    def _evict(self) -> Tuple[Hashable, Any]:
        lru = self._ledger.peek_back()
        if lru is None:
            raise CacheInvariantError("full cache has an empty ledger")
        self._ledger.remove_back()
        self._index.remove(lru.key)
        self._evictions += 1
        record_eviction(self.name)
        logger.debug("cache_evicted", cache=self.name, key=repr(lru.key))
        return lru.key, lru.value

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __len__(self) -> int:
        return self._ledger.size()

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"LRUCache(name={self.name!r}, size={self.size()}, capacity={self._capacity})"
