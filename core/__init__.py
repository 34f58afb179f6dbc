"""Bounded key-value caches with least-recently-used eviction."""

from .lru import MISS, LRUCache
from .synchronized import SynchronizedLRUCache
from .sharded import ShardedLRUCache
from .memoize import memoize
from .factory import create_cache

__all__ = [
    "MISS",
    "LRUCache",
    "SynchronizedLRUCache",
    "ShardedLRUCache",
    "memoize",
    "create_cache",
]
