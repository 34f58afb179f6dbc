"""Cache provider implementations."""

from core.interfaces import CacheProvider

from .cache import InMemoryLRUCache

__all__ = [
    "CacheProvider",
    "InMemoryLRUCache",
]
