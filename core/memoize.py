"""Memoize function results in a bounded cache."""

from __future__ import annotations

import asyncio
import functools
from typing import Any, Callable, Hashable, Optional, TypeVar

import structlog

from core.interfaces import SyncCache
from core.lru import MISS, LRUCache

logger = structlog.get_logger(__name__)

T = TypeVar("T")

KeyFunc = Callable[..., Hashable]


def default_key(*args: Any, **kwargs: Any) -> Hashable:
    """Positional and keyword arguments always occupy separate slots."""
    return args, tuple(sorted(kwargs.items()))


def memoize(
    cache: Optional[SyncCache] = None,
    *,
    maxsize: int = 128,
    key: Optional[KeyFunc] = None,
):
    """
    Decorator caching return values keyed on call arguments.

    Args:
        cache: Cache to store results in (defaults to a new ``LRUCache``)
        maxsize: Capacity of the default cache
        key: Builds the cache key from the call arguments

    Calls whose key is unhashable are passed straight through. Coroutine
    functions cache the awaited result.
    """
    make_key = key or default_key

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        store = cache if cache is not None else LRUCache(maxsize, name=func.__qualname__)

        def lookup(args: tuple, kwargs: dict) -> tuple[Optional[Hashable], Any]:
            cache_key = make_key(*args, **kwargs)
            try:
                hash(cache_key)
            except TypeError:
                logger.debug("memoize_unhashable_key", function=func.__qualname__)
                return None, MISS
            return cache_key, store.get(cache_key, MISS)

        if asyncio.iscoroutinefunction(func):
            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                cache_key, cached = lookup(args, kwargs)
                if cached is not MISS:
                    return cached
                result = await func(*args, **kwargs)
                if cache_key is not None:
                    store.put(cache_key, result)
                return result
            async_wrapper.cache = store  # type: ignore[attr-defined]
            return async_wrapper
        else:
            @functools.wraps(func)
            def sync_wrapper(*args, **kwargs):
                cache_key, cached = lookup(args, kwargs)
                if cached is not MISS:
                    return cached
                result = func(*args, **kwargs)
                if cache_key is not None:
                    store.put(cache_key, result)
                return result
            sync_wrapper.cache = store  # type: ignore[attr-defined]
            return sync_wrapper

    return decorator
