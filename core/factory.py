from __future__ import annotations

from typing import Optional, Union

import structlog

from config.settings import CacheSettings
from core.lru import EvictionCallback, LRUCache
from core.sharded import ShardedLRUCache
from core.synchronized import SynchronizedLRUCache
from monitoring.telemetry import initialize_telemetry, telemetry_initialized

logger = structlog.get_logger(__name__)

AnyCache = Union[LRUCache, SynchronizedLRUCache, ShardedLRUCache]


def create_cache(
    settings: Optional[CacheSettings] = None,
    *,
    on_evict: Optional[EvictionCallback] = None,
) -> AnyCache:
    """Build the cache variant described by ``settings``.

    More than one shard always yields a :class:`ShardedLRUCache`; otherwise
    ``thread_safe`` picks between the synchronized and the plain cache.
    """
    settings = settings or CacheSettings()

    if settings.metrics_enabled and not telemetry_initialized():
        initialize_telemetry(
            prometheus_port=settings.prometheus_port,
            log_level=settings.log_level,
            log_format=settings.log_format,
        )

    if settings.shards > 1:
        cache: AnyCache = ShardedLRUCache(
            settings.capacity,
            settings.shards,
            on_evict=on_evict,
            name=settings.name,
        )
    elif settings.thread_safe:
        cache = SynchronizedLRUCache(settings.capacity, on_evict=on_evict, name=settings.name)
    else:
        cache = LRUCache(settings.capacity, on_evict=on_evict, name=settings.name)

    logger.debug("cache_factory_built", cache=settings.name, variant=type(cache).__name__)
    return cache
