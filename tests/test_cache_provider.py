import asyncio

import pytest

from core.providers import InMemoryLRUCache


@pytest.mark.asyncio
async def test_memory_lru():
    cache = InMemoryLRUCache(max_size=2)
    await cache.set("a", "x")
    await cache.set("b", "y")
    await cache.set("c", "z")
    assert await cache.get("a") is None
    assert await cache.get("b") == "y"


@pytest.mark.asyncio
async def test_get_refreshes_recency():
    cache = InMemoryLRUCache(max_size=2)
    await cache.set("a", 1)
    await cache.set("b", 2)
    assert await cache.get("a") == 1
    await cache.set("c", 3)
    assert await cache.get("b") is None
    assert await cache.get("a") == 1


@pytest.mark.asyncio
async def test_delete_and_clear():
    cache = InMemoryLRUCache(max_size=4)
    await cache.set("a", 1)
    await cache.set("b", 2)
    await cache.delete("a")
    await cache.delete("missing")
    assert await cache.get("a") is None

    assert await cache.clear() == 1
    assert await cache.get("b") is None


@pytest.mark.asyncio
async def test_stats():
    cache = InMemoryLRUCache(max_size=1)
    await cache.set("a", 1)
    await cache.get("a")
    await cache.get("b")
    await cache.set("b", 2)

    stats = await cache.stats()
    assert stats["type"] == "in_memory_lru"
    assert stats["max_size"] == 1
    assert stats["current_size"] == 1
    assert stats["hits"] == 1
    assert stats["misses"] == 1
    assert stats["hit_rate"] == 0.5
    assert stats["evictions"] == 1


@pytest.mark.asyncio
async def test_concurrent_tasks():
    cache = InMemoryLRUCache(max_size=10)

    async def writer(n):
        for i in range(20):
            await cache.set((n, i), i)
            await asyncio.sleep(0)

    await asyncio.gather(*(writer(n) for n in range(5)))
    stats = await cache.stats()
    assert stats["current_size"] == 10
    assert stats["evictions"] == 90
