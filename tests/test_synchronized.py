import threading

import pytest

from core.interfaces import SyncCache
from core.lru import MISS, LRUCache
from core.synchronized import SynchronizedLRUCache
from exceptions import InvalidCapacityError


def test_behaves_like_plain_cache():
    cache = SynchronizedLRUCache(2, name="sync")
    cache.put(1, 1)
    cache.put(2, 2)
    assert cache.get(1) == 1
    cache.put(3, 3)
    assert cache.get(2, MISS) is MISS
    assert cache.keys() == [3, 1]
    assert cache.items() == [(3, 3), (1, 1)]
    assert cache.capacity == 2
    assert cache.name == "sync"
    assert len(cache) == 2
    assert 3 in cache
    assert cache.peek(1) == 1
    assert list(cache) == [3, 1]


def test_removal_operations():
    cache = SynchronizedLRUCache(3)
    cache.put("a", 1)
    cache.put("b", 2)
    assert cache.remove("a") is True
    assert cache.pop("b") == 2
    assert cache.pop("b", None) is None
    cache.put("c", 3)
    cache.clear()
    assert cache.size() == 0


def test_invalid_capacity():
    with pytest.raises(InvalidCapacityError):
        SynchronizedLRUCache(0)


def test_satisfies_sync_cache_protocol():
    assert isinstance(SynchronizedLRUCache(1), SyncCache)
    assert isinstance(LRUCache(1), SyncCache)


def test_concurrent_writers_stay_within_capacity():
    cache = SynchronizedLRUCache(50)
    errors = []

    def worker(offset):
        try:
            for i in range(500):
                key = (offset * 31 + i) % 200
                cache.put(key, i)
                cache.get((key + 1) % 200)
                if i % 17 == 0:
                    cache.remove(key)
        except Exception as exc:  # pragma: no cover - surfaced by assertion
            errors.append(exc)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    assert cache.size() <= cache.capacity
    cache.check_invariants()
    stats = cache.stats()
    assert stats.hits + stats.misses == 8 * 500
