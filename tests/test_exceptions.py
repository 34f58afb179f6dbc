import pytest

from core.lru import LRUCache
from core.ledger import RecencyLedger
from exceptions import (
    CacheError,
    CacheInvariantError,
    DuplicateKeyError,
    EmptyLedgerError,
    InvalidCapacityError,
)


@pytest.mark.parametrize(
    "exc, builtin",
    [
        (InvalidCapacityError, ValueError),
        (DuplicateKeyError, KeyError),
        (EmptyLedgerError, LookupError),
        (CacheInvariantError, AssertionError),
    ],
)
def test_hierarchy(exc, builtin):
    assert issubclass(exc, CacheError)
    assert issubclass(exc, builtin)


def test_capacity_error_message():
    with pytest.raises(InvalidCapacityError, match="positive"):
        LRUCache(-3)


def test_steady_state_operations_never_raise():
    cache = LRUCache(1)
    assert cache.get("nothing") is None
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("b", 3)
    assert cache.get("b") == 3


def test_empty_ledger_is_unreachable_through_cache():
    ledger = RecencyLedger()
    with pytest.raises(EmptyLedgerError):
        ledger.remove_back()

    cache = LRUCache(1)
    for i in range(10):
        cache.put(i, i)
    cache.check_invariants()
