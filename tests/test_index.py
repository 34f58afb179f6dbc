import pytest

from core.index import KeyIndex
from core.ledger import RecencyLedger
from exceptions import CacheError, DuplicateKeyError


def test_insert_and_resolve():
    index = KeyIndex()
    ledger = RecencyLedger()
    handle = ledger.push_front("k", "v")

    assert not index.contains("k")
    assert index.resolve("k") is None

    index.insert("k", handle)
    assert index.contains("k")
    assert "k" in index
    assert index.resolve("k") is handle
    assert len(index) == 1


def test_insert_duplicate_key_raises():
    index = KeyIndex()
    ledger = RecencyLedger()
    index.insert("k", ledger.push_front("k", 1))

    with pytest.raises(DuplicateKeyError) as excinfo:
        index.insert("k", ledger.push_front("k", 2))
    assert isinstance(excinfo.value, CacheError)
    assert isinstance(excinfo.value, KeyError)


def test_remove_returns_handle():
    index = KeyIndex()
    ledger = RecencyLedger()
    handle = ledger.push_front("k", 1)
    index.insert("k", handle)

    assert index.remove("k") is handle
    assert len(index) == 0
    with pytest.raises(KeyError):
        index.remove("k")


def test_keys_and_clear():
    index = KeyIndex()
    ledger = RecencyLedger()
    for key in ("a", "b"):
        index.insert(key, ledger.push_front(key, None))
    assert sorted(index.keys()) == ["a", "b"]

    index.clear()
    assert len(index) == 0
