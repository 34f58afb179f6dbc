"""Recency ledger: a doubly linked sequence ordered from most to least recently used."""

from __future__ import annotations

from typing import Any, Hashable, Iterator, Optional

from exceptions import EmptyLedgerError


class LedgerNode:
    """A single cache entry and its position in the ledger.

    The node object itself is the handle handed to the index.
    """

    __slots__ = ("key", "value", "prev", "next")

    def __init__(self, key: Hashable = None, value: Any = None) -> None:
        self.key = key
        self.value = value
        self.prev: LedgerNode = self
        self.next: LedgerNode = self

    def __repr__(self) -> str:
        return f"LedgerNode(key={self.key!r})"


class RecencyLedger:
    """Entries linked around a sentinel.

    ``sentinel.next`` is the head (most recently used) and ``sentinel.prev``
    is the tail (least recently used). An empty ledger is the sentinel linked
    to itself, so linking and unlinking never branch on emptiness.
    """

    def __init__(self) -> None:
        self._sentinel = LedgerNode()
        self._size = 0

    def push_front(self, key: Hashable, value: Any) -> LedgerNode:
        """Insert a new entry as the most recently used one and return its handle."""
        node = LedgerNode(key, value)
        self._link_front(node)
        self._size += 1
        return node

    def move_to_front(self, node: LedgerNode) -> None:
        """Promote an existing entry to most recently used."""
        if self._sentinel.next is node:
            return
        self._unlink(node)
        self._link_front(node)

    def peek_back(self) -> Optional[LedgerNode]:
        """Return the least recently used entry without removing it."""
        tail = self._sentinel.prev
        if tail is self._sentinel:
            return None
        return tail

    def remove_back(self) -> LedgerNode:
        """Remove and return the least recently used entry."""
        tail = self._sentinel.prev
        if tail is self._sentinel:
            raise EmptyLedgerError("cannot remove from an empty ledger")
        self.remove(tail)
        return tail

    def remove(self, node: LedgerNode) -> None:
        """Unlink an arbitrary entry given its handle."""
        self._unlink(node)
        node.prev = node.next = node
        self._size -= 1

    def size(self) -> int:
        return self._size

    def clear(self) -> None:
        node = self._sentinel.next
        while node is not self._sentinel:
            following = node.next
            node.prev = node.next = node
            node = following
        self._sentinel.prev = self._sentinel.next = self._sentinel
        self._size = 0

    def _link_front(self, node: LedgerNode) -> None:
        head = self._sentinel.next
        node.prev = self._sentinel
        node.next = head
        head.prev = node
        self._sentinel.next = node

    @staticmethod
    def _unlink(node: LedgerNode) -> None:
        node.prev.next = node.next
        node.next.prev = node.prev

    def __iter__(self) -> Iterator[LedgerNode]:
        node = self._sentinel.next
        while node is not self._sentinel:
            yield node
            node = node.next

    def __len__(self) -> int:
        return self._size
