"""Key index mapping cache keys to their ledger handles."""

from __future__ import annotations

from typing import Dict, Hashable, Iterator, Optional

from exceptions import DuplicateKeyError
from core.ledger import LedgerNode


class KeyIndex:
    """O(1) lookup from key to the node holding it in the recency ledger."""

    def __init__(self) -> None:
        self._handles: Dict[Hashable, LedgerNode] = {}

    def contains(self, key: Hashable) -> bool:
        return key in self._handles

    def resolve(self, key: Hashable) -> Optional[LedgerNode]:
        """Return the handle for ``key`` or ``None`` when absent."""
        return self._handles.get(key)

    def insert(self, key: Hashable, handle: LedgerNode) -> None:
        if key in self._handles:
            raise DuplicateKeyError(key)
        self._handles[key] = handle

    def remove(self, key: Hashable) -> LedgerNode:
        """Drop ``key`` and return its handle. Raises ``KeyError`` if absent."""
        return self._handles.pop(key)

    def keys(self) -> Iterator[Hashable]:
        return iter(self._handles)

    def clear(self) -> None:
        self._handles.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._handles

    def __len__(self) -> int:
        return len(self._handles)
