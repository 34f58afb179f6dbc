from __future__ import annotations

from typing import Any, Dict, Hashable, Optional, Protocol, runtime_checkable


@runtime_checkable
class SyncCache(Protocol):
    """Interface shared by the in-process caches."""

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the cached value or ``default``."""

    def put(self, key: Hashable, value: Any) -> None:
        """Store a value."""

    def size(self) -> int:
        """Return the number of live entries."""


class CacheProvider(Protocol):
    """Interface for asynchronous caching backends."""

    async def get(self, key: Hashable) -> Optional[Any]:
        """Retrieve value from cache."""

    async def set(self, key: Hashable, value: Any) -> None:
        """Store value in cache."""

    async def delete(self, key: Hashable) -> None:
        """Remove value from cache."""

    async def clear(self) -> int:
        """Clear cache. Returns number of entries cleared."""

    async def stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
