class CacheError(Exception):
    """Base exception for cache related errors."""


class InvalidCapacityError(CacheError, ValueError):
    """Raised when a cache is constructed with a non-positive capacity."""


class DuplicateKeyError(CacheError, KeyError):
    """Raised when a key is inserted into an index that already holds it."""


class EmptyLedgerError(CacheError, LookupError):
    """Raised when the least recently used entry is removed from an empty ledger."""


class CacheInvariantError(CacheError, AssertionError):
    """Raised when the index and the recency ledger disagree."""
