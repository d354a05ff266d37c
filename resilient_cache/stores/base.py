"""
Backing store contract.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Optional, Tuple, Union

StoreTtl = Union[int, datetime, None]


class BackingStore(ABC):
    """Key/value store with its own TTL support.

    ``ttl`` is ``None`` for no expiry, a number of seconds, or a ``datetime``
    to expire at. A TTL of zero or less, or a past ``datetime``, leaves the
    key absent.
    """

    @abstractmethod
    def get(self, key: str) -> Tuple[Any, bool]:
        """Return ``(value, True)`` when present, ``(None, False)`` otherwise."""

    @abstractmethod
    def set(self, key: str, value: Any, ttl: StoreTtl = None) -> bool:
        """Store a value. Returns False when the write failed."""

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Delete a key. Deleting an absent key succeeds."""


def expiry_timestamp(ttl: StoreTtl, now: float) -> Optional[float]:
    """Absolute expiry of a store TTL, ``None`` for no expiry."""
    if ttl is None:
        return None
    if isinstance(ttl, datetime):
        return ttl.timestamp()
    return now + ttl
