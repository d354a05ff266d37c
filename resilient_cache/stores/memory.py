"""In-process backing store with per-key expiry."""
import threading
import time
from typing import Any, Callable, Dict, Optional, Tuple

from .base import BackingStore, StoreTtl, expiry_timestamp


class MemoryStore(BackingStore):
    """
    Thread-safe in-memory store.

    Entries are kept as ``(value, expires_at)`` and dropped lazily once
    ``expires_at`` has been reached.

    Example:
        >>> store = MemoryStore()
        >>> store.set("programmes.pid", {"title": "Doctor Who"}, 300)
        True
        >>> store.get("programmes.pid")
        ({'title': 'Doctor Who'}, True)
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self.clock = clock
        self._data: Dict[str, Tuple[Any, Optional[float]]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Tuple[Any, bool]:
        with self._lock:
            if key not in self._data:
                return None, False

            value, expires_at = self._data[key]
            if expires_at is not None and self.clock() >= expires_at:
                del self._data[key]
                return None, False

            return value, True

    def set(self, key: str, value: Any, ttl: StoreTtl = None) -> bool:
        now = self.clock()
        expires_at = expiry_timestamp(ttl, now)
        with self._lock:
            self._prune_expired(now)
            if expires_at is not None and expires_at <= now:
                self._data.pop(key, None)
                return True
            self._data[key] = (value, expires_at)
            return True

    def delete(self, key: str) -> bool:
        with self._lock:
            self._data.pop(key, None)
            return True

    def clear(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._data.clear()

    def __len__(self) -> int:
        with self._lock:
            self._prune_expired(self.clock())
            return len(self._data)

    def _prune_expired(self, now: float) -> int:
        """Drop every expired entry. Caller holds the lock."""
        expired_keys = [
            key for key, (_, expires_at) in self._data.items()
            if expires_at is not None and now >= expires_at
        ]
        for key in expired_keys:
            del self._data[key]
        return len(expired_keys)
