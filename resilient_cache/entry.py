"""
Stored entry written by the resilient cache.

The logical expiry travels inside the payload; the backing store's own TTL
holds the physical retention window.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .errors import CacheSerializationError


@dataclass
class StoredEntry:
    """A cached value together with its logical expiry."""
    value: Any
    expires_at: Optional[float] = None

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and now > self.expires_at

    def to_payload(self) -> Dict[str, Any]:
        return {"value": self.value, "expires_at": self.expires_at}

    @classmethod
    def from_payload(cls, payload: Any) -> "StoredEntry":
        if not isinstance(payload, Mapping) or "value" not in payload or "expires_at" not in payload:
            raise CacheSerializationError("Payload is not a stored entry", {"type": type(payload).__name__})

        expires_at = payload["expires_at"]
        if expires_at is not None and (isinstance(expires_at, bool) or not isinstance(expires_at, (int, float))):
            raise CacheSerializationError("Invalid expiry in stored entry", {"expires_at": repr(expires_at)})

        return cls(value=payload["value"], expires_at=expires_at)
