"""
TTL buckets and TTL resolution.

A TTL is a named bucket (``CacheTtl``), a number of seconds or an absolute
``datetime`` to expire at.
"""

from datetime import datetime, timedelta
from enum import Enum
from typing import Dict, Mapping, Optional, Union

from .errors import CacheConfigurationError, InvalidTtlError


class CacheTtl(str, Enum):
    """Named TTL buckets."""
    NONE = "none"              # do not cache
    SHORT = "short"
    NORMAL = "normal"
    MEDIUM = "medium"
    LONG = "long"
    X_LONG = "xlong"
    INDEFINITE = "indefinite"  # no expiry


Ttl = Union[int, str, CacheTtl, datetime, timedelta]

DEFAULT_CACHE_TIMES: Dict[CacheTtl, int] = {
    CacheTtl.NONE: -1,
    CacheTtl.SHORT: 60,
    CacheTtl.NORMAL: 300,
    CacheTtl.MEDIUM: 1200,
    CacheTtl.LONG: 7200,
    CacheTtl.X_LONG: 86400,
}

SHORT_LIVED_BUCKETS = frozenset({CacheTtl.NONE, CacheTtl.SHORT, CacheTtl.INDEFINITE})


def _bucket(ttl: str) -> CacheTtl:
    try:
        return CacheTtl(ttl)
    except ValueError:
        raise InvalidTtlError(f"Unknown cache TTL bucket '{ttl}'", {"ttl": ttl})


class TtlResolver:
    """Resolve TTL specifications against a bucket-to-seconds table."""

    def __init__(self, cache_times: Optional[Mapping[str, int]] = None):
        self.cache_times: Dict[CacheTtl, int] = dict(DEFAULT_CACHE_TIMES)

        for name, seconds in (cache_times or {}).items():
            try:
                bucket = CacheTtl(name)
            except ValueError:
                raise CacheConfigurationError(
                    f"Unknown cache TTL bucket '{name}'", {"bucket": name}
                )
            if bucket == CacheTtl.INDEFINITE:
                raise CacheConfigurationError("The indefinite bucket cannot be overridden")
            if isinstance(seconds, bool) or not isinstance(seconds, int):
                raise CacheConfigurationError(
                    f"Cache time for '{name}' must be an integer", {"bucket": name, "value": seconds}
                )
            self.cache_times[bucket] = seconds

    @property
    def longest(self) -> int:
        """Longest finite bucket, in seconds."""
        return max(self.cache_times.values())

    def seconds(self, ttl: Ttl) -> Optional[int]:
        """Resolve a relative TTL to seconds. ``None`` means no expiry."""
        if isinstance(ttl, bool):
            raise InvalidTtlError("Boolean is not a valid cache TTL", {"ttl": ttl})
        if isinstance(ttl, int):
            return ttl
        if isinstance(ttl, timedelta):
            return int(ttl.total_seconds())
        if isinstance(ttl, str):
            bucket = _bucket(ttl)
            if bucket == CacheTtl.INDEFINITE:
                return None
            return self.cache_times[bucket]
        raise InvalidTtlError(f"Invalid cache TTL value {ttl!r}", {"ttl": repr(ttl)})

    def expires_at(self, ttl: Ttl, now: float) -> Optional[float]:
        """Absolute unix timestamp at which ``ttl`` runs out."""
        if isinstance(ttl, datetime):
            return ttl.timestamp()
        seconds = self.seconds(ttl)
        if seconds is None:
            return None
        return now + seconds

    def physical(self, ttl: Ttl) -> Union[int, datetime, None]:
        """TTL in the form backing stores accept."""
        if isinstance(ttl, datetime):
            return ttl
        return self.seconds(ttl)

    @staticmethod
    def is_short_lived(ttl: Ttl) -> bool:
        """True for TTLs that never get a stale window."""
        if isinstance(ttl, bool):
            return False
        if isinstance(ttl, int):
            return ttl <= 0
        if isinstance(ttl, timedelta):
            return ttl.total_seconds() <= 0
        if isinstance(ttl, str):
            return _bucket(ttl) in SHORT_LIVED_BUCKETS
        return False

    @staticmethod
    def is_no_cache(ttl: Ttl) -> bool:
        return isinstance(ttl, str) and ttl == CacheTtl.NONE
