"""
Stale-if-error cache.

Every entry carries two expiries. The logical one is stored inside the
payload and decides whether a value is fresh. The physical one is the
backing store's own TTL and is set to a fixed resilience window, so a
logically expired value stays retrievable as a fallback when recomputing it
fails with a whitelisted failure kind.
"""

import time
from typing import Any, Callable, Iterable, Mapping, Optional

from .cache import Cache, CacheItem
from .entry import StoredEntry
from .errors import CacheConfigurationError, CacheSerializationError, failure_kind
from .logging import get_logger
from .metrics import CacheMetrics
from .stores.base import BackingStore
from .ttl import Ttl


class ResilientCache(Cache):
    """Cache that serves stale values when a producer fails transiently.

    Compatible with ``Cache``; ``get_item`` additionally accepts
    ``return_stale`` to ignore the logical expiry.
    """

    def __init__(
        self,
        store: BackingStore,
        prefix: str,
        resilience_ttl: int,
        cache_times: Optional[Mapping[str, int]] = None,
        whitelisted_failures: Iterable[str] = (),
        *,
        logger: Any = None,
        metrics: Optional[CacheMetrics] = None,
        clock: Callable[[], float] = time.time,
    ):
        """
        Args:
            store: Backing store holding the entries.
            prefix: Key namespace; ``.resilient`` is appended to it.
            resilience_ttl: Seconds entries persist in the store. This is
                also how long stale content can be served.
            cache_times: Overrides for the TTL bucket table.
            whitelisted_failures: Failure kinds that allow serving stale content.
            logger: structlog-style logger receiving stale-serve records.
            metrics: Optional prometheus counters.
            clock: Source of the current unix time.
        """
        if isinstance(resilience_ttl, bool) or not isinstance(resilience_ttl, int) or resilience_ttl <= 0:
            raise CacheConfigurationError(
                "Resilience TTL must be a positive number of seconds",
                {"resilience_ttl": resilience_ttl}
            )

        super().__init__(store, f"{prefix}.resilient", cache_times, metrics=metrics, clock=clock)
        self.logger = logger or get_logger("resilient_cache.resilient")
        self.resilience_ttl = resilience_ttl
        self.whitelisted_failures = frozenset(whitelisted_failures)
        self._stale_content_served = 0

        if resilience_ttl < self.ttl.longest:
            self.logger.warning(
                "Resilience TTL is shorter than the longest TTL bucket",
                resilience_ttl=resilience_ttl,
                longest_bucket=self.ttl.longest
            )

    @property
    def stale_content_served_count(self) -> int:
        """Number of stale values served by this cache."""
        return self._stale_content_served

    def get_item(self, key: str, return_stale: bool = False) -> CacheItem:
        """Look a key up, treating logically expired entries as misses unless ``return_stale``."""
        key = self.standardise_key(key)
        if self.flush_cache_items:
            self.store.delete(key)

        payload, found = self.store.get(key)
        if not found:
            return CacheItem(key)

        try:
            entry = StoredEntry.from_payload(payload)
        except CacheSerializationError as e:
            self.logger.warning("Ignoring unreadable cache entry", key=key, error=e.message)
            return CacheItem(key)

        if not return_stale and entry.is_expired(self.clock()):
            return CacheItem(key)

        return CacheItem(key, entry.value, is_hit=True, expires_at=entry.expires_at)

    def set_item(self, item: CacheItem, value: Any, ttl: Ttl) -> bool:
        """Store ``value`` with a logical expiry from ``ttl``.

        Short-lived, non-cacheable and indefinite TTLs are stored for exactly
        their own lifetime. Every other TTL is kept in the backing store for
        the resilience window.
        """
        now = self.clock()
        expires_at = self.ttl.expires_at(ttl, now)

        if self.ttl.is_short_lived(ttl):
            store_ttl = self.ttl.seconds(ttl)
        else:
            store_ttl = self.resilience_ttl

        entry = StoredEntry(value, expires_at)
        return self._save(item.key, entry.to_payload(), store_ttl)

    def is_whitelisted_failure(self, error: BaseException) -> bool:
        return failure_kind(error) in self.whitelisted_failures

    def _fallback(self, key: str, error: Exception) -> Optional[CacheItem]:
        if not self.is_whitelisted_failure(error):
            return None

        stale = self.get_item(key, return_stale=True)
        if not stale.is_hit:
            return None

        self._stale_content_served += 1
        kind = failure_kind(error)
        self.logger.error(
            "Stale content served",
            stale_count=self._stale_content_served,
            key=stale.key,
            failure_kind=kind,
            error=str(error)
        )
        if self.metrics:
            self.metrics.record_stale_served(self.prefix, kind)
        return stale
