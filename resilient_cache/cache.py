"""
Pass-through cache over a backing store.
"""

import time
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence

from .keys import key_helper, standardise_key
from .logging import get_logger
from .metrics import CacheMetrics
from .stores.base import BackingStore
from .ttl import CacheTtl, Ttl, TtlResolver


@dataclass
class CacheItem:
    """Result of a cache lookup; a miss has ``is_hit`` False."""
    key: str
    value: Any = None
    is_hit: bool = False
    expires_at: Optional[float] = None


class Cache:
    """Namespaced read-through cache with named TTL buckets."""

    def __init__(
        self,
        store: BackingStore,
        prefix: str,
        cache_times: Optional[Mapping[str, int]] = None,
        *,
        metrics: Optional[CacheMetrics] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.store = store
        self.prefix = prefix
        self.ttl = TtlResolver(cache_times)
        self.metrics = metrics
        self.clock = clock
        self.flush_cache_items = False
        self.logger = get_logger("resilient_cache.cache")

    def standardise_key(self, key: str) -> str:
        return standardise_key(self.prefix, key)

    def key_helper(self, class_name: str, function_name: str, *unique_values: Any) -> str:
        """Build a key from the caller's class, function and arguments."""
        return key_helper(class_name, function_name, *unique_values)

    def set_flush_cache_items(self, flush_cache_items: bool) -> None:
        """In flush mode every lookup deletes its key first."""
        self.flush_cache_items = flush_cache_items

    def get_item(self, key: str) -> CacheItem:
        """Look a key up in the backing store."""
        key = self.standardise_key(key)
        if self.flush_cache_items:
            self.store.delete(key)

        value, found = self.store.get(key)
        if not found:
            return CacheItem(key)
        return CacheItem(key, value, is_hit=True)

    def set_item(self, item: CacheItem, value: Any, ttl: Ttl) -> bool:
        """Store ``value`` under the item's key."""
        return self._save(item.key, value, self.ttl.physical(ttl))

    def delete_item(self, key: str) -> bool:
        return self.store.delete(self.standardise_key(key))

    def get_or_set(
        self,
        key: str,
        ttl: Ttl,
        producer: Callable[..., Any],
        args: Sequence[Any] = (),
        kwargs: Optional[Mapping[str, Any]] = None,
        null_ttl: Ttl = CacheTtl.NONE,
    ) -> Any:
        """
        Return the cached value for ``key``, computing it with ``producer`` on a miss.

        A result that evaluates to empty is not cached unless ``null_ttl`` is
        something other than ``CacheTtl.NONE``.
        """
        item = self.get_item(key)
        self._record_lookup(item.is_hit)
        if item.is_hit:
            return item.value

        try:
            result = producer(*args, **(kwargs or {}))
        except Exception as e:
            fallback = self._fallback(key, e)
            if fallback is None:
                raise
            return fallback.value

        if result:
            self.set_item(item, result, ttl)
        elif not self.ttl.is_no_cache(null_ttl):
            self.set_item(item, result, null_ttl)

        return result

    def _fallback(self, key: str, error: Exception) -> Optional[CacheItem]:
        """Hit to serve when the producer failed; None re-raises the failure."""
        return None

    def _save(self, key: str, value: Any, ttl) -> bool:
        saved = self.store.set(key, value, ttl)
        if not saved:
            self.logger.warning("Cache write failed", key=key)
        if self.metrics:
            self.metrics.record_write(self.prefix, saved)
        return saved

    def _record_lookup(self, hit: bool):
        if self.metrics:
            self.metrics.record_lookup(self.prefix, hit)
