"""
Build a resilient cache from settings.
"""

from typing import Any, Optional

from .config import CacheSettings, get_settings
from .logging import get_logger
from .metrics import CacheMetrics
from .resilient import ResilientCache
from .stores.base import BackingStore
from .stores.redis_store import RedisStore


def build_cache(
    settings: Optional[CacheSettings] = None,
    store: Optional[BackingStore] = None,
    *,
    logger: Any = None,
    metrics: Optional[CacheMetrics] = None,
) -> ResilientCache:
    """Create a ``ResilientCache``; a ``RedisStore`` is used when no store is given."""
    settings = settings or get_settings()
    if store is None:
        store = RedisStore.from_url(settings.redis_url, socket_timeout=settings.redis_socket_timeout)

    cache = ResilientCache(
        store,
        settings.prefix,
        settings.resilience_ttl,
        cache_times=settings.cache_times,
        whitelisted_failures=settings.whitelisted_failures,
        logger=logger,
        metrics=metrics,
    )
    cache.set_flush_cache_items(settings.flush_cache_items)

    get_logger("resilient_cache.factory").info(
        "Resilient cache created",
        env=settings.env,
        prefix=cache.prefix,
        resilience_ttl=settings.resilience_ttl,
        whitelisted_failures=sorted(cache.whitelisted_failures),
        flush_cache_items=settings.flush_cache_items
    )
    return cache
