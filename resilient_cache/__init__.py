"""
Stale-if-error caching in front of a key/value store.

- cache: pass-through cache with named TTL buckets
- resilient: cache serving stale values when recomputation fails transiently
- stores: backing store contract, redis and in-memory stores
- ttl: TTL buckets and resolution
- decorators: ``@cached`` function decorator
- config: settings via pydantic-settings
- logging: structured logging via structlog
- metrics: Prometheus counters
- errors: error types and failure kinds
"""

from .cache import Cache, CacheItem
from .config import CacheSettings, get_settings
from .decorators import cached
from .entry import StoredEntry
from .errors import (
    CacheConfigurationError,
    CacheLayerException,
    CacheSerializationError,
    ExternalServiceError,
    InvalidTtlError,
    ProducerError,
    ServiceUnavailableError,
    UpstreamTimeoutError,
    failure_kind,
)
from .factory import build_cache
from .metrics import CacheMetrics
from .resilient import ResilientCache
from .stores import BackingStore, MemoryStore, RedisStore
from .ttl import DEFAULT_CACHE_TIMES, CacheTtl, TtlResolver

__all__ = [
    "BackingStore",
    "Cache",
    "CacheConfigurationError",
    "CacheItem",
    "CacheLayerException",
    "CacheMetrics",
    "CacheSerializationError",
    "CacheSettings",
    "CacheTtl",
    "DEFAULT_CACHE_TIMES",
    "ExternalServiceError",
    "InvalidTtlError",
    "MemoryStore",
    "ProducerError",
    "RedisStore",
    "ResilientCache",
    "ServiceUnavailableError",
    "StoredEntry",
    "TtlResolver",
    "UpstreamTimeoutError",
    "build_cache",
    "cached",
    "failure_kind",
    "get_settings",
]
