"""
Prometheus metrics for the resilient cache.
"""

import threading
from typing import Any, Dict, Optional

from prometheus_client import CollectorRegistry, Counter


class CacheMetrics:
    """Counters shared by every cache built with the same collector."""

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self.registry = registry
        self._metrics: Dict[str, Any] = {}
        self._lock = threading.Lock()
        self._setup_metrics()

    def _setup_metrics(self):
        """Set up cache metrics."""

        self._metrics["lookups_total"] = Counter(
            "resilient_cache_lookups_total",
            "Total cache lookups made by get_or_set",
            ["cache", "result"],
            registry=self.registry
        )

        self._metrics["writes_total"] = Counter(
            "resilient_cache_writes_total",
            "Total writes to the backing store",
            ["cache", "status"],
            registry=self.registry
        )

        self._metrics["stale_served_total"] = Counter(
            "resilient_cache_stale_served_total",
            "Total stale values served instead of a fresh computation",
            ["cache", "failure_kind"],
            registry=self.registry
        )

    def record_lookup(self, cache: str, hit: bool):
        """Record a cache hit or miss."""
        with self._lock:
            self._metrics["lookups_total"].labels(
                cache=cache,
                result="hit" if hit else "miss"
            ).inc()

    def record_write(self, cache: str, success: bool):
        """Record a write to the backing store."""
        with self._lock:
            self._metrics["writes_total"].labels(
                cache=cache,
                status="success" if success else "failure"
            ).inc()

    def record_stale_served(self, cache: str, failure_kind: str):
        """Record a stale value served after a producer failure."""
        with self._lock:
            self._metrics["stale_served_total"].labels(
                cache=cache,
                failure_kind=failure_kind
            ).inc()
