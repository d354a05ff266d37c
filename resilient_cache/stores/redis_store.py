"""
Redis backing store.
"""

import json
import math
import time
from datetime import datetime
from typing import Any, Tuple

import redis

from ..logging import get_logger
from .base import BackingStore, StoreTtl


class RedisStore(BackingStore):
    """Redis backing store with JSON encoded values."""

    def __init__(self, client: redis.Redis):
        self.redis = client
        self.logger = get_logger("resilient_cache.stores.redis")

    @classmethod
    def from_url(cls, redis_url: str, socket_timeout: float = 5.0) -> "RedisStore":
        """Create a store from a redis URL."""
        client = redis.Redis.from_url(
            redis_url,
            socket_connect_timeout=socket_timeout,
            socket_timeout=socket_timeout,
            retry_on_timeout=True,
            health_check_interval=30
        )
        return cls(client)

    def get(self, key: str) -> Tuple[Any, bool]:
        """Get value from redis."""
        try:
            cached_data = self.redis.get(key)
            if cached_data is None:
                return None, False

            if isinstance(cached_data, bytes):
                cached_data = cached_data.decode("utf-8")
            return json.loads(cached_data), True

        except redis.RedisError as e:
            self.logger.error("Cache get error", key=key, error=str(e))
            return None, False
        except ValueError as e:
            self.logger.warning("Undecodable cache value", key=key, error=str(e))
            return None, False

    def set(self, key: str, value: Any, ttl: StoreTtl = None) -> bool:
        """Set value in redis with the given TTL."""
        try:
            payload = json.dumps(value)
        except (TypeError, ValueError) as e:
            self.logger.error("Cache value is not JSON serializable", key=key, error=str(e))
            return False

        # tuples and non-string dict keys do not survive JSON
        if json.loads(payload) != value:
            self.logger.error("Cache value does not round-trip through JSON", key=key)
            return False

        try:
            if ttl is None:
                self.redis.set(key, payload)
            elif isinstance(ttl, datetime):
                expire_at = math.ceil(ttl.timestamp())
                if expire_at <= time.time():
                    self.redis.delete(key)
                else:
                    self.redis.set(key, payload, exat=expire_at)
            elif ttl <= 0:
                self.redis.delete(key)
            else:
                self.redis.set(key, payload, ex=ttl)

            self.logger.debug("Cached value", key=key, ttl=str(ttl))
            return True

        except redis.RedisError as e:
            self.logger.error("Cache set error", key=key, error=str(e))
            return False

    def delete(self, key: str) -> bool:
        """Delete a key from redis."""
        try:
            self.redis.delete(key)
            return True

        except redis.RedisError as e:
            self.logger.error("Cache delete error", key=key, error=str(e))
            return False
