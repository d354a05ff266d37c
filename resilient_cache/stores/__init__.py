"""
Backing stores.

The cache layers only need ``get``/``set``/``delete`` with TTL support;
``RedisStore`` is the production store and ``MemoryStore`` serves local
development and tests.
"""

from .base import BackingStore, StoreTtl
from .memory import MemoryStore
from .redis_store import RedisStore

__all__ = ["BackingStore", "StoreTtl", "MemoryStore", "RedisStore"]
