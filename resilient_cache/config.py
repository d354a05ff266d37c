"""
Configuration management for the resilient cache.
"""

from typing import Dict, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .ttl import CacheTtl


class CacheSettings(BaseSettings):
    """Cache settings, read from ``RESILIENT_CACHE_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RESILIENT_CACHE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")

    # Backing store
    redis_url: str = Field(default="redis://localhost:6379/0")
    redis_socket_timeout: float = Field(default=5.0, gt=0)

    # Cache behaviour
    prefix: str = Field(default="app")
    resilience_ttl: int = Field(default=86400, gt=0)
    cache_times: Dict[str, int] = Field(default_factory=dict)
    whitelisted_failures: List[str] = Field(default_factory=list)
    flush_cache_items: bool = Field(default=False)

    @field_validator("cache_times")
    @classmethod
    def _known_buckets(cls, value: Dict[str, int]) -> Dict[str, int]:
        known = {bucket.value for bucket in CacheTtl if bucket != CacheTtl.INDEFINITE}
        unknown = sorted(set(value) - known)
        if unknown:
            raise ValueError(f"Unknown cache TTL buckets: {', '.join(unknown)}")
        return value


def get_settings(**overrides) -> CacheSettings:
    """Get cache settings from the environment."""
    return CacheSettings(**overrides)
