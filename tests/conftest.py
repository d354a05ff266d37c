"""
Shared fixtures for the resilient cache tests.
"""

from unittest.mock import MagicMock

import pytest

from resilient_cache import MemoryStore, ResilientCache


class FakeClock:
    """Controllable replacement for ``time.time``."""

    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


RESILIENCE_TTL = 172800
WHITELISTED_FAILURES = ["SERVICE_UNAVAILABLE", "UPSTREAM_TIMEOUT", "TimeoutError", "ConnectionError"]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return MemoryStore(clock=clock)


@pytest.fixture
def logger():
    return MagicMock()


@pytest.fixture
def resilient_cache(store, logger, clock):
    return ResilientCache(
        store,
        "programmes",
        RESILIENCE_TTL,
        whitelisted_failures=WHITELISTED_FAILURES,
        logger=logger,
        clock=clock,
    )
