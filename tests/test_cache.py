"""
Unit tests for the pass-through cache.
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from resilient_cache import Cache, CacheTtl, ServiceUnavailableError


class TestCache:
    """Test cases for Cache."""

    @pytest.fixture
    def cache(self, store, clock):
        return Cache(store, "programmes", clock=clock)

    def test_miss_for_unknown_key(self, cache):
        item = cache.get_item("pid")

        assert item.is_hit is False
        assert item.key == "programmes.pid"

    def test_set_then_get(self, cache):
        cache.set_item(cache.get_item("pid"), {"title": "Doctor Who"}, CacheTtl.NORMAL)

        assert cache.get_item("pid").value == {"title": "Doctor Who"}

    def test_entry_expires_with_its_ttl(self, cache, clock):
        cache.set_item(cache.get_item("pid"), "Doctor Who", CacheTtl.NORMAL)

        clock.advance(300)

        assert cache.get_item("pid").is_hit is False

    def test_absolute_expiry(self, cache, clock):
        expire_at = datetime.fromtimestamp(clock.now + 60, tz=timezone.utc)
        cache.set_item(cache.get_item("pid"), "Doctor Who", expire_at)

        clock.advance(59)
        assert cache.get_item("pid").is_hit is True

        clock.advance(1)
        assert cache.get_item("pid").is_hit is False

    def test_no_cache_bucket_is_not_stored(self, cache, store):
        cache.set_item(cache.get_item("pid"), "Doctor Who", CacheTtl.NONE)

        assert cache.get_item("pid").is_hit is False
        assert len(store) == 0

    def test_delete_item(self, cache):
        cache.set_item(cache.get_item("pid"), "Doctor Who", CacheTtl.NORMAL)

        assert cache.delete_item("pid") is True
        assert cache.get_item("pid").is_hit is False

    def test_flush_mode(self, cache):
        cache.set_item(cache.get_item("pid"), "Doctor Who", CacheTtl.NORMAL)

        cache.set_flush_cache_items(True)
        assert cache.get_item("pid").is_hit is False

    def test_reserved_characters_are_replaced(self, cache):
        assert cache.get_item("{pid}:(b006)/@\\x").key == "programmes._pid___b006____x"

    def test_key_helper(self, cache):
        key = cache.key_helper("ProgrammesService", "find_by_pid", "b006q2x0", 2, None, True)

        assert key == "ProgrammesService.find_by_pid.b006q2x0.2.null.true"

    def test_get_or_set_caches_result(self, cache):
        producer = MagicMock(return_value="Doctor Who")

        assert cache.get_or_set("pid", CacheTtl.NORMAL, producer) == "Doctor Who"
        assert cache.get_or_set("pid", CacheTtl.NORMAL, producer) == "Doctor Who"
        producer.assert_called_once_with()

    def test_get_or_set_propagates_producer_failures(self, cache, clock):
        cache.get_or_set("pid", CacheTtl.NORMAL, lambda: "Doctor Who")
        clock.advance(300)

        with pytest.raises(ServiceUnavailableError):
            cache.get_or_set("pid", CacheTtl.NORMAL, MagicMock(side_effect=ServiceUnavailableError()))

    def test_get_or_set_skips_empty_results(self, cache, store):
        assert cache.get_or_set("pid", CacheTtl.NORMAL, lambda: "") == ""
        assert len(store) == 0

    def test_get_or_set_stores_empty_results_with_null_ttl(self, cache):
        cache.get_or_set("pid", CacheTtl.NORMAL, lambda: 0, null_ttl=CacheTtl.SHORT)

        item = cache.get_item("pid")
        assert item.is_hit is True
        assert item.value == 0
