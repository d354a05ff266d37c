"""Unit tests for stored entries."""
import pytest

from resilient_cache import CacheSerializationError, StoredEntry


def test_is_expired_is_strict():
    entry = StoredEntry("Doctor Who", expires_at=1000.0)

    assert entry.is_expired(999.0) is False
    assert entry.is_expired(1000.0) is False
    assert entry.is_expired(1000.5) is True


def test_entry_without_expiry_never_expires():
    assert StoredEntry("Doctor Who").is_expired(10 ** 12) is False


def test_payload_round_trip():
    entry = StoredEntry({"title": "Doctor Who"}, 1000.0)

    assert StoredEntry.from_payload(entry.to_payload()) == entry


@pytest.mark.parametrize("payload", [
    "Doctor Who",
    None,
    {"value": "Doctor Who"},
    {"expires_at": 1000},
    {"value": "Doctor Who", "expires_at": "tomorrow"},
    {"value": "Doctor Who", "expires_at": True},
])
def test_malformed_payloads(payload):
    with pytest.raises(CacheSerializationError):
        StoredEntry.from_payload(payload)
