"""Unit tests for error types and failure kinds."""
import pytest

from resilient_cache import (
    CacheLayerException,
    ExternalServiceError,
    InvalidTtlError,
    ProducerError,
    ServiceUnavailableError,
    UpstreamTimeoutError,
    failure_kind,
)


@pytest.mark.parametrize("error,kind", [
    (ServiceUnavailableError(), "SERVICE_UNAVAILABLE"),
    (UpstreamTimeoutError(), "UPSTREAM_TIMEOUT"),
    (ExternalServiceError("ispy"), "EXTERNAL_SERVICE_ERROR"),
    (ProducerError("SCHEDULE_NOT_READY", "schedule is not ready"), "SCHEDULE_NOT_READY"),
    (InvalidTtlError(), "INVALID_TTL"),
    (TimeoutError(), "TimeoutError"),
    (ConnectionRefusedError(), "ConnectionRefusedError"),
])
def test_failure_kind(error, kind):
    assert failure_kind(error) == kind


def test_producer_error_kind_is_its_code():
    error = ProducerError("SCHEDULE_NOT_READY", "schedule is not ready", {"sid": "bbc_one"})

    assert error.kind == "SCHEDULE_NOT_READY"
    assert str(error) == "schedule is not ready"
    assert error.to_dict() == {
        "code": "SCHEDULE_NOT_READY",
        "message": "schedule is not ready",
        "details": {"sid": "bbc_one"},
    }


def test_external_service_error_names_the_service():
    error = ExternalServiceError("ispy", "bad gateway")

    assert error.message == "ispy: bad gateway"
    assert isinstance(error, CacheLayerException)
