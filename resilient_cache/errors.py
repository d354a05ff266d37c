"""
Error handling for the resilient cache.

Every exception raised by this package derives from ``CacheLayerException``
and carries a machine readable ``code``. Producers can raise ``ProducerError``
subclasses so that their failures carry an explicit kind tag which the
resilient cache matches against its whitelist.
"""

from typing import Any, Dict, Optional


class CacheLayerException(Exception):
    """Base exception for the cache layer."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dict suitable for structured logging."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class InvalidTtlError(CacheLayerException):
    """TTL value that cannot be resolved."""

    def __init__(self, message: str = "Invalid cache TTL value", details: Optional[Dict[str, Any]] = None):
        super().__init__("INVALID_TTL", message, details)


class CacheConfigurationError(CacheLayerException):
    """Invalid construction-time configuration."""

    def __init__(self, message: str = "Invalid cache configuration", details: Optional[Dict[str, Any]] = None):
        super().__init__("CACHE_CONFIGURATION_ERROR", message, details)


class CacheSerializationError(CacheLayerException):
    """Payload read from the backing store is not a stored entry."""

    def __init__(self, message: str = "Invalid cache payload", details: Optional[Dict[str, Any]] = None):
        super().__init__("CACHE_SERIALIZATION_ERROR", message, details)


class ProducerError(CacheLayerException):
    """Failure raised by a producer function, tagged with its kind."""

    def __init__(self, kind: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(kind, message, details)

    @property
    def kind(self) -> str:
        return self.code


class ServiceUnavailableError(ProducerError):
    """A dependency of the producer is down."""

    def __init__(self, message: str = "Service unavailable", details: Optional[Dict[str, Any]] = None):
        super().__init__("SERVICE_UNAVAILABLE", message, details)


class UpstreamTimeoutError(ProducerError):
    """A dependency of the producer did not answer in time."""

    def __init__(self, message: str = "Upstream timeout", details: Optional[Dict[str, Any]] = None):
        super().__init__("UPSTREAM_TIMEOUT", message, details)


class ExternalServiceError(ProducerError):
    """External service errors."""

    def __init__(self, service: str, message: str = "External service error", details: Optional[Dict[str, Any]] = None):
        super().__init__("EXTERNAL_SERVICE_ERROR", f"{service}: {message}", details)


def failure_kind(exc: BaseException) -> str:
    """Return the failure-kind identifier of an exception.

    Tagged exceptions report their ``code``; anything else reports its class
    name. Whitelists are matched against this identifier only.
    """
    if isinstance(exc, CacheLayerException):
        return exc.code
    return type(exc).__name__
