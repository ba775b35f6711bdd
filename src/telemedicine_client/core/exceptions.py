"""
Exception handling for the telemedicine client infrastructure.

Domain failures (authentication, unknown slots or appointments, upstream
errors) live in ``telemedicine_client.domain.errors``; this module holds
the errors raised by configuration and supporting infrastructure.
"""

from typing import Any, Dict, Optional


class TelemedicineClientException(Exception):
    """Base exception class for the telemedicine client."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(TelemedicineClientException):
    """Raised when there's a configuration error."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, "CONFIG_ERROR", details)


class CacheError(TelemedicineClientException):
    """Raised when there's a cache operation error."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, "CACHE_ERROR", details)
