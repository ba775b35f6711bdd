"""
Domain-specific error types for provider contract violations.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base domain error."""

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


class AuthenticationError(DomainError):
    """Patient data missing, or the provider refused to issue a token."""

    def __init__(
        self,
        message: str = "The patient data is not set.",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, "AUTHENTICATION_ERROR", details)


class InvalidSlotError(DomainError):
    """Slot id unknown to the provider."""

    def __init__(self, slot_id: str, details: Optional[Dict[str, Any]] = None) -> None:
        message = f"The slot id '{slot_id}' is not valid"
        super().__init__(message, "INVALID_SLOT", {"slot_id": slot_id, **(details or {})})


class InvalidAppointmentError(DomainError):
    """Appointment id unknown to the provider."""

    def __init__(
        self, appointment_id: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        message = f"The appointment id '{appointment_id}' is not valid"
        super().__init__(
            message,
            "INVALID_APPOINTMENT",
            {"appointment_id": appointment_id, **(details or {})},
        )


class InvalidDoctorError(DomainError):
    """Doctor id unknown for the given specialty."""

    def __init__(self, doctor_id: str, specialty: Optional[str] = None) -> None:
        message = f"The doctor id '{doctor_id}' is not valid"
        super().__init__(
            message, "INVALID_DOCTOR", {"doctor_id": doctor_id, "specialty": specialty}
        )


class UpstreamError(DomainError):
    """Non-success response from the provider API."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(
            message, "UPSTREAM_ERROR", {"status_code": status_code, "body": body}
        )
