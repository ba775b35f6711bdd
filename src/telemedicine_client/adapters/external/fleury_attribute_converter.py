"""
Conversion of Fleury payload attributes into domain values.
"""

from datetime import datetime
from typing import Dict

from ...core.utils.datetime_utils import parse_provider_datetime
from ...domain.enums.appointment_status import AppointmentStatus
from ...domain.errors import UpstreamError

DEFAULT_TIMEZONE = "America/Sao_Paulo"

_STATUS_MAP: Dict[str, AppointmentStatus] = {
    "AGENDADO": AppointmentStatus.SCHEDULED,
    "CONFIRMADO": AppointmentStatus.SCHEDULED,
    "SCHEDULED": AppointmentStatus.SCHEDULED,
    "BOOKED": AppointmentStatus.SCHEDULED,
    "CANCELADO": AppointmentStatus.CANCELLED,
    "CANCELLED": AppointmentStatus.CANCELLED,
    "CANCELED": AppointmentStatus.CANCELLED,
    "REALIZADO": AppointmentStatus.COMPLETED,
    "FINALIZADO": AppointmentStatus.COMPLETED,
    "COMPLETED": AppointmentStatus.COMPLETED,
    "DONE": AppointmentStatus.COMPLETED,
}


def convert_provider_date(value: str, timezone: str = DEFAULT_TIMEZONE) -> datetime:
    """Fleury date string to an aware datetime."""
    try:
        return parse_provider_datetime(value, timezone)
    except (TypeError, ValueError) as e:
        raise UpstreamError(f"Unparseable date from Fleury: {value!r}", body=value) from e


def convert_provider_appointment_status(value: str) -> AppointmentStatus:
    """Fleury raw appointment status to AppointmentStatus."""
    status = _STATUS_MAP.get(str(value or "").strip().upper())
    if status is None:
        raise UpstreamError(f"Unknown appointment status from Fleury: {value!r}", body=value)
    return status
