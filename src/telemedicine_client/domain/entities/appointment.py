"""Appointment entity returned by a successful scheduling call."""

from dataclasses import dataclass
from datetime import datetime

from ..enums.appointment_status import AppointmentStatus


@dataclass(frozen=True)
class Appointment:
    """Immutable appointment snapshot."""

    id: str
    date_time: datetime
    status: AppointmentStatus

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Appointment id cannot be empty")
        if not isinstance(self.status, AppointmentStatus):
            object.__setattr__(self, "status", AppointmentStatus(self.status))
