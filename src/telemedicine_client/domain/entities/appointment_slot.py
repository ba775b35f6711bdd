"""Appointment slot entity: a bookable moment offered by a doctor."""

from dataclasses import dataclass
from datetime import datetime

from ...core.utils.datetime_utils import is_aware


@dataclass(frozen=True)
class AppointmentSlot:
    """Immutable bookable slot."""

    id: str
    date_time: datetime

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Slot id cannot be empty")
        if not isinstance(self.date_time, datetime) or not is_aware(self.date_time):
            raise ValueError("Slot date-time must be a timezone-aware datetime")

    def is_after(self, moment: datetime) -> bool:
        return self.date_time > moment
