"""Appointment slot collection."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from ..entities.appointment_slot import AppointmentSlot
from .base import EntityCollection


class AppointmentSlotCollection(EntityCollection[AppointmentSlot]):
    """Ordered slots; ordering is whatever the producer supplied."""

    def until(self, moment: Optional[datetime]) -> AppointmentSlotCollection:
        """Slots at or before ``moment``; everything when ``moment`` is None."""
        if moment is None:
            return AppointmentSlotCollection(self._items)
        return self.filter(lambda slot: not slot.is_after(moment))

    def truncate(self, limit: Optional[int]) -> AppointmentSlotCollection:
        """First ``limit`` slots; a falsy limit keeps everything."""
        if not limit:
            return AppointmentSlotCollection(self._items)
        return AppointmentSlotCollection(self._items[:limit])

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, AppointmentSlotCollection):
            return NotImplemented
        return self._items == other._items
