"""Doctor domain entity representing a professional offered by a provider."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Optional

from ..value_objects.full_name import FullName

if TYPE_CHECKING:
    # Avoid circular import at runtime while keeping type hints
    from ..collections.appointment_slot_collection import AppointmentSlotCollection


@dataclass(frozen=True, eq=False)
class Doctor:
    """Doctor domain entity.

    Two instances with the same id represent the same professional, so
    equality and hashing only look at ``id``. Slots are never mutated in
    place; ``with_slots`` builds a new Doctor instead.
    """

    id: str
    name: FullName
    registration_number: str
    photo: Optional[str] = None
    slots: Optional[AppointmentSlotCollection] = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Doctor id cannot be empty")
        if isinstance(self.name, str):
            object.__setattr__(self, "name", FullName(self.name))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Doctor):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def with_slots(self, slots: Optional[AppointmentSlotCollection]) -> Doctor:
        """Copy of this doctor carrying ``slots``."""
        return replace(self, slots=slots)
