"""Doctor collection."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from .base import EntityCollection

if TYPE_CHECKING:
    from ..entities.doctor import Doctor


class DoctorCollection(EntityCollection["Doctor"]):
    """Ordered doctors.

    Iteration keeps insertion order; equality does not. Uniqueness by id is
    kept by the code that fills the collection, not by ``add``.
    """

    def ids(self) -> List[str]:
        return [doctor.id for doctor in self._items]

    def find(self, doctor_id: str) -> Optional[Doctor]:
        """Doctor with ``doctor_id``, or None."""
        for doctor in self._items:
            if doctor.id == doctor_id:
                return doctor
        return None

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DoctorCollection):
            return NotImplemented
        return len(self) == len(other) and sorted(self.ids()) == sorted(other.ids())
