"""
Ordered collections over domain entities.
"""

from .appointment_slot_collection import AppointmentSlotCollection
from .doctor_collection import DoctorCollection

__all__ = [
    "AppointmentSlotCollection",
    "DoctorCollection",
]
