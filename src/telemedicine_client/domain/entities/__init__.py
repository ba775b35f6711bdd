"""
Domain entities package.
"""

from .appointment import Appointment
from .appointment_slot import AppointmentSlot
from .doctor import Doctor

__all__ = [
    "Appointment",
    "AppointmentSlot",
    "Doctor",
]
