"""
Telemedicine client: one scheduling contract over many telemedicine providers.

Providers list doctors and their available slots, book slots for a patient
and hand out appointment links. The Fleury adapter talks to the real API;
``telemedicine_client.testing.FakeScheduledTelemedicineProvider`` is an
in-memory double with the same contract.
"""

from .application.ports.providers import TelemedicineProvider
from .core.provider_factory import create_provider
from .domain.collections import AppointmentSlotCollection, DoctorCollection
from .domain.entities import Appointment, AppointmentSlot, Doctor
from .domain.enums import AppointmentStatus
from .domain.errors import (
    AuthenticationError,
    DomainError,
    InvalidAppointmentError,
    InvalidDoctorError,
    InvalidSlotError,
    UpstreamError,
)
from .domain.value_objects import FullName, PatientData

__version__ = "0.1.0"

__all__ = [
    "Appointment",
    "AppointmentSlot",
    "AppointmentSlotCollection",
    "AppointmentStatus",
    "AuthenticationError",
    "Doctor",
    "DoctorCollection",
    "DomainError",
    "FullName",
    "InvalidAppointmentError",
    "InvalidDoctorError",
    "InvalidSlotError",
    "PatientData",
    "TelemedicineProvider",
    "UpstreamError",
    "create_provider",
]
