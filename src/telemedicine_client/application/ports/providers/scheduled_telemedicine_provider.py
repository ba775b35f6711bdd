"""
Provider contract every scheduled telemedicine integration implements.

The contract is split into capabilities, the way providers differ in
practice: every provider lists doctors and slots, while authenticating and
booking with patient data are separate capabilities. ``TelemedicineProvider``
combines the three and is what callers should depend on.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from ....domain.collections import AppointmentSlotCollection, DoctorCollection
from ....domain.entities import Appointment
from ....domain.value_objects import PatientData


class AuthenticatesUsingPatientData(ABC):
    """Provider whose session token is issued for a specific patient."""

    @abstractmethod
    def set_patient_data_for_authentication(
        self, patient_data: PatientData
    ) -> "AuthenticatesUsingPatientData":
        """Record the patient used by the next authentication. No network call."""
        pass

    @abstractmethod
    def authenticate(self) -> str:
        """
        Establish an authenticated session.

        Returns:
            The session token

        Raises:
            AuthenticationError: if no patient data was set
        """
        pass


class ScheduledTelemedicineProvider(ABC):
    """Doctor, slot and appointment-link queries."""

    @abstractmethod
    def get_doctors(
        self, specialty: Optional[str] = None, name: Optional[str] = None
    ) -> DoctorCollection:
        """List doctors, optionally filtered by specialty and name."""
        pass

    @abstractmethod
    def get_slots_for_doctor(
        self,
        doctor_id: str,
        specialty: Optional[str] = None,
        until: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> AppointmentSlotCollection:
        """
        List available slots for one doctor.

        Args:
            doctor_id: Provider doctor id
            specialty: Restrict to slots offered under this specialty
            until: Inclusive upper bound; slots strictly after it are excluded
            limit: Maximum number of slots returned

        Returns:
            AppointmentSlotCollection, empty when the doctor has no slots
        """
        pass

    @abstractmethod
    def get_doctors_with_slots(
        self,
        specialty: Optional[str] = None,
        doctor_id: Optional[str] = None,
        until: Optional[datetime] = None,
        slot_limit: Optional[int] = None,
    ) -> DoctorCollection:
        """
        List bookable doctors, each carrying its filtered slots.

        Doctors left without slots after filtering are never returned.
        """
        pass

    @abstractmethod
    def get_appointment_link(self, appointment_id: str) -> str:
        """
        Patient-facing link for an appointment.

        Raises:
            InvalidAppointmentError: if the appointment is unknown
        """
        pass

    @abstractmethod
    def cache_until(self, moment: datetime) -> "ScheduledTelemedicineProvider":
        """Cache list/search results until ``moment``."""
        pass

    @abstractmethod
    def without_cache(self) -> "ScheduledTelemedicineProvider":
        """Always hit the provider for list/search calls."""
        pass


class SchedulesUsingPatientData(ABC):
    """Provider that books slots for a patient described by PatientData."""

    @abstractmethod
    def schedule_using_patient_data(
        self, specialty: str, slot_id: str, patient_data: PatientData
    ) -> Appointment:
        """
        Book a slot.

        Raises:
            InvalidSlotError: if the slot id is unknown
        """
        pass


class TelemedicineProvider(
    ScheduledTelemedicineProvider,
    AuthenticatesUsingPatientData,
    SchedulesUsingPatientData,
):
    """Full provider contract implemented by the real and the fake adapters."""
