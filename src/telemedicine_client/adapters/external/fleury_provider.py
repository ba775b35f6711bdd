"""
Fleury scheduled telemedicine provider.

Talks to the Fleury "cuidado digital" integration API. The session token is
issued per patient and obtained lazily: every authenticated call checks for
a token and authenticates first when there is none. Concurrent first calls
on one instance may each authenticate; the last token wins and every token
stays valid, so no lock is taken.
"""

import time
from datetime import datetime
from typing import Any, Dict, List, Optional
from zoneinfo import ZoneInfo

import requests

from ...application.cache.read_through_cache import ReadThroughCache
from ...application.ports.providers import TelemedicineProvider
from ...application.ports.services.error_handler import ProviderErrorHandler
from ...core.config import FleurySettings
from ...core.structured_logger import get_logger
from ...core.utils.datetime_utils import format_date, today_in
from ...domain.collections import AppointmentSlotCollection, DoctorCollection
from ...domain.entities import Appointment, AppointmentSlot, Doctor
from ...domain.errors import AuthenticationError, UpstreamError
from ...domain.value_objects import FullName, PatientData
from ..http.session_factory import build_session
from .fleury_attribute_converter import (
    convert_provider_appointment_status,
    convert_provider_date,
)
from .fleury_error_handler import FleuryErrorHandler

logger = get_logger(__name__)

API_PREFIX = "integration/cuidado-digital/v1"
AUTHENTICATION_PATH = f"{API_PREFIX}/autenticate"
PROFESSIONALS_PATH = f"{API_PREFIX}/profissionais"
SLOTS_BY_PROFESSIONAL_PATH = f"{API_PREFIX}/horarios-por-profissional"
APPOINTMENTS_PATH = f"{API_PREFIX}/consultas"

TOKEN_HEADER = "x-authorization-token"

DOCTORS_CACHE_NAMESPACE = "scheduled.telemedicine.providers:fleury:doctors"
DOCTORS_WITH_SLOTS_CACHE_NAMESPACE = "scheduled.telemedicine.providers:fleury:doctors-with-slots"


class FleuryScheduledTelemedicineProvider(TelemedicineProvider):
    """Fleury implementation of the telemedicine provider contract."""

    def __init__(
        self,
        settings: FleurySettings,
        error_handler: Optional[ProviderErrorHandler] = None,
        cache: Optional[ReadThroughCache] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._base_url = settings.base_url.rstrip("/")
        self._api_key = settings.api_key
        self._client_id = settings.client_id
        self._timezone = settings.timezone
        self._timeout = settings.timeout_seconds
        self._max_slots = settings.max_slots_per_professional
        self._error_handler = error_handler or FleuryErrorHandler()
        self._cache = cache or ReadThroughCache(None, enabled=False)
        self._session = session or build_session(settings.max_retries)
        self._auth_patient_data: Optional[PatientData] = None
        self._auth_token: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self._auth_token is not None

    def set_patient_data_for_authentication(
        self, patient_data: PatientData
    ) -> "FleuryScheduledTelemedicineProvider":
        self._auth_patient_data = patient_data
        return self

    def authenticate(self) -> str:
        patient_data = self._auth_patient_data

        if patient_data is None:
            raise AuthenticationError()

        response = self._request(
            "POST",
            AUTHENTICATION_PATH,
            json={
                "apiKey": self._api_key,
                "client": self._client_id,
                "name": str(patient_data.name),
                "documentNumber": patient_data.document_number,
                "gender": patient_data.gender,
                "birth": format_date(patient_data.birth_date),
                "phone": patient_data.phone,
                "email": patient_data.email,
            },
            with_token=False,
        )

        token = self._json(response).get("access_token")
        if not token:
            raise AuthenticationError("Fleury did not return an access token.")

        self._auth_token = token
        logger.info("Authenticated with Fleury", provider="fleury")

        return token

    def get_doctors(
        self, specialty: Optional[str] = None, name: Optional[str] = None
    ) -> DoctorCollection:
        self._ensure_can_authenticate()

        payload: Dict[str, Any] = {}

        if specialty:
            payload["specialty"] = specialty

        if name:
            payload["name"] = name

        cache_key = self._cache.fingerprint(DOCTORS_CACHE_NAMESPACE, payload)
        response = self._cache.fetch_or_compute(
            cache_key,
            lambda: self._authenticated_get(PROFESSIONALS_PATH, payload),
        )

        doctors = DoctorCollection()

        for doctor_data in response or []:
            doctor = self._create_doctor_from_doctor_data(doctor_data)
            if doctors.find(doctor.id) is None:
                doctors.add(doctor)

        return doctors

    def get_slots_for_doctor(
        self,
        doctor_id: str,
        specialty: Optional[str] = None,
        until: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> AppointmentSlotCollection:
        self._ensure_is_authenticated()

        doctors = self.get_doctors_with_slots(specialty, doctor_id, until, limit)
        doctor = doctors.find(doctor_id)

        if doctor is None or doctor.slots is None:
            return AppointmentSlotCollection()

        return doctor.slots

    def get_doctors_with_slots(
        self,
        specialty: Optional[str] = None,
        doctor_id: Optional[str] = None,
        until: Optional[datetime] = None,
        slot_limit: Optional[int] = None,
    ) -> DoctorCollection:
        self._ensure_can_authenticate()

        payload: Dict[str, Any] = {
            "date_init": format_date(today_in(self._timezone)),
            "type": "REMOTE",
            "appointment_type": "DOCTOR_FAMILY",
            "limitForProfessional": self._max_slots,
        }

        if specialty:
            payload["specialty"] = specialty

        if doctor_id:
            payload["professional_id"] = doctor_id

        if until:
            until = self._to_provider_time(until)
            payload["date_end"] = format_date(until)

        if slot_limit:
            payload["limitForProfessional"] = min(slot_limit, self._max_slots)

        cache_key = self._cache.fingerprint(DOCTORS_WITH_SLOTS_CACHE_NAMESPACE, payload)
        response = self._cache.fetch_or_compute(
            cache_key,
            lambda: self._authenticated_get(SLOTS_BY_PROFESSIONAL_PATH, payload),
        )

        return self._aggregate_doctors_with_slots(
            response or [], until, payload["limitForProfessional"]
        )

    def schedule_using_patient_data(
        self, specialty: str, slot_id: str, patient_data: PatientData
    ) -> Appointment:
        self._ensure_is_authenticated()

        response = self._request(
            "POST",
            APPOINTMENTS_PATH,
            json={
                "slot_id": slot_id,
                "patient": {
                    "name": str(patient_data.name),
                    "national_id": patient_data.document_number,
                    "gender": patient_data.gender,
                    "dob": format_date(patient_data.birth_date),
                    "cellphone": patient_data.phone,
                    "email": patient_data.email,
                },
            },
        )
        data = self._json(response)

        if not data.get("id"):
            raise UpstreamError("Fleury scheduling response has no appointment id", response.status_code, data)

        appointment = Appointment(
            str(data["id"]),
            convert_provider_date(data.get("date"), self._timezone),
            convert_provider_appointment_status(data.get("status")),
        )
        logger.info(
            "Appointment scheduled",
            provider="fleury",
            specialty=specialty,
            slot_id=slot_id,
            appointment_id=appointment.id,
        )

        return appointment

    def get_appointment_link(self, appointment_id: str) -> str:
        self._ensure_is_authenticated()

        response = self._request("GET", f"{APPOINTMENTS_PATH}/{appointment_id}")
        link = self._json(response).get("attendance_link")

        if not link:
            raise UpstreamError("Fleury returned no attendance link", response.status_code)

        return link

    def cache_until(self, moment: datetime) -> "FleuryScheduledTelemedicineProvider":
        self._cache.cache_until(moment)
        return self

    def without_cache(self) -> "FleuryScheduledTelemedicineProvider":
        self._cache.without_cache()
        return self

    def _aggregate_doctors_with_slots(
        self,
        records: List[Dict[str, Any]],
        until: Optional[datetime],
        limit: int,
    ) -> DoctorCollection:
        """Build bookable doctors from professional/slots records.

        Upstream order is kept. A professional repeated across records is
        merged into its first occurrence.
        """
        collection = DoctorCollection()

        for record in records:
            if not record.get("slots"):
                continue

            slots = AppointmentSlotCollection()

            for slot in record["slots"]:
                slots.add(self._create_slot_from_slot_data(slot))

            # upstream only filters by calendar day
            slots = slots.until(until)

            if slots.is_empty():
                continue

            doctor = self._create_doctor_from_doctor_data(record.get("professional") or {})
            existing = collection.find(doctor.id)

            if existing is None:
                collection.add(doctor.with_slots(slots))
                continue

            merged = AppointmentSlotCollection(existing.slots)
            for slot in slots:
                merged.add(slot)
            collection = DoctorCollection(
                existing.with_slots(merged) if item.id == existing.id else item
                for item in collection
            )

        return DoctorCollection(
            doctor.with_slots(doctor.slots.truncate(limit)) for doctor in collection
        )

    def _authenticated_get(self, path: str, params: Dict[str, Any]) -> Any:
        self._ensure_is_authenticated()

        return self._json(self._request("GET", path, params=params))

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        with_token: bool = True,
    ) -> requests.Response:
        headers = {}

        if with_token:
            headers[TOKEN_HEADER] = self._auth_token

        started = time.monotonic()
        try:
            response = self._session.request(
                method,
                f"{self._base_url}/{path}",
                params=params,
                json=json,
                headers=headers,
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.error("Fleury request raised", method=method, path=path, error=str(e))
            raise UpstreamError(f"Fleury request failed: {e}") from e

        logger.info(
            "Fleury request",
            method=method,
            path=path,
            status=response.status_code,
            duration_ms=round((time.monotonic() - started) * 1000, 1),
        )

        if not response.ok:
            self._error_handler.handle_errors(response)

        return response

    def _ensure_can_authenticate(self) -> None:
        """Fail before any cache lookup when no session can ever be opened."""
        if self._auth_token is None and self._auth_patient_data is None:
            raise AuthenticationError()

    def _ensure_is_authenticated(self) -> None:
        if not self._auth_token:
            self.authenticate()

    def _to_provider_time(self, moment: datetime) -> datetime:
        """Express ``moment`` in the provider timezone; naive values are taken as local to it."""
        if moment.tzinfo is None:
            return moment.replace(tzinfo=ZoneInfo(self._timezone))
        return moment.astimezone(ZoneInfo(self._timezone))

    @staticmethod
    def _json(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError("Fleury returned a non-JSON body", response.status_code, response.text) from e

    def _create_slot_from_slot_data(self, data: Dict[str, Any]) -> AppointmentSlot:
        if data.get("id") in (None, ""):
            raise UpstreamError("Fleury slot without id", body=data)

        return AppointmentSlot(
            str(data["id"]),
            convert_provider_date(data.get("date"), self._timezone),
        )

    @staticmethod
    def _create_doctor_from_doctor_data(data: Dict[str, Any]) -> Doctor:
        if not data.get("id") or not data.get("name"):
            raise UpstreamError("Fleury professional without id or name", body=data)

        return Doctor(
            str(data["id"]),
            FullName.from_full_name_string(data["name"]),
            data.get("council") or "",
            data.get("avatar") or None,
        )
