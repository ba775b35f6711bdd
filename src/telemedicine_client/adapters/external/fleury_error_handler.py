"""
Error translation for failed Fleury responses.
"""

import json
import logging
from typing import Any

from requests import Response

from ...application.ports.services.error_handler import ProviderErrorHandler
from ...domain.errors import (
    AuthenticationError,
    InvalidAppointmentError,
    InvalidSlotError,
    UpstreamError,
)

logger = logging.getLogger(__name__)

AUTHENTICATION_PATH = "autenticate"
APPOINTMENTS_PATH = "consultas"


class FleuryErrorHandler(ProviderErrorHandler):
    """Maps Fleury error responses onto the domain error taxonomy."""

    def handle_errors(self, response: Response) -> None:
        status = response.status_code
        method = (response.request.method if response.request else "") or ""
        path = self._path_of(response)
        body = self._body_of(response)

        logger.warning(f"Fleury request failed: {method} {path} -> {status}")

        if path.endswith(AUTHENTICATION_PATH) and status in (400, 401, 403, 422):
            raise AuthenticationError("Fleury rejected the patient authentication.", {"body": body})

        if method == "POST" and path.endswith(APPOINTMENTS_PATH) and status in (404, 409, 422):
            slot_id = ""
            if response.request is not None and response.request.body:
                slot_id = self._slot_id_from_request(response.request.body)
            raise InvalidSlotError(slot_id, {"body": body})

        if method == "GET" and f"/{APPOINTMENTS_PATH}/" in path and status == 404:
            raise InvalidAppointmentError(path.rsplit("/", 1)[-1], {"body": body})

        raise UpstreamError(f"Fleury request failed with status {status}", status, body)

    @staticmethod
    def _path_of(response: Response) -> str:
        url = response.url or (response.request.url if response.request else "") or ""
        return url.split("?", 1)[0].rstrip("/")

    @staticmethod
    def _body_of(response: Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text

    @staticmethod
    def _slot_id_from_request(body: Any) -> str:
        if isinstance(body, bytes):
            body = body.decode("utf-8", errors="replace")
        try:
            return str(json.loads(body).get("slot_id", ""))
        except (ValueError, AttributeError):
            return ""
