"""
Shared fixtures: patient data, Fleury settings and a scripted HTTP session.
"""

import json
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import pytest
import requests

from telemedicine_client.core.config import FleurySettings
from telemedicine_client.domain.value_objects import FullName, PatientData

BASE_URL = "https://fleury.test"
API_PREFIX = "/integration/cuidado-digital/v1/"

Responder = Callable[[Optional[Dict[str, Any]], Optional[Dict[str, Any]]], Tuple[int, Any]]


def make_response(
    status: int,
    payload: Any,
    method: str,
    url: str,
    body: Optional[Dict[str, Any]] = None,
) -> requests.Response:
    """Build a real requests.Response as the transport would return it."""
    response = requests.Response()
    response.status_code = status
    response._content = json.dumps(payload).encode("utf-8") if payload is not None else b""
    response.encoding = "utf-8"
    response.headers["Content-Type"] = "application/json"
    response.url = url
    response.request = requests.Request(method, url, json=body).prepare()
    return response


@dataclass
class RecordedCall:
    method: str
    path: str
    params: Optional[Dict[str, Any]]
    json: Optional[Dict[str, Any]]
    headers: Dict[str, Any]


@dataclass
class FakeSession:
    """Stands in for requests.Session; routes are keyed by method and API path."""

    routes: Dict[Tuple[str, str], List[Union[Tuple[int, Any], Responder]]] = field(default_factory=dict)
    calls: List[RecordedCall] = field(default_factory=list)
    raise_on_request: Optional[Exception] = None

    def add(self, method: str, path: str, payload: Any = None, status: int = 200) -> "FakeSession":
        self.routes.setdefault((method, path), []).append((status, payload))
        return self

    def add_responder(self, method: str, path: str, responder: Responder) -> "FakeSession":
        self.routes.setdefault((method, path), []).append(responder)
        return self

    def request(self, method, url, params=None, json=None, headers=None, timeout=None):
        path = url.split(API_PREFIX, 1)[1]
        self.calls.append(RecordedCall(method, path, params, json, dict(headers or {})))

        if self.raise_on_request is not None:
            raise self.raise_on_request

        queue = self.routes.get((method, path))
        if not queue:
            raise AssertionError(f"Unexpected request {method} {path}")

        # the last scripted response repeats
        entry = queue.pop(0) if len(queue) > 1 else queue[0]
        status, payload = entry(params, json) if callable(entry) else entry

        return make_response(status, payload, method, url, json)

    def paths(self, method: Optional[str] = None) -> List[str]:
        return [call.path for call in self.calls if method is None or call.method == method]


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def patient_data() -> PatientData:
    return PatientData(
        name=FullName("Maria da Silva"),
        document_number="12345678909",
        gender="F",
        birth_date=date(1990, 5, 17),
        phone="+5511999990000",
        email="maria@example.com",
    )


@pytest.fixture
def fleury_settings() -> FleurySettings:
    return FleurySettings(
        base_url=BASE_URL,
        api_key="test-api-key",
        client_id="test-client",
        timezone="America/Sao_Paulo",
    )


@pytest.fixture
def session() -> FakeSession:
    """Session already able to authenticate."""
    return FakeSession().add("POST", "autenticate", {"access_token": "token-123"})


@pytest.fixture
def slot_time() -> datetime:
    # 10:00 in Sao Paulo
    return datetime(2030, 1, 10, 13, 0, tzinfo=timezone.utc)


@pytest.fixture
def bare_session() -> FakeSession:
    """Session with no scripted routes."""
    return FakeSession()
