"""
HTTP client for the clinical records backend.

Every call returns an :class:`ApiResponse` envelope.  Callers never see a
``requests`` exception: HTTP errors, transport failures and unreadable
bodies all collapse into ``success=False`` with a human readable
``error`` string.  The client does not retry, cache or deduplicate.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

NETWORK_ERROR = "Error de conexión. Verifica que el servidor esté ejecutándose."
INVALID_RESPONSE = "Respuesta inválida del servidor"


@dataclass
class ApiResponse:
    success: bool
    data: Any = None
    error: Optional[str] = None


class Endpoints:
    """Path builders for every backend resource."""

    PATIENTS = '/patients'
    USERS = '/users'
    # the backend names diagnoses "diagnostics"
    DIAGNOSES = '/diagnostics'
    PRESCRIPTIONS = '/prescriptions'
    MEDICAL_CENTERS = '/medical-centers'
    APPOINTMENTS = '/appointments'
    LOGIN = '/auth/login'
    LOGOUT = '/auth/logout'
    HEALTH = '/health'

    @staticmethod
    def patient(pk) -> str:
        return f"{Endpoints.PATIENTS}/{pk}"

    @staticmethod
    def user(pk) -> str:
        return f"{Endpoints.USERS}/{pk}"

    @staticmethod
    def diagnosis(pk) -> str:
        return f"{Endpoints.DIAGNOSES}/{pk}"

    @staticmethod
    def prescription(pk) -> str:
        return f"{Endpoints.PRESCRIPTIONS}/{pk}"

    @staticmethod
    def medical_center(pk) -> str:
        return f"{Endpoints.MEDICAL_CENTERS}/{pk}"

    @staticmethod
    def appointment(pk) -> str:
        return f"{Endpoints.APPOINTMENTS}/{pk}"


def unwrap(payload: Any) -> Any:
    """Strip one ``{"data": ...}`` level; anything else passes through."""
    if isinstance(payload, dict) and 'data' in payload:
        return payload['data']
    return payload


def _error_message(payload: Any, status_code: int) -> str:
    if isinstance(payload, dict) and payload.get('message'):
        return str(payload['message'])
    return f"HTTP error! status: {status_code}"


class ApiClient:
    def __init__(self, base_url: str, *, session: Optional[requests.Session] = None,
                 timeout: Optional[float] = None, headers: Optional[Dict[str, str]] = None):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.timeout = timeout
        self.headers = {'Content-Type': 'application/json', **(headers or {})}

    def request(self, method: str, endpoint: str, payload: Any = None) -> ApiResponse:
        url = f"{self.base_url}{endpoint}"
        try:
            resp = self.session.request(method, url, json=payload, headers=self.headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("api request failed method=%s url=%s error=%s", method, url, e)
            return ApiResponse(success=False, error=NETWORK_ERROR)

        text = resp.text or ''
        parsed: Any = None
        readable = True
        if text.strip():
            try:
                parsed = resp.json()
            except ValueError:
                readable = False

        if not 200 <= resp.status_code < 300:
            logger.warning("api error method=%s url=%s status=%s", method, url, resp.status_code)
            return ApiResponse(success=False, error=_error_message(parsed, resp.status_code))
        if not readable:
            logger.warning("api unreadable body method=%s url=%s status=%s", method, url, resp.status_code)
            return ApiResponse(success=False, error=INVALID_RESPONSE)
        return ApiResponse(success=True, data=unwrap(parsed))

    def get(self, endpoint: str) -> ApiResponse:
        return self.request('GET', endpoint)

    def post(self, endpoint: str, data: Any = None) -> ApiResponse:
        return self.request('POST', endpoint, data)

    def put(self, endpoint: str, data: Any = None) -> ApiResponse:
        return self.request('PUT', endpoint, data)

    def delete(self, endpoint: str) -> ApiResponse:
        return self.request('DELETE', endpoint)


class ClinicApi:
    """One method per logical backend operation."""

    def __init__(self, client: ApiClient):
        self.client = client

    # Patients
    def get_patients(self) -> ApiResponse:
        return self.client.get(Endpoints.PATIENTS)

    def get_patient(self, pk) -> ApiResponse:
        return self.client.get(Endpoints.patient(pk))

    def create_patient(self, data: dict) -> ApiResponse:
        return self.client.post(Endpoints.PATIENTS, data)

    def update_patient(self, pk, data: dict) -> ApiResponse:
        return self.client.put(Endpoints.patient(pk), data)

    def delete_patient(self, pk) -> ApiResponse:
        return self.client.delete(Endpoints.patient(pk))

    # Users / doctors
    def get_users(self) -> ApiResponse:
        return self.client.get(Endpoints.USERS)

    def get_user(self, pk) -> ApiResponse:
        return self.client.get(Endpoints.user(pk))

    def create_user(self, data: dict) -> ApiResponse:
        return self.client.post(Endpoints.USERS, data)

    def update_user(self, pk, data: dict) -> ApiResponse:
        return self.client.put(Endpoints.user(pk), data)

    def delete_user(self, pk) -> ApiResponse:
        return self.client.delete(Endpoints.user(pk))

    # Diagnoses
    def get_diagnoses(self) -> ApiResponse:
        return self.client.get(Endpoints.DIAGNOSES)

    def get_diagnosis(self, pk) -> ApiResponse:
        return self.client.get(Endpoints.diagnosis(pk))

    def create_diagnosis(self, data: dict) -> ApiResponse:
        return self.client.post(Endpoints.DIAGNOSES, data)

    def update_diagnosis(self, pk, data: dict) -> ApiResponse:
        return self.client.put(Endpoints.diagnosis(pk), data)

    def delete_diagnosis(self, pk) -> ApiResponse:
        return self.client.delete(Endpoints.diagnosis(pk))

    # Prescriptions
    def get_prescriptions(self) -> ApiResponse:
        return self.client.get(Endpoints.PRESCRIPTIONS)

    def get_prescription(self, pk) -> ApiResponse:
        return self.client.get(Endpoints.prescription(pk))

    def create_prescription(self, data: dict) -> ApiResponse:
        return self.client.post(Endpoints.PRESCRIPTIONS, data)

    def update_prescription(self, pk, data: dict) -> ApiResponse:
        return self.client.put(Endpoints.prescription(pk), data)

    def delete_prescription(self, pk) -> ApiResponse:
        return self.client.delete(Endpoints.prescription(pk))

    # Medical centers
    def get_medical_centers(self) -> ApiResponse:
        return self.client.get(Endpoints.MEDICAL_CENTERS)

    def get_medical_center(self, pk) -> ApiResponse:
        return self.client.get(Endpoints.medical_center(pk))

    def create_medical_center(self, data: dict) -> ApiResponse:
        return self.client.post(Endpoints.MEDICAL_CENTERS, data)

    def update_medical_center(self, pk, data: dict) -> ApiResponse:
        return self.client.put(Endpoints.medical_center(pk), data)

    def delete_medical_center(self, pk) -> ApiResponse:
        return self.client.delete(Endpoints.medical_center(pk))

    # Appointments
    def get_appointments(self) -> ApiResponse:
        return self.client.get(Endpoints.APPOINTMENTS)

    def get_appointment(self, pk) -> ApiResponse:
        return self.client.get(Endpoints.appointment(pk))

    def create_appointment(self, data: dict) -> ApiResponse:
        return self.client.post(Endpoints.APPOINTMENTS, data)

    def update_appointment(self, pk, data: dict) -> ApiResponse:
        return self.client.put(Endpoints.appointment(pk), data)

    def delete_appointment(self, pk) -> ApiResponse:
        return self.client.delete(Endpoints.appointment(pk))

    # Auth
    def login(self, credentials: dict) -> ApiResponse:
        return self.client.post(Endpoints.LOGIN, credentials)

    def logout(self) -> ApiResponse:
        return self.client.post(Endpoints.LOGOUT)

    def health_check(self) -> ApiResponse:
        return self.client.get(Endpoints.HEALTH)


def get_api() -> ClinicApi:
    """Build a fresh client from settings.  Views call this once per request."""
    client = ApiClient(settings.API_BASE_URL, timeout=settings.API_TIMEOUT)
    return ClinicApi(client)
