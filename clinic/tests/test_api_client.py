"""
Tests for the backend HTTP client.

The ``requests.Session`` is replaced by a small fake that records what
was sent and answers with a canned ``requests.Response``.
"""
import json

import pytest
import requests

from clinic.services.api import INVALID_RESPONSE, NETWORK_ERROR, ApiClient, ClinicApi, Endpoints, unwrap


def make_response(status, body=None, raw=None):
    resp = requests.Response()
    resp.status_code = status
    resp.encoding = 'utf-8'
    if raw is not None:
        resp._content = raw.encode('utf-8')
    elif body is not None:
        resp._content = json.dumps(body).encode('utf-8')
    else:
        resp._content = b''
    return resp


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.sent = []

    def request(self, method, url, json=None, headers=None, timeout=None):
        self.sent.append({'method': method, 'url': url, 'json': json, 'headers': headers, 'timeout': timeout})
        if self.error is not None:
            raise self.error
        return self.response


def client_for(session):
    return ApiClient('http://backend.test/api/', session=session, timeout=5)


def test_error_status_uses_body_message():
    session = FakeSession(make_response(404, {'message': 'not found'}))
    resp = client_for(session).get('/patients/9')
    assert resp.success is False
    assert resp.error == 'not found'
    assert resp.data is None


def test_error_status_without_message():
    session = FakeSession(make_response(500, raw='<html>boom</html>'))
    resp = client_for(session).get('/patients')
    assert resp.success is False
    assert resp.error == 'HTTP error! status: 500'


def test_transport_failure_becomes_network_error():
    session = FakeSession(error=requests.ConnectionError('refused'))
    resp = client_for(session).get('/patients')
    assert resp.success is False
    assert resp.error == NETWORK_ERROR


def test_timeout_becomes_network_error():
    session = FakeSession(error=requests.Timeout('slow'))
    resp = client_for(session).post('/patients', {'firstName': 'Ana'})
    assert resp.success is False
    assert resp.error


def test_data_envelope_is_unwrapped():
    session = FakeSession(make_response(200, {'data': [{'id': 1}], 'total': 1}))
    resp = client_for(session).get('/patients')
    assert resp.success is True
    assert resp.data == [{'id': 1}]


def test_bare_payload_passes_through():
    session = FakeSession(make_response(200, [{'id': 1}, {'id': 2}]))
    resp = client_for(session).get('/patients')
    assert resp.data == [{'id': 1}, {'id': 2}]


def test_null_data_key_still_unwraps():
    assert unwrap({'data': None, 'message': 'ok'}) is None
    assert unwrap({'token': 'abc'}) == {'token': 'abc'}


def test_empty_success_body():
    session = FakeSession(make_response(204))
    resp = client_for(session).delete('/patients/3')
    assert resp.success is True
    assert resp.data is None


def test_unparseable_success_body():
    session = FakeSession(make_response(200, raw='not json'))
    resp = client_for(session).get('/health')
    assert resp.success is False
    assert resp.error == INVALID_RESPONSE


def test_request_shape():
    session = FakeSession(make_response(201, {'id': 4}))
    client_for(session).post('/patients', {'firstName': 'Ana'})
    sent = session.sent[0]
    assert sent['method'] == 'POST'
    assert sent['url'] == 'http://backend.test/api/patients'
    assert sent['headers']['Content-Type'] == 'application/json'
    assert sent['json'] == {'firstName': 'Ana'}
    assert sent['timeout'] == 5


def test_get_sends_no_body():
    session = FakeSession(make_response(200, []))
    client_for(session).get('/users')
    assert session.sent[0]['json'] is None


@pytest.mark.parametrize('call, method, path', [
    (lambda api: api.get_patients(), 'GET', '/patients'),
    (lambda api: api.get_user(5), 'GET', '/users/5'),
    (lambda api: api.get_diagnoses(), 'GET', '/diagnostics'),
    (lambda api: api.update_prescription(2, {}), 'PUT', '/prescriptions/2'),
    (lambda api: api.delete_medical_center(8), 'DELETE', '/medical-centers/8'),
    (lambda api: api.create_appointment({}), 'POST', '/appointments'),
    (lambda api: api.login({'email': 'a@b.co', 'password': 'x'}), 'POST', '/auth/login'),
    (lambda api: api.logout(), 'POST', '/auth/logout'),
    (lambda api: api.health_check(), 'GET', '/health'),
])
def test_endpoint_mapping(call, method, path):
    session = FakeSession(make_response(200, {}))
    call(ClinicApi(client_for(session)))
    assert session.sent[0]['method'] == method
    assert session.sent[0]['url'] == f'http://backend.test/api{path}'


def test_endpoint_builders():
    assert Endpoints.patient(3) == '/patients/3'
    assert Endpoints.diagnosis(1) == '/diagnostics/1'
    assert Endpoints.medical_center(2) == '/medical-centers/2'
