from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from clinic.services.api import ApiResponse


def test_check_backend_reports_counts(fake_api):
    fake_api(get_patients=ApiResponse(success=True, data=[{'id': 1}]))
    out = StringIO()
    call_command('check_backend', stdout=out)
    text = out.getvalue()
    assert 'Health check OK' in text
    assert 'patients: 1 records' in text
    assert 'Checked 6 collections' in text


def test_check_backend_health_only(fake_api):
    api = fake_api()
    call_command('check_backend', '--health-only', stdout=StringIO())
    assert [name for name, _ in api.calls] == ['health_check']


def test_check_backend_fails_when_backend_down(fake_api):
    fake_api(health_check=ApiResponse(success=False, error='Error de conexión'))
    with pytest.raises(CommandError):
        call_command('check_backend', stdout=StringIO())


def test_check_backend_collection_failure(fake_api):
    fake_api(get_appointments=ApiResponse(success=False, error='HTTP error! status: 500'))
    out = StringIO()
    with pytest.raises(CommandError):
        call_command('check_backend', stdout=out)
    assert 'appointments: HTTP error! status: 500' in out.getvalue()
