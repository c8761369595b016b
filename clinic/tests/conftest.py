import pytest

from clinic.services import api as api_service
from clinic.services.api import ApiResponse


class FakeApi:
    """Stand-in for ClinicApi that records every call.

    Responses are looked up by method name; collection getters default
    to an empty list and everything else to an empty success.
    """

    def __init__(self, **responses):
        self.responses = responses
        self.calls = []

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError(name)

        def call(*args):
            self.calls.append((name, args))
            if name in self.responses:
                return self.responses[name]
            if name.startswith('get_') and name.endswith('s'):
                return ApiResponse(success=True, data=[])
            return ApiResponse(success=True, data={})
        return call

    def called(self, name):
        return [args for n, args in self.calls if n == name]


@pytest.fixture
def fake_api(monkeypatch):
    def install(**responses):
        api = FakeApi(**responses)
        monkeypatch.setattr(api_service, 'get_api', lambda: api)
        return api
    return install
