from clinic.services.api import ApiResponse
from clinic.state import FetchState


def test_load_success():
    state = FetchState().load(lambda: ApiResponse(success=True, data=[1, 2]))
    assert state.is_loaded
    assert state.data == [1, 2]
    assert state.error is None


def test_load_failure_clears_data():
    state = FetchState()
    state.load(lambda: ApiResponse(success=True, data=[1]))
    state.load(lambda: ApiResponse(success=False, error='boom'))
    assert state.is_failed
    assert state.data is None
    assert state.error == 'boom'


def test_failure_without_message():
    state = FetchState().load(lambda: ApiResponse(success=False))
    assert state.error == 'Error desconocido'


def test_stale_result_is_ignored():
    state = FetchState()
    first = state.start()
    second = state.start()
    assert state.settle(first, ApiResponse(success=True, data='old')) is False
    assert state.is_loading
    assert state.settle(second, ApiResponse(success=True, data='new')) is True
    assert state.data == 'new'


def test_start_marks_loading():
    state = FetchState()
    assert state.status == 'idle'
    state.start()
    assert state.is_loading
