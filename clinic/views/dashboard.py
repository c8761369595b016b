from django.shortcuts import render
from django.views.decorators.http import require_http_methods

from clinic.services import api as api_service
from clinic.services.prescriptions import prescription_stats
from clinic.state import FetchState

COUNTERS = [
    ('patients', 'Pacientes', 'get_patients', 'patients_list'),
    ('doctors', 'Médicos', 'get_users', 'doctors_list'),
    ('appointments', 'Citas', 'get_appointments', 'appointments_list'),
    ('prescriptions', 'Prescripciones', 'get_prescriptions', 'prescriptions_list'),
]


@require_http_methods(['GET'])
def dashboard(request):
    """Backend health and record counts, fetched one after another."""
    api = api_service.get_api()
    health = api.health_check()
    cards = []
    expiring = None
    for key, label, method, url_name in COUNTERS:
        state = FetchState().load(getattr(api, method))
        count = len(state.data) if state.is_loaded and isinstance(state.data, list) else None
        if key == 'prescriptions' and count is not None:
            expiring = prescription_stats(state.data)['byStatus']
        cards.append({'key': key, 'label': label, 'count': count, 'error': state.error, 'url_name': url_name})
    return render(request, 'clinic/dashboard.html', {
        'backend_ok': health.success,
        'backend_error': health.error,
        'cards': cards,
        'prescription_status': expiring,
        'user_type': request.session.get('userType'),
    })
