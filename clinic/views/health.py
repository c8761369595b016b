from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from clinic.services import api as api_service


@require_http_methods(['GET'])
def healthz(request):
    resp = api_service.get_api().health_check()
    if resp.success:
        return JsonResponse({'ok': True, 'backend': resp.data})
    return JsonResponse({'ok': False, 'backend': None, 'error': resp.error}, status=503)
