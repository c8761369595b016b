"""
Login and logout screens.

The backend issues a token on ``POST /auth/login``.  It is only kept
(in the signed session cookie) when the user ticks "remember me"; no
request path re-attaches it to backend calls.
"""
from __future__ import annotations

from django.contrib import messages
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods

from clinic.forms.schemas import LOGIN_FORM
from clinic.services import api as api_service
from .common import FORM_INVALID

USER_TYPES = [('doctor', 'Médico'), ('admin', 'Administrador'), ('patient', 'Paciente')]
TRUTHY = {'1', 'true', 'on', 'yes'}


@require_http_methods(['GET', 'POST'])
def login_view(request):
    form = LOGIN_FORM.build()
    remember = False
    user_type = 'doctor'

    if request.method == 'POST':
        for name in ('email', 'password'):
            form.update_field(name, request.POST.get(name, ''))
        remember = (request.POST.get('rememberMe') or '').lower() in TRUTHY
        requested = request.POST.get('userType') or ''
        if requested in dict(USER_TYPES):
            user_type = requested

        if not form.validate_form():
            messages.error(request, FORM_INVALID)
        else:
            form.set_submitting(True)
            resp = api_service.get_api().login({
                'email': form.data['email'].strip(),
                'password': form.data['password'],
            })
            form.set_submitting(False)
            if resp.success:
                token = resp.data.get('token') if isinstance(resp.data, dict) else None
                if remember and token:
                    request.session['authToken'] = token
                    request.session['userType'] = user_type
                messages.success(request, "Inicio de sesión exitoso")
                return redirect('dashboard')
            messages.error(request, resp.error or "Error al iniciar sesión")

    return render(request, 'clinic/login.html', {
        'form': form,
        'remember': remember,
        'user_type': user_type,
        'user_types': USER_TYPES,
    })


@require_http_methods(['POST'])
def logout_view(request):
    resp = api_service.get_api().logout()
    # the local session is dropped even when the backend call fails
    request.session.flush()
    if resp.success:
        messages.success(request, "Sesión cerrada")
    else:
        messages.error(request, resp.error or "Error al cerrar sesión")
    return redirect('login')
