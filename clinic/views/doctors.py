from django.views.decorators.http import require_http_methods

from clinic.forms.schemas import DOCTOR_FORM
from clinic.services.doctors import doctor_name, doctor_stats, search_doctors
from clinic.utils import full_name
from .common import Column, Resource, delete_view, detail_view, form_view, list_view

DOCTORS = Resource(
    slug='doctors',
    title='Médicos',
    noun='médico',
    article='el',
    api_item='user',
    api_collection='users',
    form=DOCTOR_FORM,
    search=search_doctors,
    stats=doctor_stats,
    display_name=doctor_name,
    columns=[
        Column('Nombre', full_name),
        Column('Email', lambda d: d.get('email')),
        Column('Especialidad', lambda d: d.get('specialty')),
        Column('Licencia', lambda d: d.get('licenseNumber')),
    ],
    details=[
        Column('Email', lambda d: d.get('email')),
        Column('Teléfono', lambda d: d.get('phone')),
        Column('Especialidad', lambda d: d.get('specialty')),
        Column('Número de licencia', lambda d: d.get('licenseNumber')),
        Column('Dirección', lambda d: d.get('address')),
    ],
)


@require_http_methods(['GET'])
def doctor_list(request):
    return list_view(request, DOCTORS)


@require_http_methods(['GET'])
def doctor_detail(request, pk):
    return detail_view(request, DOCTORS, pk)


@require_http_methods(['GET', 'POST'])
def doctor_new(request):
    return form_view(request, DOCTORS)


@require_http_methods(['GET', 'POST'])
def doctor_edit(request, pk):
    return form_view(request, DOCTORS, pk)


@require_http_methods(['GET', 'POST'])
def doctor_delete(request, pk):
    return delete_view(request, DOCTORS, pk)
