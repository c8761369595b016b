from django.views.decorators.http import require_http_methods

from clinic.forms.schemas import APPOINTMENT_FORM
from clinic.services.appointments import appointment_stats, search_appointments, status_class
from clinic.utils import full_name, iso_day
from .common import Column, Resource, delete_view, detail_view, form_view, list_view

APPOINTMENTS = Resource(
    slug='appointments',
    title='Citas',
    noun='cita',
    article='la',
    feminine=True,
    api_item='appointment',
    api_collection='appointments',
    form=APPOINTMENT_FORM,
    search=search_appointments,
    stats=appointment_stats,
    display_name=lambda a: a.get('reason') or '',
    columns=[
        Column('Paciente', lambda a: full_name(a.get('Patient'))),
        Column('Médico', lambda a: full_name(a.get('Doctor'))),
        Column('Fecha', lambda a: iso_day(a.get('appointmentDate'))),
        Column('Hora', lambda a: a.get('appointmentTime')),
        Column('Motivo', lambda a: a.get('reason')),
        Column('Estado', lambda a: a.get('status'), badge=lambda a: status_class(a.get('status'))),
    ],
    details=[
        Column('Paciente', lambda a: full_name(a.get('Patient'))),
        Column('Médico', lambda a: full_name(a.get('Doctor'))),
        Column('Fecha', lambda a: iso_day(a.get('appointmentDate'))),
        Column('Hora', lambda a: a.get('appointmentTime')),
        Column('Estado', lambda a: a.get('status'), badge=lambda a: status_class(a.get('status'))),
        Column('Notas', lambda a: a.get('notes')),
    ],
)


@require_http_methods(['GET'])
def appointment_list(request):
    return list_view(request, APPOINTMENTS)


@require_http_methods(['GET'])
def appointment_detail(request, pk):
    return detail_view(request, APPOINTMENTS, pk)


@require_http_methods(['GET', 'POST'])
def appointment_new(request):
    return form_view(request, APPOINTMENTS)


@require_http_methods(['GET', 'POST'])
def appointment_edit(request, pk):
    return form_view(request, APPOINTMENTS, pk)


@require_http_methods(['GET', 'POST'])
def appointment_delete(request, pk):
    return delete_view(request, APPOINTMENTS, pk)
