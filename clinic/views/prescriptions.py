from django.views.decorators.http import require_http_methods

from clinic.forms.schemas import PRESCRIPTION_FORM
from clinic.services.prescriptions import (
    STATUSES,
    days_remaining,
    prescription_stats,
    prescription_status,
    search_prescriptions,
    status_class,
)
from clinic.utils import full_name, iso_day
from .common import Column, Resource, delete_view, detail_view, form_view, list_view


def _status(p):
    return prescription_status(p.get('endDate'))


def _badge(p):
    return status_class(_status(p))


def _remaining(p):
    days = days_remaining(p.get('endDate'))
    return f"{days} días" if days is not None else 'Sin fecha de fin'


PRESCRIPTIONS = Resource(
    slug='prescriptions',
    title='Prescripciones',
    noun='prescripción',
    article='la',
    feminine=True,
    api_item='prescription',
    api_collection='prescriptions',
    form=PRESCRIPTION_FORM,
    search=search_prescriptions,
    stats=prescription_stats,
    status_choices=STATUSES,
    display_name=lambda p: p.get('medication') or '',
    columns=[
        Column('Medicamento', lambda p: p.get('medication')),
        Column('Paciente', lambda p: full_name(p.get('Patient'))),
        Column('Dosis', lambda p: p.get('dosage')),
        Column('Frecuencia', lambda p: p.get('frequency')),
        Column('Inicio', lambda p: iso_day(p.get('startDate'))),
        Column('Estado', _status, badge=_badge),
    ],
    details=[
        Column('Paciente', lambda p: full_name(p.get('Patient'))),
        Column('Médico', lambda p: full_name(p.get('user'))),
        Column('Dosis', lambda p: p.get('dosage')),
        Column('Frecuencia', lambda p: p.get('frequency')),
        Column('Instrucciones', lambda p: p.get('instructions')),
        Column('Fecha de inicio', lambda p: iso_day(p.get('startDate'))),
        Column('Fecha de fin', lambda p: iso_day(p.get('endDate'))),
        Column('Estado', _status, badge=_badge),
        Column('Tiempo restante', _remaining),
    ],
)


@require_http_methods(['GET'])
def prescription_list(request):
    return list_view(request, PRESCRIPTIONS)


@require_http_methods(['GET'])
def prescription_detail(request, pk):
    return detail_view(request, PRESCRIPTIONS, pk)


@require_http_methods(['GET', 'POST'])
def prescription_new(request):
    return form_view(request, PRESCRIPTIONS)


@require_http_methods(['GET', 'POST'])
def prescription_edit(request, pk):
    return form_view(request, PRESCRIPTIONS, pk)


@require_http_methods(['GET', 'POST'])
def prescription_delete(request, pk):
    return delete_view(request, PRESCRIPTIONS, pk)
