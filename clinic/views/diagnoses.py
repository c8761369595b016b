from django.views.decorators.http import require_http_methods

from clinic.forms.schemas import DIAGNOSIS_FORM, DIAGNOSIS_STATUSES
from clinic.services.diagnoses import diagnosis_stats, search_diagnoses, severity_class
from clinic.utils import full_name, iso_day
from .common import Column, Resource, delete_view, detail_view, form_view, list_view

DIAGNOSES = Resource(
    slug='diagnoses',
    title='Diagnósticos',
    noun='diagnóstico',
    article='el',
    api_item='diagnosis',
    api_collection='diagnoses',
    form=DIAGNOSIS_FORM,
    search=search_diagnoses,
    stats=diagnosis_stats,
    status_choices=DIAGNOSIS_STATUSES,
    display_name=lambda d: d.get('diagnosis') or '',
    columns=[
        Column('Paciente', lambda d: full_name(d.get('Patient'))),
        Column('Médico', lambda d: full_name(d.get('Doctor'))),
        Column('Diagnóstico', lambda d: d.get('diagnosis')),
        Column('Severidad', lambda d: d.get('severity'), badge=lambda d: severity_class(d.get('severity'))),
        Column('Estado', lambda d: d.get('status')),
        Column('Fecha', lambda d: iso_day(d.get('diagnosisDate'))),
    ],
    details=[
        Column('Paciente', lambda d: full_name(d.get('Patient'))),
        Column('Médico', lambda d: full_name(d.get('Doctor'))),
        Column('Código CIE-10', lambda d: d.get('icd10Code')),
        Column('Síntomas', lambda d: d.get('symptoms')),
        Column('Tratamiento', lambda d: d.get('treatment')),
        Column('Severidad', lambda d: d.get('severity'), badge=lambda d: severity_class(d.get('severity'))),
        Column('Estado', lambda d: d.get('status')),
        Column('Fecha de diagnóstico', lambda d: iso_day(d.get('diagnosisDate'))),
        Column('Fecha de seguimiento', lambda d: iso_day(d.get('followUpDate'))),
        Column('Notas', lambda d: d.get('notes')),
    ],
)


@require_http_methods(['GET'])
def diagnosis_list(request):
    return list_view(request, DIAGNOSES)


@require_http_methods(['GET'])
def diagnosis_detail(request, pk):
    return detail_view(request, DIAGNOSES, pk)


@require_http_methods(['GET', 'POST'])
def diagnosis_new(request):
    return form_view(request, DIAGNOSES)


@require_http_methods(['GET', 'POST'])
def diagnosis_edit(request, pk):
    return form_view(request, DIAGNOSES, pk)


@require_http_methods(['GET', 'POST'])
def diagnosis_delete(request, pk):
    return delete_view(request, DIAGNOSES, pk)
