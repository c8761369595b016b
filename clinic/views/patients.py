from django.views.decorators.http import require_http_methods

from clinic.forms.schemas import PATIENT_FORM
from clinic.services.patients import gender_display, patient_age, patient_stats, search_patients
from clinic.utils import full_name, iso_day
from .common import Column, Resource, delete_view, detail_view, form_view, list_view


def _age(p):
    age = patient_age(p.get('dateOfBirth'))
    return f"{age} años" if age is not None else ''


PATIENTS = Resource(
    slug='patients',
    title='Pacientes',
    noun='paciente',
    article='el',
    api_item='patient',
    api_collection='patients',
    form=PATIENT_FORM,
    search=search_patients,
    stats=patient_stats,
    columns=[
        Column('Nombre', full_name),
        Column('Email', lambda p: p.get('email')),
        Column('Teléfono', lambda p: p.get('phone')),
        Column('Edad', _age),
        Column('Género', lambda p: gender_display(p.get('gender'))),
        Column('Grupo sanguíneo', lambda p: p.get('bloodType')),
    ],
    details=[
        Column('Email', lambda p: p.get('email')),
        Column('Teléfono', lambda p: p.get('phone')),
        Column('DNI/NIE', lambda p: p.get('identification')),
        Column('Fecha de nacimiento', lambda p: iso_day(p.get('dateOfBirth'))),
        Column('Edad', _age),
        Column('Género', lambda p: gender_display(p.get('gender'))),
        Column('Grupo sanguíneo', lambda p: p.get('bloodType')),
        Column('Dirección', lambda p: p.get('address')),
        Column('Contacto de emergencia', lambda p: p.get('emergencyContact')),
        Column('Teléfono de emergencia', lambda p: p.get('emergencyPhone')),
        Column('Alergias', lambda p: p.get('allergies')),
        Column('Historial médico', lambda p: p.get('medicalHistory')),
    ],
)


@require_http_methods(['GET'])
def patient_list(request):
    return list_view(request, PATIENTS)


@require_http_methods(['GET'])
def patient_detail(request, pk):
    return detail_view(request, PATIENTS, pk)


@require_http_methods(['GET', 'POST'])
def patient_new(request):
    return form_view(request, PATIENTS)


@require_http_methods(['GET', 'POST'])
def patient_edit(request, pk):
    return form_view(request, PATIENTS, pk)


@require_http_methods(['GET', 'POST'])
def patient_delete(request, pk):
    return delete_view(request, PATIENTS, pk)
