from django.views.decorators.http import require_http_methods

from clinic.forms.schemas import MEDICAL_CENTER_FORM
from clinic.services.medical_centers import center_stats, search_centers
from .common import Column, Resource, delete_view, detail_view, form_view, list_view

MEDICAL_CENTERS = Resource(
    slug='medical_centers',
    title='Centros médicos',
    noun='centro médico',
    article='el',
    api_item='medical_center',
    api_collection='medical_centers',
    form=MEDICAL_CENTER_FORM,
    search=search_centers,
    stats=center_stats,
    display_name=lambda c: c.get('name') or '',
    columns=[
        Column('Nombre', lambda c: c.get('name')),
        Column('Tipo', lambda c: c.get('type')),
        Column('Email', lambda c: c.get('email')),
        Column('Teléfono', lambda c: c.get('phone')),
        Column('Capacidad', lambda c: c.get('capacity')),
    ],
    details=[
        Column('Tipo', lambda c: c.get('type')),
        Column('Dirección', lambda c: c.get('address')),
        Column('Teléfono', lambda c: c.get('phone')),
        Column('Email', lambda c: c.get('email')),
        Column('Sitio web', lambda c: c.get('website')),
        Column('Capacidad', lambda c: c.get('capacity')),
        Column('Descripción', lambda c: c.get('description')),
    ],
)


@require_http_methods(['GET'])
def center_list(request):
    return list_view(request, MEDICAL_CENTERS)


@require_http_methods(['GET'])
def center_detail(request, pk):
    return detail_view(request, MEDICAL_CENTERS, pk)


@require_http_methods(['GET', 'POST'])
def center_new(request):
    return form_view(request, MEDICAL_CENTERS)


@require_http_methods(['GET', 'POST'])
def center_edit(request, pk):
    return form_view(request, MEDICAL_CENTERS, pk)


@require_http_methods(['GET', 'POST'])
def center_delete(request, pk):
    return delete_view(request, MEDICAL_CENTERS, pk)
