"""
Shared list/detail/form/delete screens.

Every record screen in the console follows one pattern: fetch, render,
validate, mutate, notify and redirect.  A :class:`Resource` describes
the per-entity differences (labels, API operations, form definition,
search and table columns); the functions below implement the pattern
once.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from django.contrib import messages
from django.shortcuts import redirect, render
from django.urls import reverse

from clinic.forms.schemas import FormDefinition
from clinic.forms.validation import FormState
from clinic.services import api as api_service
from clinic.state import FetchState
from clinic.utils import full_name

logger = logging.getLogger(__name__)

FORM_INVALID = "Por favor, corrige los errores en el formulario antes de continuar."


@dataclass
class Column:
    label: str
    value: Callable[[dict], Any]
    badge: Optional[Callable[[dict], str]] = None


@dataclass
class Resource:
    slug: str
    title: str
    noun: str
    article: str
    api_item: str
    api_collection: str
    form: FormDefinition
    search: Callable[..., List[dict]]
    columns: List[Column]
    details: List[Column]
    stats: Optional[Callable[[List[dict]], dict]] = None
    status_choices: List[str] = field(default_factory=list)
    display_name: Callable[[dict], str] = full_name
    feminine: bool = False

    # labels
    @property
    def the_noun(self) -> str:
        return f"{self.article} {self.noun}"

    def _participle(self, masc: str) -> str:
        return masc[:-1] + 'a' if self.feminine else masc

    def done(self, verb: str) -> str:
        return f"{self.noun[:1].upper()}{self.noun[1:]} {self._participle(verb)} exitosamente!"

    # url names
    def url(self, view: str, pk=None) -> str:
        name = f"{self.slug}_{view}"
        return reverse(name, args=[pk]) if pk is not None else reverse(name)

    # api operations
    def fetch_all(self, api):
        return getattr(api, f"get_{self.api_collection}")()

    def fetch_one(self, api, pk):
        return getattr(api, f"get_{self.api_item}")(pk)

    def create(self, api, payload):
        return getattr(api, f"create_{self.api_item}")(payload)

    def update(self, api, pk, payload):
        return getattr(api, f"update_{self.api_item}")(pk, payload)

    def remove(self, api, pk):
        return getattr(api, f"delete_{self.api_item}")(pk)


def _cell(column: Column, record: dict) -> Dict[str, Any]:
    value = column.value(record)
    return {
        'value': '' if value is None else value,
        'badge': column.badge(record) if column.badge else '',
    }


def _not_found(request, res: Resource, error: Optional[str]):
    return render(request, 'clinic/not_found.html', {
        'resource': res,
        'error': error,
        'back_url': res.url('list'),
    }, status=404)


def list_view(request, res: Resource):
    api = api_service.get_api()
    state = FetchState().load(lambda: res.fetch_all(api))
    q = request.GET.get('q', '')
    status = request.GET.get('status', '')

    records: List[dict] = []
    if state.is_failed:
        messages.error(request, f"Error al cargar la lista de {res.title.lower()}")
    elif isinstance(state.data, list):
        records = state.data

    kwargs = {'status': status} if res.status_choices else {}
    rows = [
        {
            'id': r.get('id'),
            'cells': [_cell(c, r) for c in res.columns],
            'detail_url': res.url('detail', r.get('id')),
            'edit_url': res.url('edit', r.get('id')),
            'delete_url': res.url('delete', r.get('id')),
        }
        for r in res.search(records, q, **kwargs)
    ]
    return render(request, 'clinic/list.html', {
        'resource': res,
        'state': state,
        'columns': res.columns,
        'rows': rows,
        'q': q,
        'status': status,
        'stats': res.stats(records) if res.stats else None,
        'retry_url': request.get_full_path(),
        'new_url': res.url('new'),
    })


def detail_view(request, res: Resource, pk):
    api = api_service.get_api()
    state = FetchState().load(lambda: res.fetch_one(api, pk))
    if state.is_failed or not state.data:
        messages.error(request, f"Error al cargar {res.the_noun}")
        return _not_found(request, res, state.error)

    record = state.data
    return render(request, 'clinic/detail.html', {
        'resource': res,
        'record': record,
        'name': res.display_name(record),
        'fields': [(c.label, _cell(c, record)) for c in res.details],
        'edit_url': res.url('edit', pk),
        'delete_url': res.url('delete', pk),
        'back_url': res.url('list'),
    })


def load_people(api, definition: FormDefinition) -> Dict[str, list]:
    """Picker options for forms that reference patients or doctors."""
    kinds = {f.kind for f in definition.fields}
    options: Dict[str, list] = {'patient': [], 'doctor': []}
    for kind, fetch in (('patient', api.get_patients), ('doctor', api.get_users)):
        if kind not in kinds:
            continue
        resp = fetch()
        if resp.success and isinstance(resp.data, list):
            options[kind] = [(str(p.get('id')), full_name(p)) for p in resp.data]
        else:
            logger.warning("could not load %s options: %s", kind, resp.error)
    return options


def form_fields(definition: FormDefinition, form: FormState, editing: bool, people: Dict[str, list]):
    fields = []
    for spec in definition.field_specs(editing):
        choices = spec.choices
        if spec.kind in ('patient', 'doctor'):
            choices = people.get(spec.kind, [])
        fields.append({
            'name': spec.name,
            'label': spec.label,
            'kind': 'select' if spec.kind in ('patient', 'doctor') else spec.kind,
            'choices': choices or [],
            'required': spec.required,
            'value': form.data.get(spec.name, ''),
            'error': form.error_for(spec.name),
        })
    return fields


def form_view(request, res: Resource, pk=None):
    editing = pk is not None
    api = api_service.get_api()
    definition = res.form
    form = definition.build(editing)
    record = None

    if editing and request.method != 'POST':
        state = FetchState().load(lambda: res.fetch_one(api, pk))
        if state.is_failed or not state.data:
            messages.error(request, f"Error al cargar {res.the_noun}")
            return _not_found(request, res, state.error)
        record = state.data
        form.load(definition.from_record(record))

    if request.method == 'POST':
        for spec in definition.field_specs(editing):
            form.update_field(spec.name, request.POST.get(spec.name, ''))
        if not form.validate_form():
            messages.error(request, FORM_INVALID)
        else:
            form.set_submitting(True)
            payload = definition.to_payload(form.data, editing)
            if editing:
                resp = res.update(api, pk, payload)
            else:
                resp = res.create(api, payload)
            form.set_submitting(False)
            if resp.success:
                messages.success(request, res.done('actualizado' if editing else 'creado'))
                return redirect(res.url('list'))
            verb = 'actualizar' if editing else 'crear'
            messages.error(request, resp.error or f"Error al {verb} {res.the_noun}")

    people = load_people(api, definition)
    return render(request, 'clinic/form.html', {
        'resource': res,
        'editing': editing,
        'pk': pk,
        'record': record,
        'form': form,
        'fields': form_fields(definition, form, editing, people),
        'cancel_url': res.url('list'),
    }, status=400 if form.has_errors else 200)


def delete_view(request, res: Resource, pk):
    if request.method != 'POST':
        return render(request, 'clinic/confirm_delete.html', {
            'resource': res,
            'pk': pk,
            'cancel_url': res.url('list'),
        })
    api = api_service.get_api()
    resp = res.remove(api, pk)
    if resp.success:
        messages.success(request, res.done('eliminado'))
    else:
        messages.error(request, resp.error or f"Error al eliminar {res.the_noun}")
    return redirect(res.url('list'))
