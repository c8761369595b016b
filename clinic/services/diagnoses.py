from __future__ import annotations

from typing import Iterable, List

from clinic.utils import contains, full_name

SEVERITY_CLASSES = {
    'leve': 'ok',
    'moderado': 'warn',
    'grave': 'danger',
    'severo': 'danger',
    'critico': 'danger',
}
SEVERE = {'grave', 'severo', 'critico', 'crítico'}
OPEN_STATUSES = {'activo', 'en seguimiento', 'en tratamiento'}


def search_diagnoses(diagnoses: Iterable[dict], q: str = '', status: str = '') -> List[dict]:
    """Substring search on patient, doctor, diagnosis text and id, plus an exact status filter."""
    q = (q or '').strip()
    result = []
    for d in diagnoses:
        if status and d.get('status') != status:
            continue
        if q and not (
            contains(full_name(d.get('Patient')), q)
            or contains(full_name(d.get('Doctor')), q)
            or contains(d.get('diagnosis'), q)
            or contains(d.get('id'), q)
        ):
            continue
        result.append(d)
    return result


def severity_class(severity) -> str:
    return SEVERITY_CLASSES.get((severity or '').lower(), 'muted')


def diagnosis_stats(diagnoses: List[dict]) -> dict:
    return {
        'total': len(diagnoses),
        'open': sum(1 for d in diagnoses if (d.get('status') or '').lower() in OPEN_STATUSES),
        'severe': sum(1 for d in diagnoses if (d.get('severity') or '').lower() in SEVERE),
        'resolved': sum(1 for d in diagnoses if (d.get('status') or '').lower() == 'resuelto'),
    }
