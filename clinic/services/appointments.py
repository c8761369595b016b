from __future__ import annotations

from typing import Iterable, List

from clinic.utils import contains

STATUS_CLASSES = {
    'programada': 'info',
    'confirmada': 'ok',
    'completada': 'done',
    'cancelada': 'danger',
    'en progreso': 'warn',
}


def search_appointments(appointments: Iterable[dict], q: str = '') -> List[dict]:
    """Match reason, status and the first/last names of patient and doctor."""
    q = (q or '').strip()
    if not q:
        return list(appointments)
    result = []
    for a in appointments:
        patient = a.get('Patient') or {}
        doctor = a.get('Doctor') or {}
        fields = [
            a.get('reason'), a.get('status'),
            patient.get('firstName'), patient.get('lastName'),
            doctor.get('firstName'), doctor.get('lastName'),
        ]
        if any(contains(f, q) for f in fields):
            result.append(a)
    return result


def status_class(status) -> str:
    return STATUS_CLASSES.get((status or '').lower(), 'muted')


def appointment_stats(appointments: List[dict]) -> dict:
    def count(name):
        return sum(1 for a in appointments if (a.get('status') or '').lower() == name)
    return {
        'total': len(appointments),
        'scheduled': count('programada'),
        'confirmed': count('confirmada'),
        'completed': count('completada'),
    }
