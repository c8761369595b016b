from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional

from clinic.utils import contains, full_name, to_date, today as _today

GENDER_LABELS = {'male': 'Masculino', 'female': 'Femenino', 'other': 'Otro'}


def search_patients(patients: Iterable[dict], q: str = '') -> List[dict]:
    """Case-insensitive substring match on full name, email and phone."""
    q = (q or '').strip()
    if not q:
        return list(patients)
    return [
        p for p in patients
        if contains(full_name(p), q) or contains(p.get('email'), q) or contains(p.get('phone'), q)
    ]


def patient_age(date_of_birth, today: Optional[date] = None) -> Optional[int]:
    born = to_date(date_of_birth)
    if born is None:
        return None
    today = today or _today()
    age = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        age -= 1
    return age


def gender_display(gender: Optional[str]) -> str:
    return GENDER_LABELS.get(gender or '', gender or '')


def has_allergies(patient: dict) -> bool:
    allergies = (patient.get('allergies') or '').strip()
    return bool(allergies) and allergies.lower() != 'ninguna'


def patient_stats(patients: List[dict]) -> dict:
    total = len(patients)
    male = sum(1 for p in patients if p.get('gender') == 'male')
    return {
        'total': total,
        'male': male,
        'malePct': round(male * 100 / total) if total else 0,
        'withAllergies': sum(1 for p in patients if has_allergies(p)),
    }
