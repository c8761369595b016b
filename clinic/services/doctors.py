from __future__ import annotations

from typing import Iterable, List

from clinic.utils import contains, full_name


def search_doctors(doctors: Iterable[dict], q: str = '') -> List[dict]:
    q = (q or '').strip()
    if not q:
        return list(doctors)
    return [
        d for d in doctors
        if contains(full_name(d), q) or contains(d.get('email'), q) or contains(d.get('specialty'), q)
    ]


def doctor_name(doctor) -> str:
    name = full_name(doctor)
    return f"Dr. {name}" if name else ''


def doctor_stats(doctors: List[dict]) -> dict:
    return {
        'total': len(doctors),
        'specialties': len({d.get('specialty') for d in doctors if d.get('specialty')}),
    }
