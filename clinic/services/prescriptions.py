"""
Client-side prescription status.

The backend stores only ``endDate``; whether a prescription is active,
about to expire or expired is derived here from the current date.
"""
from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional

from clinic.utils import contains, full_name, to_date, today as _today

ACTIVE = 'Activa'
EXPIRING = 'Por Vencer'
EXPIRED = 'Vencida'
STATUSES = [ACTIVE, EXPIRING, EXPIRED]

EXPIRING_WINDOW_DAYS = 7

STATUS_CLASSES = {ACTIVE: 'ok', EXPIRING: 'warn', EXPIRED: 'danger'}


def prescription_status(end_date, today: Optional[date] = None) -> str:
    end = to_date(end_date)
    if end is None:
        return ACTIVE
    today = today or _today()
    if end < today:
        return EXPIRED
    if (end - today).days < EXPIRING_WINDOW_DAYS:
        return EXPIRING
    return ACTIVE


def days_remaining(end_date, today: Optional[date] = None) -> Optional[int]:
    end = to_date(end_date)
    if end is None:
        return None
    return (end - (today or _today())).days


def status_class(status: str) -> str:
    return STATUS_CLASSES.get(status, 'muted')


def search_prescriptions(prescriptions: Iterable[dict], q: str = '', status: str = '',
                         today: Optional[date] = None) -> List[dict]:
    q = (q or '').strip()
    result = []
    for p in prescriptions:
        if status and prescription_status(p.get('endDate'), today) != status:
            continue
        if q and not (
            contains(p.get('medication'), q)
            or contains(full_name(p.get('Patient')), q)
            or contains(p.get('id'), q)
        ):
            continue
        result.append(p)
    return result


def prescription_stats(prescriptions: List[dict], today: Optional[date] = None) -> dict:
    counts = {s: 0 for s in STATUSES}
    for p in prescriptions:
        counts[prescription_status(p.get('endDate'), today)] += 1
    return {'total': len(prescriptions), 'byStatus': counts}
