from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from django.utils import timezone
from django.utils.dateparse import parse_date


def to_date(value: Any) -> Optional[date]:
    """Coerce a date, datetime or ISO string (``2024-01-15`` or ``2024-01-15T00:00:00Z``) to a date."""
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    try:
        return parse_date(value.strip()[:10])
    except ValueError:
        return None


def today() -> date:
    return timezone.localdate()


def iso_day(value: Any) -> str:
    d = to_date(value)
    return d.isoformat() if d else ''


def full_name(person: Optional[dict]) -> str:
    if not person:
        return ''
    return f"{person.get('firstName') or ''} {person.get('lastName') or ''}".strip()


def contains(haystack: Any, needle: str) -> bool:
    if haystack is None:
        return False
    return needle.lower() in str(haystack).lower()
