from __future__ import annotations

from typing import Iterable, List

from clinic.utils import contains


def search_centers(centers: Iterable[dict], q: str = '') -> List[dict]:
    q = (q or '').strip()
    if not q:
        return list(centers)
    return [
        c for c in centers
        if contains(c.get('name'), q) or contains(c.get('email'), q) or contains(c.get('type'), q)
    ]


def center_stats(centers: List[dict]) -> dict:
    capacity = 0
    for c in centers:
        try:
            capacity += int(c.get('capacity') or 0)
        except (TypeError, ValueError):
            continue
    return {
        'total': len(centers),
        'types': len({c.get('type') for c in centers if c.get('type')}),
        'capacity': capacity,
    }
