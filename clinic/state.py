"""
Single fetch-state container for a screen.

A screen holds exactly one :class:`FetchState` instead of separate
loading/error/data values.  ``start()`` hands out a token; ``settle()``
only applies a response carrying the most recent token, so a result
that arrives after a newer load was started is dropped.
"""
from __future__ import annotations

import itertools
from typing import Any, Optional

IDLE = 'idle'
LOADING = 'loading'
LOADED = 'loaded'
FAILED = 'failed'


class FetchState:
    _tokens = itertools.count(1)

    def __init__(self):
        self.status = IDLE
        self.data: Any = None
        self.error: Optional[str] = None
        self._active: Optional[int] = None

    def start(self) -> int:
        token = next(self._tokens)
        self._active = token
        self.status = LOADING
        self.error = None
        return token

    def settle(self, token: int, response) -> bool:
        """Apply ``response`` if ``token`` is still the active one."""
        if token != self._active:
            return False
        self._active = None
        if response.success:
            self.status = LOADED
            self.data = response.data
            self.error = None
        else:
            self.status = FAILED
            self.data = None
            self.error = response.error or 'Error desconocido'
        return True

    def load(self, fetch) -> 'FetchState':
        token = self.start()
        self.settle(token, fetch())
        return self

    @property
    def is_loading(self) -> bool:
        return self.status == LOADING

    @property
    def is_loaded(self) -> bool:
        return self.status == LOADED

    @property
    def is_failed(self) -> bool:
        return self.status == FAILED

    def __repr__(self) -> str:
        return f"<FetchState {self.status}>"
