"""
Form state and reusable field validators.

A validator is a plain callable ``(value) -> str`` returning an error
message, or ``""`` when the value is acceptable.  Validators never raise.
Cross-field checks are record validators ``(record) -> [(field, message)]``
and only run from :meth:`FormState.validate_form` once every field passes.
"""
from __future__ import annotations

import copy
import re
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from clinic.utils import to_date, today

Validator = Callable[[Any], str]
RecordValidator = Callable[[dict], List[Tuple[str, str]]]

EMAIL_RE = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
PHONE_RE = re.compile(r'^\+?[\d\s\-()]+$')
DNI_RE = re.compile(r'^[0-9]{8}[TRWAGMYFPDXBNJZSQVHLCKE]$', re.IGNORECASE)
NIE_RE = re.compile(r'^[XYZ][0-9]{7}[TRWAGMYFPDXBNJZSQVHLCKE]$', re.IGNORECASE)
ICD10_RE = re.compile(r'^[A-Z]\d{2}(\.\d{1,2})?$')


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) == 0
    return False


class rules:
    """Validator vocabulary shared by the form definitions."""

    @staticmethod
    def required(value: Any, label: str) -> str:
        if is_blank(value):
            return f"{label} es obligatorio"
        return ""

    @staticmethod
    def email(value: Any) -> str:
        if is_blank(value):
            return "El email es obligatorio"
        if not EMAIL_RE.match(str(value)):
            return "Formato de email inválido"
        return ""

    @staticmethod
    def phone(value: Any) -> str:
        if is_blank(value):
            return "El teléfono es obligatorio"
        if not PHONE_RE.match(str(value)):
            return "Formato de teléfono inválido"
        return ""

    @staticmethod
    def dni(value: Any) -> str:
        if is_blank(value):
            return "El DNI/NIE es obligatorio"
        v = str(value).strip()
        if not DNI_RE.match(v) and not NIE_RE.match(v):
            return "Formato de DNI/NIE inválido"
        return ""

    @staticmethod
    def age(birth_date: Any) -> str:
        if is_blank(birth_date):
            return "La fecha de nacimiento es obligatoria"
        born = to_date(birth_date)
        if born is None:
            return "Fecha de nacimiento inválida"
        years = today().year - born.year
        if years < 0 or years > 150:
            return "Fecha de nacimiento inválida"
        return ""

    @staticmethod
    def integer(label: str) -> Validator:
        """Required whole number, e.g. a picker id submitted as a string."""
        def check(value: Any) -> str:
            if is_blank(value):
                return rules.required(value, label)
            try:
                int(str(value).strip())
            except ValueError:
                return f"{label} debe ser un número"
            return ""
        return check

    @staticmethod
    def icd10(value: Any) -> str:
        if not is_blank(value) and not ICD10_RE.match(str(value).strip()):
            return "Formato de código CIE-10 inválido (ej: J06.9)"
        return ""

    @staticmethod
    def date_range(start: Any, end: Any, start_label: str, end_label: str) -> str:
        s, e = to_date(start), to_date(end)
        if s and e and e <= s:
            return f"{end_label} debe ser posterior a {start_label}"
        return ""

    @staticmethod
    def optional(rule: Validator) -> Validator:
        def check(value: Any) -> str:
            if is_blank(value):
                return ""
            return rule(value)
        return check

    @staticmethod
    def requires(label: str) -> Validator:
        return lambda value: rules.required(value, label)


def date_order(start_field: str, end_field: str, start_label: str, end_label: str) -> RecordValidator:
    """Record validator: ``end_field`` must fall after ``start_field``."""
    def check(record: dict) -> List[Tuple[str, str]]:
        msg = rules.date_range(record.get(start_field), record.get(end_field), start_label, end_label)
        return [(end_field, msg)] if msg else []
    return check


class FormState:
    """Mutable values, per-field errors and the submitting flag of one form.

    The form never talks to the network; the screen toggles
    ``is_submitting`` around its own call and must not issue the call
    unless :meth:`validate_form` returned ``True``.
    """

    def __init__(self, initial: Dict[str, Any], validators: Dict[str, Validator],
                 record_validators: Iterable[RecordValidator] = ()):
        self.initial = copy.deepcopy(initial)
        self.data: Dict[str, Any] = copy.deepcopy(initial)
        self.validators = dict(validators)
        self.record_validators = list(record_validators)
        self.errors: Dict[str, str] = {}
        self.is_submitting = False

    def _run(self, field: str, value: Any) -> str:
        validator = self.validators.get(field)
        if validator is None:
            return ""
        return validator(value) or ""

    def validate_field(self, field: str, value: Any = None) -> bool:
        if value is None:
            value = self.data.get(field)
        error = self._run(field, value)
        if error:
            self.errors[field] = error
        else:
            self.errors.pop(field, None)
        return not error

    def update_field(self, field: str, value: Any) -> None:
        self.data[field] = value
        if self.errors.get(field):
            self.validate_field(field, value)

    def validate_form(self) -> bool:
        errors: Dict[str, str] = {}
        for field in self.validators:
            error = self._run(field, self.data.get(field))
            if error:
                errors[field] = error
        if not errors:
            for check in self.record_validators:
                for field, message in check(self.data):
                    if message and field not in errors:
                        errors[field] = message
        self.errors = errors
        return not errors

    def load(self, record: Dict[str, Any]) -> None:
        for field, value in record.items():
            self.update_field(field, value)

    def set_submitting(self, flag: bool) -> None:
        self.is_submitting = bool(flag)

    def reset(self) -> None:
        self.data = copy.deepcopy(self.initial)
        self.errors = {}
        self.is_submitting = False

    def error_for(self, field: str) -> str:
        return self.errors.get(field, "")

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)
