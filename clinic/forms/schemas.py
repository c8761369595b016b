"""
Form definitions for every record screen.

Each :class:`FormDefinition` bundles the default record, the field
validators handed to :class:`~clinic.forms.validation.FormState`, the
cross-field rules and the conversions between the backend record and
the flat string values a HTML form carries.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import bleach

from clinic.forms.validation import FormState, RecordValidator, Validator, date_order, is_blank, rules
from clinic.utils import iso_day

BLOOD_TYPES = ['A+', 'A-', 'B+', 'B-', 'AB+', 'AB-', 'O+', 'O-']
GENDERS = [('male', 'Masculino'), ('female', 'Femenino'), ('other', 'Otro')]
SPECIALTIES = [
    'Cardiología', 'Dermatología', 'Endocrinología', 'Gastroenterología', 'Ginecología',
    'Hematología', 'Infectología', 'Medicina Interna', 'Nefrología', 'Neurología',
    'Oncología', 'Oftalmología', 'Ortopedia', 'Otorrinolaringología', 'Pediatría',
    'Psiquiatría', 'Radiología', 'Reumatología', 'Traumatología', 'Urología',
]
SEVERITIES = ['Leve', 'Moderado', 'Grave']
DIAGNOSIS_STATUSES = ['Activo', 'En Seguimiento', 'Resuelto', 'Crónico']
FREQUENCIES = [
    'Una vez al día', 'Dos veces al día', 'Tres veces al día', 'Cada 6 horas', 'Cada 8 horas',
    'Cada 12 horas', 'Según necesidad', 'Antes de las comidas', 'Después de las comidas',
    'Con el estómago vacío',
]
CENTER_TYPES = [
    'Hospital General', 'Clínica Privada', 'Centro de Salud', 'Hospital Especializado',
    'Clínica Ambulatoria', 'Centro de Diagnóstico', 'Laboratorio Clínico',
    'Centro de Rehabilitación', 'Hospital Pediátrico', 'Centro de Urgencias',
]
APPOINTMENT_STATUSES = ['Programada', 'Confirmada', 'En Progreso', 'Completada', 'Cancelada']


def _pairs(values):
    return [(v, v) for v in values]


@dataclass
class FieldSpec:
    name: str
    label: str
    kind: str = 'text'
    choices: Optional[List[Tuple[str, str]]] = None
    required: bool = False


@dataclass
class FormDefinition:
    name: str
    fields: List[FieldSpec]
    validators: Dict[str, Validator]
    edit_validators: Dict[str, Validator] = field(default_factory=dict)
    record_validators: List[RecordValidator] = field(default_factory=list)
    edit_record_validators: Optional[List[RecordValidator]] = None
    create_only: Tuple[str, ...] = ()
    numeric: Tuple[str, ...] = ()
    nullable: Tuple[str, ...] = ()
    raw: Tuple[str, ...] = ()
    exclude: Tuple[str, ...] = ()
    extra: Dict[str, Any] = field(default_factory=dict)

    def field_specs(self, editing: bool = False) -> List[FieldSpec]:
        return [f for f in self.fields if not (editing and f.name in self.create_only)]

    def initial(self, editing: bool = False) -> Dict[str, Any]:
        return {f.name: '' for f in self.field_specs(editing)}

    def build(self, editing: bool = False) -> FormState:
        names = {f.name for f in self.field_specs(editing)}
        validators = {k: v for k, v in self.validators.items() if k in names}
        if editing:
            validators.update({k: v for k, v in self.edit_validators.items() if k in names})
        record_validators = self.record_validators
        if editing and self.edit_record_validators is not None:
            record_validators = self.edit_record_validators
        return FormState(self.initial(editing), validators, record_validators)

    def from_record(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """Flatten a backend record into form values (edit pre-population)."""
        values: Dict[str, Any] = {}
        for spec in self.field_specs(editing=True):
            value = record.get(spec.name)
            if value is None:
                values[spec.name] = ''
            elif spec.kind == 'date':
                values[spec.name] = iso_day(value)
            else:
                values[spec.name] = str(value)
        return values

    def to_payload(self, data: Dict[str, Any], editing: bool = False) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        for spec in self.field_specs(editing):
            name = spec.name
            if name in self.exclude:
                continue
            value = data.get(name, '')
            if name in self.numeric:
                payload[name] = _to_int(value)
            elif name in self.nullable and is_blank(value):
                payload[name] = None
            elif isinstance(value, str) and name not in self.raw:
                payload[name] = bleach.clean(value.strip(), strip=True)
            else:
                payload[name] = value
        payload.update(self.extra)
        return payload


def _to_int(value: Any) -> Optional[int]:
    # numeric fields carry rules.integer, so only validated values get here
    if is_blank(value):
        return None
    return int(str(value).strip())


def _passwords_match(record: dict) -> List[Tuple[str, str]]:
    confirm = record.get('confirmPassword')
    if is_blank(confirm):
        return [('confirmPassword', 'Confirma la contraseña')]
    if confirm != record.get('password'):
        return [('confirmPassword', 'Las contraseñas no coinciden')]
    return []


PATIENT_FORM = FormDefinition(
    name='patient',
    fields=[
        FieldSpec('firstName', 'Nombre', required=True),
        FieldSpec('lastName', 'Apellidos', required=True),
        FieldSpec('email', 'Email', kind='email', required=True),
        FieldSpec('phone', 'Teléfono', required=True),
        FieldSpec('identification', 'DNI/NIE', required=True),
        FieldSpec('dateOfBirth', 'Fecha de nacimiento', kind='date', required=True),
        FieldSpec('gender', 'Género', kind='select', choices=GENDERS, required=True),
        FieldSpec('bloodType', 'Grupo sanguíneo', kind='select', choices=_pairs(BLOOD_TYPES)),
        FieldSpec('address', 'Dirección', kind='textarea'),
        FieldSpec('emergencyContact', 'Contacto de emergencia'),
        FieldSpec('emergencyPhone', 'Teléfono de emergencia'),
        FieldSpec('allergies', 'Alergias', kind='textarea'),
        FieldSpec('medicalHistory', 'Historial médico', kind='textarea'),
    ],
    validators={
        'firstName': rules.requires('El nombre'),
        'lastName': rules.requires('Los apellidos'),
        'email': rules.email,
        'phone': rules.phone,
        'identification': rules.dni,
        'dateOfBirth': rules.age,
        'gender': rules.requires('El género'),
    },
    # records created before the DNI field existed may lack it
    edit_validators={'identification': rules.optional(rules.dni)},
    nullable=('dateOfBirth',),
)

DOCTOR_FORM = FormDefinition(
    name='doctor',
    fields=[
        FieldSpec('firstName', 'Nombre', required=True),
        FieldSpec('lastName', 'Apellidos', required=True),
        FieldSpec('email', 'Email', kind='email', required=True),
        FieldSpec('phone', 'Teléfono', required=True),
        FieldSpec('specialty', 'Especialidad', kind='select', choices=_pairs(SPECIALTIES), required=True),
        FieldSpec('licenseNumber', 'Número de licencia', required=True),
        FieldSpec('address', 'Dirección', kind='textarea'),
        FieldSpec('password', 'Contraseña', kind='password', required=True),
        FieldSpec('confirmPassword', 'Confirmar contraseña', kind='password', required=True),
    ],
    validators={
        'firstName': rules.requires('El nombre'),
        'lastName': rules.requires('Los apellidos'),
        'email': rules.email,
        'phone': rules.phone,
        'specialty': rules.requires('La especialidad'),
        'licenseNumber': rules.requires('El número de licencia'),
        'password': rules.requires('La contraseña'),
    },
    record_validators=[_passwords_match],
    edit_record_validators=[],
    create_only=('password', 'confirmPassword'),
    raw=('password',),
    exclude=('confirmPassword',),
    extra={'role': 'doctor'},
)

DIAGNOSIS_FORM = FormDefinition(
    name='diagnosis',
    fields=[
        FieldSpec('patientId', 'Paciente', kind='patient', required=True),
        FieldSpec('doctorId', 'Médico', kind='doctor', required=True),
        FieldSpec('diagnosis', 'Diagnóstico', required=True),
        FieldSpec('icd10Code', 'Código CIE-10'),
        FieldSpec('symptoms', 'Síntomas', kind='textarea', required=True),
        FieldSpec('treatment', 'Tratamiento', kind='textarea', required=True),
        FieldSpec('severity', 'Severidad', kind='select', choices=_pairs(SEVERITIES), required=True),
        FieldSpec('status', 'Estado', kind='select', choices=_pairs(DIAGNOSIS_STATUSES), required=True),
        FieldSpec('diagnosisDate', 'Fecha de diagnóstico', kind='date', required=True),
        FieldSpec('followUpDate', 'Fecha de seguimiento', kind='date'),
        FieldSpec('notes', 'Notas', kind='textarea'),
    ],
    validators={
        'patientId': rules.integer('El paciente'),
        'doctorId': rules.integer('El médico'),
        'diagnosis': rules.requires('El diagnóstico'),
        'icd10Code': rules.icd10,
        'symptoms': rules.requires('Los síntomas'),
        'treatment': rules.requires('El tratamiento'),
        'severity': rules.requires('La severidad'),
        'status': rules.requires('El estado'),
        'diagnosisDate': rules.requires('La fecha de diagnóstico'),
    },
    record_validators=[
        date_order('diagnosisDate', 'followUpDate', 'la fecha de diagnóstico', 'La fecha de seguimiento'),
    ],
    numeric=('patientId', 'doctorId'),
    nullable=('followUpDate', 'icd10Code', 'notes'),
)

PRESCRIPTION_FORM = FormDefinition(
    name='prescription',
    fields=[
        FieldSpec('patientId', 'Paciente', kind='patient', required=True),
        FieldSpec('prescribedBy', 'Médico', kind='doctor', required=True),
        FieldSpec('medication', 'Medicamento', required=True),
        FieldSpec('dosage', 'Dosis', required=True),
        FieldSpec('frequency', 'Frecuencia', kind='select', choices=_pairs(FREQUENCIES), required=True),
        FieldSpec('instructions', 'Instrucciones', kind='textarea', required=True),
        FieldSpec('startDate', 'Fecha de inicio', kind='date', required=True),
        FieldSpec('endDate', 'Fecha de fin', kind='date'),
    ],
    validators={
        'patientId': rules.integer('El paciente'),
        'prescribedBy': rules.integer('El médico'),
        'medication': rules.requires('El medicamento'),
        'dosage': rules.requires('La dosis'),
        'frequency': rules.requires('La frecuencia'),
        'instructions': rules.requires('Las instrucciones'),
        'startDate': rules.requires('La fecha de inicio'),
    },
    record_validators=[date_order('startDate', 'endDate', 'la fecha de inicio', 'La fecha de fin')],
    numeric=('patientId', 'prescribedBy'),
    nullable=('endDate',),
)

MEDICAL_CENTER_FORM = FormDefinition(
    name='medical_center',
    fields=[
        FieldSpec('name', 'Nombre', required=True),
        FieldSpec('type', 'Tipo', kind='select', choices=_pairs(CENTER_TYPES), required=True),
        FieldSpec('address', 'Dirección', kind='textarea', required=True),
        FieldSpec('phone', 'Teléfono', required=True),
        FieldSpec('email', 'Email', kind='email', required=True),
        FieldSpec('website', 'Sitio web'),
        FieldSpec('capacity', 'Capacidad', kind='number'),
        FieldSpec('description', 'Descripción', kind='textarea'),
    ],
    validators={
        'name': rules.requires('El nombre'),
        'type': rules.requires('El tipo'),
        'address': rules.requires('La dirección'),
        'phone': rules.phone,
        'email': rules.email,
        'capacity': rules.optional(rules.integer('La capacidad')),
    },
    numeric=('capacity',),
    nullable=('website', 'description'),
)

APPOINTMENT_FORM = FormDefinition(
    name='appointment',
    fields=[
        FieldSpec('patientId', 'Paciente', kind='patient', required=True),
        FieldSpec('doctorId', 'Médico', kind='doctor', required=True),
        FieldSpec('appointmentDate', 'Fecha', kind='date', required=True),
        FieldSpec('appointmentTime', 'Hora', kind='time', required=True),
        FieldSpec('reason', 'Motivo', kind='textarea', required=True),
        FieldSpec('status', 'Estado', kind='select', choices=_pairs(APPOINTMENT_STATUSES), required=True),
        FieldSpec('notes', 'Notas', kind='textarea'),
    ],
    validators={
        'patientId': rules.integer('El paciente'),
        'doctorId': rules.integer('El médico'),
        'appointmentDate': rules.requires('La fecha'),
        'appointmentTime': rules.requires('La hora'),
        'reason': rules.requires('El motivo'),
        'status': rules.requires('El estado'),
    },
    numeric=('patientId', 'doctorId'),
    nullable=('notes',),
)

LOGIN_FORM = FormDefinition(
    name='login',
    fields=[
        FieldSpec('email', 'Email', kind='email', required=True),
        FieldSpec('password', 'Contraseña', kind='password', required=True),
    ],
    validators={
        'email': rules.email,
        'password': rules.requires('La contraseña'),
    },
    raw=('password',),
)
