from datetime import date, timedelta

from clinic.services.appointments import appointment_stats, search_appointments
from clinic.services.diagnoses import search_diagnoses, severity_class
from clinic.services.doctors import doctor_name, search_doctors
from clinic.services.medical_centers import center_stats
from clinic.services.patients import has_allergies, patient_age, patient_stats, search_patients
from clinic.services.prescriptions import (
    ACTIVE,
    EXPIRED,
    EXPIRING,
    days_remaining,
    prescription_stats,
    prescription_status,
    search_prescriptions,
)
from clinic.utils import to_date

TODAY = date(2024, 6, 15)

PATIENTS = [
    {'id': 1, 'firstName': 'Ana', 'lastName': 'López', 'email': 'ana@example.com', 'phone': '600111222',
     'gender': 'female', 'allergies': 'Penicilina'},
    {'id': 2, 'firstName': 'Luis', 'lastName': 'Pérez', 'email': 'luis@example.com', 'phone': '699000111',
     'gender': 'male', 'allergies': 'Ninguna'},
]


def test_prescription_status_boundaries():
    assert prescription_status(TODAY - timedelta(days=1), TODAY) == EXPIRED
    assert prescription_status(TODAY + timedelta(days=3), TODAY) == EXPIRING
    assert prescription_status(TODAY, TODAY) == EXPIRING
    assert prescription_status(TODAY + timedelta(days=7), TODAY) == ACTIVE
    assert prescription_status(None, TODAY) == ACTIVE
    assert prescription_status('', TODAY) == ACTIVE


def test_prescription_status_accepts_timestamps():
    assert prescription_status('2024-06-14T23:00:00.000Z', TODAY) == EXPIRED


def test_days_remaining():
    assert days_remaining('2024-06-20', TODAY) == 5
    assert days_remaining(None, TODAY) is None


def test_search_prescriptions_by_status_and_text():
    items = [
        {'id': 1, 'medication': 'Ibuprofeno', 'endDate': '2024-06-01', 'Patient': PATIENTS[0]},
        {'id': 2, 'medication': 'Amoxicilina', 'endDate': '2024-06-17', 'Patient': PATIENTS[1]},
        {'id': 3, 'medication': 'Omeprazol', 'endDate': None, 'Patient': PATIENTS[1]},
    ]
    assert [p['id'] for p in search_prescriptions(items, status=EXPIRED, today=TODAY)] == [1]
    assert [p['id'] for p in search_prescriptions(items, 'luis', today=TODAY)] == [2, 3]
    assert [p['id'] for p in search_prescriptions(items, 'amox', EXPIRING, TODAY)] == [2]
    stats = prescription_stats(items, TODAY)
    assert stats['byStatus'] == {ACTIVE: 1, EXPIRING: 1, EXPIRED: 1}


def test_search_patients():
    assert [p['id'] for p in search_patients(PATIENTS, 'LÓPEZ')] == [1]
    assert [p['id'] for p in search_patients(PATIENTS, '699')] == [2]
    assert len(search_patients(PATIENTS, '')) == 2
    assert search_patients(PATIENTS, 'zzz') == []


def test_patient_age_before_and_after_birthday():
    assert patient_age('1990-06-15', TODAY) == 34
    assert patient_age('1990-06-16', TODAY) == 33
    assert patient_age('', TODAY) is None


def test_patient_stats():
    stats = patient_stats(PATIENTS)
    assert stats == {'total': 2, 'male': 1, 'malePct': 50, 'withAllergies': 1}
    assert has_allergies({'allergies': ''}) is False


def test_search_doctors_and_name():
    doctors = [{'firstName': 'Marta', 'lastName': 'Ruiz', 'email': 'm@x.es', 'specialty': 'Pediatría'}]
    assert search_doctors(doctors, 'pedia') == doctors
    assert doctor_name(doctors[0]) == 'Dr. Marta Ruiz'
    assert doctor_name(None) == ''


def test_search_diagnoses():
    items = [
        {'id': 1, 'diagnosis': 'Gripe', 'status': 'Activo', 'Patient': PATIENTS[0], 'Doctor': None},
        {'id': 2, 'diagnosis': 'Asma', 'status': 'Resuelto', 'Patient': PATIENTS[1], 'Doctor': None},
    ]
    assert [d['id'] for d in search_diagnoses(items, 'ana')] == [1]
    assert [d['id'] for d in search_diagnoses(items, '', 'Resuelto')] == [2]
    assert severity_class('Grave') == 'danger'
    assert severity_class(None) == 'muted'


def test_search_appointments_matches_names_and_reason():
    items = [
        {'id': 1, 'reason': 'Revisión', 'status': 'Programada', 'Patient': PATIENTS[0], 'Doctor': None},
        {'id': 2, 'reason': 'Dolor', 'status': 'Completada', 'Patient': None, 'Doctor': {'firstName': 'Marta'}},
    ]
    assert [a['id'] for a in search_appointments(items, 'marta')] == [2]
    assert [a['id'] for a in search_appointments(items, 'revis')] == [1]
    assert appointment_stats(items)['completed'] == 1


def test_center_stats_ignores_bad_capacity():
    stats = center_stats([{'type': 'Hospital General', 'capacity': 100}, {'type': 'Hospital General', 'capacity': 'n/a'}])
    assert stats == {'total': 2, 'types': 1, 'capacity': 100}


def test_helpers():
    assert to_date('2024-01-15T10:00:00Z') == date(2024, 1, 15)
    assert to_date('garbage') is None
