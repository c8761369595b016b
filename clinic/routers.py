"""
URL mappings for the admin console.

Every record resource exposes the same five screens: list, detail,
new, edit and delete (confirmation on GET, deletion on POST).
"""
from django.urls import include, path

from .views import appointments, diagnoses, doctors, medical_centers, patients, prescriptions
from .views.auth import login_view, logout_view
from .views.dashboard import dashboard
from .views.health import healthz


def crud(prefix, slug, list_view, detail_view, new_view, edit_view, delete_view):
    return [
        path(f'{prefix}/', list_view, name=f'{slug}_list'),
        path(f'{prefix}/new/', new_view, name=f'{slug}_new'),
        path(f'{prefix}/<int:pk>/', detail_view, name=f'{slug}_detail'),
        path(f'{prefix}/<int:pk>/edit/', edit_view, name=f'{slug}_edit'),
        path(f'{prefix}/<int:pk>/delete/', delete_view, name=f'{slug}_delete'),
    ]


urlpatterns = [
    path('', include('django_prometheus.urls')),
    path('healthz', healthz, name='healthz'),
    path('', dashboard, name='dashboard'),
    # Authentication
    path('login/', login_view, name='login'),
    path('logout/', logout_view, name='logout'),
    # Records
    *crud('patients', 'patients', patients.patient_list, patients.patient_detail,
          patients.patient_new, patients.patient_edit, patients.patient_delete),
    *crud('doctors', 'doctors', doctors.doctor_list, doctors.doctor_detail,
          doctors.doctor_new, doctors.doctor_edit, doctors.doctor_delete),
    *crud('diagnoses', 'diagnoses', diagnoses.diagnosis_list, diagnoses.diagnosis_detail,
          diagnoses.diagnosis_new, diagnoses.diagnosis_edit, diagnoses.diagnosis_delete),
    *crud('prescriptions', 'prescriptions', prescriptions.prescription_list, prescriptions.prescription_detail,
          prescriptions.prescription_new, prescriptions.prescription_edit, prescriptions.prescription_delete),
    *crud('medical-centers', 'medical_centers', medical_centers.center_list, medical_centers.center_detail,
          medical_centers.center_new, medical_centers.center_edit, medical_centers.center_delete),
    *crud('appointments', 'appointments', appointments.appointment_list, appointments.appointment_detail,
          appointments.appointment_new, appointments.appointment_edit, appointments.appointment_delete),
]
