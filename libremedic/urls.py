"""
URL configuration for the LibreMedic admin console.

All screens are provided by the ``clinic`` app.
"""
from django.urls import include, path

urlpatterns = [
    path('', include('clinic.routers')),
]
