"""
WSGI config for the LibreMedic console.

It exposes the WSGI callable as a module-level variable named ``application``.
"""
import os

from django.core.wsgi import get_wsgi_application  # type: ignore

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'libremedic.settings')

application = get_wsgi_application()
