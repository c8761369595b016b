"""
ASGI config for the LibreMedic console.

The console only serves HTTP; views stay synchronous and Django runs
them in a thread under ASGI servers.
"""
import os

from django.core.asgi import get_asgi_application  # type: ignore

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "libremedic.settings")

application = get_asgi_application()
