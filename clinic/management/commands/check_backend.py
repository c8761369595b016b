from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from clinic.services import api as api_service

COLLECTIONS = [
    ('patients', 'get_patients'),
    ('users', 'get_users'),
    ('diagnostics', 'get_diagnoses'),
    ('prescriptions', 'get_prescriptions'),
    ('medical-centers', 'get_medical_centers'),
    ('appointments', 'get_appointments'),
]


class Command(BaseCommand):
    help = "Check that the clinical records API is reachable and list record counts."

    def add_arguments(self, parser):
        parser.add_argument('--health-only', action='store_true', help="Only call the health endpoint.")

    def handle(self, *args, **options):
        api = api_service.get_api()
        self.stdout.write(f"Backend: {settings.API_BASE_URL}")

        health = api.health_check()
        if not health.success:
            raise CommandError(f"Health check failed: {health.error}")
        self.stdout.write(self.style.SUCCESS("Health check OK"))
        if options['health_only']:
            return

        failures = 0
        for name, method in COLLECTIONS:
            resp = getattr(api, method)()
            if resp.success:
                count = len(resp.data) if isinstance(resp.data, list) else 0
                self.stdout.write(self.style.SUCCESS(f"{name}: {count} records"))
            else:
                failures += 1
                self.stdout.write(self.style.ERROR(f"{name}: {resp.error}"))

        if failures:
            raise CommandError(f"{failures} collection(s) could not be loaded")
        self.stdout.write(self.style.SUCCESS(f"Checked {len(COLLECTIONS)} collections"))
