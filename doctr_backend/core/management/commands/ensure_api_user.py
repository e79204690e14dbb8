"""
Create or update the static basic-auth user for the REST API.

Usage:
    python manage.py ensure_api_user
    python manage.py ensure_api_user --username api --password s3cret

Defaults come from DOCTR_API_USERNAME / DOCTR_API_PASSWORD.
"""

import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Create or update the basic-auth API user"

    def add_arguments(self, parser):
        parser.add_argument("--username", default=None, help="Defaults to DOCTR_API_USERNAME.")
        parser.add_argument("--password", default=None, help="Defaults to DOCTR_API_PASSWORD.")

    def handle(self, *args, **options):
        username = options["username"] or settings.DOCTR_API_USERNAME
        password = options["password"] or settings.DOCTR_API_PASSWORD

        if not username:
            raise CommandError("No username given and DOCTR_API_USERNAME is not set.")
        if not password:
            raise CommandError("No password given and DOCTR_API_PASSWORD is not set.")

        User = get_user_model()
        user, created = User.objects.get_or_create(username=username)
        user.set_password(password)
        user.is_active = True
        user.save()

        logger.info("API user %s (username=%s)", "created" if created else "updated", username)
        self.stdout.write(
            self.style.SUCCESS(f"API user '{username}' {'created' if created else 'updated'}.")
        )
