"""
Doctr seed command - inserts reproducible sample doctors.

Usage:
    python manage.py seed                 # 25 doctors
    python manage.py seed --count 100
    python manage.py seed --flush         # delete all doctors first
"""

from django.core.management.base import BaseCommand

from doctr_backend.doctors.seeders import seed_doctors


class Command(BaseCommand):
    help = "Seed the database with sample doctors"

    def add_arguments(self, parser):
        parser.add_argument(
            "--count",
            type=int,
            default=25,
            help="Number of doctors to create (default: 25).",
        )
        parser.add_argument(
            "--flush",
            action="store_true",
            help="Delete all existing doctors before seeding.",
        )

    def handle(self, *args, **options):
        count = options["count"]
        flush = options.get("flush", False)

        self.stdout.write("=" * 60)
        self.stdout.write("  Doctr Seed")
        self.stdout.write("=" * 60)

        stats = seed_doctors(count=count, flush=flush)

        for key, value in sorted(stats.items()):
            self.stdout.write(f"  {key}: {value}")
        self.stdout.write(self.style.SUCCESS("Seeding complete."))
