"""
Doctors App Configuration
"""

from django.apps import AppConfig


class DoctorsConfig(AppConfig):
    """Doctor registry (single table)."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'doctr_backend.doctors'
    verbose_name = 'Doctors'
