"""
Core App Configuration
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Health check, audit logging and management commands."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'doctr_backend.core'
    verbose_name = 'Core'
