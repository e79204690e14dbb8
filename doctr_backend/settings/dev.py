"""
Development settings for the Doctr backend (SQLite, browsable API).

Usage:
    export DJANGO_SETTINGS_MODULE=doctr_backend.settings.dev
    python manage.py migrate
    python manage.py ensure_api_user --password password
    python manage.py runserver
"""

from __future__ import annotations

from .base import *  # noqa: F403,F405

# ------------------------------------------------------------
# Development overrides
# ------------------------------------------------------------

DEBUG = True
ALLOWED_HOSTS = ["localhost", "127.0.0.1", "[::1]", "*"]

REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    "DEFAULT_AUTHENTICATION_CLASSES": (
        "rest_framework.authentication.BasicAuthentication",
        "rest_framework.authentication.SessionAuthentication",  # browsable API
    ),
    "DEFAULT_RENDERER_CLASSES": (
        "rest_framework.renderers.JSONRenderer",
        "rest_framework.renderers.BrowsableAPIRenderer",
    ),
}

# Matches the credential the API clients use out of the box.
DOCTR_API_PASSWORD = DOCTR_API_PASSWORD or "password"

CORS_ALLOW_ALL_ORIGINS = True
CORS_ALLOW_CREDENTIALS = True

# Verbose logging in dev
LOGGING["root"]["level"] = "INFO"
LOGGING["loggers"]["doctr_backend"]["level"] = "DEBUG"

# Security relaxed
SECURE_SSL_REDIRECT = False
SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False
SECURE_HSTS_SECONDS = 0
