from __future__ import annotations

from .base import *  # noqa: F403,F405

DEBUG = False
ALLOWED_HOSTS = ["localhost", "testserver"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    },
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    "PAGE_SIZE": 20,
}
DOCTORS_MAX_PAGE_SIZE = 2000

DOCTR_API_USERNAME = "admin"
DOCTR_API_PASSWORD = "password"

# Keep test output quiet; tests assert on loggers via assertLogs.
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "null": {"class": "logging.NullHandler"},
    },
    "root": {"handlers": ["null"], "level": "WARNING"},
    "loggers": {
        "doctr_backend": {"handlers": ["null"], "level": "INFO", "propagate": False},
    },
}
