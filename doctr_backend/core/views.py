"""Core app views."""

import logging

from django.db import DatabaseError, connection
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def health(request):
    """Health check endpoint - no authentication required."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1;')
    except DatabaseError as exc:
        logger.warning('Health check failed: %s', exc)
        return JsonResponse({'status': 'error', 'detail': 'Database unavailable.'}, status=503)

    return JsonResponse({'status': 'ok'})
