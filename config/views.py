"""
WeatherHub Platform - Root Views

This module provides root-level views for the Django project.

Author:     Gonzalo Patino
Created:    2025
Course:     Southern New Hampshire University
License:    Academic Use Only - See LICENSE file
"""

import time

from django.conf import settings
from django.http import JsonResponse

# Process start, used for the uptime report
STARTED_AT = time.monotonic()


def health(request):
    """
    Health check endpoint for load balancers and monitoring.

    Returns:
        JsonResponse: running version and uptime in whole seconds.
    """
    return JsonResponse(
        {
            "version": settings.WEATHERHUB_VERSION,
            "uptime": int(time.monotonic() - STARTED_AT),
        }
    )
