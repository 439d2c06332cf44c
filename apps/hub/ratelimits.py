"""
WeatherHub Platform - Rate Limiting Decorators

This module provides rate limiting decorators to protect API endpoints
from misbehaving devices:
    - ratelimit_weather: 60 submissions per minute per device identifier
    - ratelimit_register: 30 check-ins per hour per IP

Rates are read from settings on every request so they can be tuned (or
disabled with RATELIMIT_ENABLE) without a restart of the URL config.

Author:     Gonzalo Patino
Created:    2025
Course:     Southern New Hampshire University
License:    Academic Use Only - See LICENSE file
"""

import json
from functools import wraps

from django.conf import settings
from django.http import JsonResponse
from django_ratelimit.decorators import ratelimit


def get_client_ip(request):
    """Extract client IP from request, handling proxies."""
    x_forwarded_for = request.META.get("HTTP_X_FORWARDED_FOR")
    if x_forwarded_for:
        return x_forwarded_for.split(",")[0].strip()
    return request.META.get("REMOTE_ADDR")


def get_device_uuid(request):
    """Extract the claimed device identifier for device-specific rate limiting."""
    uuid = request.POST.get("uuid")
    if not uuid and request.content_type == "application/json":
        try:
            payload = json.loads(request.body.decode("utf-8") or "{}")
        except ValueError:
            payload = None
        if isinstance(payload, dict):
            uuid = payload.get("uuid")
    return str(uuid) if uuid else get_client_ip(request)


def ratelimit_weather(view_func):
    """Rate limit: RATELIMIT_WEATHER submissions per device."""
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        decorated = ratelimit(
            group="weather",
            key=lambda group, req: get_device_uuid(req),
            rate=getattr(settings, "RATELIMIT_WEATHER", "60/m"),
            method=["POST"],
            block=True,
        )(view_func)
        return decorated(request, *args, **kwargs)
    return wrapper


def ratelimit_register(view_func):
    """Rate limit: RATELIMIT_REGISTER device check-ins per IP."""
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        decorated = ratelimit(
            group="register",
            key=lambda group, req: get_client_ip(req),
            rate=getattr(settings, "RATELIMIT_REGISTER", "30/h"),
            method=["POST"],
            block=True,
        )(view_func)
        return decorated(request, *args, **kwargs)
    return wrapper


def ratelimited_error(request, exception=None):
    """Custom view for rate limit exceeded errors."""
    return JsonResponse(
        {
            "error": "rate_limit_exceeded",
            "message": "Too many requests. Please try again later.",
        },
        status=429,
    )
