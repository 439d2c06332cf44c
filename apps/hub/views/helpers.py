"""
Shared helper functions, decorators, and serializers for views.
"""

import json
import logging
from functools import wraps

from django.core.exceptions import ObjectDoesNotExist
from django.http import JsonResponse, QueryDict
from django.views.decorators.csrf import csrf_exempt

from ..errors import HubError, InternalError, ValidationError

logger = logging.getLogger(__name__)

# How many readings the dashboard shows by default
RECENT_READINGS_LIMIT = 20


# ---------------------------------------------------------------------------
# Decorators
# ---------------------------------------------------------------------------

def json_endpoint(*methods):
    """
    Decorator for JSON API views.

    Restricts the view to the given HTTP methods (405 JSON otherwise),
    exempts it from CSRF (devices have no session), and reports any
    HubError exactly once as {"error": message} with its status.
    """
    def decorator(view_func):
        @csrf_exempt
        @wraps(view_func)
        def _wrapped(request, *args, **kwargs):
            if request.method not in methods:
                response = JsonResponse({"error": "Method not allowed"}, status=405)
                response["Allow"] = ", ".join(methods)
                return response
            try:
                return view_func(request, *args, **kwargs)
            except InternalError as exc:
                logger.exception("Internal error in %s", request.path)
                return JsonResponse({"error": exc.message}, status=exc.status)
            except HubError as exc:
                logger.info("%s %s rejected: %s", request.method, request.path, exc.message)
                return JsonResponse({"error": exc.message}, status=exc.status)
        return _wrapped
    return decorator


# ---------------------------------------------------------------------------
# Request parsing
# ---------------------------------------------------------------------------

def request_data(request):
    """
    Return the request body as a mapping.

    JSON bodies must be an object. Anything else is treated as a
    form-encoded body; Django only parses those for POST, so PUT bodies are
    parsed here.
    """
    if request.content_type == "application/json":
        try:
            payload = json.loads(request.body.decode("utf-8") or "{}")
        except ValueError as exc:
            raise ValidationError(f"Invalid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise ValidationError("Invalid JSON: expected an object")
        return payload

    if request.method == "POST":
        return request.POST
    return QueryDict(request.body, encoding=request.encoding)


# ---------------------------------------------------------------------------
# Serializers
# ---------------------------------------------------------------------------

def _iso(dt):
    return dt.isoformat() if dt else None


def serialize_reading(reading) -> dict:
    return {
        "id": reading.id,
        "temperature": reading.temperature,
        "humidity": reading.humidity,
        "pressure": reading.pressure,
        "device": reading.device.uuid if reading.device_id else None,
        "created_at": _iso(reading.created_at),
    }


def serialize_device(device) -> dict:
    try:
        config = device.config
    except ObjectDoesNotExist:
        # Devices created through the admin may not have checked in yet
        config = None

    return {
        "id": device.id,
        "uuid": device.uuid,
        "name": device.name,
        "version": config.version if config else None,
        "address": config.address if config else None,
        "room": device.room_id,
        "location": device.location,
        "created_at": _iso(device.created_at),
        "last_seen": _iso(device.last_seen),
    }


def serialize_room(room) -> dict:
    return {
        "id": room.id,
        "name": room.name,
        "devices": [d.id for d in room.devices.all()],
    }
