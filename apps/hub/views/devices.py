"""
WeatherHub Platform - Device Endpoints

    - GET /devices: devices and rooms
    - POST /devices: device check-in, returns the device identifier
    - PUT /devices: rename a device and/or move it to another room
    - DELETE /devices?id=<id>: remove a device

Author:     Gonzalo Patino
Created:    2025
Course:     Southern New Hampshire University
License:    Academic Use Only - See LICENSE file
"""

from django.http import JsonResponse

from ..apps import get_services
from ..forms import DeviceRegistrationForm, DeviceUpdateForm, IdForm, bind
from ..ratelimits import ratelimit_register
from ..services import KEEP_ROOM
from .helpers import (
    json_endpoint,
    request_data,
    serialize_device,
    serialize_room,
)


@json_endpoint("GET", "POST", "PUT", "DELETE")
def devices(request):
    handler = {
        "GET": list_devices,
        "POST": register_device,
        "PUT": update_device,
        "DELETE": delete_device,
    }[request.method]
    return handler(request)


def list_devices(request):
    """
    Response:
    {
        "devices": [
            {
                "id": 1,
                "uuid": "7f1c...",
                "name": "Balcony",
                "version": "1.0",
                "address": "10.0.0.1",
                "room": 2,
                "location": "Living room",
                ...
            }
        ],
        "rooms": [{"id": 2, "name": "Living room", "devices": [1]}]
    }
    """
    services = get_services()
    return JsonResponse(
        {
            "devices": [serialize_device(d) for d in services.registry.list()],
            "rooms": [serialize_room(r) for r in services.rooms.list()],
        }
    )


@ratelimit_register
def register_device(request):
    """
    Check a device in.

    Body (form or JSON):
    {
        "name": "Balcony",
        "version": "1.0",
        "address": "10.0.0.1",
        "uuid": "..."           # optional, identifier from an earlier check-in
    }

    A device checking in again from the same address gets its existing
    identifier back.
    """
    form = bind(DeviceRegistrationForm, request_data(request))

    device, created = get_services().registry.register(
        form["name"],
        form["version"],
        form["address"],
        uuid=form["uuid"] or None,
    )
    return JsonResponse(
        {
            "id": device.id,
            "uuid": device.uuid,
            "created": created,
        }
    )


def update_device(request):
    """
    Body: {"id": 1, "name": "Balcony", "room": 2}

    "room" is a room id (null clears it). Older clients send "location"
    with a room name instead; an empty location clears the room. With
    neither key the room is left unchanged.
    """
    data = request_data(request)
    form = bind(DeviceUpdateForm, data)
    services = get_services()

    if "room" in data:
        room_id = form["room"]
    elif "location" in data:
        location = form["location"]
        room_id = services.rooms.find(location).id if location else None
    else:
        room_id = KEEP_ROOM

    updated = services.registry.rename(form["id"], form["name"], room_id)
    return JsonResponse({"updated": updated})


def delete_device(request):
    form = bind(IdForm, request.GET)
    deleted = get_services().registry.remove(form["id"])
    return JsonResponse({"deleted": deleted})
