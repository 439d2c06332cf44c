"""
Room endpoints - CRUD on the labels devices are grouped by.
"""

from django.http import JsonResponse

from ..apps import get_services
from ..forms import IdForm, RoomForm, RoomUpdateForm, bind
from .helpers import json_endpoint, request_data, serialize_room


@json_endpoint("GET", "POST", "PUT", "DELETE")
def rooms(request):
    directory = get_services().rooms

    if request.method == "GET":
        return JsonResponse([serialize_room(r) for r in directory.list()], safe=False)

    if request.method == "POST":
        form = bind(RoomForm, request_data(request))
        room = directory.create(form["name"])
        return JsonResponse({"id": room.id, "name": room.name, "devices": []})

    if request.method == "PUT":
        form = bind(RoomUpdateForm, request_data(request))
        return JsonResponse({"updated": directory.rename(form["id"], form["name"])})

    # DELETE: devices in the room stay, unassigned
    form = bind(IdForm, request.GET)
    return JsonResponse({"deleted": directory.remove(form["id"])})
