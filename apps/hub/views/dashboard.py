"""
Dashboard HTML view - rooms, devices, and the latest readings.
"""

from django.shortcuts import render
from django.views.decorators.http import require_GET

from ..apps import get_services
from .helpers import RECENT_READINGS_LIMIT


@require_GET
def index(request):
    services = get_services()
    devices = services.registry.list()

    context = {
        "rooms": services.rooms.list(),
        "unassigned": [d for d in devices if d.room_id is None],
        "device_count": len(devices),
        "readings": services.ingestion.list(limit=RECENT_READINGS_LIMIT),
    }
    return render(request, "hub/index.html", context)
