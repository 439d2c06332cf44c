"""
Weather views - reading submission and history.
"""

import logging
import time

from django.conf import settings
from django.http import JsonResponse

from ..apps import get_services
from ..forms import WeatherForm, WeatherQueryForm, bind
from ..ratelimits import ratelimit_weather
from .helpers import json_endpoint, request_data, serialize_reading

logger = logging.getLogger(__name__)


@json_endpoint("GET", "POST")
def weather(request):
    """
    GET /weather
        All readings, newest first. Optional query params:
          - limit: cap on the number of readings returned
          - uuid: only readings from this device

    POST /weather
        Form or JSON body:
        {
            "uuid": "<device identifier>",
            "temperature": 21.5,
            "humidity": 40.0,
            "pressure": 1013.2
        }

        - 200 with the stored reading
        - 400 if a field is missing or not a number
        - 403 if the device never checked in
    """
    if request.method == "POST":
        return submit_reading(request)
    return list_readings(request)


def list_readings(request):
    query = bind(WeatherQueryForm, request.GET)

    limit = query["limit"]
    if limit is not None:
        limit = min(limit, settings.WEATHER_LIST_MAX_LIMIT)

    delay = settings.WEATHERHUB_READ_DELAY
    if delay > 0:
        time.sleep(delay)

    readings = get_services().ingestion.list(limit=limit, uuid=query["uuid"] or None)
    return JsonResponse([serialize_reading(r) for r in readings], safe=False)


@ratelimit_weather
def submit_reading(request):
    form = bind(WeatherForm, request_data(request))

    reading = get_services().ingestion.submit(
        form["uuid"],
        form["temperature"],
        form["humidity"],
        form["pressure"],
    )
    return JsonResponse(serialize_reading(reading))
