"""
Open CORS policy for the JSON API.

The dashboard may be served from a different origin than the API, and
devices do not send an Origin at all, so every response allows any origin.
Preflight OPTIONS requests are answered here without reaching the views.
"""

from django.http import HttpResponse

ALLOWED_METHODS = "GET, POST, PUT, DELETE, OPTIONS"


class OpenCorsMiddleware:

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if request.method == "OPTIONS" and "HTTP_ACCESS_CONTROL_REQUEST_METHOD" in request.META:
            response = HttpResponse(status=200)
            response["Access-Control-Allow-Methods"] = ALLOWED_METHODS
            response["Access-Control-Allow-Headers"] = request.META.get(
                "HTTP_ACCESS_CONTROL_REQUEST_HEADERS", "Content-Type"
            )
            response["Access-Control-Max-Age"] = "86400"
        else:
            response = self.get_response(request)

        response["Access-Control-Allow-Origin"] = "*"
        return response
