"""
Errors raised by the hub services.

Each error carries the HTTP status it is reported with; views turn them
into a JSON body of the form {"error": message}.
"""


class HubError(Exception):
    status = 500
    default_message = "Internal server error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(HubError):
    """Malformed or missing request fields."""
    status = 400
    default_message = "Bad request"


class AuthorizationError(HubError):
    """A device identifier that was never issued by the registry."""
    status = 403
    default_message = "Device does not exist, check in first"


class InternalError(HubError):
    """Persistence or serialization failure."""
    status = 500
