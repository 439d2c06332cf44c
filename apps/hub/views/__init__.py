"""
Views package for the hub app.

Views are organized into submodules:
  - helpers: Shared decorators, request parsing, and serializers
  - devices: Device check-in and management (JSON)
  - rooms: Room CRUD (JSON)
  - weather: Reading submission and history (JSON)
  - dashboard: HTML overview page
"""

from .dashboard import index
from .devices import devices
from .rooms import rooms
from .weather import weather

__all__ = [
    "devices",
    "index",
    "rooms",
    "weather",
]
