"""
WeatherHub Platform - Registry and Ingestion Services

The services hold the device registration, room and weather ingestion
rules. They are built once by HubConfig.ready() and handed to the views,
so nothing in the request path reaches for a module-level database handle.

    - DeviceRegistry: check-in, listing, rename/reassign, removal, and
      identifier authentication
    - RoomDirectory: room CRUD
    - WeatherIngestion: append-only reading log

Every statement runs in autocommit mode; database failures surface as
InternalError and are never retried.

Author:     Gonzalo Patino
Created:    2025
Course:     Southern New Hampshire University
License:    Academic Use Only - See LICENSE file
"""

import logging

from django.db import DatabaseError, IntegrityError, transaction
from django.utils import timezone

from .errors import AuthorizationError, InternalError, ValidationError
from .models import Device, DeviceConfig, Room, WeatherReading

logger = logging.getLogger(__name__)

# Passed as room_id to leave a device's room untouched
KEEP_ROOM = object()


class RoomDirectory:

    def list(self):
        try:
            return list(Room.objects.prefetch_related("devices__config").order_by("name", "id"))
        except DatabaseError as exc:
            raise InternalError() from exc

    def get(self, room_id):
        """Return the room with this id, or raise ValidationError."""
        try:
            room = Room.objects.filter(id=room_id).first()
        except DatabaseError as exc:
            raise InternalError() from exc
        if room is None:
            raise ValidationError(f"Room {room_id} does not exist")
        return room

    def find(self, name: str) -> Room:
        try:
            room = Room.objects.filter(name=name).first()
        except DatabaseError as exc:
            raise InternalError() from exc
        if room is None:
            raise ValidationError(f"Room '{name}' does not exist")
        return room

    def create(self, name: str) -> Room:
        try:
            with transaction.atomic():
                room = Room.objects.create(name=name)
        except IntegrityError as exc:
            raise ValidationError(f"Room '{name}' already exists") from exc
        except DatabaseError as exc:
            raise InternalError() from exc
        logger.info("Created room %s (id=%s)", room.name, room.id)
        return room

    def rename(self, room_id, name: str) -> int:
        try:
            with transaction.atomic():
                return Room.objects.filter(id=room_id).update(name=name)
        except IntegrityError as exc:
            raise ValidationError(f"Room '{name}' already exists") from exc
        except DatabaseError as exc:
            raise InternalError() from exc

    def remove(self, room_id) -> int:
        """
        Delete a room. Devices in it are kept; their room reference is
        cleared by the SET_NULL foreign key.
        """
        try:
            _, per_model = Room.objects.filter(id=room_id).delete()
        except DatabaseError as exc:
            raise InternalError() from exc
        deleted = per_model.get(Room._meta.label, 0)
        if deleted:
            logger.info("Removed room id=%s", room_id)
        return deleted


class DeviceRegistry:

    def __init__(self, rooms: RoomDirectory):
        self.rooms = rooms

    def _queryset(self):
        return Device.objects.select_related("config", "room")

    def register(self, name: str, version: str, address: str, uuid: str = None):
        """
        Check a device in.

        A device already known under this network address keeps its
        identifier. Failing that, a known `uuid` hint resolves to its
        device. Otherwise a fresh identifier is issued.

        Returns a tuple: (Device instance, created flag).
        """
        try:
            existing = self._queryset().filter(config__address=address).first()
            if existing is None and uuid:
                existing = self._queryset().filter(uuid=uuid).first()
            if existing is not None:
                return existing, False

            try:
                with transaction.atomic():
                    device = Device.objects.create(uuid=self._fresh_uuid(), name=name)
                    DeviceConfig.objects.create(device=device, version=version, address=address)
            except IntegrityError:
                # Another check-in from the same address won the insert
                existing = self._queryset().filter(config__address=address).first()
                if existing is None:
                    raise
                return existing, False
        except DatabaseError as exc:
            logger.exception("Failed to register device at %s", address)
            raise InternalError() from exc

        logger.info("Registered device %s (%s) at %s", device.uuid, name, address)
        return device, True

    def _fresh_uuid(self) -> str:
        candidate = Device.generate_uuid()
        while Device.objects.filter(uuid=candidate).exists():
            candidate = Device.generate_uuid()
        return candidate

    def list(self):
        try:
            return list(self._queryset().order_by("created_at", "id"))
        except DatabaseError as exc:
            raise InternalError() from exc

    def rename(self, device_id, name: str, room_id=KEEP_ROOM) -> int:
        """
        Update the name and, unless room_id is KEEP_ROOM, the room of a
        device. room_id=None clears the assignment.

        An unknown device id updates nothing and returns 0.
        """
        fields = {"name": name}
        if room_id is not KEEP_ROOM:
            fields["room"] = self.rooms.get(room_id) if room_id is not None else None
        try:
            return Device.objects.filter(id=device_id).update(**fields)
        except DatabaseError as exc:
            raise InternalError() from exc

    def remove(self, device_id) -> int:
        try:
            _, per_model = Device.objects.filter(id=device_id).delete()
        except DatabaseError as exc:
            logger.exception("Failed to remove device id=%s", device_id)
            raise InternalError() from exc
        deleted = per_model.get(Device._meta.label, 0)
        if deleted:
            logger.info("Removed device id=%s", device_id)
        return deleted

    def authenticate(self, uuid: str) -> Device:
        try:
            device = Device.objects.filter(uuid=uuid).first()
        except DatabaseError as exc:
            raise InternalError() from exc
        if device is None:
            logger.warning("Rejected unknown device identifier %s", uuid)
            raise AuthorizationError()
        return device


class WeatherIngestion:

    def __init__(self, registry: DeviceRegistry):
        self.registry = registry

    def submit(self, uuid: str, temperature: float, humidity: float, pressure: float) -> WeatherReading:
        device = self.registry.authenticate(uuid)
        try:
            reading = WeatherReading.objects.create(
                device=device,
                temperature=temperature,
                humidity=humidity,
                pressure=pressure,
            )
            Device.objects.filter(id=device.id).update(last_seen=timezone.now())
        except DatabaseError as exc:
            logger.exception("Failed to store reading from %s", uuid)
            raise InternalError() from exc

        logger.debug("Stored reading %s from device %s", reading.id, uuid)
        return reading

    def list(self, limit: int = None, uuid: str = None):
        """Readings, most recent first."""
        qs = WeatherReading.objects.select_related("device").order_by("-created_at", "-id")
        if uuid:
            qs = qs.filter(device__uuid=uuid)
        if limit is not None:
            qs = qs[:limit]
        try:
            return list(qs)
        except DatabaseError as exc:
            raise InternalError() from exc
