from unittest import mock

import pytest
from django.db import DatabaseError

from apps.hub.errors import AuthorizationError, InternalError, ValidationError
from apps.hub.models import Device, DeviceConfig, Room, WeatherReading
from apps.hub.services import KEEP_ROOM

pytestmark = pytest.mark.django_db


def test_services_are_wired_once(services):
    assert services.registry.rooms is services.rooms
    assert services.ingestion.registry is services.registry


def test_register_is_idempotent_per_address(services):
    device, created = services.registry.register("A", "1.0", "10.0.0.1")
    again, created_again = services.registry.register("B", "2.0", "10.0.0.1")

    assert created is True
    assert created_again is False
    assert again.pk == device.pk
    assert again.uuid == device.uuid
    # First check-in wins; later ones do not overwrite metadata
    assert again.name == "A"
    assert again.config.version == "1.0"


def test_register_failure_is_internal_error(services):
    with mock.patch.object(DeviceConfig.objects, "create", side_effect=DatabaseError("locked")):
        with pytest.raises(InternalError):
            services.registry.register("A", "1.0", "10.0.0.1")

    # The device row is rolled back with its config
    assert Device.objects.count() == 0


def test_authenticate_unknown_identifier(services):
    with pytest.raises(AuthorizationError) as excinfo:
        services.registry.authenticate("missing")

    assert excinfo.value.status == 403


def test_rename_keeps_room_unless_given(services):
    room = services.rooms.create("Hall")
    device, _ = services.registry.register("A", "1.0", "10.0.0.1")
    services.registry.rename(device.id, "A", room.id)

    assert services.registry.rename(device.id, "B", KEEP_ROOM) == 1

    device.refresh_from_db()
    assert device.name == "B"
    assert device.room == room


def test_rename_with_unknown_room(services):
    device, _ = services.registry.register("A", "1.0", "10.0.0.1")

    with pytest.raises(ValidationError):
        services.registry.rename(device.id, "B", 404)


def test_remove_counts_only_devices(services):
    device, _ = services.registry.register("A", "1.0", "10.0.0.1")

    assert services.registry.remove(device.id) == 1
    assert services.registry.remove(device.id) == 0


def test_remove_failure_is_internal_error(services):
    with mock.patch("apps.hub.services.Device.objects.filter", side_effect=DatabaseError("locked")):
        with pytest.raises(InternalError):
            services.registry.remove(1)


def test_submit_rejects_unknown_device_without_writing(services):
    with pytest.raises(AuthorizationError):
        services.ingestion.submit("missing", 1.0, 2.0, 3.0)

    assert WeatherReading.objects.count() == 0


def test_submit_and_list(services):
    device, _ = services.registry.register("A", "1.0", "10.0.0.1")

    first = services.ingestion.submit(device.uuid, 1.0, 2.0, 3.0)
    second = services.ingestion.submit(device.uuid, 4.0, 5.0, 6.0)

    assert [r.pk for r in services.ingestion.list()] == [second.pk, first.pk]
    assert first.created_at <= second.created_at
    assert [r.pk for r in services.ingestion.list(limit=1)] == [second.pk]


def test_room_rename_to_existing_name(services):
    services.rooms.create("Hall")
    other = services.rooms.create("Attic")

    with pytest.raises(ValidationError):
        services.rooms.rename(other.id, "Hall")

    assert Room.objects.get(id=other.id).name == "Attic"


def test_find_room_by_name(services):
    hall = services.rooms.create("Hall")

    assert services.rooms.find("Hall") == hall
    with pytest.raises(ValidationError):
        services.rooms.find("Cellar")
