import pytest
from django.db import connection
from django.test.utils import CaptureQueriesContext

from apps.hub.models import Device, Room

pytestmark = pytest.mark.django_db


def test_create_and_list_rooms(client):
    response = client.post("/rooms", {"name": "Kitchen"}, content_type="application/json")

    assert response.status_code == 200
    room = response.json()
    assert room["name"] == "Kitchen"
    assert room["devices"] == []
    assert client.get("/rooms").json() == [room]


def test_duplicate_room_name_is_bad_request(client):
    client.post("/rooms", {"name": "Kitchen"}, content_type="application/json")

    response = client.post("/rooms", {"name": "Kitchen"}, content_type="application/json")

    assert response.status_code == 400
    assert Room.objects.count() == 1


def test_rename_room(client):
    room = Room.objects.create(name="Kitchen")

    response = client.put("/rooms", {"id": room.id, "name": "Pantry"}, content_type="application/json")

    assert response.json() == {"updated": 1}
    room.refresh_from_db()
    assert room.name == "Pantry"


def test_deleting_room_keeps_its_devices(client, register):
    room = Room.objects.create(name="Kitchen")
    first = register(address="10.0.0.1")
    second = register(address="10.0.0.2")
    Device.objects.filter(id__in=[first["id"], second["id"]]).update(room=room)

    response = client.delete(f"/rooms?id={room.id}")

    assert response.status_code == 200
    assert response.json() == {"deleted": 1}
    assert Device.objects.count() == 2
    assert Device.objects.filter(room__isnull=False).count() == 0
    devices = client.get("/devices").json()["devices"]
    assert {d["location"] for d in devices} == {"Unassigned"}


def test_delete_unknown_room(client):
    response = client.delete("/rooms?id=42")

    assert response.status_code == 200
    assert response.json() == {"deleted": 0}


def test_room_name_is_required(client):
    response = client.post("/rooms", {}, content_type="application/json")

    assert response.status_code == 400


def test_create_room_reads_nothing_back(client):
    with CaptureQueriesContext(connection) as ctx:
        response = client.post("/rooms", {"name": "Cellar"}, content_type="application/json")

    assert response.status_code == 200
    assert response.json()["devices"] == []
    selects = [q["sql"] for q in ctx.captured_queries if q["sql"].lstrip().upper().startswith("SELECT")]
    assert selects == []
