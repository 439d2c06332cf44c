import pytest
from django.core.cache import cache

from apps.hub.apps import get_services


@pytest.fixture(autouse=True)
def no_ratelimit(settings):
    settings.RATELIMIT_ENABLE = False
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def services():
    return get_services()


@pytest.fixture
def register(client):
    """Check a device in over HTTP and return the response JSON."""
    def _register(name="Balcony", version="1.0", address="10.0.0.1", **extra):
        payload = {"name": name, "version": version, "address": address, **extra}
        response = client.post("/devices", payload, content_type="application/json")
        assert response.status_code == 200, response.content
        return response.json()
    return _register


@pytest.fixture
def submit(client):
    """Post a reading over HTTP and return the response."""
    def _submit(uuid, temperature=21.5, humidity=40.0, pressure=1013.2, **kwargs):
        payload = {
            "uuid": uuid,
            "temperature": temperature,
            "humidity": humidity,
            "pressure": pressure,
        }
        return client.post("/weather", payload, content_type="application/json", **kwargs)
    return _submit
