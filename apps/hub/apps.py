"""
WeatherHub Platform - Hub Application Configuration

Django application configuration for the hub app. The registry and
ingestion services are constructed here, once per process, and the views
look them up through `get_services()`.

Author:     Gonzalo Patino
Created:    2025
Course:     Southern New Hampshire University
License:    Academic Use Only - See LICENSE file
"""

from django.apps import AppConfig, apps


class HubConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.hub"
    label = "hub"
    verbose_name = "WeatherHub"

    def ready(self):
        from .services import DeviceRegistry, RoomDirectory, WeatherIngestion

        self.rooms = RoomDirectory()
        self.registry = DeviceRegistry(self.rooms)
        self.ingestion = WeatherIngestion(self.registry)


def get_services() -> HubConfig:
    return apps.get_app_config("hub")
