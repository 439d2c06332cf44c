from django.urls import path

from . import views

urlpatterns = [
    # Dashboard
    path("", views.index, name="index"),

    # Devices
    path("devices", views.devices, name="devices"),

    # Rooms
    path("rooms", views.rooms, name="rooms"),

    # Weather readings
    path("weather", views.weather, name="weather"),
]
