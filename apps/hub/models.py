"""
WeatherHub Platform - Database Models

This module defines the data models for the WeatherHub platform:
    - Room: Logical grouping label devices may be assigned to
    - Device: Registered sensor identified by a server-issued opaque token
    - DeviceConfig: Firmware version and network address of a device
    - WeatherReading: Append-only log of temperature/humidity/pressure samples

Author:     Gonzalo Patino
Created:    2025
Course:     Southern New Hampshire University
License:    Academic Use Only - See LICENSE file
"""

import uuid

from django.db import models


# Label shown for devices that are not assigned to any room
UNASSIGNED_LOCATION = "Unassigned"


class Room(models.Model):
    name = models.CharField(max_length=100, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name


class Device(models.Model):
    # Opaque identifier handed to the device on check-in
    uuid = models.CharField(max_length=36, unique=True, editable=False)
    name = models.CharField(max_length=100)
    room = models.ForeignKey(
        Room,
        related_name="devices",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)

    # Last time the device submitted a reading
    last_seen = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ["created_at", "id"]

    def __str__(self):
        return f"{self.name} ({self.uuid})"

    @staticmethod
    def generate_uuid() -> str:
        return str(uuid.uuid4())

    def save(self, *args, **kwargs):
        # Devices added through the admin get an identifier too
        if not self.uuid:
            self.uuid = self.generate_uuid()
        super().save(*args, **kwargs)

    @property
    def location(self) -> str:
        return self.room.name if self.room_id else UNASSIGNED_LOCATION


class DeviceConfig(models.Model):
    """
    Static facts a device reports when it checks in.

    The network address is unique: a device that checks in again from the
    same address is the same device.
    """
    device = models.OneToOneField(
        Device,
        on_delete=models.CASCADE,
        related_name="config",
    )
    version = models.CharField(max_length=32)
    address = models.CharField(max_length=64, unique=True)

    def __str__(self):
        return f"{self.address} (firmware {self.version})"


class WeatherReading(models.Model):
    temperature = models.FloatField()
    humidity = models.FloatField()
    pressure = models.FloatField()

    # Kept when the device is removed so the log stays append-only
    device = models.ForeignKey(
        Device,
        related_name="readings",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=["created_at"], name="hub_reading_created_idx"),
        ]

    def __str__(self):
        return f"#{self.pk} {self.temperature}°C @ {self.created_at.isoformat()}"
