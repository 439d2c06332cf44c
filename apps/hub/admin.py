# Register your models here.
from django.contrib import admin
from .models import Device, DeviceConfig, Room, WeatherReading


class DeviceConfigInline(admin.StackedInline):
    model = DeviceConfig
    extra = 0
    can_delete = False


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ("name", "created_at")
    search_fields = ("name",)


@admin.register(Device)
class DeviceAdmin(admin.ModelAdmin):
    list_display = ("name", "uuid", "room", "last_seen", "created_at")
    list_filter = ("room",)
    search_fields = ("name", "uuid", "config__address")
    readonly_fields = ("uuid", "created_at", "last_seen")
    inlines = [DeviceConfigInline]


# Readings are append-only; the admin only shows them
@admin.register(WeatherReading)
class WeatherReadingAdmin(admin.ModelAdmin):
    list_display = ("id", "device", "temperature", "humidity", "pressure", "created_at")
    list_filter = ("device",)
    ordering = ("-created_at",)

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
