# apps/hub/templatetags/hub_tags.py
"""
Template filters for the dashboard.
"""
from django import template

register = template.Library()


@register.filter
def device_label(device) -> str:
    """
    Name of the device that sent a reading.

    Usage in templates:
        {{ reading.device|device_label }}
    """
    if device is None:
        return "removed device"
    return device.name or device.uuid


@register.filter
def firmware(device) -> str:
    """
    Firmware version reported at check-in, or "unknown".

    Usage in templates:
        {{ device|firmware }}
    """
    # A missing one-to-one raises a subclass of AttributeError
    config = getattr(device, "config", None)
    return config.version if config else "unknown"
