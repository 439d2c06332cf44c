"""
WeatherHub Platform - Root URL Configuration

This module defines the root URL routing for the Django project:
    - / - HTML dashboard
    - /weather, /devices, /rooms - JSON API used by devices and the dashboard
    - /health - Health check endpoint
    - /admin/ - Django admin interface

Author:     Gonzalo Patino
Created:    2025
Course:     Southern New Hampshire University
License:    Academic Use Only - See LICENSE file

For URL routing reference:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""

from django.contrib import admin
from django.urls import include, path

from .views import health


urlpatterns = [
    path("admin/", admin.site.urls),
    path("health", health, name="health"),
    path("", include("apps.hub.urls")),
]
