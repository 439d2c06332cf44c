"""
WeatherHub Platform - Django Settings

Settings are read from the environment (optionally a local .env file):
    - DJANGO_SECRET_KEY, DJANGO_DEBUG, DJANGO_ALLOWED_HOSTS
    - WEATHERHUB_DB_PATH: SQLite database file (default: weather.db)
    - WEATHERHUB_VERSION: version reported by /health
    - WEATHERHUB_READ_DELAY: artificial delay in seconds before GET /weather
    - WEATHERHUB_LOG_LEVEL: console log level
    - RATELIMIT_ENABLE, RATELIMIT_WEATHER, RATELIMIT_REGISTER

Author:     Gonzalo Patino
Created:    2025
Course:     Southern New Hampshire University
License:    Academic Use Only - See LICENSE file

For the full list of settings and their values, see
    https://docs.djangoproject.com/en/5.2/ref/settings/
"""

import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")


def _env_bool(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in ("1", "true", "yes", "y", "on")


SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "django-insecure-weatherhub-dev-key")

DEBUG = _env_bool("DJANGO_DEBUG", True)

ALLOWED_HOSTS = [
    h.strip()
    for h in os.getenv("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")
    if h.strip()
]


INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "django_ratelimit",
    "apps.hub",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "apps.hub.middleware.OpenCorsMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    "django_ratelimit.middleware.RatelimitMiddleware",
]

ROOT_URLCONF = "config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "config.wsgi.application"


# Database
# A single SQLite file; schema is created idempotently by `manage.py migrate`.

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.getenv("WEATHERHUB_DB_PATH", str(BASE_DIR / "weather.db")),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"


# Cache (used by django-ratelimit counters)

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "weatherhub",
    }
}


LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"


# ---------------------------------------------------------------------------
# WeatherHub
# ---------------------------------------------------------------------------

WEATHERHUB_VERSION = os.getenv("WEATHERHUB_VERSION", "0.0.1")

# Seconds to sleep before answering GET /weather. Only meant for load tests.
WEATHERHUB_READ_DELAY = float(os.getenv("WEATHERHUB_READ_DELAY", "0") or 0)

# Cap for GET /weather?limit=
WEATHER_LIST_MAX_LIMIT = 1000


# Rate limiting (django-ratelimit)

RATELIMIT_ENABLE = _env_bool("RATELIMIT_ENABLE", True)
RATELIMIT_WEATHER = os.getenv("RATELIMIT_WEATHER", "60/m")
RATELIMIT_REGISTER = os.getenv("RATELIMIT_REGISTER", "30/h")
RATELIMIT_VIEW = "apps.hub.ratelimits.ratelimited_error"

# LocMemCache is per-process; fine for a single-process deployment.
SILENCED_SYSTEM_CHECKS = ["django_ratelimit.E003", "django_ratelimit.W001"]


# Logging

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "apps.hub": {
            "handlers": ["console"],
            "level": os.getenv("WEATHERHUB_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}
