"""
Base settings for the tax service project.

Environment-specific modules (development, production, test) import
everything from here and override what differs.
"""

from pathlib import Path

from core.config import get_settings
from core.logging import configure_from_settings

BASE_DIR = Path(__file__).resolve().parent.parent.parent

APP_SETTINGS = get_settings()

SECRET_KEY = APP_SETTINGS.secret_key.get_secret_value()

DEBUG = APP_SETTINGS.debug

ALLOWED_HOSTS = APP_SETTINGS.allowed_hosts

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "django.contrib.staticfiles",
    "rest_framework",
    "drf_spectacular",
    "apps.api",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "core.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
            ],
        },
    },
]

# The service keeps no state; the database only backs Django's own apps
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "id"

TIME_ZONE = "Asia/Jakarta"

USE_I18N = True

USE_TZ = True

STATIC_URL = "static/"

# Authentication is handled by the dashboard's gateway
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
}

SPECTACULAR_SETTINGS = {
    "TITLE": "Business Operations Tax API",
    "DESCRIPTION": "PPN and PPh computation for sales and purchase documents",
    "VERSION": "0.1.0",
}

configure_from_settings()
