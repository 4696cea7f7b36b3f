"""URL configuration for the plain Django health check."""

from django.urls import path

from .health import health_check

urlpatterns = [
    path("", health_check, name="health"),
]
