"""URL configuration for the API application."""

from django.urls import path

from apps.api.views import HealthCheckView, TaxCalculationView

app_name = "api"

urlpatterns = [
    path("taxes/calculate/", TaxCalculationView.as_view(), name="tax-calculate"),
    path("health/", HealthCheckView.as_view(), name="health"),
]
