"""
API URL configuration.
"""
from django.urls import path, re_path
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularSwaggerView,
    SpectacularRedocView,
)

from .views import WaitlistView

app_name = "api"

urlpatterns = [
    # Accept both /api/waitlist and /api/waitlist/ so a POST is never redirected
    re_path(r"^waitlist/?$", WaitlistView.as_view(), name="waitlist"),
    # OpenAPI schema
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    # API documentation UIs
    path(
        "docs/",
        SpectacularSwaggerView.as_view(url_name="api:schema"),
        name="swagger-ui",
    ),
    path("redoc/", SpectacularRedocView.as_view(url_name="api:schema"), name="redoc"),
]
