"""
URL configuration for the Django application.

The `urlpatterns` list routes URLs to views. This is the root URL configuration
that includes all app-specific routes.

URL Structure:
    /                              - ReDoc API documentation
    /schema/                       - OpenAPI schema (YAML)
    /health/                       - Health check endpoint (for load balancers, Docker)
    /admin/media-library/          - Media library endpoints (staff only)
        medias/                    - List media
        medias/{id}/               - Get/delete media
        medias/single-update/      - Update one media
        medias/bulk-update/        - Update many media
        medias/bulk-delete/        - Delete many media
    /admin/                        - Django admin interface

The media library is mounted under the admin path so the links built by
media.services.routes.RouteBuilder resolve to these views.

For more information, see:
https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""

from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView

from core.views import health_check

urlpatterns = [
    # Documentation
    path("", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    # Health check (Docker, Kubernetes, load balancers)
    path("health/", health_check, name="health_check"),
    # Media library (before the admin site so its catch-all doesn't shadow it)
    path("admin/media-library/", include("media.urls")),
    # Admin
    path("admin/", admin.site.urls),
]

# =============================================================================
# Admin Site Customization
# =============================================================================
admin.site.site_header = "Media Library Admin"
admin.site.site_title = "Admin Portal"
admin.site.index_title = "Welcome to the Admin Portal"
