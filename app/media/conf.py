"""
Media library configuration access.

All media library settings live in a single ``MEDIA_LIBRARY`` dict in the
Django settings module. This module merges that dict over the defaults so
callers never need to guard against missing keys.

Settings:
    MEDIAS_TABLE: Table holding media assets
    MEDIABLES_TABLE: Association table linking media to owner entities
    EXTRA_METADATA_FIELDS: Extra metadata fields, each a dict with at least "name"
    TRANSLATABLE_METADATA_FIELDS: Names of fields stored per locale
    FALLBACK_LOCALE: Locale consulted when the active locale has no value
    USE_PROPERTY_FALLBACK: Whether the fallback locale is consulted at all
    MORPH_MAP: Owner type tag -> "app_label.ModelName"
    BROWSER_ROUTE_PREFIXES: Module name -> admin route prefix
    ADMIN_PATH: First path segment of admin edit links
    IMAGE_SERVICE: Dotted path to the image service class
    IMAGE_BASE_URL: Base URL the image service builds on

Usage:
    from media.conf import media_library_settings

    table = media_library_settings()["MEDIABLES_TABLE"]
"""

from __future__ import annotations

from typing import Any

from django.conf import settings

DEFAULTS: dict[str, Any] = {
    "MEDIAS_TABLE": "medias",
    "MEDIABLES_TABLE": "mediables",
    "EXTRA_METADATA_FIELDS": [],
    "TRANSLATABLE_METADATA_FIELDS": [],
    "FALLBACK_LOCALE": "en",
    "USE_PROPERTY_FALLBACK": False,
    "MORPH_MAP": {},
    "BROWSER_ROUTE_PREFIXES": {},
    "ADMIN_PATH": "admin",
    "IMAGE_SERVICE": "media.services.image.LocalImageService",
    "IMAGE_BASE_URL": "/img/",
}


def media_library_settings() -> dict[str, Any]:
    """
    Return the effective media library settings.

    Keys missing from ``settings.MEDIA_LIBRARY`` (or ``None`` values) fall
    back to DEFAULTS. The settings are re-read on each call so
    ``override_settings`` in tests takes effect immediately.
    """
    configured = getattr(settings, "MEDIA_LIBRARY", None) or {}
    merged = dict(DEFAULTS)
    merged.update({key: value for key, value in configured.items() if value is not None})
    return merged


def get_setting(name: str) -> Any:
    """Return a single media library setting."""
    return media_library_settings()[name]
