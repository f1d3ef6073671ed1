"""
Django signals for the media app.

Provides:
- owner_unresolved: sent whenever an ownership record is dropped because
  its owner can't be resolved (unknown type, dangling id, block without a
  parent). Receivers get ``record`` (OwnershipRecord) and ``reason``.
- Cache reset of the media library registries when ``MEDIA_LIBRARY``
  changes (``override_settings`` in tests).

Usage:
    from media.signals import owner_unresolved

    def report_orphan(sender, record, reason, **kwargs):
        ...

    owner_unresolved.connect(report_orphan)
"""

from __future__ import annotations

import logging

from django.core.signals import setting_changed
from django.dispatch import Signal

logger = logging.getLogger(__name__)

MEDIA_LIBRARY_SETTING = "MEDIA_LIBRARY"

owner_unresolved = Signal()


def connect_signals():
    """
    Connect all signal handlers.

    Called from MediaConfig.ready() so handlers are connected once the
    app registry is loaded.
    """
    setting_changed.connect(
        reset_media_library_caches,
        dispatch_uid="media_library_setting_changed",
    )

    logger.debug("Media signals connected")


def reset_media_library_caches(sender, setting: str, **kwargs) -> None:
    """
    Drop cached registries built from MEDIA_LIBRARY.

    Args:
        sender: Settings wrapper sending the signal.
        setting: Name of the changed setting.
        **kwargs: Additional signal arguments.
    """
    if setting != MEDIA_LIBRARY_SETTING:
        return

    from media.fields import get_field_registry
    from media.metadata import get_metadata_resolver
    from media.registry import get_owner_registry
    from media.services.image import get_image_service

    get_field_registry.cache_clear()
    get_metadata_resolver.cache_clear()
    get_owner_registry.cache_clear()
    get_image_service.cache_clear()

    logger.debug("Media library caches cleared")
