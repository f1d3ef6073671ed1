"""
Tests for media signals.

These tests verify:
- MEDIA_LIBRARY changes reset the cached registries
- Other settings leave the caches alone
"""

from __future__ import annotations

from media.fields import get_field_registry
from media.metadata import get_metadata_resolver
from media.registry import get_owner_registry
from media.services.image import get_image_service
from media.signals import reset_media_library_caches


class TestResetMediaLibraryCaches:
    """Tests for reset_media_library_caches()."""

    def test_setting_change_rebuilds_registries(self, media_library):
        """Overriding MEDIA_LIBRARY rebuilds every cached registry."""
        fields = get_field_registry()
        resolver = get_metadata_resolver()
        owners = get_owner_registry()
        images = get_image_service()

        media_library(EXTRA_METADATA_FIELDS=[{"name": "license"}])

        assert get_field_registry() is not fields
        assert get_field_registry().extra_field_names() == ("license",)
        assert get_metadata_resolver() is not resolver
        assert get_owner_registry() is not owners
        assert get_image_service() is not images

    def test_other_settings_ignored(self):
        """Changes to unrelated settings keep the caches."""
        fields = get_field_registry()

        reset_media_library_caches(sender=None, setting="LANGUAGE_CODE")

        assert get_field_registry() is fields

    def test_direct_call(self):
        """Calling the receiver for MEDIA_LIBRARY clears the caches."""
        fields = get_field_registry()

        reset_media_library_caches(sender=None, setting="MEDIA_LIBRARY")

        assert get_field_registry() is not fields
