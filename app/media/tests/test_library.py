"""
Tests for MediaLibraryService.

These tests verify:
- CMS representation (image URLs, action URLs, metadatas, owners)
- Single and bulk metadata/tag updates, including per-locale values
- Guarded single and bulk deletion
"""

from __future__ import annotations

import pytest
from django.utils import translation

from content.tests.factories import BlockFactory
from core.exceptions import NotFoundError, ValidationError
from media.models import MediaAsset, Mediable, Tag
from media.services.deletion import MEDIA_IN_USE
from media.services.library import MediaLibraryService
from media.tests.factories import MediableFactory, MediaAssetFactory, TagFactory

pytestmark = pytest.mark.django_db


# =============================================================================
# CMS representation
# =============================================================================


class TestCmsPayload:
    """Tests for MediaLibraryService.cms_payload()."""

    def test_unused_media(self, media):
        """An unused media carries image URLs and a delete URL."""
        payload = MediaLibraryService.cms_payload(media)

        assert payload["id"] == media.pk
        assert payload["name"] == "sunset@2x.jpg"
        assert payload["thumbnail"] == "/img/f3c1a2b4-sunset?fit=max&h=256&q=60"
        assert payload["original"] == "/img/f3c1a2b4-sunset"
        assert payload["medium"] == "/img/f3c1a2b4-sunset?h=430"
        assert payload["width"] == 1200
        assert payload["height"] == 800
        assert payload["tags"] == []
        assert payload["deleteUrl"] == f"/admin/media-library/medias/{media.pk}/"
        assert payload["updateUrl"] == "/admin/media-library/medias/single-update/"
        assert payload["updateBulkUrl"] == "/admin/media-library/medias/bulk-update/"
        assert payload["deleteBulkUrl"] == "/admin/media-library/medias/bulk-delete/"
        assert payload["owners"] == []

    def test_used_media_has_no_delete_url(self, media, article):
        """Media in use can't be deleted from the library."""
        Mediable.attach(media, article)

        payload = MediaLibraryService.cms_payload(media)

        assert payload["deleteUrl"] is None
        assert [owner["id"] for owner in payload["owners"]] == [article.pk]
        assert payload["owners"][0]["name"] == "Hello"
        assert payload["owners"][0]["edit"] == f"/admin/content/articles/{article.pk}/edit/"

    def test_dangling_placement_blocks_delete_but_lists_no_owner(self, media):
        """A placement whose owner is gone still blocks deletion."""
        MediableFactory(media=media, mediable_type="articles", mediable_id="999999")

        payload = MediaLibraryService.cms_payload(media)

        assert payload["deleteUrl"] is None
        assert payload["owners"] == []

    def test_owners_listed_once(self, media, article):
        """An owner using the media twice is listed once."""
        Mediable.attach(media, article, role="cover")
        Mediable.attach(media, BlockFactory(parent=article))

        payload = MediaLibraryService.cms_payload(media)

        assert len(payload["owners"]) == 1

    def test_metadatas(self):
        """Default metadatas hold base and extra fields; custom is empty."""
        media = MediaAssetFactory(
            caption={"en": "Sunset"},
            alt_text={"en": "Sun"},
            extra_metadatas={"credit": {"en": "Jane"}},
        )

        metadatas = MediaLibraryService.cms_payload(media)["metadatas"]

        assert metadatas == {
            "default": {
                "caption": {"en": "Sunset"},
                "altText": {"en": "Sun"},
                "video": None,
                "credit": {"en": "Jane"},
            },
            "custom": {"caption": None, "altText": None, "video": None},
        }

    def test_tags(self):
        """Tag names are listed."""
        media = MediaAssetFactory(tags=["Beach"])

        assert MediaLibraryService.cms_payload(media)["tags"] == ["Beach"]

    def test_model_shortcut(self, media):
        """MediaAsset.to_cms_dict() returns the same payload."""
        assert media.to_cms_dict() == MediaLibraryService.cms_payload(media)


# =============================================================================
# update_media
# =============================================================================


class TestUpdateMedia:
    """Tests for MediaLibraryService.update_media()."""

    def test_not_found(self):
        """Unknown ids fail with NOT_FOUND."""
        result = MediaLibraryService.update_media(999999, {"caption": "x"})

        assert result.success is False
        assert result.error_code == NotFoundError.default_error_code

    def test_translatable_scalar_sets_active_language(self):
        """A plain value for a translatable field sets the active language."""
        media = MediaAssetFactory(caption={"en": "Sunset"})

        with translation.override("fr"):
            result = MediaLibraryService.update_media(media.pk, {"caption": "Coucher"})

        assert result.success is True
        media.refresh_from_db()
        assert media.caption == {"en": "Sunset", "fr": "Coucher"}

    def test_translatable_mapping_merges_locales(self):
        """A locale mapping replaces only the locales it names."""
        media = MediaAssetFactory(extra_metadatas={"credit": {"en": "Jane", "fr": "Jeanne"}})

        MediaLibraryService.update_media(media.pk, {"credit": {"fr": "J. Doe"}})

        media.refresh_from_db()
        assert media.extra_metadatas == {"credit": {"en": "Jane", "fr": "J. Doe"}}

    def test_plain_field(self, media_library):
        """Non-translatable fields store the value as given."""
        media_library(TRANSLATABLE_METADATA_FIELDS=[])
        media = MediaAssetFactory()

        MediaLibraryService.update_media(media.pk, {"altText": "Sun", "credit": "Jane"})

        media.refresh_from_db()
        assert media.alt_text == "Sun"
        assert media.extra_metadatas == {"credit": "Jane"}

    def test_plain_field_rejects_mapping(self, media_library):
        """Locale mappings are refused for non-translatable fields."""
        media_library(TRANSLATABLE_METADATA_FIELDS=[])
        media = MediaAssetFactory(alt_text="Sun")

        result = MediaLibraryService.update_media(media.pk, {"alt_text": {"en": "x"}})

        assert result.success is False
        assert result.error_code == ValidationError.default_error_code
        assert result.errors == {"alt_text": ["This field is not translatable."]}
        media.refresh_from_db()
        assert media.alt_text == "Sun"

    def test_unknown_field(self):
        """Unknown fields are refused and nothing is saved."""
        media = MediaAssetFactory(caption={"en": "Sunset"})

        result = MediaLibraryService.update_media(
            media.pk, {"caption": {"en": "Changed"}, "bogus": "x"}
        )

        assert result.success is False
        assert result.errors == {"bogus": ["Unknown metadata field."]}
        media.refresh_from_db()
        assert media.caption == {"en": "Sunset"}

    def test_tags_replaced(self):
        """Given tags replace the current ones."""
        media = MediaAssetFactory(tags=["Beach", "Summer"])

        MediaLibraryService.update_media(media.pk, tags=["summer", "Night"])

        assert sorted(tag.name for tag in media.tags.all()) == ["Night", "Summer"]
        assert Tag.objects.count() == 3

    def test_tags_none_keeps_tags(self):
        """Omitting tags keeps the current ones."""
        media = MediaAssetFactory(tags=["Beach"])

        MediaLibraryService.update_media(media.pk, {"caption": "x"}, tags=None)

        assert [tag.name for tag in media.tags.all()] == ["Beach"]

    def test_returns_media(self):
        """The updated asset is returned."""
        media = MediaAssetFactory()

        result = MediaLibraryService.update_media(media.pk, {})

        assert result.data == media


# =============================================================================
# bulk_update
# =============================================================================


class TestBulkUpdate:
    """Tests for MediaLibraryService.bulk_update()."""

    def test_metadata_applied_to_all(self):
        """Metadata is applied to every listed asset."""
        first, second = MediaAssetFactory.create_batch(2)

        with translation.override("en"):
            result = MediaLibraryService.bulk_update([first.pk, second.pk], {"credit": "Jane"})

        assert result.success is True
        for media in (first, second):
            media.refresh_from_db()
            assert media.extra_metadatas == {"credit": {"en": "Jane"}}

    def test_tags_added_and_removed(self):
        """Tags are added and removed on every asset."""
        first = MediaAssetFactory(tags=["Beach"])
        second = MediaAssetFactory(tags=["Beach", "Night"])

        MediaLibraryService.bulk_update(
            [first.pk, second.pk], add_tags=["Summer"], remove_tags=["beach"]
        )

        assert [tag.name for tag in first.tags.all()] == ["Summer"]
        assert sorted(tag.name for tag in second.tags.all()) == ["Night", "Summer"]

    def test_unknown_ids_ignored(self, media):
        """Unknown ids are skipped."""
        result = MediaLibraryService.bulk_update([media.pk, 999999], add_tags=["Beach"])

        assert [item.pk for item in result.data] == [media.pk]

    def test_nothing_found(self):
        """No known ids fails with NOT_FOUND."""
        result = MediaLibraryService.bulk_update([999999], add_tags=["Beach"])

        assert result.success is False
        assert result.error_code == NotFoundError.default_error_code

    def test_invalid_metadata(self, media):
        """Invalid metadata fails without saving."""
        result = MediaLibraryService.bulk_update([media.pk], {"bogus": "x"}, add_tags=["Beach"])

        assert result.success is False
        assert result.error_code == ValidationError.default_error_code
        assert media.tags.count() == 0


# =============================================================================
# Deletion
# =============================================================================


class TestDeleteMedia:
    """Tests for MediaLibraryService.delete_media()."""

    def test_unused_media_deleted(self, media):
        """Unused media is deleted."""
        media_id = media.pk

        result = MediaLibraryService.delete_media(media_id)

        assert result.success is True
        assert result.data == media_id
        assert not MediaAsset.objects.filter(pk=media_id).exists()

    def test_used_media_refused(self, media, article):
        """Media in use is kept and MEDIA_IN_USE is reported."""
        Mediable.attach(media, article)

        result = MediaLibraryService.delete_media(media.pk)

        assert result.success is False
        assert result.error_code == MEDIA_IN_USE
        assert MediaAsset.objects.filter(pk=media.pk).exists()

    def test_not_found(self):
        """Unknown ids fail with NOT_FOUND."""
        result = MediaLibraryService.delete_media(999999)

        assert result.error_code == NotFoundError.default_error_code


class TestBulkDelete:
    """Tests for MediaLibraryService.bulk_delete()."""

    def test_deletes_only_unused(self, article):
        """Used and unknown ids are skipped, the rest deleted."""
        unused, used = MediaAssetFactory.create_batch(2)
        Mediable.attach(used, article)

        result = MediaLibraryService.bulk_delete([unused.pk, used.pk, 999999])

        assert result.success is True
        assert result.data == {"deleted": [unused.pk], "skipped": [used.pk, 999999]}
        assert list(MediaAsset.objects.values_list("pk", flat=True)) == [used.pk]

    def test_repeated_ids_handled_once(self, article):
        """An id listed twice is deleted or skipped only once."""
        unused, used = MediaAssetFactory.create_batch(2)
        Mediable.attach(used, article)

        result = MediaLibraryService.bulk_delete([unused.pk, used.pk, unused.pk, used.pk])

        assert result.success is True
        assert result.data == {"deleted": [unused.pk], "skipped": [used.pk]}
        assert list(MediaAsset.objects.values_list("pk", flat=True)) == [used.pk]

    def test_accepts_iterators(self, media):
        """Ids may be given as any iterable."""
        result = MediaLibraryService.bulk_delete(iter([media.pk]))

        assert result.data == {"deleted": [media.pk], "skipped": []}
