"""
MediaLibraryService for the CMS media library.

Provides:
- The CMS representation of a media asset (URLs, metadata, owners)
- Owner details (ownership index + owner projector)
- Single and bulk metadata/tag updates
- Guarded single and bulk deletion

Translatable metadata fields are stored as locale -> value mappings. An
update sending a plain value for a translatable field sets the active
language only; a mapping replaces the stored locales it names.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from django.urls import reverse
from django.utils import translation

from core.exceptions import ConflictError, NotFoundError, ValidationError
from core.services import BaseService, ServiceResult
from media.fields import get_field_registry
from media.models import MediaAsset, Tag
from media.models.media_asset import BASE_FIELD_ALIASES
from media.services.deletion import DeletionGuard
from media.services.image import get_image_service
from media.services.owners import OwnerProjector
from media.services.ownership import OwnershipIndexReader
from media.services.routes import RouteBuilder

if TYPE_CHECKING:
    from collections.abc import Iterable

    from media.services.owners import OwnerDescriptor

THUMBNAIL_OPTIONS = {"h": "256"}
MEDIUM_OPTIONS = {"h": "430"}

MEDIA_MODULE = "medias"
MEDIA_ROUTE_PREFIX = "media-library"


class MediaLibraryService(BaseService):
    """
    Service for media library reads and edits.

    Usage:
        # CMS representation
        payload = MediaLibraryService.cms_payload(media)

        # Update one media
        result = MediaLibraryService.update_media(
            media_id=7,
            metadatas={"caption": "Sunset", "credit": {"en": "Jane"}},
            tags=["summer"],
        )

        # Delete what is no longer used
        result = MediaLibraryService.bulk_delete([7, 8, 9])
        result.data  # {"deleted": [7, 9], "skipped": [8]}
    """

    # =========================================================================
    # Reads
    # =========================================================================

    @classmethod
    def get_owner_details(cls, media: MediaAsset) -> list[OwnerDescriptor]:
        """
        Return descriptors of the entities using a media asset.

        Each owner entity is listed once, even when it uses the asset in
        several places.
        """
        records = OwnershipIndexReader().find_owners(media.pk)
        return OwnerProjector().project(records, unique=True)

    @classmethod
    def cms_payload(cls, media: MediaAsset) -> dict[str, Any]:
        """
        Build the CMS representation of a media asset.

        Returns:
            Dict with id, name, image URLs, dimensions, tag names, action
            URLs, metadatas (``default`` and ``custom``) and owners
        """
        images = get_image_service()
        routes = RouteBuilder()

        delete_url = None
        if DeletionGuard().can_delete_safely(media.pk):
            delete_url = routes.module_route(
                MEDIA_MODULE, MEDIA_ROUTE_PREFIX, "destroy", media.pk
            )

        default_metadatas: dict[str, Any] = {
            "caption": media.caption,
            "altText": media.alt_text,
            "video": None,
        }
        default_metadatas.update(media.extra_metadata_values())

        return {
            "id": media.pk,
            "name": media.filename,
            "thumbnail": images.get_cms_url(media.uuid, THUMBNAIL_OPTIONS),
            "original": images.get_raw_url(media.uuid),
            "medium": images.get_url(media.uuid, MEDIUM_OPTIONS),
            "width": media.width,
            "height": media.height,
            "tags": [tag.name for tag in media.tags.all()],
            "deleteUrl": delete_url,
            "updateUrl": reverse("media:single-update"),
            "updateBulkUrl": reverse("media:bulk-update"),
            "deleteBulkUrl": reverse("media:bulk-delete"),
            "metadatas": {
                "default": default_metadatas,
                "custom": {
                    "caption": None,
                    "altText": None,
                    "video": None,
                },
            },
            "owners": [owner.to_dict() for owner in cls.get_owner_details(media)],
        }

    # =========================================================================
    # Updates
    # =========================================================================

    @classmethod
    def update_media(
        cls,
        media_id: Any,
        metadatas: Mapping[str, Any] | None = None,
        tags: Iterable[str] | None = None,
    ) -> ServiceResult[MediaAsset]:
        """
        Update metadata and tags of one media asset.

        Args:
            media_id: Media asset id
            metadatas: Field name -> value (or locale -> value)
            tags: Tag names replacing the current tags; None leaves them

        Returns:
            ServiceResult with the updated MediaAsset
        """
        logger = cls.get_logger()

        media = MediaAsset.objects.filter(pk=media_id).first()
        if media is None:
            return ServiceResult.failure(
                "Media not found",
                error_code=NotFoundError.default_error_code,
            )

        errors = cls._apply_metadatas(media, metadatas or {})
        if errors:
            return ServiceResult.failure(
                "Invalid metadata",
                error_code=ValidationError.default_error_code,
                errors=errors,
            )

        with cls.atomic():
            media.save()
            if tags is not None:
                media.tags.set(cls._tags_for_names(tags))

        logger.info(f"Updated media {media.pk}")
        return ServiceResult.success(media)

    @classmethod
    def bulk_update(
        cls,
        media_ids: Iterable[Any],
        metadatas: Mapping[str, Any] | None = None,
        add_tags: Iterable[str] | None = None,
        remove_tags: Iterable[str] | None = None,
    ) -> ServiceResult[list[MediaAsset]]:
        """
        Apply metadata and tag changes to several media assets.

        Args:
            media_ids: Media asset ids; unknown ids are ignored
            metadatas: Field name -> value applied to every asset
            add_tags: Tag names added to every asset
            remove_tags: Tag names removed from every asset

        Returns:
            ServiceResult with the updated assets
        """
        logger = cls.get_logger()

        medias = list(MediaAsset.objects.filter(pk__in=list(media_ids)))
        if not medias:
            return ServiceResult.failure(
                "No media found",
                error_code=NotFoundError.default_error_code,
            )

        for media in medias:
            errors = cls._apply_metadatas(media, metadatas or {})
            if errors:
                return ServiceResult.failure(
                    "Invalid metadata",
                    error_code=ValidationError.default_error_code,
                    errors=errors,
                )

        remove_names = [name.strip().lower() for name in (remove_tags or []) if name.strip()]
        tags_to_remove = [
            tag for tag in Tag.objects.all() if tag.name.lower() in remove_names
        ]

        with cls.atomic():
            tags_to_add = cls._tags_for_names(add_tags or [])
            for media in medias:
                media.save()
                if tags_to_add:
                    media.tags.add(*tags_to_add)
                if tags_to_remove:
                    media.tags.remove(*tags_to_remove)

        logger.info(f"Bulk updated {len(medias)} media")
        return ServiceResult.success(medias)

    # =========================================================================
    # Deletion
    # =========================================================================

    @classmethod
    def delete_media(cls, media_id: Any) -> ServiceResult[Any]:
        """
        Delete a media asset that no content uses.

        Returns:
            ServiceResult with the deleted id, or a NOT_FOUND / MEDIA_IN_USE
            failure
        """
        logger = cls.get_logger()

        with cls.atomic():
            media = MediaAsset.objects.filter(pk=media_id).first()
            if media is None:
                return ServiceResult.failure(
                    "Media not found",
                    error_code=NotFoundError.default_error_code,
                )

            try:
                DeletionGuard().ensure_deletable(media.pk)
            except ConflictError as e:
                return ServiceResult.failure(e.message, error_code=e.error_code)

            deleted_id = media.pk
            media.delete()

        logger.info(f"Deleted media {deleted_id}")
        return ServiceResult.success(deleted_id)

    @classmethod
    def bulk_delete(cls, media_ids: Iterable[Any]) -> ServiceResult[dict[str, list[Any]]]:
        """
        Delete every listed media asset that is safe to delete.

        Returns:
            ServiceResult with ``deleted`` and ``skipped`` id lists; unknown
            and still-used ids are skipped, repeated ids are handled once
        """
        logger = cls.get_logger()
        guard = DeletionGuard()
        media_ids = list(dict.fromkeys(media_ids))
        deleted: list[Any] = []
        skipped: list[Any] = []

        with cls.atomic():
            medias = {media.pk: media for media in MediaAsset.objects.filter(pk__in=media_ids)}
            for media_id in media_ids:
                media = medias.get(media_id)
                if media is None or not guard.can_delete_safely(media.pk):
                    skipped.append(media_id)
                    continue
                media.delete()
                deleted.append(media_id)

        logger.info(f"Bulk delete: {len(deleted)} deleted, {len(skipped)} skipped")
        return ServiceResult.success({"deleted": deleted, "skipped": skipped})

    # =========================================================================
    # Helpers
    # =========================================================================

    @classmethod
    def _apply_metadatas(
        cls,
        media: MediaAsset,
        metadatas: Mapping[str, Any],
    ) -> dict[str, list[str]]:
        """Set known metadata fields on the asset; return field errors."""
        registry = get_field_registry()
        known = set(registry.metadata_field_names())
        errors: dict[str, list[str]] = {}

        for key, value in metadatas.items():
            name = BASE_FIELD_ALIASES.get(key, key)
            if name not in known:
                errors[key] = ["Unknown metadata field."]
                continue

            if not registry.is_translatable(name):
                if isinstance(value, Mapping):
                    errors[key] = ["This field is not translatable."]
                    continue
                media.set_metadata_value(name, value)
                continue

            current = media.metadata_value(name)
            locales = dict(current) if isinstance(current, Mapping) else {}
            if isinstance(value, Mapping):
                locales.update({str(locale): item for locale, item in value.items()})
            else:
                locale = translation.get_language() or "en"
                locales[locale] = value
            media.set_metadata_value(name, locales)

        return errors

    @staticmethod
    def _tags_for_names(names: Iterable[str]) -> list[Tag]:
        return [Tag.get_or_create_by_name(name) for name in names if name and name.strip()]
