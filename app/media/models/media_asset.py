"""
MediaAsset model for media library entries.

Provides:
- External image service addressing through a uuid
- Base caption and alt text, stored per locale when translatable
- Extra metadata fields declared in MEDIA_LIBRARY["EXTRA_METADATA_FIELDS"]
- Owner lookup and delete guard over the mediables association table

Files themselves live in the image service; this table only holds the
metadata the CMS edits.
"""

from __future__ import annotations

import re
import uuid
from pathlib import PurePosixPath
from typing import TYPE_CHECKING, Any

from django.db import models

from core.helpers import capitalize_words
from core.models import BaseModel
from media.conf import get_setting
from media.fields import get_field_registry

if TYPE_CHECKING:
    from media.services.owners import OwnerDescriptor

RETINA_SUFFIX = "@2x"

# Metadata names accepted by metadata_value() for the base fields
BASE_FIELD_ALIASES: dict[str, str] = {
    "caption": "caption",
    "alt_text": "alt_text",
    "altText": "alt_text",
}


def generate_media_uuid() -> str:
    """Return a fresh image service key."""
    return str(uuid.uuid4())


class MediaAsset(BaseModel):
    """
    Media library entry addressed in the image service by ``uuid``.

    Attributes:
        uuid: Image service key
        filename: Original filename
        width: Width in pixels
        height: Height in pixels
        caption: Caption text, or locale -> text when translatable
        alt_text: Alt text, or locale -> text when translatable
        extra_metadatas: Extra field name -> value (or locale -> value)
        tags: Tags applied in the media library

    Example:
        >>> media = MediaAsset.objects.create(
        ...     filename="sunset@2x.jpg",
        ...     width=1200,
        ...     height=800,
        ... )
        >>> media.dimensions
        '1200x800'
        >>> media.can_delete_safely()
        True
    """

    # =========================================================================
    # Fields
    # =========================================================================

    uuid = models.CharField(
        max_length=255,
        default=generate_media_uuid,
        db_index=True,
        help_text="Key of the file in the image service",
    )

    filename = models.CharField(
        max_length=255,
        help_text="Original filename",
    )

    width = models.PositiveIntegerField(
        null=True,
        blank=True,
        help_text="Width in pixels",
    )

    height = models.PositiveIntegerField(
        null=True,
        blank=True,
        help_text="Height in pixels",
    )

    caption = models.JSONField(
        default=str,
        blank=True,
        help_text="Caption, or a locale -> caption mapping when translatable",
    )

    alt_text = models.JSONField(
        default=str,
        blank=True,
        help_text="Alt text, or a locale -> alt text mapping when translatable",
    )

    extra_metadatas = models.JSONField(
        default=dict,
        blank=True,
        help_text="Values of the configured extra metadata fields",
    )

    tags = models.ManyToManyField(
        "media.Tag",
        blank=True,
        related_name="medias",
        help_text="Tags applied to this media",
    )

    # =========================================================================
    # Meta
    # =========================================================================

    class Meta:
        """Model metadata."""

        db_table = get_setting("MEDIAS_TABLE")
        verbose_name = "Media"
        verbose_name_plural = "Medias"
        ordering = ["-created_at"]

    # =========================================================================
    # Methods
    # =========================================================================

    def __str__(self) -> str:
        """Return the filename."""
        return self.filename

    def clean(self) -> None:
        """Fill an empty alt text from the filename."""
        super().clean()
        if not self.alt_text and self.filename:
            self.alt_text = self.alt_text_from(self.filename)

    @property
    def dimensions(self) -> str:
        """
        Return dimensions as a formatted string.

        Returns:
            String like "1200x800"
        """
        return f"{self.width or 0}x{self.height or 0}"

    @staticmethod
    def alt_text_from(filename: str) -> str:
        """
        Derive default alt text from a filename.

        Example:
            MediaAsset.alt_text_from("red_car-front@2x.jpg")  # "Red Car Front"
        """
        stem = PurePosixPath(filename or "").stem
        if stem.endswith(RETINA_SUFFIX):
            stem = stem[: -len(RETINA_SUFFIX)]
        words = re.sub(r"[^a-zA-Z0-9]+", " ", stem).strip()
        return capitalize_words(words)

    def metadata_value(self, name: str) -> Any:
        """
        Return the asset's own value for a metadata field.

        Base fields are read from their columns, extra fields from
        ``extra_metadatas``. Unknown names yield None.
        """
        column = BASE_FIELD_ALIASES.get(name)
        if column is not None:
            return getattr(self, column)
        if get_field_registry().is_extra(name):
            return (self.extra_metadatas or {}).get(name)
        return None

    def set_metadata_value(self, name: str, value: Any) -> None:
        """Set a base or extra metadata field (not saved)."""
        column = BASE_FIELD_ALIASES.get(name)
        if column is not None:
            setattr(self, column, value if value is not None else "")
            return
        extra = dict(self.extra_metadatas or {})
        extra[name] = value
        self.extra_metadatas = extra

    def extra_metadata_values(self) -> dict[str, Any]:
        """Return configured extra field name -> stored value, in config order."""
        stored = self.extra_metadatas or {}
        return {name: stored.get(name) for name in get_field_registry().extra_field_names()}

    def can_delete_safely(self) -> bool:
        """Return True if no content references this media."""
        from media.services.deletion import DeletionGuard

        return DeletionGuard().can_delete_safely(self.pk)

    def get_owner_details(self) -> list[OwnerDescriptor]:
        """Return descriptors of the content entities using this media."""
        from media.services.library import MediaLibraryService

        return MediaLibraryService.get_owner_details(self)

    def to_cms_dict(self) -> dict[str, Any]:
        """Return the media library representation used by the CMS."""
        from media.services.library import MediaLibraryService

        return MediaLibraryService.cms_payload(self)
