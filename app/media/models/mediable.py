"""
Mediable model - association rows linking media to owner entities.

Each row places one media asset on one owner entity of any type. The owner
is identified by a type tag (a morph map key or model label) and an id, so
no foreign key constrains it: rows whose owner has been deleted are
possible and are skipped when owners are resolved.

Placement metadata (``metadatas``) overrides the asset's own metadata for
this placement only. It is stored as JSON text and may be malformed.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from django.db import models

from core.models import BaseModel
from media.conf import get_setting

if TYPE_CHECKING:
    from media.models import MediaAsset

logger = logging.getLogger(__name__)


class Mediable(BaseModel):
    """
    Placement of a media asset on an owner entity.

    Attributes:
        media: The media asset being used.
        mediable_type: Owner type tag.
        mediable_id: Owner primary key.
        role: Slot on the owner ("cover", "gallery", ...).
        locale: Locale the placement applies to, blank for all.
        metadatas: JSON text, field -> locale -> value.

    Usage:
        # Place a media on an article
        Mediable.attach(media, article, role="cover")

        # Resolve placement-level caption for the active language
        placement.get_metadata("caption")

        # Use the alt text as fallback when no caption is set
        placement.get_metadata("caption", fallback="alt_text")
    """

    media = models.ForeignKey(
        "media.MediaAsset",
        on_delete=models.CASCADE,
        related_name="mediables",
        help_text="The media asset being used",
    )

    mediable_type = models.CharField(
        max_length=255,
        help_text="Owner type tag (morph map key or app_label.ModelName)",
    )

    mediable_id = models.CharField(
        max_length=64,
        help_text="Owner primary key",
    )

    role = models.CharField(
        max_length=100,
        blank=True,
        default="",
        help_text="Slot the media fills on the owner",
    )

    locale = models.CharField(
        max_length=10,
        blank=True,
        default="",
        help_text="Locale this placement applies to; blank for all",
    )

    metadatas = models.TextField(
        blank=True,
        default="",
        help_text="Placement metadata as JSON text (field -> locale -> value)",
    )

    class Meta:
        db_table = get_setting("MEDIABLES_TABLE")
        verbose_name = "Mediable"
        verbose_name_plural = "Mediables"
        ordering = ["id"]

        indexes = [
            models.Index(fields=["media"], name="mediable_media_idx"),
            models.Index(
                fields=["mediable_type", "mediable_id"],
                name="mediable_owner_idx",
            ),
        ]

    def __str__(self) -> str:
        """Return description of the placement."""
        return f"{self.media_id} on {self.mediable_type}#{self.mediable_id}"

    @classmethod
    def attach(
        cls,
        media: MediaAsset,
        entity: models.Model,
        role: str = "",
        locale: str = "",
        metadatas: dict[str, Any] | str | None = None,
    ) -> Mediable:
        """
        Place a media asset on an owner entity.

        The owner type is stored with the registry's tag for the entity's
        model, so placements written here resolve back to the same model.

        Args:
            media: The media asset.
            entity: Owner entity (saved).
            role: Slot on the owner.
            locale: Locale the placement applies to.
            metadatas: Placement metadata, as a mapping or JSON text.

        Returns:
            The created Mediable.
        """
        from media.registry import get_owner_registry

        if metadatas is None:
            payload = ""
        elif isinstance(metadatas, str):
            payload = metadatas
        else:
            payload = json.dumps(metadatas)

        mediable = cls.objects.create(
            media=media,
            mediable_type=get_owner_registry().tag_for(entity),
            mediable_id=str(entity.pk),
            role=role,
            locale=locale,
            metadatas=payload,
        )
        logger.debug(f"Attached media {media.pk} to {mediable.mediable_type}#{entity.pk}")
        return mediable

    def get_metadata(self, name: str, fallback: str | None = None) -> str:
        """
        Resolve a metadata field for this placement.

        Looks at the placement's own value for the active language, then the
        fallback locale for translatable fields, then the asset's own value
        (read from ``fallback`` instead of ``name`` when given).

        Args:
            name: Metadata field name.
            fallback: Asset field to fall back to.

        Returns:
            Resolved value, or empty string.
        """
        from media.metadata import get_metadata_resolver

        return get_metadata_resolver().resolve(
            self.metadatas,
            name,
            source=self.media,
            fallback_field=fallback,
        )
