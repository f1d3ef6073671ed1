"""
Content models that use media from the media library.

Each model declares its media-owner capabilities explicitly:

    Article: sluggable (SlugMixin), titled by ``title``
    Page: titled by ``name``
    Block: OwnerProxy; media placed in a block belongs to its parent entity

Media placements are rows in the mediables table (media.models.Mediable),
not foreign keys on these models.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from django.db import models

from core.model_mixins import SlugMixin
from core.models import BaseModel

if TYPE_CHECKING:
    from django.db.models import QuerySet


class Article(SlugMixin, BaseModel):
    """
    Editorial article.

    Attributes:
        title: Headline, also the slug source.
        body: Article text.
    """

    title_key = "title"

    title = models.CharField(
        max_length=255,
        help_text="Article headline",
    )

    body = models.TextField(
        blank=True,
        default="",
        help_text="Article text",
    )

    class Meta:
        verbose_name = "Article"
        verbose_name_plural = "Articles"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        """Return the headline."""
        return self.title

    def get_slug_source(self) -> str:
        return self.title

    @property
    def blocks(self) -> QuerySet[Block]:
        """Blocks embedded in this article."""
        return Block.objects.for_entity(self)


class Page(BaseModel):
    """
    Static page.

    Attributes:
        name: Page name shown in navigation.
        path: URL path the page is served at.
    """

    title_key = "name"

    name = models.CharField(
        max_length=255,
        help_text="Page name",
    )

    path = models.CharField(
        max_length=255,
        blank=True,
        default="",
        help_text="URL path of the page",
    )

    class Meta:
        verbose_name = "Page"
        verbose_name_plural = "Pages"
        ordering = ["name"]

    def __str__(self) -> str:
        """Return the page name."""
        return self.name

    @property
    def blocks(self) -> QuerySet[Block]:
        """Blocks embedded in this page."""
        return Block.objects.for_entity(self)


class BlockQuerySet(models.QuerySet):
    """QuerySet for Block."""

    def for_entity(self, entity: models.Model) -> BlockQuerySet:
        """Blocks embedded in ``entity``."""
        from media.registry import get_owner_registry

        return self.filter(
            blockable_type=get_owner_registry().tag_for(entity),
            blockable_id=str(entity.pk),
        )


class Block(BaseModel):
    """
    Content fragment embedded in a parent entity.

    The parent is identified like a media owner: a type tag (morph map key
    or model label) and an id. Media placed in a block are listed as used
    by the parent.

    Attributes:
        blockable_type: Parent type tag.
        blockable_id: Parent primary key.
        type: Block kind ("image", "gallery", "text", ...).
        position: Order within the parent.
        content: Block fields.

    Usage:
        block = Block.create_for(article, type="image")
        block.get_parent_entity()  # article
    """

    blockable_type = models.CharField(
        max_length=255,
        help_text="Parent type tag (morph map key or app_label.ModelName)",
    )

    blockable_id = models.CharField(
        max_length=64,
        help_text="Parent primary key",
    )

    type = models.CharField(
        max_length=100,
        help_text="Block kind",
    )

    position = models.PositiveIntegerField(
        default=0,
        help_text="Order within the parent",
    )

    content = models.JSONField(
        default=dict,
        blank=True,
        help_text="Block fields",
    )

    objects = BlockQuerySet.as_manager()

    class Meta:
        verbose_name = "Block"
        verbose_name_plural = "Blocks"
        ordering = ["position", "id"]

        indexes = [
            models.Index(
                fields=["blockable_type", "blockable_id"],
                name="block_parent_idx",
            ),
        ]

    def __str__(self) -> str:
        """Return block kind and parent."""
        return f"{self.type} block on {self.blockable_type}#{self.blockable_id}"

    @classmethod
    def create_for(cls, entity: models.Model, **fields: Any) -> Block:
        """Create a block embedded in ``entity``."""
        from media.registry import get_owner_registry

        return cls.objects.create(
            blockable_type=get_owner_registry().tag_for(entity),
            blockable_id=str(entity.pk),
            **fields,
        )

    def get_parent_entity(self) -> models.Model | None:
        """
        Return the entity this block is embedded in.

        Returns None when the parent type can't be resolved or the parent
        row no longer exists.
        """
        from media.registry import get_owner_registry

        loader = get_owner_registry().resolve_loader(self.blockable_type)
        if loader is None:
            return None
        return loader.find_by_id(self.blockable_id)
