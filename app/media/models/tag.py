"""
Tag model for categorizing media in the library.

Tags are shared across the library; a media asset may carry any number of
them and the library list can be filtered by tag slug.
"""

from __future__ import annotations

from django.db import models

from core.model_mixins import SlugMixin
from core.models import BaseModel


class Tag(SlugMixin, BaseModel):
    """
    Library tag.

    Attributes:
        name: Display name.
        slug: URL-safe identifier, generated from the name.

    Usage:
        tag = Tag.objects.create(name="Summer 2024")
        tag.slug  # "summer-2024"

        media.tags.add(tag)
    """

    name = models.CharField(
        max_length=100,
        help_text="Display name of the tag",
    )

    class Meta:
        verbose_name = "Tag"
        verbose_name_plural = "Tags"
        ordering = ["name"]

    def __str__(self) -> str:
        """Return the tag name."""
        return self.name

    def get_slug_source(self) -> str:
        return self.name

    @classmethod
    def get_or_create_by_name(cls, name: str) -> Tag:
        """
        Return the tag with this name, creating it if needed.

        Names are matched case-insensitively.
        """
        name = name.strip()
        tag = cls.objects.filter(name__iexact=name).first()
        if tag is None:
            tag = cls.objects.create(name=name)
        return tag
