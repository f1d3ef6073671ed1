"""
Model mixins providing reusable functionality for Django models.

This module contains abstract mixin classes that can be combined with
BaseModel to add specific functionality. These are generic infrastructure
classes with no domain-specific logic.

Available Mixins:
    SlugMixin: Auto-generated URL slugs

Usage:
    from core.models import BaseModel
    from core.model_mixins import SlugMixin

    class Article(SlugMixin, BaseModel):
        title = models.CharField(max_length=200)

        def get_slug_source(self):
            return self.title

Note:
    - Always list mixins before BaseModel in inheritance
    - Mixins are abstract and don't create database tables
    - Inheriting SlugMixin is how a model declares it is sluggable;
      consumers check isinstance(obj, SlugMixin) rather than probing
      for a slug attribute
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from django.db import models
from django.utils.text import slugify

if TYPE_CHECKING:
    from typing import Any


class SlugMixin(models.Model):
    """
    Add URL-safe slug field with auto-generation support.

    Slugs are URL-safe identifiers typically derived from a title or name.
    Example: "My Article Title" -> "my-article-title"

    Fields:
        slug: URL-safe identifier, unique per model

    Usage:
        class Article(SlugMixin, BaseModel):
            title = models.CharField(max_length=200)

            def get_slug_source(self) -> str:
                return self.title

        # Slug auto-generated on save
        article = Article.objects.create(title="My Article")
        print(article.slug)  # "my-article"

        # Duplicate titles get numbered slugs
        article2 = Article.objects.create(title="My Article")
        print(article2.slug)  # "my-article-1"

    Override:
        get_slug_source(): Return the string to slugify (required)

    Note:
        If slug is provided explicitly, it won't be auto-generated.
    """

    slug = models.SlugField(
        max_length=255,
        unique=True,
        db_index=True,
        help_text="URL-safe identifier for this record",
    )

    class Meta:
        abstract = True

    def get_slug_source(self) -> str:
        """
        Return the value to slugify.

        Override in subclass to specify which field to use.

        Returns:
            String to convert to slug
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement get_slug_source()"
        )

    def save(self, *args: Any, **kwargs: Any) -> None:
        """
        Auto-generate slug if not provided.

        Generates unique slug from get_slug_source() if slug is empty.
        Appends numbers for uniqueness if needed.
        """
        if not self.slug:
            base_slug = slugify(self.get_slug_source()) or self.__class__.__name__.lower()
            slug = base_slug
            counter = 1
            model = self.__class__

            while model._default_manager.filter(slug=slug).exclude(pk=self.pk).exists():
                slug = f"{base_slug}-{counter}"
                counter += 1

            self.slug = slug

        super().save(*args, **kwargs)
