"""
Owner type registry (the "morph map").

Rows in the mediables table identify their owner by a type tag and an id.
The registry turns a tag into an ``EntityLoader``:

    1. Tags registered explicitly (``register()`` or MEDIA_LIBRARY["MORPH_MAP"])
    2. Otherwise the tag itself, read as a Django model label ("content.Article")

Lookups never raise. An unknown tag resolves to None and the caller drops
the row.

Usage:
    from media.registry import get_owner_registry

    registry = get_owner_registry()
    loader = registry.resolve_loader("articles")
    article = loader.find_by_id(5) if loader else None

    registry.tag_for(article)  # "articles"
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from django.apps import apps
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import models

from media.conf import media_library_settings
from media.protocols import EntityLoader

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

logger = logging.getLogger(__name__)


class ModelLoader:
    """
    EntityLoader backed by a Django model's default manager.

    Attributes:
        model: Model class rows are loaded from
    """

    def __init__(self, model: type[models.Model]) -> None:
        self.model = model

    def find_by_id(self, entity_id: Any) -> models.Model | None:
        """Return the instance with this primary key, or None."""
        try:
            return self.model._default_manager.filter(pk=entity_id).first()
        except (TypeError, ValueError, DjangoValidationError):
            # Ids that can't be coerced to the pk type match nothing
            return None

    def __repr__(self) -> str:
        return f"ModelLoader({self.model._meta.label})"


class OwnerTypeRegistry:
    """
    Mapping from owner type tag to entity loader.

    Targets may be given as a model label string, a model class, or any
    object implementing EntityLoader. Labels are resolved lazily so the
    registry can be built before the app registry is ready.
    """

    def __init__(self, morph_map: Mapping[str, Any] | None = None) -> None:
        self._targets: dict[str, Any] = {}
        for tag, target in (morph_map or {}).items():
            self.register(tag, target)

    @classmethod
    def from_settings(cls) -> OwnerTypeRegistry:
        """Build a registry from MEDIA_LIBRARY["MORPH_MAP"]."""
        return cls(media_library_settings()["MORPH_MAP"])

    def register(self, tag: str, target: Any) -> None:
        """
        Register a loader target for a type tag.

        Args:
            tag: Type tag as stored in the mediables table
            target: Model label, model class, or EntityLoader
        """
        self._targets[str(tag)] = target

    def tags(self) -> tuple[str, ...]:
        """Return explicitly registered tags."""
        return tuple(self._targets)

    def resolve_loader(self, tag: Any) -> EntityLoader | None:
        """
        Return the loader for a type tag, or None if it can't be resolved.

        Args:
            tag: Stored owner type tag

        Returns:
            EntityLoader or None
        """
        tag = str(tag or "").strip()
        if not tag:
            return None

        target = self._targets.get(tag, tag)
        return self._as_loader(target)

    def tag_for(self, entity: models.Model | type[models.Model]) -> str:
        """
        Return the tag to store for an entity.

        Prefers the registered tag for the entity's model and falls back
        to the model label.
        """
        model = entity if isinstance(entity, type) else type(entity)
        label = model._meta.label

        for tag, target in self._targets.items():
            if target is model or target == label:
                return tag
            if isinstance(target, ModelLoader) and target.model is model:
                return tag
            if isinstance(target, str) and target.lower() == label.lower():
                return tag
        return label

    @staticmethod
    def _as_loader(target: Any) -> EntityLoader | None:
        if isinstance(target, str):
            try:
                return ModelLoader(apps.get_model(target))
            except (LookupError, ValueError):
                logger.debug(f"No model registered for owner type {target!r}")
                return None

        if isinstance(target, type) and issubclass(target, models.Model):
            return ModelLoader(target)

        if isinstance(target, EntityLoader):
            return target

        logger.debug(f"Unusable owner loader target {target!r}")
        return None


@lru_cache(maxsize=1)
def get_owner_registry() -> OwnerTypeRegistry:
    """Return the process-wide owner type registry."""
    return OwnerTypeRegistry.from_settings()
