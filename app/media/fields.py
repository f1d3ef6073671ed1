"""
Field Registry for configurable media metadata.

Resolves, from configuration, the set of extra metadata fields carried by
every media asset and which metadata fields are stored per locale.

The registry is computed once and cached for the life of the process.
``media.signals`` clears the cache when MEDIA_LIBRARY changes (only happens
under ``override_settings`` in tests).

Usage:
    from media.fields import get_field_registry

    registry = get_field_registry()
    registry.extra_field_names()        # ("credit", "source")
    registry.is_translatable("caption")  # True
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from typing import TYPE_CHECKING

from media.conf import media_library_settings

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import Any

logger = logging.getLogger(__name__)

# Metadata fields every asset carries as real columns
BASE_METADATA_FIELDS = ("caption", "alt_text")


@dataclass(frozen=True)
class ExtraField:
    """
    One configured extra metadata field.

    Attributes:
        name: Attribute name on the asset
        label: Human-readable label for editors
        type: Editor input hint ("text", "checkbox", ...)
    """

    name: str
    label: str = ""
    type: str = "text"


@dataclass(frozen=True)
class FieldRegistry:
    """
    Immutable view of the configured metadata schema.

    Attributes:
        extra_fields: Extra fields in configuration order
        translatable_fields: Names of per-locale fields
    """

    extra_fields: tuple[ExtraField, ...] = ()
    translatable_fields: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_config(
        cls,
        extra_fields: Iterable[Mapping[str, Any]] | None,
        translatable_fields: Iterable[str] | None,
    ) -> FieldRegistry:
        """
        Build a registry from raw configuration lists.

        Entries that are not mappings or have no usable name are skipped;
        duplicates keep the first occurrence. Absent lists produce an empty
        registry.
        """
        parsed: list[ExtraField] = []
        seen: set[str] = set()

        for entry in extra_fields or []:
            name = str(entry.get("name") or "").strip() if isinstance(entry, Mapping) else ""
            if not name or name in seen:
                logger.warning(f"Ignoring extra metadata field entry: {entry!r}")
                continue
            seen.add(name)
            parsed.append(
                ExtraField(
                    name=name,
                    label=str(entry.get("label") or name.replace("_", " ").capitalize()),
                    type=str(entry.get("type") or "text"),
                )
            )

        translatable = frozenset(
            str(name).strip() for name in (translatable_fields or []) if str(name).strip()
        )
        return cls(extra_fields=tuple(parsed), translatable_fields=translatable)

    @classmethod
    def from_settings(cls) -> FieldRegistry:
        """Build a registry from the MEDIA_LIBRARY setting."""
        config = media_library_settings()
        return cls.from_config(
            config["EXTRA_METADATA_FIELDS"],
            config["TRANSLATABLE_METADATA_FIELDS"],
        )

    def extra_field_names(self) -> tuple[str, ...]:
        """Return extra field names in configuration order."""
        return tuple(extra.name for extra in self.extra_fields)

    def is_translatable(self, field_name: str) -> bool:
        """Return True if the field is stored as a locale mapping."""
        return field_name in self.translatable_fields

    def is_extra(self, field_name: str) -> bool:
        """Return True if the field is a configured extra field."""
        return field_name in self.extra_field_names()

    def metadata_field_names(self) -> tuple[str, ...]:
        """Return base metadata fields followed by extra fields."""
        return BASE_METADATA_FIELDS + self.extra_field_names()


@lru_cache(maxsize=1)
def get_field_registry() -> FieldRegistry:
    """Return the process-wide field registry."""
    registry = FieldRegistry.from_settings()
    logger.debug(
        f"Field registry built: extra={registry.extra_field_names()} "
        f"translatable={sorted(registry.translatable_fields)}"
    )
    return registry
