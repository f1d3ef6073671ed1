"""
Metadata Resolver for per-placement media metadata.

Every placement of a media asset (a row in the mediables table) carries a
metadata payload shaped ``field -> locale -> value``. Non-translatable
values live under the ``"_default"`` locale key. Payloads written by older
clients may store a scalar directly at ``field``; those are normalized on
parse so lookups only ever see the single nested shape.

Resolution order for ``resolve(payload, field, locale, source)``:
    1. payload[field][locale] when truthy
    2. payload[field][fallback_locale] when the field is translatable and
       the property fallback policy is enabled
    3. payload[field]["_default"] when set
    4. the asset's own value for the field (or for ``fallback_field``),
       reduced through the same locale rules when translatable
    5. empty string

Resolution never raises. A malformed payload is treated as empty.

Usage:
    from media.metadata import get_metadata_resolver

    resolver = get_metadata_resolver()
    resolver.resolve('{"credit": {"en": "Jane"}}', "credit", "fr", media)
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from functools import lru_cache
from typing import TYPE_CHECKING

from django.conf import settings
from django.utils import translation

from media.conf import media_library_settings
from media.fields import get_field_registry
from media.protocols import MetadataSource

if TYPE_CHECKING:
    from typing import Any

    from media.fields import FieldRegistry

logger = logging.getLogger(__name__)

DEFAULT_LOCALE_KEY = "_default"


def parse_metadata_payload(raw: Any) -> dict[str, dict[str, Any]]:
    """
    Parse a stored metadata payload into ``field -> locale -> value``.

    Accepts a JSON string, bytes, or an already-decoded mapping. Scalars
    stored directly under a field name are moved under ``"_default"``.
    Anything that isn't a JSON object yields an empty mapping.

    Args:
        raw: Stored payload (str, bytes, mapping or None)

    Returns:
        Normalized payload mapping

    Example:
        parse_metadata_payload('{"caption": "Hi"}')
        # {"caption": {"_default": "Hi"}}
    """
    if raw is None:
        return {}

    if isinstance(raw, (bytes, bytearray)):
        raw = bytes(raw).decode("utf-8", errors="replace")

    if isinstance(raw, str):
        if not raw.strip():
            return {}
        try:
            raw = json.loads(raw)
        except (ValueError, RecursionError):
            logger.debug("Ignoring malformed metadata payload")
            return {}

    if not isinstance(raw, Mapping):
        return {}

    payload: dict[str, dict[str, Any]] = {}
    for name, value in raw.items():
        if isinstance(value, Mapping):
            payload[str(name)] = {str(locale): item for locale, item in value.items()}
        else:
            payload[str(name)] = {DEFAULT_LOCALE_KEY: value}
    return payload


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


class MetadataResolver:
    """
    Resolves the display value of a metadata field for one placement.

    Attributes:
        registry: Field registry deciding which fields are translatable
        fallback_locale: Locale consulted when the active one has no value
        use_property_fallback: Whether the fallback locale is consulted
    """

    def __init__(
        self,
        registry: FieldRegistry,
        fallback_locale: str | None = None,
        use_property_fallback: bool = False,
    ) -> None:
        self.registry = registry
        self.fallback_locale = fallback_locale
        self.use_property_fallback = bool(use_property_fallback)

    @classmethod
    def from_settings(cls) -> MetadataResolver:
        """Build a resolver from the MEDIA_LIBRARY setting."""
        config = media_library_settings()
        return cls(
            registry=get_field_registry(),
            fallback_locale=config["FALLBACK_LOCALE"],
            use_property_fallback=config["USE_PROPERTY_FALLBACK"],
        )

    def _fallback_locale_enabled(self) -> bool:
        return self.use_property_fallback and bool(self.fallback_locale)

    def resolve(
        self,
        raw_payload: Any,
        field_name: str,
        locale: str | None = None,
        source: Any = None,
        fallback_field: str | None = None,
    ) -> str:
        """
        Resolve the display value of ``field_name``.

        Args:
            raw_payload: Placement metadata payload (JSON text or mapping)
            field_name: Metadata field to resolve
            locale: Active locale; defaults to the current Django language
            source: Asset providing its own values as the last fallback
            fallback_field: Read this asset field instead of ``field_name``
                for the asset fallback

        Returns:
            Resolved value, or empty string
        """
        locale = locale or translation.get_language() or settings.LANGUAGE_CODE
        entry = parse_metadata_payload(raw_payload).get(field_name, {})

        value = entry.get(locale)
        if value:
            return _as_text(value)

        if (
            self.registry.is_translatable(field_name)
            and self._fallback_locale_enabled()
        ):
            value = entry.get(self.fallback_locale)
            if value:
                return _as_text(value)

        fallback_value = self._asset_fallback(source, fallback_field or field_name, locale)

        default_value = entry.get(DEFAULT_LOCALE_KEY)
        if default_value is not None:
            return _as_text(default_value)

        return fallback_value or ""

    def reduce_locale_value(self, value: Any, locale: str) -> str:
        """
        Reduce a locale mapping to a single value.

        Looks up the active locale, then the fallback locale when the
        policy allows it. Non-mapping values are returned as text.
        """
        if not isinstance(value, Mapping):
            return _as_text(value)

        reduced = _as_text(value.get(locale))
        if reduced == "" and self._fallback_locale_enabled():
            reduced = _as_text(value.get(self.fallback_locale))
        return reduced

    def _asset_fallback(self, source: Any, target_field: str, locale: str) -> str:
        raw_value = self._read_source(source, target_field)

        if self.registry.is_translatable(target_field) or isinstance(raw_value, Mapping):
            return self.reduce_locale_value(raw_value, locale)

        return _as_text(raw_value)

    @staticmethod
    def _read_source(source: Any, target_field: str) -> Any:
        if source is None:
            return None
        if isinstance(source, MetadataSource):
            return source.metadata_value(target_field)
        if isinstance(source, Mapping):
            return source.get(target_field)
        return getattr(source, target_field, None)


@lru_cache(maxsize=1)
def get_metadata_resolver() -> MetadataResolver:
    """Return the process-wide metadata resolver."""
    return MetadataResolver.from_settings()
