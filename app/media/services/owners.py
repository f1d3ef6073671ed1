"""
Owner Projector.

Turns ownership records into uniform, read-only owner descriptors without
knowing the owner's concrete type ahead of time:

    1. Resolve the record's type tag to a loader through the owner registry
    2. Load the entity; missing rows are dropped
    3. Blocks (OwnerProxy) are replaced by their parent entity; blocks
       without a parent are dropped
    4. Derive the module name from the subject's model name
       ("BlogPost" -> "blogPosts")
    5. Build the descriptor (id, slug, name, titleKey, module, edit link)

Resolution failures never raise: the record is skipped, logged at DEBUG
and announced through the ``owner_unresolved`` signal. Storage and loader
errors (e.g. DatabaseError) propagate.

Usage:
    projector = OwnerProjector()
    owners = projector.project(OwnershipIndexReader().find_owners(media.id))
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from core.helpers import lcfirst, pluralize
from core.model_mixins import SlugMixin
from media.conf import get_setting
from media.protocols import OwnerProxy, Titled
from media.registry import get_owner_registry
from media.services.routes import RouteBuilder
from media.signals import owner_unresolved

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from typing import Any

    from media.registry import OwnerTypeRegistry
    from media.services.ownership import OwnershipRecord

logger = logging.getLogger(__name__)

REASON_UNRESOLVABLE_TYPE = "unresolvable_type"
REASON_MISSING_ENTITY = "missing_entity"
REASON_MISSING_PARENT = "missing_parent"
REASON_MISSING_MODULE = "missing_module"


@dataclass(frozen=True)
class OwnerDescriptor:
    """
    Read-only description of an entity that uses a media asset.

    Attributes:
        id: Owner primary key
        slug: Owner slug when the owner is sluggable, else None
        name: Display name read from the owner's title attribute
        title_key: Name of the title attribute, or None
        module: Module the owner belongs to ("articles")
        edit: Admin edit link
        model: The resolved owner entity
    """

    id: Any
    slug: str | None
    name: Any
    title_key: str | None
    module: str
    edit: str
    model: Any

    @property
    def model_label(self) -> str:
        meta = getattr(self.model, "_meta", None)
        return meta.label if meta is not None else type(self.model).__name__

    def to_dict(self) -> dict[str, Any]:
        """Return the descriptor in its serialized shape."""
        return {
            "id": self.id,
            "slug": self.slug,
            "name": self.name,
            "titleKey": self.title_key,
            "module": self.module,
            "edit": self.edit,
            "model": self.model_label,
        }


def module_name_for(entity: Any) -> str:
    """
    Return the module name for an entity.

    The short model name, lower-camel-cased and pluralized.

    Example:
        module_name_for(Article())   # "articles"
        module_name_for(BlogPost())  # "blogPosts"
    """
    meta = getattr(entity, "_meta", None)
    type_name = meta.object_name if meta is not None else type(entity).__name__
    return pluralize(lcfirst(type_name or ""))


class OwnerProjector:
    """
    Projects ownership records into owner descriptors.

    Attributes:
        registry: Owner type registry (morph map)
        routes: Route builder for edit links
        route_prefixes: Module -> admin route prefix
    """

    def __init__(
        self,
        registry: OwnerTypeRegistry | None = None,
        routes: RouteBuilder | None = None,
        route_prefixes: Mapping[str, str] | None = None,
    ) -> None:
        self.registry = registry or get_owner_registry()
        self.routes = routes or RouteBuilder()
        self.route_prefixes = (
            route_prefixes
            if route_prefixes is not None
            else get_setting("BROWSER_ROUTE_PREFIXES")
        )

    def project(
        self,
        records: Iterable[OwnershipRecord],
        unique: bool = False,
    ) -> list[OwnerDescriptor]:
        """
        Project records into descriptors, skipping unresolvable ones.

        Args:
            records: Ownership records, in any order
            unique: Keep only the first descriptor per owner entity

        Returns:
            Descriptors in record order
        """
        descriptors: list[OwnerDescriptor] = []
        seen: set[tuple[str, Any]] = set()

        for record in records:
            descriptor = self.project_record(record)
            if descriptor is None:
                continue

            if unique:
                key = (descriptor.model_label, descriptor.id)
                if key in seen:
                    continue
                seen.add(key)

            descriptors.append(descriptor)

        return descriptors

    def project_record(self, record: OwnershipRecord) -> OwnerDescriptor | None:
        """Project a single record, or return None if it can't be resolved."""
        loader = self.registry.resolve_loader(record.owner_type)
        if loader is None:
            return self._drop(record, REASON_UNRESOLVABLE_TYPE)

        entity = loader.find_by_id(record.owner_id)
        if entity is None:
            return self._drop(record, REASON_MISSING_ENTITY)

        subject = entity
        if isinstance(entity, OwnerProxy):
            subject = entity.get_parent_entity()
            if subject is None:
                return self._drop(record, REASON_MISSING_PARENT)

        module = module_name_for(subject)
        if not module:
            return self._drop(record, REASON_MISSING_MODULE)

        return self.describe(subject, module)

    def describe(self, subject: Any, module: str) -> OwnerDescriptor:
        """Build the descriptor for a resolved owner entity."""
        title_key = getattr(subject, "title_key", None) if isinstance(subject, Titled) else None
        name = getattr(subject, title_key, None) if title_key else str(subject)
        subject_id = getattr(subject, "pk", None)
        if subject_id is None:
            subject_id = getattr(subject, "id", None)

        return OwnerDescriptor(
            id=subject_id,
            slug=subject.slug if isinstance(subject, SlugMixin) else None,
            name=name,
            title_key=title_key,
            module=module,
            edit=self.routes.module_route(
                module,
                self.route_prefixes.get(module),
                "edit",
                subject_id,
            ),
            model=subject,
        )

    def _drop(self, record: OwnershipRecord, reason: str) -> None:
        logger.debug(
            f"Skipping owner {record.owner_type}#{record.owner_id} "
            f"of media {record.media_id}: {reason}"
        )
        owner_unresolved.send(sender=self.__class__, record=record, reason=reason)
        return None
