"""
Capability protocols for media owners and collaborators.

Owner entities declare what they support instead of being probed at
runtime for attributes:

    Titled: exposes ``title_key``, the attribute holding its display name
    OwnerProxy: a content fragment (block) whose real owner is a parent entity
    EntityLoader: loads an entity of one type by id
    MetadataSource: exposes an asset's own metadata values

Sluggable entities inherit ``core.model_mixins.SlugMixin``.

Usage:
    from media.protocols import OwnerProxy, Titled

    class Block(BaseModel):
        def get_parent_entity(self):
            ...

    isinstance(block, OwnerProxy)  # True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import Any


@runtime_checkable
class Titled(Protocol):
    """
    Entity with a designated display-name attribute.

    Example:
        class Page(BaseModel):
            title_key = "name"
            name = models.CharField(max_length=200)
    """

    title_key: str


@runtime_checkable
class OwnerProxy(Protocol):
    """
    Entity that references media on behalf of a parent entity.

    Media placed in a block belongs, for display purposes, to the entity
    the block is embedded in.
    """

    def get_parent_entity(self) -> Any | None:
        """Return the parent entity, or None if it no longer exists."""
        ...


@runtime_checkable
class EntityLoader(Protocol):
    """Loads entities of a single type by primary key."""

    def find_by_id(self, entity_id: Any) -> Any | None:
        """Return the entity, or None if no row matches."""
        ...


@runtime_checkable
class MetadataSource(Protocol):
    """Provides an asset's own value for a metadata field."""

    def metadata_value(self, field_name: str) -> Any:
        """Return the stored value (scalar or locale mapping), or None."""
        ...
