"""
Ownership Index Reader.

Finds every (owner type, owner id) pair referencing a media asset by
reading the mediables association table directly. One indexed lookup per
call, keyed by media id: no joins, no pagination.

Usage:
    reader = OwnershipIndexReader()
    records = reader.find_owners(media.id)
    count = reader.owner_count(media.id)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from media.conf import get_setting
from media.services.storage import TableReader

if TYPE_CHECKING:
    from typing import Any

    from core.protocols import StorageReader

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OwnershipRecord:
    """
    One placement of a media asset on an owner entity.

    Attributes:
        media_id: Referenced media asset
        owner_type: Stored owner type tag (morph map key or model label)
        owner_id: Owner primary key
        metadatas: Placement metadata payload as stored (may be malformed)
        role: Placement role within the owner ("cover", "gallery", ...)
        locale: Locale the placement applies to, if any
        id: Association row id
    """

    media_id: Any
    owner_type: str
    owner_id: Any
    metadatas: Any = None
    role: str = ""
    locale: str = ""
    id: Any = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> OwnershipRecord:
        """Build a record from a raw mediables row."""
        return cls(
            media_id=row.get("media_id"),
            owner_type=str(row.get("mediable_type") or ""),
            owner_id=row.get("mediable_id"),
            metadatas=row.get("metadatas"),
            role=str(row.get("role") or ""),
            locale=str(row.get("locale") or ""),
            id=row.get("id"),
        )


class OwnershipIndexReader:
    """
    Reads owner references for media assets from the association table.

    Attributes:
        storage: StorageReader used for the lookups
        table: Association table name (MEDIA_LIBRARY["MEDIABLES_TABLE"])
    """

    MEDIA_COLUMN = "media_id"

    def __init__(
        self,
        storage: StorageReader | None = None,
        table: str | None = None,
    ) -> None:
        self.storage = storage or TableReader()
        self.table = table or get_setting("MEDIABLES_TABLE")

    def find_owners(self, media_id: Any) -> list[OwnershipRecord]:
        """
        Return every ownership record for a media asset.

        Order is storage order and carries no meaning.
        """
        rows = self.storage.select_rows_where(self.table, self.MEDIA_COLUMN, media_id)
        records = [OwnershipRecord.from_row(row) for row in rows]
        logger.debug(f"Found {len(records)} ownership records for media {media_id}")
        return records

    def owner_count(self, media_id: Any) -> int:
        """Return the number of association rows for a media asset."""
        return self.storage.count_rows_where(self.table, self.MEDIA_COLUMN, media_id)
