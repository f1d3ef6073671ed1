"""
Deletion Guard.

A media asset may be deleted only once nothing references it any more.
The check is a live count against the mediables table on every call;
nothing is cached, so a concurrent attach between the check and the
delete is only excluded when the caller wraps both in a transaction.

Usage:
    guard = DeletionGuard()
    if guard.can_delete_safely(media.id):
        media.delete()

    guard.ensure_deletable(media.id)  # raises ConflictError when in use
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from core.exceptions import ConflictError
from media.services.ownership import OwnershipIndexReader

if TYPE_CHECKING:
    from typing import Any

logger = logging.getLogger(__name__)

MEDIA_IN_USE = "MEDIA_IN_USE"


class DeletionGuard:
    """
    Decides whether a media asset has no remaining owners.

    Attributes:
        reader: Ownership index used for the owner count
    """

    def __init__(self, reader: OwnershipIndexReader | None = None) -> None:
        self.reader = reader or OwnershipIndexReader()

    def can_delete_safely(self, media_id: Any) -> bool:
        """Return True if no association row references the asset."""
        return self.reader.owner_count(media_id) == 0

    def ensure_deletable(self, media_id: Any) -> None:
        """
        Raise if the asset is still referenced.

        Raises:
            ConflictError: MEDIA_IN_USE, with the current owner count
        """
        count = self.reader.owner_count(media_id)
        if count == 0:
            return

        logger.info(f"Refusing to delete media {media_id}: {count} owner(s)")
        raise ConflictError(
            "Media is still used by other content",
            error_code=MEDIA_IN_USE,
            details={"media_id": media_id, "owner_count": count},
        )
