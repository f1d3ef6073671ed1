"""Media library services: metadata, ownership, owner projection and deletion."""

from media.services.deletion import DeletionGuard
from media.services.image import ImageService, LocalImageService, get_image_service
from media.services.library import MediaLibraryService
from media.services.owners import OwnerDescriptor, OwnerProjector
from media.services.ownership import OwnershipIndexReader, OwnershipRecord
from media.services.routes import RouteBuilder
from media.services.storage import TableReader

__all__ = [
    "DeletionGuard",
    "ImageService",
    "LocalImageService",
    "MediaLibraryService",
    "OwnerDescriptor",
    "OwnerProjector",
    "OwnershipIndexReader",
    "OwnershipRecord",
    "RouteBuilder",
    "TableReader",
    "get_image_service",
]
