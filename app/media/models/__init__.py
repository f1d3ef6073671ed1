"""
Media models package.

Exports:
    MediaAsset: Media library entry (image service uuid + metadata)
    Mediable: Placement of a media asset on an owner entity
    Tag: Tags for categorizing media
"""

from media.models.media_asset import MediaAsset
from media.models.mediable import Mediable
from media.models.tag import Tag

__all__ = [
    "MediaAsset",
    "Mediable",
    "Tag",
]
