"""
Serializers for the CMS media library API.

Provides:
- OwnerDescriptorSerializer: Serialized shape of an owner descriptor
- MediaCmsSerializer: Read-only CMS representation of a media asset
- MediaListQuerySerializer: Query parameters of the media list
- MediaSingleUpdateSerializer: Update metadata and tags of one media
- MediaBulkUpdateSerializer: Update metadata and tags of many media
- MediaBulkDeleteSerializer: Delete many media
- BulkDeleteResultSerializer: Result of a bulk delete
"""

from __future__ import annotations

from typing import Any

from drf_spectacular.utils import OpenApiExample, extend_schema_serializer
from rest_framework import serializers

from media.models import MediaAsset


class OwnerDescriptorSerializer(serializers.Serializer):
    """
    Entity using a media asset.

    Built from OwnerDescriptor.to_dict(); documented here for the schema.
    """

    id = serializers.IntegerField(read_only=True)
    slug = serializers.CharField(read_only=True, allow_null=True)
    name = serializers.CharField(read_only=True, allow_null=True)
    titleKey = serializers.CharField(read_only=True, allow_null=True)  # noqa: N815
    module = serializers.CharField(read_only=True)
    edit = serializers.CharField(read_only=True)
    model = serializers.CharField(
        read_only=True,
        help_text="Owner model label (app_label.ModelName)",
    )


class MediaMetadatasSerializer(serializers.Serializer):
    """Asset metadata (``default``) and placement overrides (``custom``)."""

    default = serializers.DictField(read_only=True)
    custom = serializers.DictField(read_only=True)


class MediaCmsSerializer(serializers.Serializer):
    """
    Read-only CMS representation of a media asset.

    The representation itself is built by MediaLibraryService.cms_payload();
    the declared fields describe it for the API schema.
    """

    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    thumbnail = serializers.CharField(read_only=True)
    original = serializers.CharField(read_only=True)
    medium = serializers.CharField(read_only=True)
    width = serializers.IntegerField(read_only=True, allow_null=True)
    height = serializers.IntegerField(read_only=True, allow_null=True)
    tags = serializers.ListField(child=serializers.CharField(), read_only=True)
    deleteUrl = serializers.CharField(read_only=True, allow_null=True)  # noqa: N815
    updateUrl = serializers.CharField(read_only=True)  # noqa: N815
    updateBulkUrl = serializers.CharField(read_only=True)  # noqa: N815
    deleteBulkUrl = serializers.CharField(read_only=True)  # noqa: N815
    metadatas = MediaMetadatasSerializer(read_only=True)
    owners = OwnerDescriptorSerializer(many=True, read_only=True)

    def to_representation(self, instance: MediaAsset) -> dict[str, Any]:
        return instance.to_cms_dict()


class MediaListQuerySerializer(serializers.Serializer):
    """Query parameters for the media list."""

    tag = serializers.SlugField(
        required=False,
        help_text="Only list media carrying the tag with this slug",
    )
    page_size = serializers.IntegerField(
        required=False,
        min_value=1,
        max_value=100,
        default=20,
        help_text="Results per page (max 100)",
    )


@extend_schema_serializer(
    examples=[
        OpenApiExample(
            "Caption and tags",
            value={
                "id": 7,
                "metadatas": {"caption": "Sunset over the bay", "alt_text": "Sunset"},
                "tags": ["summer", "landscape"],
            },
            request_only=True,
        ),
        OpenApiExample(
            "Translated credit",
            value={
                "id": 7,
                "metadatas": {"credit": {"en": "Jane Doe", "fr": "Jeanne Doe"}},
            },
            request_only=True,
        ),
    ]
)
class MediaSingleUpdateSerializer(serializers.Serializer):
    """
    Update metadata and tags of one media asset.

    Translatable fields accept a locale -> value mapping; a plain value
    sets the active language.
    """

    id = serializers.IntegerField(help_text="Media id")
    metadatas = serializers.DictField(
        child=serializers.JSONField(),
        required=False,
        default=dict,
        help_text="Metadata field name -> value (or locale -> value)",
    )
    tags = serializers.ListField(
        child=serializers.CharField(max_length=100),
        required=False,
        allow_null=True,
        default=None,
        help_text="Tag names replacing the current tags; omit to keep them",
    )


class MediaBulkUpdateSerializer(serializers.Serializer):
    """Apply metadata and tag changes to several media assets."""

    ids = serializers.ListField(
        child=serializers.IntegerField(),
        allow_empty=False,
        help_text="Media ids",
    )
    metadatas = serializers.DictField(
        child=serializers.JSONField(),
        required=False,
        default=dict,
    )
    add_tags = serializers.ListField(
        child=serializers.CharField(max_length=100),
        required=False,
        default=list,
    )
    remove_tags = serializers.ListField(
        child=serializers.CharField(max_length=100),
        required=False,
        default=list,
    )


class MediaBulkDeleteSerializer(serializers.Serializer):
    """Media ids to delete."""

    ids = serializers.ListField(
        child=serializers.IntegerField(),
        allow_empty=False,
        help_text="Media ids; ids still in use are skipped",
    )


class BulkDeleteResultSerializer(serializers.Serializer):
    """Result of a bulk delete."""

    deleted = serializers.ListField(child=serializers.IntegerField())
    skipped = serializers.ListField(child=serializers.IntegerField())
