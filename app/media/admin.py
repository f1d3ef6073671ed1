"""Django admin configuration for media app."""

from django.contrib import admin

from media.models import MediaAsset, Mediable, Tag
from media.services.ownership import OwnershipIndexReader


class MediableInline(admin.TabularInline):
    """Placements of a media on content entities."""

    model = Mediable
    extra = 0
    fields = ["mediable_type", "mediable_id", "role", "locale", "metadatas"]


@admin.register(MediaAsset)
class MediaAssetAdmin(admin.ModelAdmin):
    """Admin configuration for MediaAsset model."""

    list_display = [
        "id",
        "filename",
        "dimensions",
        "owner_count",
        "created_at",
    ]
    search_fields = ["filename", "uuid"]
    readonly_fields = ["uuid", "created_at", "updated_at"]
    filter_horizontal = ["tags"]
    inlines = [MediableInline]
    date_hierarchy = "created_at"
    ordering = ["-created_at"]

    @admin.display(description="Owners")
    def owner_count(self, obj: MediaAsset) -> int:
        """Number of placements referencing the media."""
        return OwnershipIndexReader().owner_count(obj.pk)

    def has_delete_permission(self, request, obj=None) -> bool:
        """Only media no content uses can be deleted."""
        if obj is not None and not obj.can_delete_safely():
            return False
        return super().has_delete_permission(request, obj)


@admin.register(Mediable)
class MediableAdmin(admin.ModelAdmin):
    """Admin configuration for Mediable model."""

    list_display = [
        "id",
        "media",
        "mediable_type",
        "mediable_id",
        "role",
        "locale",
    ]
    list_filter = ["mediable_type", "role"]
    search_fields = ["mediable_type", "mediable_id", "media__filename"]
    raw_id_fields = ["media"]


@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    """Admin configuration for Tag model."""

    list_display = ["id", "name", "slug", "created_at"]
    search_fields = ["name", "slug"]
    readonly_fields = ["created_at", "updated_at"]
    ordering = ["name"]
