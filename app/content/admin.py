"""Django admin configuration for content app."""

from django.contrib import admin

from content.models import Article, Block, Page


@admin.register(Article)
class ArticleAdmin(admin.ModelAdmin):
    """Admin configuration for Article model."""

    list_display = ["id", "title", "slug", "created_at"]
    search_fields = ["title", "slug"]
    readonly_fields = ["created_at", "updated_at"]
    ordering = ["-created_at"]


@admin.register(Page)
class PageAdmin(admin.ModelAdmin):
    """Admin configuration for Page model."""

    list_display = ["id", "name", "path", "created_at"]
    search_fields = ["name", "path"]
    readonly_fields = ["created_at", "updated_at"]


@admin.register(Block)
class BlockAdmin(admin.ModelAdmin):
    """Admin configuration for Block model."""

    list_display = ["id", "type", "blockable_type", "blockable_id", "position"]
    list_filter = ["type", "blockable_type"]
    search_fields = ["blockable_type", "blockable_id"]
