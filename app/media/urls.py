"""
URL configuration for the media library.

Mounted under /admin/media-library/ so RouteBuilder's module links
(``/admin/media-library/medias/{id}/``) land on these views.

Media Library - Medias:
    GET    /medias/                  - List media
    GET    /medias/{media_id}/       - Get media
    DELETE /medias/{media_id}/       - Delete media (409 while in use)
    POST   /medias/single-update/    - Update one media
    POST   /medias/bulk-update/      - Update many media
    POST   /medias/bulk-delete/      - Delete many media
"""

from django.urls import path

from media.views import (
    MediaBulkDeleteView,
    MediaBulkUpdateView,
    MediaDetailView,
    MediaListView,
    MediaSingleUpdateView,
)

app_name = "media"

urlpatterns = [
    path("medias/", MediaListView.as_view(), name="list"),
    path(
        "medias/single-update/",
        MediaSingleUpdateView.as_view(),
        name="single-update",
    ),
    path(
        "medias/bulk-update/",
        MediaBulkUpdateView.as_view(),
        name="bulk-update",
    ),
    path(
        "medias/bulk-delete/",
        MediaBulkDeleteView.as_view(),
        name="bulk-delete",
    ),
    path("medias/<int:media_id>/", MediaDetailView.as_view(), name="detail"),
]
