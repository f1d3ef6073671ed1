"""
API views for the CMS media library.

Provides:
- MediaListView: List media with their CMS representation
- MediaDetailView: Get or delete one media
- MediaSingleUpdateView: Update metadata and tags of one media
- MediaBulkUpdateView: Update metadata and tags of many media
- MediaBulkDeleteView: Delete every listed media no content uses
"""

from __future__ import annotations

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from core.exceptions import ConflictError, NotFoundError, ValidationError
from media.models import MediaAsset
from media.serializers import (
    BulkDeleteResultSerializer,
    MediaBulkDeleteSerializer,
    MediaBulkUpdateSerializer,
    MediaCmsSerializer,
    MediaListQuerySerializer,
    MediaSingleUpdateSerializer,
)
from media.services.deletion import MEDIA_IN_USE
from media.services.library import MediaLibraryService

# Service error codes -> HTTP status
ERROR_STATUS = {
    NotFoundError.default_error_code: status.HTTP_404_NOT_FOUND,
    ConflictError.default_error_code: status.HTTP_409_CONFLICT,
    MEDIA_IN_USE: status.HTTP_409_CONFLICT,
    ValidationError.default_error_code: status.HTTP_400_BAD_REQUEST,
}


def error_response(result) -> Response:
    """Build the error response for a failed ServiceResult."""
    response_status = ERROR_STATUS.get(result.error_code, status.HTTP_400_BAD_REQUEST)
    return Response(result.to_response(), status=response_status)


class MediaListView(APIView):
    """
    List media library entries.

    GET /admin/media-library/medias/
        Paginated CMS representations, newest first.

    Query Parameters:
        tag: Only media carrying this tag slug
        page: Page number (default: 1)
        page_size: Results per page (default: 20, max: 100)

    Authentication:
        Staff only.
    """

    permission_classes = [IsAdminUser]

    @extend_schema(
        operation_id="list_medias",
        summary="List media",
        description="List media library entries with URLs, metadata and owners.",
        parameters=[
            OpenApiParameter(
                name="tag",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Tag slug filter",
                required=False,
            ),
            OpenApiParameter(
                name="page",
                type=OpenApiTypes.INT,
                location=OpenApiParameter.QUERY,
                description="Page number (default: 1)",
                required=False,
                default=1,
            ),
            OpenApiParameter(
                name="page_size",
                type=OpenApiTypes.INT,
                location=OpenApiParameter.QUERY,
                description="Results per page (default: 20, max: 100)",
                required=False,
                default=20,
            ),
        ],
        responses={200: MediaCmsSerializer(many=True)},
        tags=["Media Library - Medias"],
    )
    def get(self, request) -> Response:
        """List media."""
        query_serializer = MediaListQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)
        params = query_serializer.validated_data

        queryset = MediaAsset.objects.prefetch_related("tags").order_by("-created_at", "-id")
        if tag := params.get("tag"):
            queryset = queryset.filter(tags__slug=tag).distinct()

        paginator = PageNumberPagination()
        paginator.page_size = params["page_size"]
        page = paginator.paginate_queryset(queryset, request)

        serializer = MediaCmsSerializer(page, many=True)
        return paginator.get_paginated_response(serializer.data)


class MediaDetailView(APIView):
    """
    Get or delete one media.

    GET /admin/media-library/medias/{media_id}/
        CMS representation of the media.

    DELETE /admin/media-library/medias/{media_id}/
        Delete the media if no content uses it.

    Response:
        200 OK / 204 No Content
        404 Not Found: No such media
        409 Conflict: Media still used by content
    """

    permission_classes = [IsAdminUser]

    @extend_schema(
        operation_id="get_media",
        summary="Get media",
        responses={
            200: MediaCmsSerializer,
            404: OpenApiResponse(description="Media not found"),
        },
        tags=["Media Library - Medias"],
    )
    def get(self, request, media_id: int) -> Response:
        """Return the CMS representation of a media."""
        media = MediaAsset.objects.prefetch_related("tags").filter(pk=media_id).first()
        if media is None:
            return Response(
                {"error": "Media not found"},
                status=status.HTTP_404_NOT_FOUND,
            )

        return Response(MediaCmsSerializer(media).data)

    @extend_schema(
        operation_id="delete_media",
        summary="Delete media",
        description="Delete a media. Refused with 409 while any content uses it.",
        responses={
            204: OpenApiResponse(description="Media deleted"),
            404: OpenApiResponse(description="Media not found"),
            409: OpenApiResponse(description="Media still in use"),
        },
        tags=["Media Library - Medias"],
    )
    def delete(self, request, media_id: int) -> Response:
        """Delete a media no content uses."""
        result = MediaLibraryService.delete_media(media_id)
        if not result.success:
            return error_response(result)

        return Response(status=status.HTTP_204_NO_CONTENT)


class MediaSingleUpdateView(APIView):
    """
    Update metadata and tags of one media.

    POST /admin/media-library/medias/single-update/
    """

    permission_classes = [IsAdminUser]

    @extend_schema(
        operation_id="update_media",
        summary="Update media",
        request=MediaSingleUpdateSerializer,
        responses={
            200: MediaCmsSerializer,
            400: OpenApiResponse(description="Invalid metadata"),
            404: OpenApiResponse(description="Media not found"),
        },
        tags=["Media Library - Medias"],
    )
    def post(self, request) -> Response:
        """Apply the update and return the new representation."""
        serializer = MediaSingleUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        data = serializer.validated_data
        result = MediaLibraryService.update_media(
            media_id=data["id"],
            metadatas=data["metadatas"],
            tags=data["tags"],
        )
        if not result.success:
            return error_response(result)

        return Response(MediaCmsSerializer(result.data).data)


class MediaBulkUpdateView(APIView):
    """
    Update metadata and tags of many media.

    POST /admin/media-library/medias/bulk-update/
    """

    permission_classes = [IsAdminUser]

    @extend_schema(
        operation_id="bulk_update_medias",
        summary="Bulk update media",
        request=MediaBulkUpdateSerializer,
        responses={
            200: MediaCmsSerializer(many=True),
            400: OpenApiResponse(description="Invalid metadata"),
            404: OpenApiResponse(description="No media found"),
        },
        tags=["Media Library - Medias"],
    )
    def post(self, request) -> Response:
        """Apply the update to every listed media."""
        serializer = MediaBulkUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        data = serializer.validated_data
        result = MediaLibraryService.bulk_update(
            media_ids=data["ids"],
            metadatas=data["metadatas"],
            add_tags=data["add_tags"],
            remove_tags=data["remove_tags"],
        )
        if not result.success:
            return error_response(result)

        return Response(MediaCmsSerializer(result.data, many=True).data)


class MediaBulkDeleteView(APIView):
    """
    Delete many media.

    POST /admin/media-library/medias/bulk-delete/
        Deletes every listed media no content uses; the others are skipped.
    """

    permission_classes = [IsAdminUser]

    @extend_schema(
        operation_id="bulk_delete_medias",
        summary="Bulk delete media",
        request=MediaBulkDeleteSerializer,
        responses={200: BulkDeleteResultSerializer},
        tags=["Media Library - Medias"],
    )
    def post(self, request) -> Response:
        """Delete the deletable media."""
        serializer = MediaBulkDeleteSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        result = MediaLibraryService.bulk_delete(serializer.validated_data["ids"])
        return Response(BulkDeleteResultSerializer(result.data).data)
