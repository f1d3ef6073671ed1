"""
Image service URL builders.

Image storage and transformation are handled by an external image service
addressed by media uuid. The media library only needs URLs from it:

    get_cms_url(uuid, opts)  - thumbnail for editor UIs
    get_raw_url(uuid)        - untouched original
    get_url(uuid, opts)      - display rendition

MEDIA_LIBRARY["IMAGE_SERVICE"] names the implementation class;
``LocalImageService`` builds query-string URLs under IMAGE_BASE_URL.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Protocol, runtime_checkable
from urllib.parse import urlencode

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from media.conf import get_setting

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any


@runtime_checkable
class ImageService(Protocol):
    """Interface of the external image service."""

    def get_cms_url(self, uuid: str, opts: Mapping[str, Any] | None = None) -> str: ...

    def get_raw_url(self, uuid: str) -> str: ...

    def get_url(self, uuid: str, opts: Mapping[str, Any] | None = None) -> str: ...


class LocalImageService:
    """
    ImageService producing ``{base_url}{uuid}?{params}`` URLs.

    CMS URLs always carry compression hints on top of the caller's options.

    Example:
        service = LocalImageService("https://img.example.com/")
        service.get_url("abc", {"h": "430"})
        # "https://img.example.com/abc?h=430"
    """

    CMS_PARAMS: dict[str, str] = {"fit": "max", "q": "60"}

    def __init__(self, base_url: str | None = None) -> None:
        base_url = base_url if base_url is not None else get_setting("IMAGE_BASE_URL")
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"

    def _build(self, uuid: str, params: Mapping[str, Any] | None = None) -> str:
        url = f"{self.base_url}{uuid}"
        if params:
            url = f"{url}?{urlencode(sorted((key, str(value)) for key, value in params.items()))}"
        return url

    def get_cms_url(self, uuid: str, opts: Mapping[str, Any] | None = None) -> str:
        params = dict(self.CMS_PARAMS)
        params.update(opts or {})
        return self._build(uuid, params)

    def get_raw_url(self, uuid: str) -> str:
        return self._build(uuid)

    def get_url(self, uuid: str, opts: Mapping[str, Any] | None = None) -> str:
        return self._build(uuid, opts)


@lru_cache(maxsize=1)
def get_image_service() -> ImageService:
    """
    Return the configured image service instance.

    Raises:
        ImproperlyConfigured: If IMAGE_SERVICE can't be imported
    """
    dotted_path = get_setting("IMAGE_SERVICE")
    try:
        service_class = import_string(dotted_path)
    except ImportError as e:
        raise ImproperlyConfigured(
            f"MEDIA_LIBRARY['IMAGE_SERVICE'] could not be imported: {dotted_path}"
        ) from e
    return service_class()
