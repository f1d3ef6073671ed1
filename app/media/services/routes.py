"""
RouteBuilder for admin module links.

Admin links follow the shape ``/{admin}/{prefix}/{module}/{id}/{action}/``:

    module_route("articles", "blog", "edit", 5)   -> "/admin/blog/articles/5/edit/"
    module_route("pages", None, "edit", 3)        -> "/admin/pages/3/edit/"
    module_route("medias", "media-library", "destroy", 7)
                                                  -> "/admin/media-library/medias/7/"

Actions addressed by HTTP method alone (show, update, destroy, index,
store) have no trailing action segment. Named routes go through
``django.urls.reverse``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

from django.urls import reverse

from media.conf import get_setting

if TYPE_CHECKING:
    from typing import Any


class RouteBuilder:
    """
    Builds admin URLs for content modules.

    Attributes:
        admin_path: First path segment (MEDIA_LIBRARY["ADMIN_PATH"])
    """

    IMPLICIT_ACTIONS = frozenset({"index", "show", "store", "update", "destroy"})

    def __init__(self, admin_path: str | None = None) -> None:
        self.admin_path = admin_path if admin_path is not None else get_setting("ADMIN_PATH")

    def module_route(
        self,
        module: str,
        route_prefix: str | None,
        action: str,
        pk: Any = None,
    ) -> str:
        """
        Build the URL for an action on a module record.

        Args:
            module: Module name ("articles")
            route_prefix: Route prefix the module lives under, if any
            action: Action name ("edit", "destroy", ...)
            pk: Record id; omitted for collection actions

        Returns:
            Absolute URL path
        """
        segments = [self.admin_path, route_prefix, module]
        if pk is not None:
            segments.append(pk)
        if action and action not in self.IMPLICIT_ACTIONS:
            segments.append(action)

        parts = [quote(str(segment).strip("/")) for segment in segments if segment not in (None, "")]
        return "/" + "/".join(part for part in parts if part) + "/"

    def route(self, name: str, *args: Any, **kwargs: Any) -> str:
        """Reverse a named URL pattern."""
        return reverse(name, args=args or None, kwargs=kwargs or None)
