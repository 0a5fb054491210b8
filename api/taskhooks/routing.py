"""Absolute URLs for the pages notifications link to."""

from typing import Any, Optional, Protocol
from urllib.parse import quote

from taskhooks.errors import InvalidReference

DEFAULT_ROUTES = {
    "projects": "/projects/{id}",
    "deployments": "/deployments/{id}",
}


class UrlGenerator(Protocol):
    def url_for(self, resource: str, id: Any) -> str:
        ...


class RouteUrlGenerator:
    """Build URLs from ``{id}`` route templates joined to a base URL."""

    def __init__(self, base_url: str, routes: Optional[dict[str, str]] = None):
        self.base_url = base_url.rstrip("/")
        self._routes = dict(DEFAULT_ROUTES if routes is None else routes)

    def url_for(self, resource: str, id: Any) -> str:
        template = self._routes.get(resource)
        if template is None:
            raise InvalidReference(resource, id, "unknown route")
        if id is None or not str(id).strip():
            raise InvalidReference(resource, id, "empty id")
        return self.base_url + template.format(id=quote(str(id), safe=""))
