"""Core catalog client with a raw-request escape hatch."""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

import requests

from .editor.controller import TagEditor
from .editor.dispatch import TagUpdateDispatcher
from .resources._common_types import ResourceType, ValidationMode
from .resources.tags import Tags
from .tools import tags as tag_tools

DEFAULT_HOST = os.environ.get("CATALOG_HOST", "localhost")
CATALOG_PORT = int(os.environ.get("CATALOG_PORT", "5000"))
API_PREFIX = "/api/metadata/v0"


class Catalog:
    """Client for the catalog metadata API."""

    tags: Tags
    tools: Any

    def __init__(
        self,
        *,
        host: Optional[str] = None,
        port: Optional[int | str] = None,
        default_timeout: int = 20,
        session: Optional[requests.Session] = None,
        raise_on_error: bool = False,
    ) -> None:
        """Create a client bound to a catalog instance.

        Parameters
        ----------
        host
            Hostname or IP of the catalog frontend.
        port
            API port number.
        default_timeout
            Default request timeout in seconds.
        session
            Optional requests session to reuse connections.
        raise_on_error
            If True, raise HTTP errors instead of returning None.
        """
        self.host = host or DEFAULT_HOST
        self.port = int(port or CATALOG_PORT)
        self.default_timeout = default_timeout
        self.raise_on_error = raise_on_error
        self._logger = logging.getLogger(__name__)
        self._session = session

        self.tags: Tags = Tags(self)
        self.tools = type("Tools", (), {})()
        self.tools.tags = tag_tools

    def editor(
        self,
        resource_type: ResourceType,
        key: str,
        *,
        dispatcher: Optional[TagUpdateDispatcher] = None,
        validation: ValidationMode = "warn",
    ) -> TagEditor:
        """Return a tag editor for one resource.

        Updates go through ``self.tags`` unless another dispatcher (for
        example a :class:`~tagedit.editor.dispatch.BackgroundDispatcher`)
        is given. The resource's tags are loaded once up front.
        """
        editor = TagEditor(
            self.tags,
            dispatcher or self.tags,
            resource_type,
            key,
            validation=validation,
        )
        editor.refresh()
        return editor

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any] | list[tuple[str, Any]]] = None,
        json: Optional[dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> Optional[dict[str, Any] | list[Any]]:
        """Send a raw request to the metadata API.

        Parameters
        ----------
        method
            HTTP method (GET, PUT, DELETE).
        path
            Endpoint path, with or without the leading API prefix.
        params
            Query parameters for the request.
        json
            JSON payload for the request.
        timeout
            Timeout in seconds for this request.

        Returns
        -------
        dict | list | None
            Parsed JSON payload, or None if the response is empty or non-JSON.
        """
        url = self.url_for(path)
        requester = self._session or requests
        response = None
        try:
            response = requester.request(
                method,
                url,
                params=params,
                json=json,
                timeout=timeout or self.default_timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            if self.raise_on_error:
                raise
            detail = _server_message(exc.response if exc.response is not None else response)
            self._logger.warning(
                "Request failed for %s %s: %s%s", method, url, exc, f" ({detail})" if detail else ""
            )
            return None
        except Exception as exc:  # noqa: BLE001 - surface request failures
            if self.raise_on_error:
                raise
            self._logger.warning("Request failed for %s %s: %s", method, url, exc)
            return None

        return self._decode(response, method, url)

    def url_for(self, path: str) -> str:
        """Return the absolute URL for an API path, adding the API prefix when missing."""
        path = path if path.startswith("/") else "/" + path
        if not path.startswith(API_PREFIX + "/"):
            path = API_PREFIX + path
        return f"http://{self.host}:{self.port}{path}"

    def _decode(self, response: Any, method: str, url: str) -> Optional[dict[str, Any] | list[Any]]:
        # Write endpoints may answer with an empty body
        if not response.content:
            return None
        try:
            payload = response.json()
        except ValueError:
            self._logger.warning("Response from %s %s was not JSON", method, url)
            return None
        return payload if isinstance(payload, (dict, list)) else None


def _server_message(response: Any) -> Optional[str]:
    """Pull the failure text out of an error response body, if it has one."""
    try:
        body = response.json()
    except (ValueError, AttributeError):
        return None
    if not isinstance(body, dict):
        return None
    # The metadata API reports failures in "msg"
    for field in ("msg", "message", "error"):
        if field in body:
            return f"server {field}: {body[field]}"
    return None
