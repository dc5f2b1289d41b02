"""Base resource helpers."""

from __future__ import annotations

from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from ..client import Catalog

Params = Optional[dict[str, Any] | list[tuple[str, Any]]]
Payload = Optional[dict[str, Any] | list[Any]]


class Resource:
    """Shared helpers for resource classes."""

    def __init__(self, client: "Catalog") -> None:
        self._client = client

    @property
    def _logger(self):
        return self._client._logger

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Params = None,
        json: Optional[dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> Payload:
        return self._client.request(method, path, params=params, json=json, timeout=timeout)

    def _get(self, path: str, *, params: Params = None, timeout: Optional[int] = None) -> Payload:
        return self._request("GET", path, params=params, timeout=timeout)

    def _send(
        self,
        method: str,
        path: str,
        *,
        json: Optional[dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> Payload:
        """Send a JSON body with a write verb (PUT or DELETE)."""
        return self._request(method, path, json=json, timeout=timeout)

    @staticmethod
    def _field(response: Payload, *names: str) -> Any:
        """Walk nested dict fields of ``response``; None as soon as one is missing."""
        current: Any = response
        for name in names:
            if not isinstance(current, dict):
                return None
            current = current.get(name)
        return current
