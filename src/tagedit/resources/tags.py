"""Tag catalog and resource tag resource wrapper."""

from __future__ import annotations

from typing import Iterable, Optional, cast

from .base import Resource
from .tags_types import TagOperation, TagResponse, UpdateMethod
from ._common_types import (
    RESOURCE_ENDPOINTS,
    ResourceType,
    ValidationMode,
    _is_resource_type,
    is_valid_tag_name,
)


class Tags(Resource):
    """Tag catalog reads and per-resource tag updates."""

    def list(self, *, timeout: Optional[int] = None) -> list[TagResponse] | None:
        """Fetch the tag catalog.

        Parameters
        ----------
        timeout
            Request timeout in seconds.

        Returns
        -------
        list[TagResponse] or None
            List of tag dicts (``tag_name``, ``tag_count``), or ``None`` on error.
        """
        response = self._get("/tags", timeout=timeout)
        if not isinstance(response, dict):
            return None

        tags = self._field(response, "tags")
        if isinstance(tags, list):
            return [cast(TagResponse, tag) for tag in tags if isinstance(tag, dict)]
        self._logger.warning("Tags response missing expected tags list.")
        return None

    def get_tag_catalog(self, *, timeout: Optional[int] = None) -> set[str]:
        """Return the names of every known tag; empty when the catalog is unavailable."""
        tags = self.list(timeout=timeout)
        if tags is None:
            return set()
        return {tag["tag_name"] for tag in tags if isinstance(tag.get("tag_name"), str)}

    def get_resource_tags(
        self,
        resource_type: ResourceType,
        key: str,
        *,
        validation: ValidationMode = "warn",
        timeout: Optional[int] = None,
    ) -> set[str] | None:
        """Fetch the tags currently attached to one resource.

        Parameters
        ----------
        resource_type
            ``"table"``, ``"dashboard"`` or ``"feature"``.
        key
            Resource key (table key, dashboard uri or feature key).
        validation
            Validation mode: ``"off"`` sends inputs as-is, ``"warn"`` drops invalid
            inputs with warnings, and ``"strict"`` raises on invalid inputs.
        timeout
            Request timeout in seconds.

        Returns
        -------
        set[str] or None
            Attached tag names, or ``None`` on error.
        """
        if validation != "off" and not self._check_target(resource_type, key, validation, "get_resource_tags"):
            return None

        key_param, data_field = RESOURCE_ENDPOINTS.get(resource_type, ("key", f"{resource_type}Data"))
        response = self._get(f"/{resource_type}", params={key_param: key}, timeout=timeout)
        if not isinstance(response, dict):
            return None

        tags = self._field(response, data_field, "tags")
        if not isinstance(tags, list):
            self._logger.warning("Response for %s %s missing expected tags list.", resource_type, key)
            return None

        names: set[str] = set()
        for tag in tags:
            # Detail payloads carry tag dicts; some older endpoints return bare names
            name = tag.get("tag_name") if isinstance(tag, dict) else tag
            if isinstance(name, str):
                names.add(name)
        return names

    def update(
        self,
        resource_type: ResourceType,
        key: str,
        method: UpdateMethod,
        tag_name: str,
        *,
        validation: ValidationMode = "warn",
        timeout: Optional[int] = None,
    ) -> bool:
        """Attach (``PUT``) or detach (``DELETE``) one tag on a resource.

        Only added tag names are checked against the tag name pattern;
        removing an existing attachment never needs name validation.

        Returns
        -------
        bool
            ``True`` when the update request succeeds.
        """
        if validation != "off":
            if not self._check_target(resource_type, key, validation, "update"):
                return False
            if not isinstance(method, UpdateMethod):
                if validation == "strict":
                    raise ValueError(f"Invalid update method: {method}")
                self._logger.warning("Invalid update method: %s", method)
                return False
            if method is UpdateMethod.ADD and not is_valid_tag_name(tag_name):
                if validation == "strict":
                    raise ValueError(f"Invalid tag name: {tag_name}")
                self._logger.warning("Invalid tag name for add: %s", tag_name)
                return False
            if not isinstance(tag_name, str) or not tag_name:
                if validation == "strict":
                    raise ValueError(f"Invalid tag name: {tag_name}")
                self._logger.warning("Invalid tag name for remove: %s", tag_name)
                return False

        verb = method.value if isinstance(method, UpdateMethod) else str(method)
        payload = {"key": key, "tag": tag_name}
        response = self._send(verb, f"/update_{resource_type}_tags", json=payload, timeout=timeout)
        if response is None:
            return False
        self._logger.debug("%s tag %s on %s %s", verb, tag_name, resource_type, key)
        return True

    def apply_tag_operations(
        self,
        resource_type: ResourceType,
        key: str,
        operations: Iterable[TagOperation],
        *,
        validation: ValidationMode = "warn",
        timeout: Optional[int] = None,
    ) -> bool:
        """Apply a list of tag operations to one resource, in order.

        One request is sent per operation. Processing stops at the first
        failed request; operations already applied are not rolled back.

        Returns
        -------
        bool
            ``True`` when every operation succeeded (vacuously for an empty list).
        """
        for operation in operations:
            ok = self.update(
                resource_type,
                key,
                operation.method,
                operation.tag_name,
                validation=validation,
                timeout=timeout,
            )
            if not ok:
                self._logger.warning(
                    "Stopped applying tag operations on %s %s at %s %s",
                    resource_type,
                    key,
                    operation.method.name,
                    operation.tag_name,
                )
                return False
        return True

    def _check_target(self, resource_type: object, key: object, validation: ValidationMode, action: str) -> bool:
        if not _is_resource_type(resource_type):
            if validation == "strict":
                raise ValueError(f"Invalid resource_type: {resource_type}")
            self._logger.warning("Invalid resource_type for %s: %s", action, resource_type)
            return False
        if not isinstance(key, str) or not key.strip():
            if validation == "strict":
                raise ValueError(f"Invalid key: {key}")
            self._logger.warning("Invalid key for %s: %s", action, key)
            return False
        return True
