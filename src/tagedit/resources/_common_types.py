"""Shared types and validation helpers for resources.

This module contains:
- Validation mode type (shared across all resources and editors)
- Resource type definitions and their endpoint layout
- Tag name validation
"""

from __future__ import annotations

import re
from typing import Literal, get_args

# --- Shared Validation Mode --- #
ValidationMode = Literal["off", "warn", "strict"]


# --- Resource Types --- #
ResourceType = Literal["table", "dashboard", "feature"]
RESOURCE_TYPES: tuple[ResourceType, ...] = get_args(ResourceType)

# (query parameter for the resource key, response field holding the resource)
RESOURCE_ENDPOINTS: dict[ResourceType, tuple[str, str]] = {
    "table": ("key", "tableData"),
    "dashboard": ("uri", "dashboard"),
    "feature": ("key", "featureData"),
}


def _is_resource_type(value: object) -> bool:
    return isinstance(value, str) and value in RESOURCE_TYPES


# --- Tag Names --- #
VALID_TAG_PATTERN = re.compile(r"^[a-z0-9_]+$")

TAG_EXISTS_MESSAGE = "Tag already exists."
INVALID_TAG_MESSAGE = "Valid characters include a-z, 0-9, and '_'."


def is_valid_tag_name(candidate: object) -> bool:
    """Return True when ``candidate`` is an acceptable tag name.

    Names are case-sensitive and must consist only of lowercase ASCII
    letters, digits and underscores.
    """
    # fullmatch so a trailing newline is rejected as well
    return isinstance(candidate, str) and VALID_TAG_PATTERN.fullmatch(candidate) is not None


def invalid_tag_message(candidate: object) -> str:
    """Return the hint shown when ``candidate`` cannot be offered as a new tag.

    A valid name is only ever refused because it is already known, so the
    message points at the existing tag instead of the allowed characters.
    """
    if is_valid_tag_name(candidate):
        return TAG_EXISTS_MESSAGE
    return INVALID_TAG_MESSAGE

