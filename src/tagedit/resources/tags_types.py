"""Types for the tags resource and the tag update operations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypedDict
from typing_extensions import ReadOnly


class TagResponse(TypedDict, total=False):
    """Readonly tag dict returned by the tag catalog endpoint."""
    tag_name: ReadOnly[str]
    tag_count: ReadOnly[int]


class UpdateMethod(str, Enum):
    """Tag update method; the value is the HTTP verb sent for it."""
    ADD = "PUT"
    REMOVE = "DELETE"


@dataclass(frozen=True)
class TagOperation:
    """A single add or remove instruction targeting one tag name."""
    method: UpdateMethod
    tag_name: str

    @classmethod
    def add(cls, tag_name: str) -> "TagOperation":
        return cls(UpdateMethod.ADD, tag_name)

    @classmethod
    def remove(cls, tag_name: str) -> "TagOperation":
        return cls(UpdateMethod.REMOVE, tag_name)


__all__ = ["TagResponse", "UpdateMethod", "TagOperation"]
