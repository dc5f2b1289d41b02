"""Exceptions raised by tag editing."""

from __future__ import annotations


class TagEditError(Exception):
    """Base class for tag editing errors."""


class InvalidTagNameError(TagEditError, ValueError):
    """A tag name does not match the allowed pattern."""

    def __init__(self, tag_name: object, message: str | None = None) -> None:
        self.tag_name = tag_name
        super().__init__(message or f"Invalid tag name: {tag_name!r}")


class SessionError(TagEditError, RuntimeError):
    """Batch edit session used outside its lifetime."""


class SessionAlreadyOpenError(SessionError):
    """A batch edit session is already open for the resource."""


class SessionClosedError(SessionError):
    """The batch edit session was committed, discarded or never opened."""


__all__ = [
    "TagEditError",
    "InvalidTagNameError",
    "SessionError",
    "SessionAlreadyOpenError",
    "SessionClosedError",
]
