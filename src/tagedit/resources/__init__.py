"""Resource module exports."""

from .tags import Tags

__all__ = ["Tags"]
