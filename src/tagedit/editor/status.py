"""Staged tag status and its toggle transitions."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class TagStatus(Enum):
    """Staged status of a tag inside a batch edit session.

    A tag that was attached when the session opened is either ``PRESENT``
    or ``REMOVE``. Any other tag is either ``ADD`` or has no entry, written
    as ``None`` throughout this package.
    """
    PRESENT = "PRESENT"
    REMOVE = "REMOVE"
    ADD = "ADD"

    @property
    def in_baseline(self) -> bool:
        """Whether only tags from the baseline can hold this status."""
        return self is not TagStatus.ADD


TRANSITIONS: dict[Optional[TagStatus], Optional[TagStatus]] = {
    None: TagStatus.ADD,
    TagStatus.ADD: None,
    TagStatus.PRESENT: TagStatus.REMOVE,
    TagStatus.REMOVE: TagStatus.PRESENT,
}


def next_status(current: Optional[TagStatus]) -> Optional[TagStatus]:
    """Return the status a toggle moves ``current`` to."""
    return TRANSITIONS[current]


__all__ = ["TagStatus", "TRANSITIONS", "next_status"]
