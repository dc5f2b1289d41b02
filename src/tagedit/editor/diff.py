"""Reduce a batch edit session's final state to tag operations."""

from __future__ import annotations

from typing import Mapping

from ..resources.tags_types import TagOperation, UpdateMethod
from .status import TagStatus

_EMITTED: dict[TagStatus, UpdateMethod] = {
    TagStatus.ADD: UpdateMethod.ADD,
    TagStatus.REMOVE: UpdateMethod.REMOVE,
}


def compile_operations(statuses: Mapping[str, TagStatus]) -> list[TagOperation]:
    """Return the minimal operations that move the baseline to ``statuses``.

    ``REMOVE`` entries become remove operations and ``ADD`` entries become
    add operations, in mapping order. ``PRESENT`` entries are unchanged
    baseline tags and emit nothing; tags without an entry are never
    visited. Removes only target baseline tags and adds only target other
    tags, so no two operations touch the same name.
    """
    operations: list[TagOperation] = []
    for tag_name, status in statuses.items():
        method = _EMITTED.get(status)
        if method is not None:
            operations.append(TagOperation(method, tag_name))
    return operations


__all__ = ["compile_operations"]
