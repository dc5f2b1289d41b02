"""Batch edit session: staged tag toggles for one editing episode.

A session is opened from a snapshot of the tags attached to a resource
(the baseline). Every baseline tag starts ``PRESENT``; every other tag has
no entry. Toggling cycles a tag between two states that depend only on
whether it was in the baseline:

    baseline tag:      PRESENT <-> REMOVE
    non-baseline tag:  (no entry) <-> ADD

Nothing is sent while toggling. ``commit`` reduces the staged state to the
minimal list of operations and closes the session; ``discard`` closes it
without producing anything.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..exceptions import InvalidTagNameError, SessionClosedError
from ..resources._common_types import ValidationMode, invalid_tag_message, is_valid_tag_name
from ..resources.tags_types import TagOperation
from .diff import compile_operations
from .status import TagStatus, next_status

_logger = logging.getLogger(__name__)


class BatchEditSession:
    """Staged tag membership changes against a fixed baseline."""

    def __init__(
        self,
        baseline: Iterable[str],
        *,
        catalog: Iterable[str] = (),
        validation: ValidationMode = "warn",
    ) -> None:
        self._baseline = frozenset(baseline)
        self._catalog = frozenset(catalog)
        self._validation = validation
        self._statuses: Optional[dict[str, TagStatus]] = {
            name: TagStatus.PRESENT for name in sorted(self._baseline)
        }

    @classmethod
    def open(
        cls,
        baseline: Iterable[str],
        *,
        catalog: Iterable[str] = (),
        validation: ValidationMode = "warn",
    ) -> "BatchEditSession":
        """Open a session with every ``baseline`` tag marked ``PRESENT``.

        Parameters
        ----------
        baseline
            Tags attached to the resource when the session opens.
        catalog
            Known tag names. They were validated when created, so toggling
            them in is never rejected.
        validation
            How names outside baseline and catalog are checked before they
            are staged: ``"off"`` stages them as typed, ``"warn"`` ignores
            invalid names with a warning, ``"strict"`` raises
            :class:`InvalidTagNameError`.
        """
        return cls(baseline, catalog=catalog, validation=validation)

    @property
    def baseline(self) -> frozenset[str]:
        return self._baseline

    @property
    def is_open(self) -> bool:
        return self._statuses is not None

    def _require_open(self) -> dict[str, TagStatus]:
        if self._statuses is None:
            raise SessionClosedError("Batch edit session is closed")
        return self._statuses

    def status(self, tag_name: str) -> Optional[TagStatus]:
        """Return the staged status of ``tag_name``, or None when it has no entry."""
        return self._require_open().get(tag_name)

    def statuses(self) -> dict[str, TagStatus]:
        """Return a copy of the staged mapping."""
        return dict(self._require_open())

    def toggle(self, tag_name: str) -> Optional[TagStatus]:
        """Flip the staged membership of ``tag_name`` and return its new status.

        Applying ``toggle`` twice restores the previous status.
        """
        statuses = self._require_open()
        current = statuses.get(tag_name)

        if current is None and not self._accepts_new(tag_name):
            return None

        following = next_status(current)
        if following is None:
            del statuses[tag_name]
        else:
            statuses[tag_name] = following
        _logger.debug("Toggled tag %s: %s -> %s", tag_name, _label(current), _label(following))
        return following

    def pending_operations(self) -> list[TagOperation]:
        """Return what ``commit`` would produce, without closing the session."""
        return compile_operations(self._require_open())

    def commit(self) -> list[TagOperation]:
        """Close the session and return the minimal operations for its final state."""
        operations = compile_operations(self._require_open())
        self._statuses = None
        return operations

    def discard(self) -> None:
        """Close the session, dropping every staged change."""
        self._require_open()
        self._statuses = None

    def _accepts_new(self, tag_name: str) -> bool:
        if self._validation == "off" or tag_name in self._catalog:
            return True
        if is_valid_tag_name(tag_name):
            return True
        if self._validation == "strict":
            raise InvalidTagNameError(tag_name, invalid_tag_message(tag_name))
        _logger.warning("Ignoring toggle of invalid tag name: %s", tag_name)
        return False


def _label(status: Optional[TagStatus]) -> str:
    return status.value if status is not None else "-"
