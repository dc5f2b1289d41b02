"""Tag editing for one resource: immediate edits and batch sessions."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..exceptions import SessionAlreadyOpenError, SessionClosedError, TagEditError
from ..resources._common_types import ResourceType, ValidationMode
from ..resources.tags_types import TagOperation, UpdateMethod
from .dispatch import TagSource, TagUpdateDispatcher
from .immediate import ImmediateEditor
from .session import BatchEditSession
from .status import TagStatus

_logger = logging.getLogger(__name__)


class TagEditor:
    """Owns the tag editing episodes of a single resource.

    Immediate ``add``/``remove`` calls are dispatched one by one. A batch
    session is opened with :meth:`open_batch`, fed with :meth:`toggle`, and
    ended with :meth:`commit` (one dispatch of the compiled operations) or
    :meth:`discard` (no dispatch). Only one session can be open at a time.
    """

    def __init__(
        self,
        source: TagSource,
        dispatcher: TagUpdateDispatcher,
        resource_type: ResourceType,
        key: str,
        *,
        tags: Optional[Iterable[str]] = None,
        validation: ValidationMode = "warn",
    ) -> None:
        self._source = source
        self._dispatcher = dispatcher
        self.resource_type = resource_type
        self.key = key
        self.validation = validation
        self._immediate = ImmediateEditor(
            dispatcher,
            resource_type,
            key,
            current=tags or (),
            validation=validation,
        )
        self._session: Optional[BatchEditSession] = None
        self.last_commit_ok: Optional[bool] = None

    @property
    def tags(self) -> set[str]:
        """Last known tags attached to the resource."""
        return set(self._immediate.current)

    @property
    def session(self) -> Optional[BatchEditSession]:
        return self._session

    def refresh(self) -> set[str] | None:
        """Reload the resource's tags; keeps the previous snapshot on failure."""
        tags = self._source.get_resource_tags(self.resource_type, self.key)
        if tags is None:
            _logger.warning("Could not load tags for %s %s", self.resource_type, self.key)
            return None
        self._immediate.current = set(tags)
        return set(tags)

    def catalog_options(self, catalog: Optional[Iterable[str]] = None) -> list[str]:
        """Known tags not attached to the resource yet, sorted by name."""
        names = set(catalog) if catalog is not None else self._source.get_tag_catalog()
        return sorted(names - self._immediate.current)

    # ------------------------------------------------------------------
    # Immediate mode
    # ------------------------------------------------------------------
    def add(self, tag_name: str) -> Optional[TagOperation]:
        self._refuse_during_session()
        return self._immediate.add(tag_name)

    def remove(self, tag_name: str) -> TagOperation:
        self._refuse_during_session()
        return self._immediate.remove(tag_name)

    def _refuse_during_session(self) -> None:
        # An open session diffs against its own baseline
        if self._session is not None:
            raise SessionAlreadyOpenError(f"Batch edit open for {self.resource_type} {self.key}; commit or discard it first")

    # ------------------------------------------------------------------
    # Batch mode
    # ------------------------------------------------------------------
    def open_batch(
        self,
        baseline: Optional[Iterable[str]] = None,
        *,
        catalog: Optional[Iterable[str]] = None,
    ) -> BatchEditSession:
        """Open a batch session.

        Parameters
        ----------
        baseline
            Tags to start from. When omitted the resource's tags are
            reloaded from the source.
        catalog
            Known tag names, exempt from name validation when toggled in.
            Fetched from the source when omitted.

        Raises
        ------
        SessionAlreadyOpenError
            If a session is already open for this resource.
        TagEditError
            If the baseline had to be loaded and could not be.
        """
        if self._session is not None:
            raise SessionAlreadyOpenError(f"Batch edit already open for {self.resource_type} {self.key}")

        if baseline is None:
            baseline = self.refresh()
            if baseline is None:
                raise TagEditError(f"Cannot open batch edit: tags for {self.resource_type} {self.key} unavailable")
        if catalog is None:
            catalog = self._source.get_tag_catalog()

        self._session = BatchEditSession.open(baseline, catalog=catalog, validation=self.validation)
        return self._session

    def toggle(self, tag_name: str) -> Optional[TagStatus]:
        return self._require_session().toggle(tag_name)

    def commit(self) -> list[TagOperation]:
        """Compile the open session, close it, and dispatch the result once.

        The session is torn down before dispatching, so a failed update is
        never sent again from here. The known tags are only updated when
        the dispatcher does not report failure; ``last_commit_ok`` records
        the outcome.
        """
        session = self._require_session()
        self._session = None
        operations = session.commit()
        _logger.debug("Committing %d tag operations on %s %s", len(operations), self.resource_type, self.key)
        result = self._dispatcher.apply_tag_operations(self.resource_type, self.key, operations)
        self.last_commit_ok = result is not False
        if not self.last_commit_ok:
            _logger.warning("Tag update for %s %s failed; call refresh() to resync", self.resource_type, self.key)
            return operations

        current = self._immediate.current
        for operation in operations:
            if operation.method is UpdateMethod.ADD:
                current.add(operation.tag_name)
            else:
                current.discard(operation.tag_name)
        return operations

    def discard(self) -> None:
        session = self._require_session()
        self._session = None
        session.discard()

    def _require_session(self) -> BatchEditSession:
        if self._session is None:
            raise SessionClosedError(f"No batch edit open for {self.resource_type} {self.key}")
        return self._session
