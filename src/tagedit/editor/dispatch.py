"""Collaborator interfaces for reading and updating resource tags."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Protocol, Sequence

from ..resources._common_types import ResourceType
from ..resources.tags_types import TagOperation

_logger = logging.getLogger(__name__)


class TagSource(Protocol):
    """Read side: resource tag snapshots and the tag catalog."""

    def get_resource_tags(self, resource_type: ResourceType, key: str) -> set[str] | None: ...

    def get_tag_catalog(self) -> set[str]: ...


class TagUpdateDispatcher(Protocol):
    """Write side: applies operations against the backing store."""

    def apply_tag_operations(
        self,
        resource_type: ResourceType,
        key: str,
        operations: Sequence[TagOperation],
    ) -> object: ...


class BackgroundDispatcher:
    """Fire-and-forget wrapper around another dispatcher.

    Each call is submitted to a thread pool and returns immediately.
    Failures are logged and never retried. With the default single worker,
    updates for a resource reach the backing store in submission order.
    """

    def __init__(self, target: TagUpdateDispatcher, *, max_workers: int = 1) -> None:
        self._target = target
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="tagedit-dispatch")
        self._pending: set[Future] = set()
        self._lock = threading.Lock()

    def apply_tag_operations(
        self,
        resource_type: ResourceType,
        key: str,
        operations: Sequence[TagOperation],
    ) -> Future:
        # Copy so the caller cannot mutate what is in flight
        operations = list(operations)
        future = self._executor.submit(self._target.apply_tag_operations, resource_type, key, operations)
        with self._lock:
            self._pending.add(future)
        future.add_done_callback(lambda done: self._finished(done, resource_type, key, operations))
        return future

    def _finished(self, future: Future, resource_type: str, key: str, operations: list[TagOperation]) -> None:
        with self._lock:
            self._pending.discard(future)
        try:
            result = future.result()
        except Exception as exc:  # noqa: BLE001 - a background failure must not crash the pool
            _logger.warning("Tag update for %s %s failed: %s", resource_type, key, exc)
            return
        if result is False:
            _logger.warning("Tag update for %s %s was rejected (%d operations)", resource_type, key, len(operations))

    def pending(self) -> list[Future]:
        """Return futures for updates that have not finished yet."""
        with self._lock:
            return list(self._pending)

    def close(self, *, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "BackgroundDispatcher":
        return self

    def __exit__(self, *_exc) -> bool:
        self.close()
        return False


__all__ = ["TagSource", "TagUpdateDispatcher", "BackgroundDispatcher"]
