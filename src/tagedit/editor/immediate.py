"""Single add/remove tag edits dispatched without staging."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..exceptions import InvalidTagNameError
from ..resources._common_types import ResourceType, ValidationMode, invalid_tag_message, is_valid_tag_name
from ..resources.tags_types import TagOperation
from .dispatch import TagUpdateDispatcher

_logger = logging.getLogger(__name__)


class ImmediateEditor:
    """Turns each add or remove gesture into one dispatched operation."""

    def __init__(
        self,
        dispatcher: TagUpdateDispatcher,
        resource_type: ResourceType,
        key: str,
        *,
        current: Iterable[str] = (),
        validation: ValidationMode = "warn",
    ) -> None:
        self._dispatcher = dispatcher
        self.resource_type = resource_type
        self.key = key
        self.current: set[str] = set(current)
        self.validation = validation

    def add(self, tag_name: str) -> Optional[TagOperation]:
        """Attach ``tag_name`` to the resource.

        Returns
        -------
        TagOperation or None
            The dispatched operation, or ``None`` when nothing was sent: the
            name is invalid (``"warn"``) or already attached.

        Raises
        ------
        InvalidTagNameError
            If the name is invalid and validation is ``"strict"``.
        """
        if self.validation != "off" and not is_valid_tag_name(tag_name):
            if self.validation == "strict":
                raise InvalidTagNameError(tag_name, invalid_tag_message(tag_name))
            _logger.warning("Invalid tag name for add: %s", tag_name)
            return None

        if tag_name in self.current:
            _logger.debug("Tag %s already on %s %s", tag_name, self.resource_type, self.key)
            return None

        operation = TagOperation.add(tag_name)
        if self._dispatch(operation):
            self.current.add(tag_name)
        return operation

    def remove(self, tag_name: str) -> TagOperation:
        """Detach ``tag_name`` from the resource. Removal is never validated."""
        operation = TagOperation.remove(tag_name)
        if self._dispatch(operation):
            self.current.discard(tag_name)
        return operation

    def _dispatch(self, operation: TagOperation) -> bool:
        """Send one operation; False only when the dispatcher reports a failure."""
        _logger.debug("Dispatching %s %s on %s %s", operation.method.name, operation.tag_name, self.resource_type, self.key)
        result = self._dispatcher.apply_tag_operations(self.resource_type, self.key, [operation])
        return result is not False
