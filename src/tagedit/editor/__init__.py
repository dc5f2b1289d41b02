"""Tag editing: immediate edits, batch sessions and the diff compiler."""

from .controller import TagEditor
from .diff import compile_operations
from .dispatch import BackgroundDispatcher, TagSource, TagUpdateDispatcher
from .immediate import ImmediateEditor
from .session import BatchEditSession
from .status import TagStatus

__all__ = [
    "BackgroundDispatcher",
    "BatchEditSession",
    "ImmediateEditor",
    "TagEditor",
    "TagSource",
    "TagStatus",
    "TagUpdateDispatcher",
    "compile_operations",
]
