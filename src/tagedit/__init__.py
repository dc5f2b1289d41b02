"""Public package surface for the tagedit client."""

from .client import CATALOG_PORT, DEFAULT_HOST, Catalog
from .editor import BackgroundDispatcher, BatchEditSession, ImmediateEditor, TagEditor, TagStatus, compile_operations
from .exceptions import InvalidTagNameError, SessionAlreadyOpenError, SessionClosedError, SessionError, TagEditError
from .resources._common_types import is_valid_tag_name
from .resources.tags_types import TagOperation, UpdateMethod

__all__ = [
    "CATALOG_PORT",
    "DEFAULT_HOST",
    "BackgroundDispatcher",
    "BatchEditSession",
    "Catalog",
    "ImmediateEditor",
    "InvalidTagNameError",
    "SessionAlreadyOpenError",
    "SessionClosedError",
    "SessionError",
    "TagEditError",
    "TagEditor",
    "TagOperation",
    "TagStatus",
    "UpdateMethod",
    "compile_operations",
    "is_valid_tag_name",
]
