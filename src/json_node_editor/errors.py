"""Error taxonomy for node edits.

Two families live here:

- ``EditErrorKind``: user-facing failures that ``EditCommitter.commit()``
  reports as data inside an ``EditResult`` (never raised).
- Exception classes for programmer errors at the library boundary, e.g. a
  path with a negative index or a write that addresses a list by key.

A corrupt *document* is not part of the taxonomy: it is recovered by
substituting an empty object root and is only logged.
"""

from __future__ import annotations

from enum import StrEnum, auto

__all__ = [
    "MALFORMED_EDIT_MESSAGE",
    "NO_TARGET_MESSAGE",
    "EditErrorKind",
    "InvalidPathError",
    "JsonNodeEditorError",
    "PathTypeError",
]

MALFORMED_EDIT_MESSAGE = "Invalid JSON — please fix syntax before saving"
NO_TARGET_MESSAGE = "No target node selected"


class EditErrorKind(StrEnum):
    """Why an edit was rejected.

    - MALFORMED_EDIT -> "malformed_edit" : edited text is not valid JSON
    - NO_TARGET      -> "no_target"      : no node selected when saving
    - PATH_MISMATCH  -> "path_mismatch"  : the path disagrees with the
                                           container kinds in the document
    """

    MALFORMED_EDIT = auto()
    NO_TARGET = auto()
    PATH_MISMATCH = auto()


class JsonNodeEditorError(Exception):
    """Base class for exceptions raised by json-node-editor."""


class InvalidPathError(JsonNodeEditorError, ValueError):
    """A path segment is not a non-negative int or a str."""


class PathTypeError(JsonNodeEditorError, TypeError):
    """A path segment addresses an existing container of the wrong kind.

    Raised when a list is addressed by a string key or a dict by an
    integer index.
    """
