"""EditResult dataclass: the outcome of committing one node edit.

This module provides the result type returned by ``commit_edit()`` calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

from json_node_editor.errors import EditErrorKind
from json_node_editor.tree.path import Path

__all__ = ["EditResult", "WriteMode"]


class WriteMode(StrEnum):
    """How an edited value was written back into the document.

    - REPLACE: the value at the node's path was overwritten wholesale.
    - MERGE:   the edited object's keys were overlaid onto the existing
               object's keys, one level deep.
    """

    REPLACE = auto()
    MERGE = auto()


@dataclass(frozen=True, slots=True)
class EditResult:
    """Outcome of a commit: either a new document or an error, never both.

    Attributes:
        new_document_text: The full document serialized after the edit;
            None on failure.
        error_message: Human-readable reason the edit was rejected; None on
            success.
        error_kind: Machine-readable category of the failure; None on success.
        write_mode: Whether the edit replaced or merged; None on failure.
        reselect_path: Path of the node the caller should select again once
            it has rebuilt its node index; None on failure.
    """

    new_document_text: str | None = None
    error_message: str | None = None
    error_kind: EditErrorKind | None = None
    write_mode: WriteMode | None = None
    reselect_path: Path | None = None

    def __post_init__(self) -> None:
        if (self.new_document_text is None) == (self.error_message is None):
            msg = "exactly one of new_document_text and error_message must be set"
            raise ValueError(msg)

    @classmethod
    def success(
        cls,
        new_document_text: str,
        write_mode: WriteMode,
        reselect_path: Path,
    ) -> EditResult:
        return cls(
            new_document_text=new_document_text,
            write_mode=write_mode,
            reselect_path=reselect_path,
        )

    @classmethod
    def failure(cls, error_kind: EditErrorKind, error_message: str) -> EditResult:
        return cls(error_message=error_message, error_kind=error_kind)

    @property
    def ok(self) -> bool:
        """True when the edit produced a new document."""
        return self.new_document_text is not None
