"""NodeRow, RowType and NodeDescriptor: the node model shared with the view.

A *node* is the user-facing unit of a document: one path plus the rows shown
for it.  The graph view builds these (see ``NodeBuilder``) and hands the
selected one to the editor.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

from json_node_editor.tree.path import ROOT_PATH, Path, as_path

__all__ = ["NodeDescriptor", "NodeRow", "RowType", "row_type_of"]


class RowType(StrEnum):
    """Type tag of a displayed row.

    StrEnum values are the lowercased member names:
    - STRING  -> "string"
    - NUMBER  -> "number"
    - BOOLEAN -> "boolean"
    - NULL    -> "null"
    - ARRAY   -> "array"   : rendered as a nested node, not inline
    - OBJECT  -> "object"  : rendered as a nested node, not inline
    """

    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()
    ARRAY = auto()
    OBJECT = auto()

    @property
    def is_container(self) -> bool:
        return self in (RowType.ARRAY, RowType.OBJECT)


def row_type_of(value: Any) -> RowType:
    """Return the RowType tag for a JSON value.

    Raises:
        TypeError: If value is not a valid JSON type.
    """
    # bool MUST be checked before int: bool subclasses int
    if isinstance(value, bool):
        return RowType.BOOLEAN
    if value is None:
        return RowType.NULL
    if isinstance(value, str):
        return RowType.STRING
    if isinstance(value, (int, float)):
        return RowType.NUMBER
    if isinstance(value, list):
        return RowType.ARRAY
    if isinstance(value, dict):
        return RowType.OBJECT
    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


@dataclass(frozen=True, slots=True)
class NodeRow:
    """One key/value/type triple shown for a node.

    Attributes:
        key:   Object key of the row; None for the synthetic single-value row
               of a bare scalar node.
        value: The row's JSON value.  For ARRAY/OBJECT rows this is a display
               value (the child count) rather than the container itself.
        type:  The row's RowType tag.
    """

    key: str | None
    value: Any
    type: RowType

    def __post_init__(self) -> None:
        # accept the plain tag strings the view produces ("string", "array"...)
        object.__setattr__(self, "type", RowType(self.type))

    @classmethod
    def from_value(cls, key: str | None, value: Any) -> NodeRow:
        """Build a row for ``value``, inferring its type tag."""
        return cls(key=key, value=value, type=row_type_of(value))

    @property
    def is_keyless(self) -> bool:
        """True when the row carries no usable key (None or empty string)."""
        return not self.key


@dataclass(frozen=True, slots=True)
class NodeDescriptor:
    """A node of the document: its path and its ordered rows.

    Any sequence is accepted for ``path`` and ``rows``; both are frozen into
    tuples on construction so a descriptor can be held across edits.

    Raises:
        InvalidPathError: If ``path`` contains an invalid segment.
    """

    path: Path = ROOT_PATH
    rows: tuple[NodeRow, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", as_path(self.path))
        object.__setattr__(self, "rows", tuple(self.rows))

    @property
    def is_single_value(self) -> bool:
        """True for a bare-scalar/whole-value node: one row with no key."""
        return len(self.rows) == 1 and self.rows[0].is_keyless
