"""Read a value out of a JSON tree by structural path.

Lookups never raise: any step that cannot be taken (a missing key, an index
out of range, a ``None`` or scalar parent, a segment of the wrong kind)
short-circuits to the ``ABSENT`` sentinel.  ``ABSENT`` is distinct from JSON
``null``, which is a present ``None`` value.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any, Final, Literal

from json_node_editor.tree.path import PathSegment

__all__ = ["ABSENT", "Absent", "get_value_at_path", "has_value_at_path"]


class Absent(Enum):
    """Sentinel type for "the path does not resolve"."""

    ABSENT = "ABSENT"

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT: Final = Absent.ABSENT


def _child(container: Any, segment: PathSegment) -> Any:
    if isinstance(container, dict):
        if isinstance(segment, str) and segment in container:
            return container[segment]
        return ABSENT
    if isinstance(container, list):
        # bool subclasses int but never indexes an array
        if isinstance(segment, bool) or not isinstance(segment, int):
            return ABSENT
        if 0 <= segment < len(container):
            return container[segment]
        return ABSENT
    return ABSENT


def get_value_at_path(
    root: Any,
    path: Sequence[PathSegment] | None,
) -> Any | Literal[Absent.ABSENT]:
    """Return the value at ``path`` in ``root``, or ``ABSENT``.

    An empty (or None) path returns ``root`` itself, whatever it is.

    Args:
        root: Any JSON value.
        path: Sequence of str keys and int indices.

    Returns:
        The value found, which may be ``None`` for a JSON null, or ``ABSENT``
        when the path does not resolve.
    """
    cursor = root
    for segment in path or ():
        if cursor is None:
            return ABSENT
        cursor = _child(cursor, segment)
        if cursor is ABSENT:
            return ABSENT
    return cursor


def has_value_at_path(root: Any, path: Sequence[PathSegment] | None) -> bool:
    """Return True if ``path`` resolves in ``root`` (a JSON null counts)."""
    return get_value_at_path(root, path) is not ABSENT
