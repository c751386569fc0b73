"""Copy-on-write writes into a JSON tree.

``set_value_at_path`` returns a new root with one value installed and leaves
the input untouched.  Every container on the way from the root to the target
is a fresh shallow copy; every other subtree is shared with the old root.
This is the same update a persistent data structure performs, so a reader
holding the previous root never observes the write.

Missing structure is materialized on the way down: a missing, ``None`` or
scalar parent becomes an empty list when the segment below it is an ``int``
and an empty dict otherwise.  Writing past the end of a list pads it with
``None``.

Example::

    old = {"user": {"name": "Ann"}, "tags": ["a"]}
    new = set_value_at_path(old, ("user", "age"), 31)
    # new == {"user": {"name": "Ann", "age": 31}, "tags": ["a"]}
    # old is unchanged; new["tags"] is old["tags"]
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from json_node_editor.errors import PathTypeError
from json_node_editor.tree.path import PathSegment, as_path, path_to_string

__all__ = ["set_value_at_path"]


def _empty_container_for(segment: PathSegment) -> dict[str, Any] | list[Any]:
    return [] if isinstance(segment, int) else {}


def _copy_container(
    node: Any,
    segment: PathSegment,
    path: Sequence[PathSegment],
    depth: int,
) -> dict[str, Any] | list[Any]:
    """Return a shallow copy of ``node`` ready to be addressed by ``segment``.

    Non-containers (``None``, scalars) are replaced by a fresh empty container
    of the kind ``segment`` calls for.

    Raises:
        PathTypeError: If ``node`` is a container of the other kind.
    """
    if isinstance(node, dict):
        if not isinstance(segment, str):
            raise PathTypeError(
                f"cannot index object at {path_to_string(path[:depth])} "
                f"with {segment!r}"
            )
        return dict(node)
    if isinstance(node, list):
        if isinstance(segment, str):
            raise PathTypeError(
                f"cannot key array at {path_to_string(path[:depth])} "
                f"with {segment!r}"
            )
        return list(node)
    return _empty_container_for(segment)


def _assign(
    container: dict[str, Any] | list[Any],
    segment: PathSegment,
    value: Any,
) -> None:
    if isinstance(container, list):
        index = int(segment)
        if index >= len(container):
            container.extend([None] * (index + 1 - len(container)))
        container[index] = value
    else:
        container[str(segment)] = value


def _lookup(container: dict[str, Any] | list[Any], segment: PathSegment) -> Any:
    if isinstance(container, list):
        index = int(segment)
        return container[index] if index < len(container) else None
    return container.get(str(segment))


def _set_in(node: Any, path: Sequence[PathSegment], depth: int, value: Any) -> Any:
    segment = path[depth]
    copy = _copy_container(node, segment, path, depth)
    if depth == len(path) - 1:
        _assign(copy, segment, value)
    else:
        _assign(copy, segment, _set_in(_lookup(copy, segment), path, depth + 1, value))
    return copy


def set_value_at_path(
    root: Any,
    path: Sequence[PathSegment] | None,
    value: Any,
) -> Any:
    """Return a new root with ``value`` installed at ``path``.

    An empty (or None) path replaces the whole root: ``value`` itself is
    returned.  A root that is not a container becomes a dict or a list
    depending on the first segment.

    Args:
        root:  The current document root.  Never mutated.
        path:  Sequence of str keys and non-negative int indices.
        value: The JSON value to install.  Stored as-is (not copied).

    Returns:
        The new root.

    Raises:
        InvalidPathError: If ``path`` contains an invalid segment.
        PathTypeError: If a segment addresses an existing container of the
            wrong kind (a list by key or a dict by index).
    """
    frozen = as_path(path)
    if not frozen:
        return value
    return _set_in(root, frozen, 0, value)
