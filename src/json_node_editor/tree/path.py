"""Structural paths: validation, display form and equality.

A path is an ordered tuple of segments locating a value inside a JSON tree:
``int`` segments index arrays, ``str`` segments key objects.  The empty tuple
is the document root.

Display form::

    ()                  -> $
    ("user", "tags", 0) -> $["user"]["tags"][0]

The display form is presentational only; string segments are wrapped in
double quotes without escaping, so it is not guaranteed to parse back.
"""

from __future__ import annotations

from collections.abc import Sequence

from json_node_editor.errors import InvalidPathError

__all__ = [
    "ROOT_PATH",
    "Path",
    "PathSegment",
    "as_path",
    "path_equals",
    "path_to_string",
    "segments_equal",
]

PathSegment = str | int
Path = tuple[PathSegment, ...]

ROOT_PATH: Path = ()


def _is_index(segment: object) -> bool:
    # bool subclasses int but is never an array index
    return isinstance(segment, int) and not isinstance(segment, bool)


def as_path(segments: Sequence[PathSegment] | None) -> Path:
    """Validate ``segments`` and freeze them into a Path tuple.

    ``None`` is the root path.

    Raises:
        InvalidPathError: If a segment is a bool, a negative int, or neither
            str nor int.  A bare ``str`` is rejected as well, since it would
            otherwise be split into one segment per character.
    """
    if segments is None:
        return ROOT_PATH
    if isinstance(segments, str):
        msg = f"path must be a sequence of segments, got {segments!r}"
        raise InvalidPathError(msg)

    path = tuple(segments)
    for segment in path:
        if isinstance(segment, str):
            continue
        if not _is_index(segment):
            raise InvalidPathError(f"invalid path segment {segment!r} in {path!r}")
        if segment < 0:
            msg = f"array index must be >= 0, got {segment} in {path!r}"
            raise InvalidPathError(msg)
    return path


def path_to_string(path: Sequence[PathSegment] | None) -> str:
    """Return the ``$[...]`` display form of ``path``; ``"$"`` for the root."""
    if not path:
        return "$"
    parts = (str(seg) if _is_index(seg) else f'"{seg}"' for seg in path)
    return "$[" + "][".join(parts) + "]"


def segments_equal(a: PathSegment, b: PathSegment) -> bool:
    """Compare two segments by kind and value.

    ``0`` and ``"0"`` are different segments: one indexes an array, the other
    keys an object.
    """
    if isinstance(a, str) or isinstance(b, str):
        return isinstance(a, str) and isinstance(b, str) and a == b
    return _is_index(a) and _is_index(b) and a == b


def path_equals(
    a: Sequence[PathSegment] | None,
    b: Sequence[PathSegment] | None,
) -> bool:
    """Return True iff both paths have the same length and equal segments.

    Two missing paths are equal; a missing path never equals a present one
    (not even the root).
    """
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    if len(a) != len(b):
        return False
    return all(segments_equal(x, y) for x, y in zip(a, b, strict=True))
