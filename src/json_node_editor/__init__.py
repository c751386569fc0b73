"""JSON node editor - path-addressed read, write and merge over JSON documents."""

from __future__ import annotations

from json_node_editor.api import (
    ABSENT,
    build_nodes,
    commit_edit,
    find_node_by_path,
    get_value_at_path,
    normalize_node,
    normalize_node_rows,
    path_equals,
    path_to_string,
    set_value_at_path,
)
from json_node_editor.committer import EditCommitter
from json_node_editor.config import EditConfig
from json_node_editor.errors import (
    EditErrorKind,
    InvalidPathError,
    JsonNodeEditorError,
    PathTypeError,
)
from json_node_editor.result import EditResult, WriteMode
from json_node_editor.session import NodeEditSession
from json_node_editor.tree.rows import NodeDescriptor, NodeRow, RowType

__version__: str = "0.1.0"
__all__: list[str] = [
    "ABSENT",
    "EditCommitter",
    "EditConfig",
    "EditErrorKind",
    "EditResult",
    "InvalidPathError",
    "JsonNodeEditorError",
    "NodeDescriptor",
    "NodeEditSession",
    "NodeRow",
    "PathTypeError",
    "RowType",
    "WriteMode",
    "build_nodes",
    "commit_edit",
    "find_node_by_path",
    "get_value_at_path",
    "normalize_node",
    "normalize_node_rows",
    "path_equals",
    "path_to_string",
    "set_value_at_path",
]
