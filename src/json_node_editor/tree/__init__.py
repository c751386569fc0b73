"""Tree subpackage: path-addressed primitives over in-memory JSON values.

Re-exports the public API for the tree module:
- path_to_string / path_equals / as_path: structural path display and equality
- get_value_at_path / ABSENT: lookups that never raise
- set_value_at_path: copy-on-write writes
- NodeRow / RowType / NodeDescriptor: the node model shared with the view
- normalize_node_rows: canonical JSON text for a node
- NodeBuilder / find_node_by_path: the node index and re-selection by path
"""

from json_node_editor.tree.accessor import ABSENT, get_value_at_path, has_value_at_path
from json_node_editor.tree.builder import NodeBuilder, find_node_by_path
from json_node_editor.tree.normalizer import dump_json, normalize_node_rows
from json_node_editor.tree.path import (
    ROOT_PATH,
    Path,
    PathSegment,
    as_path,
    path_equals,
    path_to_string,
)
from json_node_editor.tree.rows import NodeDescriptor, NodeRow, RowType
from json_node_editor.tree.writer import set_value_at_path

__all__ = [
    "ABSENT",
    "ROOT_PATH",
    "NodeBuilder",
    "NodeDescriptor",
    "NodeRow",
    "Path",
    "PathSegment",
    "RowType",
    "as_path",
    "dump_json",
    "find_node_by_path",
    "get_value_at_path",
    "has_value_at_path",
    "normalize_node_rows",
    "path_equals",
    "path_to_string",
    "set_value_at_path",
]
