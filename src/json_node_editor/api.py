"""Public API functions for json-node-editor.

Thin stateless wrappers over the tree primitives and ``EditCommitter``.
``commit_edit`` creates a fresh ``EditCommitter`` per call to guarantee zero
global state between calls; hold an ``EditCommitter`` yourself to reuse its
document cache.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from json_node_editor.committer import EditCommitter
from json_node_editor.config import EditConfig
from json_node_editor.result import EditResult
from json_node_editor.tree.accessor import ABSENT, get_value_at_path
from json_node_editor.tree.builder import NodeBuilder, find_node_by_path
from json_node_editor.tree.normalizer import normalize_node_rows
from json_node_editor.tree.path import path_equals, path_to_string
from json_node_editor.tree.rows import NodeDescriptor, NodeRow
from json_node_editor.tree.writer import set_value_at_path

__all__ = [
    "ABSENT",
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


def commit_edit(
    document_text: str,
    node: NodeDescriptor | None,
    edited_text: str,
    config: EditConfig | None = None,
) -> EditResult:
    """Write the user's edited text for ``node`` back into the document.

    Args:
        document_text: The full current document as JSON text.  If it does
                       not parse, the edit is applied to an empty object.
        node:          The selected node (path + rows), or None.
        edited_text:   The edited JSON text for the node.
        config:        Serialization settings.  Defaults to ``EditConfig()``.

    Returns:
        An ``EditResult`` holding either the new document text (plus the
        path to re-select) or an error message.  Never raises for malformed
        input.
    """
    return EditCommitter(config=config).commit(document_text, node, edited_text)


def normalize_node(
    node: NodeDescriptor | Iterable[NodeRow] | None,
    config: EditConfig | None = None,
) -> str:
    """Return the canonical JSON text for a node or a bare row sequence.

    None (no selection) renders as ``"{}"``.
    """
    if node is None:
        return "{}"
    rows = node.rows if isinstance(node, NodeDescriptor) else node
    return normalize_node_rows(rows, config)


def build_nodes(document: Any) -> list[NodeDescriptor]:
    """Return the node index for a parsed JSON document."""
    return NodeBuilder().build(document)

