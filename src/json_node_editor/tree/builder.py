"""NodeBuilder: converts a JSON document into the node index the view shows.

The view does not show one box per JSON value.  It groups values like this:

- An object becomes one node at its path, with one row per key.  Scalar
  children are shown inline.  Container children get an ARRAY/OBJECT row
  whose value is the child count, plus a node of their own.
- An array gets no node of its own.  Each element is visited at
  ``path + (index,)``.
- A scalar that is not an object member (the document root, or an array
  element) becomes a node with a single keyless row.

After an edit the whole index is rebuilt and the edited node is found again
by path (see ``find_node_by_path``), because node identity does not survive
a rebuild.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from json_node_editor.tree.path import ROOT_PATH, Path, PathSegment, path_equals
from json_node_editor.tree.rows import NodeDescriptor, NodeRow, row_type_of

__all__ = ["NodeBuilder", "find_node_by_path"]


@dataclass
class NodeBuilder:
    """Converts any valid JSON value into a flat list of NodeDescriptors.

    Nodes come out in document order (pre-order, parents before children).

    Example::

        builder = NodeBuilder()
        nodes = builder.build({"user": {"name": "Ann"}, "tags": ["a"]})
        # [$ (row user: object 1, row tags: array 1),
        #  $["user"] (row name: "Ann"),
        #  $["tags"][0] (keyless row "a")]
    """

    def build(self, root: Any) -> list[NodeDescriptor]:
        """Return the node index for ``root``.

        Raises:
            TypeError: If the document contains a non-JSON value.
        """
        nodes: list[NodeDescriptor] = []
        self._visit(root, ROOT_PATH, nodes)
        return nodes

    def _visit(self, value: Any, path: Path, nodes: list[NodeDescriptor]) -> None:
        if isinstance(value, dict):
            self._visit_object(value, path, nodes)
        elif isinstance(value, list):
            for idx, item in enumerate(value):
                self._visit(item, (*path, idx), nodes)
        else:
            row = NodeRow.from_value(None, value)
            nodes.append(NodeDescriptor(path=path, rows=(row,)))

    def _visit_object(
        self,
        obj: dict[str, Any],
        path: Path,
        nodes: list[NodeDescriptor],
    ) -> None:
        rows: list[NodeRow] = []
        nested: list[tuple[Any, Path]] = []
        for key, val in obj.items():
            row_type = row_type_of(val)
            if row_type.is_container:
                rows.append(NodeRow(key=key, value=len(val), type=row_type))
                nested.append((val, (*path, key)))
            else:
                rows.append(NodeRow(key=key, value=val, type=row_type))

        nodes.append(NodeDescriptor(path=path, rows=tuple(rows)))
        for val, child_path in nested:
            self._visit(val, child_path, nodes)


def find_node_by_path(
    nodes: Iterable[NodeDescriptor],
    path: Sequence[PathSegment] | None,
) -> NodeDescriptor | None:
    """Return the first node whose path equals ``path``, or None."""
    for node in nodes:
        if path_equals(node.path, path):
            return node
    return None
