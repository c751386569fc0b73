"""NodeEditSession: the view-to-editor state for one selected node.

The view asks the session what to show (``original_text``, ``display_path``,
``error``...) and forwards user actions to it (``start_editing``,
``update_text``, ``cancel``, ``save``).  The session holds the document text
explicitly.  Committing goes through a stateless ``EditCommitter``, so the
session's document and selection only change when a save succeeds.

After a successful save the edited node has to be found again in the rebuilt
node index.  The session records ``pending_reselect_path``; the caller
rebuilds its index whenever it is ready and calls ``resolve_selection()``.
There is no timing assumption between the two.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from json_node_editor.committer import EditCommitter
from json_node_editor.result import EditResult
from json_node_editor.tree.builder import NodeBuilder, find_node_by_path
from json_node_editor.tree.normalizer import normalize_node_rows
from json_node_editor.tree.path import Path, path_to_string
from json_node_editor.tree.rows import NodeDescriptor

__all__ = ["NodeEditSession"]

logger = logging.getLogger(__name__)


class NodeEditSession:
    """Edit state for a document and its currently selected node.

    Args:
        document_text: The full document as JSON text.
        node: The initially selected node, if any.
        committer: The committer used by ``save()``.  Defaults to a fresh
            ``EditCommitter()``.
    """

    def __init__(
        self,
        document_text: str,
        node: NodeDescriptor | None = None,
        committer: EditCommitter | None = None,
    ) -> None:
        self._committer = committer if committer is not None else EditCommitter()
        self._builder = NodeBuilder()
        self.document_text = document_text
        self.pending_reselect_path: Path | None = None
        self._node: NodeDescriptor | None = None
        self.edited_text = ""
        self.is_editing = False
        self.error: str | None = None
        self.select(node)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    @property
    def node(self) -> NodeDescriptor | None:
        return self._node

    @property
    def original_text(self) -> str:
        """Canonical JSON text of the selected node (``{}`` if none)."""
        rows = self._node.rows if self._node is not None else ()
        return normalize_node_rows(rows, self._committer.config)

    @property
    def display_path(self) -> str:
        return path_to_string(self._node.path if self._node is not None else None)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def select(self, node: NodeDescriptor | None) -> None:
        """Select ``node`` and reset the edit state to show its text."""
        self._node = node
        self.edited_text = self.original_text
        self.is_editing = False
        self.error = None

    def start_editing(self) -> None:
        self.is_editing = True

    def update_text(self, text: str) -> None:
        self.edited_text = text

    def cancel(self) -> None:
        """Discard the edit and go back to the node's original text."""
        self.edited_text = self.original_text
        self.error = None
        self.is_editing = False

    def save(self) -> EditResult:
        """Commit the edited text.

        On success the document text is replaced, edit mode ends and
        ``pending_reselect_path`` is set.  On failure only ``error`` changes.
        """
        self.error = None
        result = self._committer.commit(
            self.document_text, self._node, self.edited_text
        )
        if not result.ok:
            self.error = result.error_message
            return result

        self.document_text = result.new_document_text or self.document_text
        self.pending_reselect_path = result.reselect_path
        self.is_editing = False
        return result

    # ------------------------------------------------------------------
    # Re-selection
    # ------------------------------------------------------------------

    def resolve_selection(
        self, nodes: Iterable[NodeDescriptor]
    ) -> NodeDescriptor | None:
        """Re-select the edited node in a rebuilt node index.

        Does nothing and returns None when no re-selection is pending.  The
        pending request is consumed whether or not a match is found; without a
        match the previous selection is kept.
        """
        path = self.pending_reselect_path
        if path is None:
            return None
        self.pending_reselect_path = None

        match = find_node_by_path(nodes, path)
        if match is None:
            logger.debug(
                "edited node %s not found after rebuild", path_to_string(path)
            )
            return None
        self.select(match)
        return match

    def rebuild_and_resolve(self) -> NodeDescriptor | None:
        """Rebuild the node index from the current document and re-select.

        Does nothing and returns None when no re-selection is pending, so the
        document is only parsed after a successful save.

        Raises:
            ValueError: If the current document text is not valid JSON.
        """
        if self.pending_reselect_path is None:
            return None
        root = self._committer.documents.parse(self.document_text)
        return self.resolve_selection(self._builder.build(root))
