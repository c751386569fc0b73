"""EditCommitter: orchestrator that writes one edited node back into a document.

This is the wiring layer between the tree primitives and the public API.
``commit()`` takes the document text, the selected node and the user's
edited text, and returns an ``EditResult``.

Pipeline:

1. Parse the edited text.  Malformed text fails the edit before anything
   else happens.
2. Parse the document text through the ``DocumentCache``.  A corrupt
   document is recovered as ``{}`` instead of failing.
3. Refuse the edit when no node is selected.
4. Choose the write mode (see ``choose_write_mode``) and install the value
   with ``set_value_at_path``.
5. Serialize the new root and ask the caller to re-select the node at the
   same path.

The committer never raises for bad user input: every failure is an
``EditResult`` value, and a failed commit produces no document at all, so
the caller's document and selection stay as they were.
"""

from __future__ import annotations

import logging
from typing import Any

from json_node_editor.cache import DocumentCache, parse_json
from json_node_editor.config import EditConfig
from json_node_editor.errors import (
    MALFORMED_EDIT_MESSAGE,
    NO_TARGET_MESSAGE,
    EditErrorKind,
    PathTypeError,
)
from json_node_editor.result import EditResult, WriteMode
from json_node_editor.tree.accessor import get_value_at_path
from json_node_editor.tree.normalizer import dump_json
from json_node_editor.tree.rows import NodeDescriptor
from json_node_editor.tree.writer import set_value_at_path

__all__ = ["EditCommitter", "choose_write_mode", "merge_shallow"]

logger = logging.getLogger(__name__)


def _is_plain_object(value: Any) -> bool:
    return isinstance(value, dict)


def choose_write_mode(node: NodeDescriptor, current: Any, edited: Any) -> WriteMode:
    """Decide whether ``edited`` replaces or merges into ``current``.

    A single keyless row means the node *is* one value (a bare scalar or a
    whole array/object), so the edit replaces it.  Otherwise the edit merges
    only when both sides are plain objects; arrays, scalars and a missing
    current value are replaced.
    """
    if node.is_single_value:
        return WriteMode.REPLACE
    if _is_plain_object(current) and _is_plain_object(edited):
        return WriteMode.MERGE
    return WriteMode.REPLACE


def merge_shallow(current: dict[str, Any], edited: dict[str, Any]) -> dict[str, Any]:
    """Overlay ``edited``'s keys onto ``current``'s, one level deep.

    Keys keep ``current``'s order; keys only in ``edited`` follow in their
    own order.  ``edited`` wins on collisions.  Neither input is mutated.
    """
    return {**current, **edited}


class EditCommitter:
    """Commits node edits against serialized documents.

    Parsed documents are cached per instance (see ``DocumentCache``), so a
    long-lived committer re-parses an unchanged document only once.  Two
    committers never share cache state.

    Example::

        committer = EditCommitter()
        node = NodeDescriptor(
            path=("user",),
            rows=[NodeRow("name", "Ann", RowType.STRING),
                  NodeRow("age", 30, RowType.NUMBER)],
        )
        result = committer.commit(
            '{"user": {"name": "Ann", "age": 30}}', node, '{"age": 31}'
        )
        result.new_document_text
        # '{\\n  "user": {\\n    "name": "Ann",\\n    "age": 31\\n  }\\n}'
    """

    def __init__(self, config: EditConfig | None = None) -> None:
        self._config: EditConfig = config if config is not None else EditConfig()
        self._documents = DocumentCache(max_size=self._config.parse_cache_size)

    @property
    def config(self) -> EditConfig:
        return self._config

    @property
    def documents(self) -> DocumentCache:
        return self._documents

    def commit(
        self,
        document_text: str,
        node: NodeDescriptor | None,
        edited_text: str,
    ) -> EditResult:
        """Write ``edited_text`` into the document at ``node``'s path.

        Args:
            document_text: The full current document as JSON text.
            node:          The selected node, or None when nothing is
                           selected.
            edited_text:   The user's edited JSON text for the node.

        Returns:
            An ``EditResult``: the new document text on success, or an error
            message and kind on failure.
        """
        try:
            edited = parse_json(edited_text)
        except (ValueError, TypeError):
            logger.debug("rejected malformed edit", exc_info=True)
            return EditResult.failure(
                EditErrorKind.MALFORMED_EDIT, MALFORMED_EDIT_MESSAGE
            )

        root = self._documents.load_root(document_text)

        if node is None:
            return EditResult.failure(EditErrorKind.NO_TARGET, NO_TARGET_MESSAGE)

        current = get_value_at_path(root, node.path)
        mode = choose_write_mode(node, current, edited)
        new_value = edited
        if mode is WriteMode.MERGE:
            new_value = merge_shallow(current, edited)
        logger.debug("writing %s at %r", mode, node.path)

        try:
            new_root = set_value_at_path(root, node.path, new_value)
        except PathTypeError as exc:
            logger.debug("path does not fit document", exc_info=True)
            return EditResult.failure(EditErrorKind.PATH_MISMATCH, str(exc))

        return EditResult.success(
            new_document_text=dump_json(new_root, self._config),
            write_mode=mode,
            reselect_path=node.path,
        )
