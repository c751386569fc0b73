"""pytest plugin for json-node-editor.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

import json
from typing import Any

import pytest

from json_node_editor import EditConfig, NodeDescriptor, commit_edit


@pytest.fixture(scope="session")
def assert_edit_applies() -> Any:
    """Fixture that returns a callable asserting the outcome of a node edit.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to commit_edit() which creates a fresh EditCommitter per call).

    Usage in tests::

        def test_rename(assert_edit_applies):
            node = NodeDescriptor(path=("user",), rows=[...])
            assert_edit_applies(
                {"user": {"name": "Ann"}},
                node,
                '{"name": "Bob"}',
                {"user": {"name": "Bob"}},
            )

    Returns:
        A callable ``_assert(document, node, edited_text, expected, config=None)``
        that raises ``AssertionError`` when the edit fails or the resulting
        document differs from ``expected``.  ``document`` may be a JSON value
        or JSON text.  Returns the new document text.
    """

    def _assert(
        document: Any,
        node: NodeDescriptor | None,
        edited_text: str,
        expected: Any,
        config: EditConfig | None = None,
    ) -> str:
        """Assert that committing ``edited_text`` produces ``expected``.

        Raises:
            AssertionError: When the commit fails, with the error kind and
                message, or when the new document is not equal to
                ``expected``, with both documents.
        """
        document_text = document if isinstance(document, str) else json.dumps(document)
        result = commit_edit(document_text, node, edited_text, config=config)
        if not result.ok:
            raise AssertionError(
                f"edit was rejected: {result.error_kind}: {result.error_message}\n"
                f"  edited_text: {edited_text}"
            )
        assert result.new_document_text is not None
        actual = json.loads(result.new_document_text)
        if actual != expected:
            raise AssertionError(
                f"edited document differs from expected "
                f"(mode={result.write_mode})\n"
                f"  actual:   {actual}\n"
                f"  expected: {expected}"
            )
        return result.new_document_text

    return _assert
