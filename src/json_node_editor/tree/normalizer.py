"""Render a node's rows as the JSON text shown to (and edited by) the user.

Three shapes, in order:

- no rows                    -> ``{}``
- one row without a key      -> that row's value on its own (``31``,
                                ``"Ann"``, ``null``...)
- anything else              -> an object of the keyed scalar rows

ARRAY and OBJECT rows are left out of the object form: nested containers are
shown and edited through their own nodes.  The output always parses back to
the value the rows describe.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from json_node_editor.config import EditConfig
from json_node_editor.tree.rows import NodeRow

__all__ = ["dump_json", "normalize_node_rows"]


def dump_json(value: Any, config: EditConfig | None = None) -> str:
    """Serialize ``value`` the way the editor writes every document.

    Raises:
        ValueError: If ``value`` contains NaN or an infinity, which JSON
            cannot represent.
        TypeError: If ``value`` is not JSON-serializable.
    """
    cfg = config if config is not None else EditConfig()
    return json.dumps(
        value,
        indent=cfg.indent,
        ensure_ascii=cfg.ensure_ascii,
        allow_nan=False,
    )


def normalize_node_rows(
    rows: Iterable[NodeRow],
    config: EditConfig | None = None,
) -> str:
    """Return the canonical JSON text for a node's rows.

    Args:
        rows:   The node's rows in display order.
        config: Serialization settings.  Defaults to ``EditConfig()``.

    Returns:
        JSON text; ``"{}"`` when there are no rows.
    """
    rows = list(rows)
    if not rows:
        return "{}"
    if len(rows) == 1 and rows[0].is_keyless:
        return dump_json(rows[0].value, config)

    obj: dict[str, Any] = {}
    for row in rows:
        if row.type.is_container or row.is_keyless:
            continue
        obj[row.key] = row.value
    return dump_json(obj, config)
