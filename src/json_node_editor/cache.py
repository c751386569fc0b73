"""DocumentCache: LRU-backed strict JSON parser for document texts.

An editing session re-parses the same document text on every save.  The
cache keeps the most recently parsed roots keyed by their exact text, so
repeated commits against an unchanged document parse it once.

Sharing a parsed root between commits is safe because nothing in this
package mutates a root: ``set_value_at_path`` copies every container it
touches and merges build new dicts.

Each ``DocumentCache`` instance maintains its own ``LRUCache``; there is no
class-level shared state.

Example::

    cache = DocumentCache(max_size=8)
    root = cache.parse('{"a": 1}')        # parsed
    again = cache.parse('{"a": 1}')       # served from memory
    assert root is again
"""

from __future__ import annotations

import json
import logging
from typing import Any

from cachetools import LRUCache

__all__ = ["DocumentCache", "parse_json"]

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_json(text: str) -> Any:
    """Parse ``text`` as strict JSON.

    ``NaN``, ``Infinity`` and ``-Infinity`` are rejected, as in standard
    JSON.

    Raises:
        ValueError: If ``text`` is not valid JSON (``json.JSONDecodeError``
            is a ``ValueError`` subclass), or nests too deeply to decode.
        TypeError: If ``text`` is not a str, bytes or bytearray.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except RecursionError as exc:
        raise ValueError("JSON nesting exceeds the recursion limit") from exc


class DocumentCache:
    """LRU cache of parsed document roots keyed by document text.

    Only successful parses are cached; malformed text is re-parsed (and
    re-rejected) every time.

    Args:
        max_size: Maximum number of parsed documents held in memory.
            Defaults to 32.  When exceeded, the least-recently-used entry
            is silently evicted.
    """

    def __init__(self, max_size: int = 32) -> None:
        self._cache: LRUCache[str, Any] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, text: str) -> Any:
        """Return the parsed root for ``text``, parsing it only on a miss.

        The same root object is returned on every hit and is shared with
        every commit against this text, so treat it as read-only.  Use
        ``set_value_at_path`` to derive a changed copy.

        Raises:
            ValueError: If ``text`` is not valid JSON.
        """
        try:
            root = self._cache[text]
        except KeyError:
            root = parse_json(text)
            self._cache[text] = root
        else:
            logger.debug("document cache hit (%d chars)", len(text))
        return root

    def load_root(self, text: str) -> Any:
        """Return the parsed root for ``text``, or ``{}`` if it is corrupt.

        A document that fails to parse must not block every future edit, so
        it is replaced by an empty object and a warning is logged.
        """
        try:
            return self.parse(text)
        except (ValueError, TypeError):
            logger.warning(
                "current document is not valid JSON; editing against an empty "
                "object instead",
                exc_info=True,
            )
            return {}

    def clear(self) -> None:
        """Drop every cached document."""
        self._cache.clear()
