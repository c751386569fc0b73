"""EditConfig: serialization and caching parameters for node edits.

EditConfig is a frozen (immutable) dataclass.  The defaults reproduce the
document format the editor always writes: 2-space indentation, non-ASCII
characters kept as-is.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["EditConfig"]


@dataclass(frozen=True, slots=True)
class EditConfig:
    """Immutable configuration for normalizing and committing edits.

    Attributes:
        indent: Spaces per indentation level in serialized output (>= 0).
        ensure_ascii: When True, non-ASCII characters are escaped as
            ``\\uXXXX``.  Default False.
        parse_cache_size: Maximum number of parsed documents held by the
            ``DocumentCache`` LRU (>= 1).
    """

    indent: int = 2
    ensure_ascii: bool = False
    parse_cache_size: int = 32

    def __post_init__(self) -> None:
        if self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ValueError(msg)
        if self.parse_cache_size < 1:
            msg = f"parse_cache_size must be >= 1, got {self.parse_cache_size}"
            raise ValueError(msg)
