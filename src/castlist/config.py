"""ParserConfig: immutable settings for parsing and canonical rendering.

ParserConfig is a frozen (immutable) dataclass holding the separator used to
split entries and group members, the maximum group nesting depth that is
parsed structurally, and the capacity of the per-codec parse cache.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ParserConfig"]

_BRACKETS = frozenset("()[]")


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Immutable configuration for CastListCodec.

    Attributes:
        separator: Single character separating entries at the top level and
            members inside a group.  Rendering joins segments with
            ``separator + " "`` and terminates the output with ``separator``.
        max_depth: Deepest group nesting that is parsed into members (>= 1).
            A ``[...]`` that would open a deeper group is kept as one alias
            fragment instead, which bounds recursion on hostile input.
        cache_size: Capacity of the LRU parse cache held by each codec
            (>= 0).  0 disables caching.
    """

    separator: str = ";"
    max_depth: int = 100
    cache_size: int = 128

    def __post_init__(self) -> None:
        if len(self.separator) != 1:
            msg = f"separator must be a single character, got {self.separator!r}"
            raise ValueError(msg)
        if self.separator in _BRACKETS or self.separator.isspace():
            msg = f"separator must not be a bracket or whitespace, got {self.separator!r}"
            raise ValueError(msg)
        if self.max_depth < 1:
            msg = f"max_depth must be >= 1, got {self.max_depth}"
            raise ValueError(msg)
        if self.cache_size < 0:
            msg = f"cache_size must be >= 0, got {self.cache_size}"
            raise ValueError(msg)
