"""ParseCache: LRU-backed memo of ``text -> Dataset`` for one codec.

Datasets are immutable once built, so a cached Dataset can be handed out to
any number of callers.  Each ``ParseCache`` instance owns its own
``LRUCache``; there is no class-level shared state.  Eviction is silent.

Example::

    from castlist.cache import ParseCache
    from castlist.tree import DatasetBuilder

    cache = ParseCache(max_size=64)
    builder = DatasetBuilder()

    first = cache.get_or_build("Batman;", builder.build)   # builds
    second = cache.get_or_build("Batman;", builder.build)  # served from memory
    assert first is second
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from cachetools import LRUCache

from castlist.tree.nodes import Dataset

__all__ = ["ParseCache"]

logger = logging.getLogger(__name__)


class ParseCache:
    """LRU memo of parsed Datasets keyed by input text.

    Args:
        max_size: Maximum number of Datasets held.  0 disables caching:
            every lookup builds afresh and nothing is stored.
    """

    def __init__(self, max_size: int = 128) -> None:
        self._enabled = max_size > 0
        self._cache: LRUCache[str, Dataset] = LRUCache(maxsize=max(max_size, 1))

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize) if self._enabled else 0

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_or_build(self, text: str, build: Callable[[str], Dataset]) -> Dataset:
        """Return the cached Dataset for ``text``, building it on a miss."""
        if not self._enabled:
            return build(text)

        cached = self._cache.get(text)
        if cached is not None:
            logger.debug("Parse cache hit (%d chars)", len(text))
            return cached

        dataset = build(text)
        self._cache[text] = dataset
        return dataset

    def clear(self) -> None:
        self._cache.clear()
