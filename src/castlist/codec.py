"""CastListCodec: orchestrator wiring DatasetBuilder + Canonicalizer + ParseCache.

This is the wiring layer between the tree primitives and the public API.

Architecture:
- parse() validates the input type and serves the Dataset from the
  per-instance ParseCache, building it with DatasetBuilder on a miss.
- render() is a pure read of the Dataset through the Canonicalizer.
- check_stability() runs parse/render twice and reports whether the
  canonical form is a fixed point, with wall-clock timing.

Two separate codecs never share cache state.
"""

from __future__ import annotations

import logging
import time

from castlist.cache import ParseCache
from castlist.config import ParserConfig
from castlist.result import StabilityResult
from castlist.tree.builder import DatasetBuilder
from castlist.tree.nodes import Dataset
from castlist.tree.renderer import Canonicalizer

__all__ = ["CastListCodec"]

logger = logging.getLogger(__name__)


class CastListCodec:
    """Parses cast-list text and renders it back in canonical form.

    Example::

        from castlist.codec import CastListCodec

        codec = CastListCodec()
        dataset = codec.parse("Superman [Clark Kent; Kal-El];")
        dataset.issue_codes()          # [IssueCode.AMBIGUOUS_SQUARE_LIST]
        codec.render(dataset)          # "Superman [Clark Kent; Kal-El];"
    """

    def __init__(self, config: ParserConfig | None = None) -> None:
        """Initialise the codec.

        Args:
            config: Parser settings.  Defaults to ``ParserConfig()`` when None.
                ``config.cache_size`` sizes this instance's parse cache.
        """
        self._config: ParserConfig = config if config is not None else ParserConfig()
        self._builder = DatasetBuilder(self._config)
        self._canonicalizer = Canonicalizer(self._config)
        self._cache = ParseCache(max_size=self._config.cache_size)

    @property
    def config(self) -> ParserConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, text: str) -> Dataset:
        """Parse ``text`` into an immutable Dataset.

        Never fails for string input; structural problems are reported in
        ``Dataset.issues_detailed``.

        Raises:
            TypeError: If ``text`` is not a ``str``.
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected str input, got {type(text)!r}")
        return self._cache.get_or_build(text, self._builder.build)

    def render(self, dataset: Dataset) -> str:
        """Render the roots of ``dataset`` as canonical text."""
        return self._canonicalizer.render(dataset)

    def canonicalize(self, text: str) -> str:
        """Return ``render(parse(text))``."""
        return self.render(self.parse(text))

    def check_stability(self, text: str) -> StabilityResult:
        """Check that the canonical form of ``text`` survives a second round trip."""
        t0 = time.perf_counter()

        first = self.parse(text)
        canonical = self.render(first)
        recanonicalized = self.canonicalize(canonical)

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        if canonical != recanonicalized:
            logger.debug(
                "Canonical form is not a fixed point: %r -> %r",
                canonical,
                recanonicalized,
            )
        return StabilityResult(
            source=text,
            canonical=canonical,
            recanonicalized=recanonicalized,
            issues=first.issues_detailed,
            computation_time_ms=elapsed_ms,
        )
