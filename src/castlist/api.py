"""Public API functions for castlist.

This module provides the user-facing functions: parse, render, canonicalize,
is_canonical, and check_stability.  Each call creates a fresh CastListCodec
to guarantee zero global state mutation between calls.
"""

from __future__ import annotations

from castlist.codec import CastListCodec
from castlist.config import ParserConfig
from castlist.result import StabilityResult
from castlist.tree.nodes import Dataset

__all__ = ["canonicalize", "check_stability", "is_canonical", "parse", "render"]


def parse(text: str, config: ParserConfig | None = None) -> Dataset:
    """Parse cast-list text into a Dataset.

    Never fails for string input: malformed brackets, missing names and
    ambiguous square spans are reported in ``Dataset.issues_detailed`` while
    the most complete recoverable tree is still returned.

    Args:
        text:   Semicolon-separated entries of ``name (info) [alias-or-group]``.
        config: Parser settings.  Defaults to ``ParserConfig()`` when None.

    Returns:
        A ``Dataset`` whose ``entries`` hold every reachable node once.

    Raises:
        TypeError: If ``text`` is not a ``str``.
    """
    return CastListCodec(config=config).parse(text)


def render(dataset: Dataset, config: ParserConfig | None = None) -> str:
    """Render a Dataset as canonical text.

    Args:
        dataset: A Dataset produced by ``parse()``.
        config:  Supplies the separator.  Defaults to ``ParserConfig()``.

    Returns:
        ``"; "``-joined root renderings terminated by ``";"``, or ``""`` when
        the Dataset has no entries.
    """
    return CastListCodec(config=config).render(dataset)


def canonicalize(text: str, config: ParserConfig | None = None) -> str:
    """Return ``render(parse(text))``."""
    return CastListCodec(config=config).canonicalize(text)


def is_canonical(text: str, config: ParserConfig | None = None) -> bool:
    """Return True if ``text`` is already in canonical form."""
    return CastListCodec(config=config).canonicalize(text) == text


def check_stability(
    text: str,
    config: ParserConfig | None = None,
) -> StabilityResult:
    """Parse, render, and re-parse ``text``; report whether the output is stable.

    Args:
        text:   Input text to check.
        config: Parser settings.  Defaults to ``ParserConfig()`` when None.

    Returns:
        A ``StabilityResult``; ``is_stable`` is True when
        ``render(parse(render(parse(text)))) == render(parse(text))``.
    """
    return CastListCodec(config=config).check_stability(text)
