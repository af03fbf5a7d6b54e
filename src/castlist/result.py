"""StabilityResult dataclass for round-trip checks.

This module provides the result type returned by check_stability() calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from castlist.issues import ParseIssue

__all__ = ["StabilityResult"]


@dataclass(frozen=True, slots=True)
class StabilityResult:
    """Outcome of parsing, rendering, and re-parsing one input text.

    Attributes:
        source:              The text that was checked.
        canonical:           ``render(parse(source))``.
        recanonicalized:     ``render(parse(canonical))``.
        issues:              Issues reported while parsing ``source``.
        computation_time_ms: Wall-clock duration of the check in milliseconds.
    """

    source: str
    canonical: str
    recanonicalized: str
    issues: tuple[ParseIssue, ...]
    computation_time_ms: float

    @property
    def is_stable(self) -> bool:
        """True when the canonical form is a fixed point."""
        return self.canonical == self.recanonicalized
