"""Tests for StabilityResult frozen dataclass.

Covers:
- Construction with all fields
- Frozen (immutable) enforcement
- is_stable reflects equality of the two renderings
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from castlist.result import StabilityResult

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def make_result(**overrides: object) -> StabilityResult:
    """Return a valid StabilityResult, optionally overriding specific fields."""
    defaults: dict[str, object] = {
        "source": "Batman",
        "canonical": "Batman;",
        "recanonicalized": "Batman;",
        "issues": (),
        "computation_time_ms": 0.5,
    }
    defaults.update(overrides)
    return StabilityResult(**defaults)  # type: ignore[arg-type]


class TestStabilityResult:
    def test_stable_when_renderings_match(self) -> None:
        assert make_result().is_stable

    def test_unstable_when_renderings_differ(self) -> None:
        assert not make_result(recanonicalized="Robin;").is_stable

    def test_frozen(self) -> None:
        result = make_result()
        with pytest.raises(FrozenInstanceError):
            result.canonical = "x"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert make_result() == make_result()
