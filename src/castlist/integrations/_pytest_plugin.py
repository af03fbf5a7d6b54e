"""pytest plugin for castlist.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from castlist import ParserConfig, check_stability


def assert_stable(text: str, config: ParserConfig | None = None) -> str:
    """Assert that the canonical form of ``text`` is a fixed point.

    Args:
        text:   Cast-list text to check.
        config: Optional ParserConfig forwarded to ``check_stability()``.

    Returns:
        The canonical form, so callers can make further assertions on it.

    Raises:
        AssertionError: When re-parsing the canonical form renders different
            text, with a message including the input, both renderings, and
            the issue codes reported for the input.
    """
    result = check_stability(text, config=config)
    if not result.is_stable:
        raise AssertionError(
            f"Canonical form is not stable:\n"
            f"  input:           {text!r}\n"
            f"  canonical:       {result.canonical!r}\n"
            f"  recanonicalized: {result.recanonicalized!r}\n"
            f"  issues: {[str(issue.code) for issue in result.issues]}"
        )
    return result.canonical


@pytest.fixture(scope="session", name="assert_canonical_stable")
def _assert_canonical_stable() -> Any:
    """Fixture that returns the canonical-stability asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to check_stability() which creates a fresh CastListCodec per call).

    Usage in tests::

        def test_roster(assert_canonical_stable):
            assert assert_canonical_stable("Batman;  Robin ;") == "Batman; Robin;"

    Returns:
        The ``assert_stable(text, config=None) -> str`` callable.
    """
    return assert_stable
