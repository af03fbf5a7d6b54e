"""Integration tests for the castlist pytest plugin.

These tests verify that the assert_canonical_stable fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: The fixture tests require castlist to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

from typing import Any

import pytest

from castlist import ParserConfig
from castlist.integrations._pytest_plugin import assert_stable


class TestAssertStable:
    """The callable handed out by the fixture."""

    def test_returns_canonical_form(self) -> None:
        assert assert_stable(" Batman ; Robin ") == "Batman; Robin;"

    def test_config_forwarded(self) -> None:
        assert assert_stable("A,B", config=ParserConfig(separator=",")) == "A, B,"

    def test_unstable_input_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Force a non-fixed-point rendering to exercise the failure message."""
        from castlist.codec import CastListCodec

        renders = iter(["Batman;", "Robin;"])
        monkeypatch.setattr(CastListCodec, "render", lambda self, ds: next(renders))

        with pytest.raises(AssertionError) as exc_info:
            assert_stable("Batman")
        message = str(exc_info.value)
        assert "not stable" in message
        assert "'Batman;'" in message
        assert "'Robin;'" in message


def test_fixture_returns_canonical(assert_canonical_stable: Any) -> None:
    assert assert_canonical_stable("Batman;  Robin ;") == "Batman; Robin;"


def test_fixture_accepts_malformed_input(assert_canonical_stable: Any) -> None:
    assert assert_canonical_stable("Zeta (a,b;") == "Zeta (a,b;);"
