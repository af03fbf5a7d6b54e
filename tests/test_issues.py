"""Tests for IssueCode, ParseIssue and IssueCollector."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from castlist.issues import IssueCode, IssueCollector, ParseIssue


class TestIssueCode:
    def test_has_exactly_nine_codes(self) -> None:
        assert len(IssueCode) == 9

    def test_values_equal_names(self) -> None:
        for code in IssueCode:
            assert code == code.name
            assert isinstance(code, str)


class TestParseIssue:
    def test_optional_fields_default_to_none(self) -> None:
        issue = ParseIssue(code=IssueCode.MISSING_NAME, raw="[x]")
        assert issue.path is None
        assert issue.message is None

    def test_frozen(self) -> None:
        issue = ParseIssue(code=IssueCode.MISSING_NAME, raw="[x]")
        with pytest.raises(FrozenInstanceError):
            issue.raw = "y"  # type: ignore[misc]


class TestIssueCollector:
    def test_starts_empty(self) -> None:
        collector = IssueCollector()
        assert len(collector) == 0
        assert collector.freeze() == ()

    def test_preserves_emission_order(self) -> None:
        collector = IssueCollector()
        collector.add(IssueCode.UNMATCHED_ROUND, "(a", "/0")
        collector.add(IssueCode.MISSING_NAME, "[b]", "/1")
        issues = collector.freeze()
        assert [i.code for i in issues] == [
            IssueCode.UNMATCHED_ROUND,
            IssueCode.MISSING_NAME,
        ]
        assert [i.path for i in issues] == ["/0", "/1"]

    def test_every_code_has_a_message(self) -> None:
        collector = IssueCollector()
        for code in IssueCode:
            collector.add(code, "x")
        assert all(issue.message for issue in collector.freeze())

    def test_freeze_is_a_snapshot(self) -> None:
        collector = IssueCollector()
        collector.add(IssueCode.MISSING_NAME, "[a]")
        snapshot = collector.freeze()
        collector.add(IssueCode.MISSING_NAME, "[b]")
        assert len(snapshot) == 1
        assert len(collector) == 2
