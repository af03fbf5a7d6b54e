"""ParseIssue diagnostics and the append-only collector threaded through a parse.

Issues are data, not failures: the parser never raises for malformed text.
Every structural problem is recorded as a ``ParseIssue`` in emission order,
and that order is part of the deterministic output of ``parse()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

__all__ = ["IssueCode", "IssueCollector", "ParseIssue"]


class IssueCode(StrEnum):
    """The nine structural issue codes.

    Values equal the member names so that codes compare equal to their
    textual form (``IssueCode.MISSING_NAME == "MISSING_NAME"``).
    """

    MISSING_NAME = "MISSING_NAME"
    INVALID_MEMBER_ALIAS_ONLY = "INVALID_MEMBER_ALIAS_ONLY"
    INVALID_FRAGMENT_ORDER = "INVALID_FRAGMENT_ORDER"
    UNMATCHED_ROUND = "UNMATCHED_ROUND"
    NESTED_ROUND_NOT_ALLOWED = "NESTED_ROUND_NOT_ALLOWED"
    UNMATCHED_SQUARE = "UNMATCHED_SQUARE"
    AMBIGUOUS_SQUARE_LIST = "AMBIGUOUS_SQUARE_LIST"
    EXTRA_CLOSING_ROUND = "EXTRA_CLOSING_ROUND"
    EXTRA_CLOSING_SQUARE = "EXTRA_CLOSING_SQUARE"


_MESSAGES: dict[IssueCode, str] = {
    IssueCode.MISSING_NAME: "Missing character/group name before fragments.",
    IssueCode.INVALID_MEMBER_ALIAS_ONLY: "Member starts with '['; missing name.",
    IssueCode.INVALID_FRAGMENT_ORDER: "Found '[' after '()'.",
    IssueCode.UNMATCHED_ROUND: "Missing closing ')'.",
    IssueCode.NESTED_ROUND_NOT_ALLOWED: "Nested '(' is not allowed.",
    IssueCode.UNMATCHED_SQUARE: "Missing closing ']'.",
    IssueCode.AMBIGUOUS_SQUARE_LIST: "Could be a group or aliases. Defaulted to alias.",
    IssueCode.EXTRA_CLOSING_ROUND: "Found ')' with no matching '('.",
    IssueCode.EXTRA_CLOSING_SQUARE: "Found ']' with no matching '['.",
}


@dataclass(frozen=True, slots=True)
class ParseIssue:
    """One structural diagnostic.

    Attributes:
        code:    Which structural problem was found.
        raw:     The offending text span (exact meaning depends on the code).
        path:    Structural locator, e.g. ``"/0/group/1"``; ``""`` for the
                 top-level scan of the whole input.
        message: Fixed human-readable description of the code.
    """

    code: IssueCode
    raw: str
    path: str | None = None
    message: str | None = None


class IssueCollector:
    """Ordered, append-only sink for ParseIssues.

    One collector is created per ``parse()`` invocation and passed explicitly
    through every scanner, reader and parser call, so independent parses never
    share state.
    """

    __slots__ = ("_issues",)

    def __init__(self) -> None:
        self._issues: list[ParseIssue] = []

    def add(self, code: IssueCode, raw: str, path: str | None = None) -> None:
        """Append an issue for ``code`` with its standard message."""
        self._issues.append(
            ParseIssue(code=code, raw=raw, path=path, message=_MESSAGES[code])
        )

    def freeze(self) -> tuple[ParseIssue, ...]:
        """Return the issues collected so far, in emission order."""
        return tuple(self._issues)

    def __len__(self) -> int:
        return len(self._issues)
