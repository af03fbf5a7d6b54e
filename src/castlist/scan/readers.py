"""Readers that consume one bracketed span starting at an opening bracket.

Round brackets are flat by policy: they are consumed with depth counting so
the text stays parseable, but any nesting is reported as
``NESTED_ROUND_NOT_ALLOWED``.  Square brackets nest freely; a ``(`` met inside
one is handed to the round reader so interior info spans are still checked.

Both readers recover from a missing closer the same way: the issue's ``raw``
is everything from the opening bracket to the end of the string, the inner
text is everything after the opening bracket, and ``end`` is ``len(text)``.
"""

from __future__ import annotations

from dataclasses import dataclass

from castlist.issues import IssueCode, IssueCollector

__all__ = ["ReadResult", "read_round", "read_square"]


@dataclass(frozen=True, slots=True)
class ReadResult:
    """Outcome of reading one bracketed span.

    Attributes:
        inner: Text between the brackets, untrimmed.
        end:   Index just past the closing bracket (or ``len(text)``).
    """

    inner: str
    end: int


def read_round(
    text: str,
    start: int,
    path: str,
    issues: IssueCollector,
) -> ReadResult:
    """Consume the ``(...)`` span whose opening bracket is at ``text[start]``."""
    i = start + 1
    depth = 1
    nested = False

    while i < len(text):
        ch = text[i]
        if ch == "(":
            depth += 1
            nested = True
        elif ch == ")":
            depth -= 1
            if depth == 0:
                if nested:
                    issues.add(
                        IssueCode.NESTED_ROUND_NOT_ALLOWED, text[start : i + 1], path
                    )
                return ReadResult(inner=text[start + 1 : i], end=i + 1)
        i += 1

    issues.add(IssueCode.UNMATCHED_ROUND, text[start:], path)
    return ReadResult(inner=text[start + 1 :], end=len(text))


def read_square(
    text: str,
    start: int,
    path: str,
    issues: IssueCollector,
) -> ReadResult:
    """Consume the balanced ``[...]`` span whose opening bracket is at ``text[start]``.

    Round spans inside are consumed whole by ``read_round`` (with the same
    ``path``), so a ``]`` inside ``(...)`` does not close the square span.
    """
    i = start + 1
    depth = 1

    while i < len(text):
        ch = text[i]
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
            if depth == 0:
                return ReadResult(inner=text[start + 1 : i], end=i + 1)
        elif ch == "(":
            i = read_round(text, i, path, issues).end
            continue
        i += 1

    issues.add(IssueCode.UNMATCHED_SQUARE, text[start:], path)
    return ReadResult(inner=text[start + 1 :], end=len(text))
