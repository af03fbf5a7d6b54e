"""Bracket-depth scanner and the top-level separator splitter built on it.

The scanner walks a string left to right with two independent depth counters,
one for round brackets and one for square brackets.  Characters are reported
to the caller only at the top level (both counters zero).  A closer that
arrives while its counter is already zero is recorded as an
``EXTRA_CLOSING_ROUND`` / ``EXTRA_CLOSING_SQUARE`` issue whose ``raw`` is the
rest of the string from that closer onward; the counter stays at zero.

Example::

    issues = IssueCollector()
    split_top_level("A [x; y]; B (p; q)", ";", "", issues)
    # ["A [x; y]", " B (p; q)"]
"""

from __future__ import annotations

from collections.abc import Callable

from castlist.issues import IssueCode, IssueCollector

__all__ = ["ScanCallback", "has_top_level", "scan_top_level", "split_top_level"]

# Receives (char, index).  Returning False stops the scan early.
ScanCallback = Callable[[str, int], bool | None]


def scan_top_level(
    text: str,
    path: str,
    issues: IssueCollector,
    callback: ScanCallback,
) -> bool:
    """Scan ``text`` and invoke ``callback`` for every top-level character.

    Bracket characters themselves are never passed to the callback.

    Args:
        text:     The string to scan.
        path:     Structural locator attached to extra-closer issues.
        issues:   Collector receiving extra-closer issues.
        callback: Called as ``callback(char, index)`` at the top level.

    Returns:
        False if the callback requested an early stop, True otherwise.
    """
    round_depth = 0
    square_depth = 0

    for i, ch in enumerate(text):
        if ch == "(":
            round_depth += 1
            continue
        if ch == ")":
            if round_depth > 0:
                round_depth -= 1
            else:
                issues.add(IssueCode.EXTRA_CLOSING_ROUND, text[i:], path)
            continue
        if ch == "[":
            square_depth += 1
            continue
        if ch == "]":
            if square_depth > 0:
                square_depth -= 1
            else:
                issues.add(IssueCode.EXTRA_CLOSING_SQUARE, text[i:], path)
            continue

        if round_depth == 0 and square_depth == 0:
            if callback(ch, i) is False:
                return False

    return True


def split_top_level(
    text: str,
    separator: str,
    path: str,
    issues: IssueCollector,
) -> list[str]:
    """Split ``text`` at every top-level occurrence of ``separator``.

    Separators inside brackets are not split points.  The trailing segment
    after the last separator is always included, even when empty.  Pieces are
    returned untrimmed; callers trim and skip empty ones.
    """
    pieces: list[str] = []
    start = 0

    def _on_char(ch: str, i: int) -> None:
        nonlocal start
        if ch == separator:
            pieces.append(text[start:i])
            start = i + 1

    scan_top_level(text, path, issues, _on_char)
    pieces.append(text[start:])
    return pieces


def has_top_level(
    text: str,
    target: str,
    path: str,
    issues: IssueCollector,
) -> bool:
    """Return True if ``target`` occurs in ``text`` at the top level.

    The whole string is scanned even after a match so that every extra
    closer in ``text`` is reported.
    """
    found = False

    def _on_char(ch: str, _i: int) -> None:
        nonlocal found
        if ch == target:
            found = True

    scan_top_level(text, path, issues, _on_char)
    return found
