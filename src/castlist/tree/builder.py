"""DatasetBuilder: converts cast-list text into a flattened Dataset.

Pipeline for one ``build()`` call:

1. Split the whole input at top-level separators (stray closers reported
   with path ``""``).
2. Parse each non-empty piece into a ``CharacterNode``.  The name is the
   trimmed text before the first bracket; an entry with no name is dropped
   after a ``MISSING_NAME`` issue.
3. Walk the fragments: ``(...)`` becomes an info fragment; ``[...]`` becomes
   a group when its interior contains any ``[``, otherwise an alias (with an
   ``AMBIGUOUS_SQUARE_LIST`` issue when the interior holds a top-level
   separator).  Group interiors are split and parsed recursively.
4. Flatten the parsed roots depth-first into ``Dataset.entries``.

Paths (JSON Pointer flavoured):
    ""               top-level scan of the whole input
    "/0"             top-level entry 0
    "/0/square"      inside a square span of entry 0
    "/0/group/2"     member 2 of a group of entry 0
"""

from __future__ import annotations

import logging

from castlist.config import ParserConfig
from castlist.issues import IssueCode, IssueCollector
from castlist.scan.readers import read_round, read_square
from castlist.scan.scanner import has_top_level, split_top_level
from castlist.tree.nodes import (
    AliasFragment,
    Character,
    CharacterNode,
    Dataset,
    Fragment,
    GroupFragment,
    InfoFragment,
    RawCharacter,
)

__all__ = ["DatasetBuilder", "flatten"]

logger = logging.getLogger(__name__)


def flatten(roots: list[CharacterNode]) -> tuple[CharacterNode, ...]:
    """Return every node reachable from ``roots`` once, in depth-first pre-order.

    Uses an explicit stack and an identity-keyed visited set, so neither deep
    nesting nor a shared node can cause unbounded work.  Raw members are not
    visited.
    """
    seen: set[CharacterNode] = set()
    ordered: list[CharacterNode] = []
    stack = list(reversed(roots))

    while stack:
        node = stack.pop()
        if node in seen:
            continue
        seen.add(node)
        ordered.append(node)
        stack.extend(reversed(node.group_members()))

    return tuple(ordered)


class DatasetBuilder:
    """Parses cast-list text into a Dataset.

    The builder holds configuration only; all per-parse state lives in the
    ``IssueCollector`` created by ``build()``, so one builder can serve any
    number of concurrent parses.

    Example::

        builder = DatasetBuilder()
        dataset = builder.build("Justice League [Wonder Woman; Batman [Bruce Wayne]];")
        [n.name for n in dataset.entries]
        # ["Justice League", "Wonder Woman", "Batman"]
    """

    def __init__(self, config: ParserConfig | None = None) -> None:
        self._config = config if config is not None else ParserConfig()

    def build(self, text: str) -> Dataset:
        """Parse ``text`` into a Dataset.  Never fails for any string.

        Raises:
            TypeError: If ``text`` is not a ``str``.
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected str input, got {type(text)!r}")

        issues = IssueCollector()
        roots: list[CharacterNode] = []

        pieces = split_top_level(text, self._config.separator, "", issues)
        for i, piece in enumerate(pieces):
            entry = piece.strip()
            if not entry:
                continue
            node = self._parse_node(entry, f"/{i}", issues, depth=0)
            if node is not None:
                roots.append(node)

        dataset = Dataset(entries=flatten(roots), issues_detailed=issues.freeze())
        logger.debug(
            "Parsed %d root(s), %d entries, %d issue(s)",
            len(roots),
            len(dataset.entries),
            len(issues),
        )
        return dataset

    # ------------------------------------------------------------------
    # Node parser
    # ------------------------------------------------------------------

    def _parse_node(
        self,
        entry: str,
        path: str,
        issues: IssueCollector,
        depth: int,
    ) -> CharacterNode | None:
        i = 0
        while i < len(entry) and entry[i] not in "[(":
            i += 1

        name = entry[:i].strip()
        if not name:
            issues.add(IssueCode.MISSING_NAME, entry, path)
            return None

        fragments: list[Fragment] = []
        seen_info = False
        square_path = f"{path}/square"

        while i < len(entry):
            ch = entry[i]

            if ch == "(":
                result = read_round(entry, i, path, issues)
                fragments.append(InfoFragment(raw=result.inner.strip()))
                seen_info = True
                i = result.end
                continue

            if ch == "[":
                if seen_info:
                    issues.add(IssueCode.INVALID_FRAGMENT_ORDER, entry[i:], path)
                result = read_square(entry, i, square_path, issues)
                fragments.append(
                    self._square_fragment(result.inner, path, issues, depth)
                )
                i = result.end
                continue

            # Whitespace and any other character between fragments: skipped.
            i += 1

        return CharacterNode(name=name, fragments=tuple(fragments))

    def _square_fragment(
        self,
        inner: str,
        path: str,
        issues: IssueCollector,
        depth: int,
    ) -> Fragment:
        """Decide whether a square span is a group or an alias."""
        if "[" in inner:
            if depth >= self._config.max_depth:
                logger.warning(
                    "Group nesting at %s exceeds max_depth=%d; kept as alias",
                    path,
                    self._config.max_depth,
                )
                return AliasFragment(raw=inner.strip())
            members = self._parse_members(inner, f"{path}/group", issues, depth + 1)
            return GroupFragment(raw=inner.strip(), members=members)

        if has_top_level(inner, self._config.separator, f"{path}/square", issues):
            issues.add(IssueCode.AMBIGUOUS_SQUARE_LIST, f"[{inner}]", path)
        return AliasFragment(raw=inner.strip())

    # ------------------------------------------------------------------
    # Member list parser
    # ------------------------------------------------------------------

    def _parse_members(
        self,
        inner: str,
        path: str,
        issues: IssueCollector,
        depth: int,
    ) -> tuple[Character, ...]:
        members: list[Character] = []

        pieces = split_top_level(inner, self._config.separator, path, issues)
        for k, piece in enumerate(pieces):
            member_text = piece.strip()
            if not member_text:
                continue
            member_path = f"{path}/{k}"
            if member_text.startswith("["):
                members.append(RawCharacter(raw=piece))
                issues.add(IssueCode.INVALID_MEMBER_ALIAS_ONLY, member_text, member_path)
                continue
            node = self._parse_node(member_text, member_path, issues, depth)
            if node is not None:
                members.append(node)

        return tuple(members)
