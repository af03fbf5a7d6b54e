"""Character and Fragment variants plus the Dataset produced by parsing.

Both unions are closed: ``Character`` is ``CharacterNode | RawCharacter`` and
``Fragment`` is ``InfoFragment | AliasFragment | GroupFragment``.  Consumers
``match`` on the variant class and finish with ``typing.assert_never`` so a
new variant fails type checking everywhere it is not handled.

Character nodes compare and hash by identity (``eq=False``): two entries with
the same name and fragments are still distinct nodes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import ClassVar

from castlist.issues import IssueCode, ParseIssue

__all__ = [
    "AliasFragment",
    "Character",
    "CharacterKind",
    "CharacterNode",
    "Dataset",
    "Fragment",
    "FragmentKind",
    "GroupFragment",
    "InfoFragment",
    "RawCharacter",
]


class CharacterKind(StrEnum):
    """Discriminator for Character variants.

    - NODE -> "node" : a named character with fragments
    - RAW  -> "raw"  : a nameless group member kept as literal text
    """

    NODE = auto()
    RAW = auto()


class FragmentKind(StrEnum):
    """Discriminator for Fragment variants.

    - INFO  -> "info"  : contents of one ``(...)``
    - ALIAS -> "alias" : contents of one ``[...]`` kept as an opaque label
    - GROUP -> "group" : contents of one ``[...]`` parsed into members
    """

    INFO = auto()
    ALIAS = auto()
    GROUP = auto()


@dataclass(frozen=True, slots=True)
class InfoFragment:
    """One ``(...)`` span.  ``raw`` is the trimmed interior, commas and all."""

    kind: ClassVar[FragmentKind] = FragmentKind.INFO

    raw: str


@dataclass(frozen=True, slots=True)
class AliasFragment:
    """One ``[...]`` span kept whole.  ``raw`` is the trimmed interior."""

    kind: ClassVar[FragmentKind] = FragmentKind.ALIAS

    raw: str


@dataclass(frozen=True, slots=True)
class GroupFragment:
    """One ``[...]`` span parsed as a member list.

    Attributes:
        raw:     Trimmed interior text.  Diagnostic only; rendering uses
                 ``members``.
        members: Parsed members in source order.
    """

    kind: ClassVar[FragmentKind] = FragmentKind.GROUP

    raw: str
    members: tuple[Character, ...] = ()


@dataclass(frozen=True, slots=True, eq=False)
class CharacterNode:
    """A named character.

    Attributes:
        name:      Trimmed, non-empty name text.
        fragments: Fragments in source order, never reordered or deduplicated.
    """

    kind: ClassVar[CharacterKind] = CharacterKind.NODE

    name: str
    fragments: tuple[Fragment, ...] = ()

    def group_members(self) -> list[CharacterNode]:
        """Return the node-variant members of every group fragment, in order."""
        return [
            member
            for fragment in self.fragments
            if isinstance(fragment, GroupFragment)
            for member in fragment.members
            if isinstance(member, CharacterNode)
        ]


@dataclass(frozen=True, slots=True, eq=False)
class RawCharacter:
    """A group member with no name, kept as its original untrimmed text."""

    kind: ClassVar[CharacterKind] = CharacterKind.RAW

    raw: str


Character = CharacterNode | RawCharacter
Fragment = InfoFragment | AliasFragment | GroupFragment


@dataclass(frozen=True, slots=True)
class Dataset:
    """Result of ``parse()``: every reachable node plus the issues found.

    Attributes:
        entries:         Each reachable node exactly once, in depth-first,
                         left-to-right first-visit order from the top-level
                         entries.  Group members appear here as well as
                         inside their group.
        issues_detailed: Issues in emission order.
    """

    entries: tuple[CharacterNode, ...] = ()
    issues_detailed: tuple[ParseIssue, ...] = ()

    def roots(self) -> list[CharacterNode]:
        """Return the entries not referenced as a member of any group."""
        members = {m for node in self.entries for m in node.group_members()}
        return [node for node in self.entries if node not in members]

    def issue_codes(self) -> list[IssueCode]:
        """Return the code of every issue, in emission order."""
        return [issue.code for issue in self.issues_detailed]

    @property
    def has_issues(self) -> bool:
        return bool(self.issues_detailed)
