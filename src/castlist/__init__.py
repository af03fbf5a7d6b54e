"""castlist - conservative parser and canonical renderer for cast lists."""

from __future__ import annotations

from castlist.api import (
    canonicalize,
    check_stability,
    is_canonical,
    parse,
    render,
)
from castlist.codec import CastListCodec
from castlist.config import ParserConfig
from castlist.issues import IssueCode, ParseIssue
from castlist.result import StabilityResult
from castlist.tree.nodes import (
    AliasFragment,
    CharacterNode,
    Dataset,
    GroupFragment,
    InfoFragment,
    RawCharacter,
)

__version__: str = "0.1.0"
__all__: list[str] = [
    "AliasFragment",
    "CastListCodec",
    "CharacterNode",
    "Dataset",
    "GroupFragment",
    "InfoFragment",
    "IssueCode",
    "ParseIssue",
    "ParserConfig",
    "RawCharacter",
    "StabilityResult",
    "canonicalize",
    "check_stability",
    "is_canonical",
    "parse",
    "render",
]
