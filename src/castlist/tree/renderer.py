"""Canonicalizer: renders a Dataset back into canonical cast-list text.

Only the true roots are rendered (entries that are not a member of any
group); members are rendered inside their group.  Group fragments are always
rebuilt from their parsed members, never from their stored raw text, which
makes ``render(parse(render(parse(x)))) == render(parse(x))``.

Rendering rules::

    node   -> name + one " "-prefixed rendering per fragment
    info   -> "(" + raw + ")"
    alias  -> "[" + raw + "]"
    group  -> "[" + "; ".join(rendered members) + "]"
    raw    -> the member's trimmed literal text
    output -> "; ".join(rendered roots) + ";"   (empty Dataset -> "")
"""

from __future__ import annotations

from typing import assert_never

from castlist.config import ParserConfig
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

__all__ = ["Canonicalizer"]


class Canonicalizer:
    """Renders Datasets and nodes to canonical text.

    Stateless apart from the separator taken from ``ParserConfig``; safe to
    share between threads.

    Example::

        canon = Canonicalizer()
        canon.render(DatasetBuilder().build("Batman  [ Bruce Wayne ] ;"))
        # "Batman [Bruce Wayne];"
    """

    def __init__(self, config: ParserConfig | None = None) -> None:
        config = config if config is not None else ParserConfig()
        self._separator = config.separator
        self._joiner = f"{config.separator} "

    def render(self, dataset: Dataset) -> str:
        roots = dataset.roots()
        if not roots:
            return ""
        return self._joiner.join(self.render_node(n) for n in roots) + self._separator

    def render_node(self, node: CharacterNode) -> str:
        """Render one node and, recursively, the members of its groups."""
        parts = [node.name.strip()]
        parts.extend(self._render_fragment(f) for f in node.fragments)
        return " ".join(parts)

    def _render_fragment(self, fragment: Fragment) -> str:
        match fragment:
            case InfoFragment(raw=raw):
                return f"({raw.strip()})"
            case AliasFragment(raw=raw):
                return f"[{raw.strip()}]"
            case GroupFragment(members=members):
                inner = self._joiner.join(self._render_character(m) for m in members)
                return f"[{inner}]"
            case _:
                assert_never(fragment)

    def _render_character(self, character: Character) -> str:
        match character:
            case CharacterNode():
                return self.render_node(character)
            case RawCharacter(raw=raw):
                return raw.strip()
            case _:
                assert_never(character)
