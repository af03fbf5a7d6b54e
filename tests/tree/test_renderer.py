"""Tests for the Canonicalizer.

Verifies:
- Rendering rules for each fragment and character variant
- Root filtering (group members never render at the top level)
- Groups render from parsed members, never from stored raw text
- Separator handling and the empty Dataset
"""

from __future__ import annotations

import pytest

from castlist.config import ParserConfig
from castlist.tree.builder import DatasetBuilder
from castlist.tree.nodes import (
    AliasFragment,
    CharacterNode,
    Dataset,
    GroupFragment,
    InfoFragment,
    RawCharacter,
)
from castlist.tree.renderer import Canonicalizer


@pytest.fixture
def canon() -> Canonicalizer:
    return Canonicalizer()


def _roundtrip(text: str) -> str:
    return Canonicalizer().render(DatasetBuilder().build(text))


class TestRenderNode:
    """Per-node rendering rules."""

    def test_name_only(self, canon: Canonicalizer) -> None:
        assert canon.render_node(CharacterNode(name="Batman")) == "Batman"

    def test_fragments_in_order(self, canon: Canonicalizer) -> None:
        node = CharacterNode(
            name=" Superman ",
            fragments=(AliasFragment(raw=" Kal-El "), InfoFragment(raw=" death ")),
        )
        assert canon.render_node(node) == "Superman [Kal-El] (death)"

    def test_group_renders_members_not_raw(self, canon: Canonicalizer) -> None:
        batman = CharacterNode(name="Batman", fragments=(AliasFragment(raw="Bruce"),))
        node = CharacterNode(
            name="League",
            fragments=(
                GroupFragment(
                    raw="stale text that must not be used",
                    members=(batman, RawCharacter(raw="  [X]  ")),
                ),
            ),
        )
        assert canon.render_node(node) == "League [Batman [Bruce]; [X]]"

    def test_empty_group(self, canon: Canonicalizer) -> None:
        node = CharacterNode(name="Empty", fragments=(GroupFragment(raw="??"),))
        assert canon.render_node(node) == "Empty []"


class TestRenderDataset:
    """Whole-dataset rendering."""

    def test_empty_dataset(self, canon: Canonicalizer) -> None:
        assert canon.render(Dataset()) == ""

    def test_roots_joined_and_terminated(self, canon: Canonicalizer) -> None:
        dataset = Dataset(
            entries=(CharacterNode(name="Batman"), CharacterNode(name="Robin"))
        )
        assert canon.render(dataset) == "Batman; Robin;"

    def test_members_not_rendered_as_roots(self, canon: Canonicalizer) -> None:
        dataset = DatasetBuilder().build(
            "Justice League [Wonder Woman; Batman [Bruce Wayne]];"
        )
        assert len(dataset.entries) == 3
        assert canon.render(dataset) == (
            "Justice League [Wonder Woman; Batman [Bruce Wayne]];"
        )

    def test_custom_separator(self) -> None:
        config = ParserConfig(separator="|")
        dataset = DatasetBuilder(config).build("A|B [x [y]| z]")
        assert Canonicalizer(config).render(dataset) == "A| B [x [y]| z]|"


class TestCanonicalForms:
    """Parse-then-render scenarios."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Jimmy Olsen (origin, death);", "Jimmy Olsen (origin, death);"),
            ("Superman [Clark Kent; Kal-El];", "Superman [Clark Kent; Kal-El];"),
            ("  Batman   [ Bruce Wayne ]  ;  ; Robin", "Batman [Bruce Wayne]; Robin;"),
            ("[Solo];", ""),
            ("Zeta (a,b;", "Zeta (a,b;);"),
            ("Iota [A] (x) [B] (y);", "Iota [A] (x) [B] (y);"),
            ("Cyborg [Victor Stone", "Cyborg [Victor Stone];"),
            ("A [B [C", "A [B [C]];"),
            ("Team [[X]; Bob [Y]];", "Team [[X]; Bob [Y]];"),
            ("Team [(info); Bob [Y]];", "Team [Bob [Y]];"),
            ("Team [ Bob [Y] ;  ; Ann ]", "Team [Bob [Y]; Ann];"),
            ("Batman[Bruce](rich)", "Batman [Bruce] (rich);"),
        ],
    )
    def test_canonical_text(self, text: str, expected: str) -> None:
        assert _roundtrip(text) == expected
