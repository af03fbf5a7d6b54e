"""Tree subpackage: cast-list data model, parser and canonical renderer.

Re-exports the public API for the tree module:
- CharacterNode / RawCharacter: the two Character variants
- InfoFragment / AliasFragment / GroupFragment: the three Fragment variants
- Dataset: flattened parse result with issues
- DatasetBuilder: converts text into a Dataset
- Canonicalizer: renders a Dataset back to canonical text
"""

from castlist.tree.builder import DatasetBuilder, flatten
from castlist.tree.nodes import (
    AliasFragment,
    Character,
    CharacterKind,
    CharacterNode,
    Dataset,
    Fragment,
    FragmentKind,
    GroupFragment,
    InfoFragment,
    RawCharacter,
)
from castlist.tree.renderer import Canonicalizer

__all__ = [
    "AliasFragment",
    "Canonicalizer",
    "Character",
    "CharacterKind",
    "CharacterNode",
    "Dataset",
    "DatasetBuilder",
    "Fragment",
    "FragmentKind",
    "GroupFragment",
    "InfoFragment",
    "RawCharacter",
    "flatten",
]
