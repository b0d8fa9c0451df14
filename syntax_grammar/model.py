"""Immutable description of a syntax tree's node types.

A :class:`Tree` is handed to the generator fully built; nothing in this
package mutates it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

# ---------------------------------------------------------------------------
# Type kinds
# ---------------------------------------------------------------------------

NODE = "Node"
ABSTRACT_NODE = "AbstractNode"
PREDEFINED_NODE = "PredefinedNode"

TREE_TYPE_KINDS = (NODE, ABSTRACT_NODE, PREDEFINED_NODE)


# ---------------------------------------------------------------------------
# Constituents
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Field:
    """A named slot of a node: a token, another node, or a list of either."""

    name: str
    type: str
    kinds: Tuple[str, ...] = ()
    optional: bool = False
    min_count: Optional[int] = None  # set means one-or-more
    allow_trailing_separator: bool = False

    def is_token(self, token_type: str) -> bool:
        return self.type == token_type


@dataclass(frozen=True)
class Choice:
    """Exactly one of the children appears."""

    children: Tuple["Constituent", ...]


@dataclass(frozen=True)
class Sequence:
    """All children appear, in order."""

    children: Tuple["Constituent", ...]


Constituent = Union[Field, Choice, Sequence]


# ---------------------------------------------------------------------------
# Tree types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TreeType:
    """One syntax node kind."""

    name: str
    base: Optional[str] = None
    children: Tuple[Constituent, ...] = ()
    kind: str = NODE

    @property
    def is_node(self) -> bool:
        return self.kind == NODE


@dataclass(frozen=True)
class Tree:
    """The whole node hierarchy.

    ``root`` names the abstract type every node ultimately derives from. It
    is part of ``types`` in most schemas but never becomes a grammar rule.
    """

    root: str
    types: Tuple[TreeType, ...]

    def type_names(self) -> Tuple[str, ...]:
        return tuple(t.name for t in self.types)
