"""Read a tree model snapshot from JSON.

The snapshot mirrors the model one-to-one::

    {
      "root": "CSharpSyntaxNode",
      "types": [
        {"kind": "AbstractNode", "name": "StatementSyntax", "base": "CSharpSyntaxNode"},
        {"kind": "Node", "name": "BreakStatementSyntax", "base": "StatementSyntax",
         "children": [
           {"name": "BreakKeyword", "type": "SyntaxToken", "kinds": ["BreakKeyword"]},
           {"name": "SemicolonToken", "type": "SyntaxToken", "kinds": ["SemicolonToken"]}
         ]}
      ]
    }

A child is either a field object, ``{"choice": [...]}`` or
``{"sequence": [...]}``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from .errors import SchemaError
from .model import NODE, TREE_TYPE_KINDS, Choice, Constituent, Field, Sequence, Tree, TreeType


def load_tree(path: Union[str, Path]) -> Tree:
    """Load a :class:`Tree` from a JSON snapshot file."""
    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise SchemaError(f"Cannot read schema {path}: {e}") from e
    return tree_from_dict(data)


def tree_from_dict(data: Dict[str, Any]) -> Tree:
    if not isinstance(data, dict):
        raise SchemaError("Schema snapshot must be a JSON object")
    root = data.get("root")
    if not isinstance(root, str) or not root:
        raise SchemaError("Schema snapshot needs a 'root' type name")
    raw_types = data.get("types", [])
    if not isinstance(raw_types, list):
        raise SchemaError("'types' must be a list")
    return Tree(root=root, types=tuple(_tree_type(t) for t in raw_types))


def _tree_type(raw: Any) -> TreeType:
    if not isinstance(raw, dict) or not isinstance(raw.get("name"), str):
        raise SchemaError(f"Type entry needs a 'name': {raw!r}")
    name = raw["name"]
    kind = raw.get("kind", NODE)
    if kind not in TREE_TYPE_KINDS:
        raise SchemaError(f"Type {name!r} has unknown kind {kind!r}")
    base = raw.get("base")
    if base is not None and not isinstance(base, str):
        raise SchemaError(f"Type {name!r} has a non-string base")
    return TreeType(
        name=name,
        base=base,
        children=_children(raw.get("children", []), name),
        kind=kind,
    )


def _children(raw: Any, owner: str) -> Tuple[Constituent, ...]:
    if not isinstance(raw, list):
        raise SchemaError(f"Children of {owner!r} must be a list")
    return tuple(_child(c, owner) for c in raw)


def _child(raw: Any, owner: str) -> Constituent:
    if not isinstance(raw, dict):
        raise SchemaError(f"Unexpected child of {owner!r}: {raw!r}")
    if "choice" in raw:
        return Choice(_children(raw["choice"], owner))
    if "sequence" in raw:
        return Sequence(_children(raw["sequence"], owner))
    return _field(raw, owner)


def _field(raw: Dict[str, Any], owner: str) -> Field:
    name = raw.get("name")
    type_name = raw.get("type")
    if not isinstance(name, str) or not isinstance(type_name, str):
        raise SchemaError(f"Field of {owner!r} needs a 'name' and a 'type': {raw!r}")

    kinds = raw.get("kinds", [])
    if not isinstance(kinds, list) or not all(isinstance(k, str) for k in kinds):
        raise SchemaError(f"Field {owner}.{name} has malformed kinds")

    min_count = raw.get("minCount")
    if min_count is not None and not isinstance(min_count, int):
        raise SchemaError(f"Field {owner}.{name} has a non-integer minCount")

    return Field(
        name=name,
        type=type_name,
        kinds=tuple(kinds),
        optional=bool(raw.get("optional", False)),
        min_count=min_count,
        allow_trailing_separator=bool(raw.get("allowTrailingSeparator", False)),
    )
