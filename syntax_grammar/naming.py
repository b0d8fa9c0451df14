"""Conversion of PascalCase type names into grammar rule names."""

from __future__ import annotations

import re
from functools import lru_cache

SYNTAX_SUFFIX = "Syntax"

_BOUNDARY = re.compile(
    r"""
    (?<=[A-Z])(?=[A-Z][a-z]) |
    (?<=[^A-Z])(?=[A-Z]) |
    (?<=[A-Za-z])(?=[^A-Za-z])
    """,
    re.VERBOSE,
)


@lru_cache(maxsize=None)
def normalize(name: str, suffix: str = SYNTAX_SUFFIX) -> str:
    """Convert a ``PascalCased`` type name into a ``snake_cased`` rule name.

    A trailing ``suffix`` is dropped first::

        >>> normalize("BreakStatementSyntax")
        'break_statement'
        >>> normalize("IOExpression")
        'io_expression'
        >>> normalize("Utf8StringLiteralToken")
        'utf_8_string_literal_token'
    """
    if suffix and name.endswith(suffix):
        name = name[: -len(suffix)]
    return _BOUNDARY.sub("_", name).lower()
