"""Exceptions raised while generating a grammar.

Every failure is fatal: a grammar that references missing rules or drops
tokens is worse than no grammar, so nothing here is recovered from.
"""

from __future__ import annotations

from typing import Iterable


class GrammarError(Exception):
    """Base class for all grammar generation errors."""


class SchemaError(GrammarError):
    """The tree model is malformed (duplicate names, bad snapshot data)."""


class ConfigError(GrammarError):
    """A configuration file could not be applied."""


class UnresolvedRuleError(GrammarError):
    """A field or base link names a type that has no rule."""

    def __init__(self, name: str):
        super().__init__(f"No rule found with name: {name}")
        self.name = name


class UnmappedTokenKindError(GrammarError):
    """A token kind is unknown or has no textual spelling."""

    def __init__(self, kind: str):
        super().__init__(f"Unexpected token kind: {kind}")
        self.kind = kind


class EmptyRuleError(GrammarError):
    """A rule selected for emission has no productions."""

    def __init__(self, rule: str):
        super().__init__(f"Rule didn't have any productions: {rule}")
        self.rule = rule


class NormalizationCollisionError(GrammarError):
    """Two different type names normalize to the same rule name."""

    def __init__(self, normalized: str, names: Iterable[str]):
        self.normalized = normalized
        self.names = tuple(sorted(names))
        super().__init__(
            f"Rule name {normalized!r} is produced by more than one type: "
            + ", ".join(self.names)
        )
