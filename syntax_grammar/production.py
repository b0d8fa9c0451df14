"""The right-hand side of a grammar rule."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple


@dataclass(frozen=True, order=True)
class Production:
    """One alternative of a rule.

    ``text`` is everything after the ``:`` or ``|`` in the emitted grammar,
    e.g. ``'extern' 'alias' identifier_token ';'``.

    ``rule_references`` holds the raw names of the rules the text refers to.
    It only steers emission order (referenced rules are printed close to
    the rule that uses them) and takes no part in equality or ordering.
    """

    text: str
    rule_references: Tuple[str, ...] = field(default=(), compare=False)

    @classmethod
    def of(cls, text: str, rule_references: Iterable[str] = ()) -> "Production":
        return cls(text, tuple(rule_references))

    def with_prefix(self, prefix: str) -> "Production":
        return Production(prefix + self.text, self.rule_references)

    def with_suffix(self, suffix: str) -> "Production":
        return Production(self.text + suffix, self.rule_references)

    def parenthesize(self) -> "Production":
        return self.with_prefix("(").with_suffix(")")

    def __str__(self) -> str:
        return self.text
