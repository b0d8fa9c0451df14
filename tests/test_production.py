"""Tests for the Production value type."""

from syntax_grammar import Production


def test_helpers_keep_references() -> None:
    production = Production.of("argument", ["ArgumentSyntax"])
    wrapped = production.with_suffix(" (',' argument)*").parenthesize().with_suffix("?")
    assert wrapped.text == "(argument (',' argument)*)?"
    assert wrapped.rule_references == ("ArgumentSyntax",)


def test_equality_ignores_references() -> None:
    assert Production("block", ("BlockSyntax",)) == Production("block")
    assert Production("block") != Production("statement")


def test_ordering_by_text() -> None:
    productions = [Production("b"), Production("'x'"), Production("a", ("A",))]
    assert [p.text for p in sorted(productions)] == ["'x'", "a", "b"]


def test_str() -> None:
    assert str(Production("';'")) == "';'"
