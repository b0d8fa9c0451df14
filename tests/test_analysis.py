"""Tests for reading generated grammars back."""

from syntax_grammar import analysis

GRAMMAR = """// <auto-generated />
grammar csharp;

statement
  : block
  | break_statement
  ;

block
  : '{' statement* '}'
  ;

break_statement
  : 'break' ';'
  ;

literal
  : '\\'' character_literal_token /* see lexical specification */
  | EOF
  ;"""


def test_parse_rule_blocks() -> None:
    assert analysis.parse_rule_blocks(GRAMMAR) == [
        ("statement", ["block", "break_statement"]),
        ("block", ["'{' statement* '}'"]),
        ("break_statement", ["'break' ';'"]),
        ("literal", ["'\\'' character_literal_token /* see lexical specification */", "EOF"]),
    ]


def test_production_references() -> None:
    assert analysis.production_references("'break' identifier_token? ('in' | expression)*") == {
        "identifier_token",
        "expression",
    }


def test_undefined_references() -> None:
    assert analysis.undefined_references(GRAMMAR) == {"literal": {"character_literal_token"}}


def test_duplicate_rules() -> None:
    assert analysis.duplicate_rules(GRAMMAR) == []
    assert analysis.duplicate_rules(GRAMMAR + "\n\nblock\n  : ';'\n  ;") == ["block"]


def test_find_cycles() -> None:
    deps = analysis.rule_dependencies(GRAMMAR)
    assert analysis.find_cycles(deps) == [["block", "statement", "block"]]


def test_find_cycles_respects_depth() -> None:
    deps = {"a": {"b"}, "b": {"c"}, "c": {"a"}}
    assert analysis.find_cycles(deps, max_depth=2) == []
    assert analysis.find_cycles(deps, max_depth=3) == [["a", "b", "c", "a"]]
