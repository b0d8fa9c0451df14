"""Tests for rule name normalization."""

import pytest

from syntax_grammar import normalize


@pytest.mark.parametrize(
    "name, expected",
    [
        ("BreakStatementSyntax", "break_statement"),
        ("CompilationUnitSyntax", "compilation_unit"),
        ("IdentifierToken", "identifier_token"),
        ("Modifier", "modifier"),
        ("IOExpressionSyntax", "io_expression"),
        ("XmlCDataSectionSyntax", "xml_c_data_section"),
        ("Utf8StringLiteralToken", "utf_8_string_literal_token"),
        ("Link10", "link_10"),
        ("Token", "token"),
    ],
)
def test_normalize(name: str, expected: str) -> None:
    assert normalize(name) == expected


def test_suffix_only_stripped_at_end() -> None:
    assert normalize("SyntaxTriviaList") == "syntax_trivia_list"


def test_custom_suffix() -> None:
    assert normalize("BreakStatementNode", "Node") == "break_statement"
    assert normalize("BreakStatementSyntax", "Node") == "break_statement_syntax"
