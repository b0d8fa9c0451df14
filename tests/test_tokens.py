"""Tests for rendering token kinds as grammar text."""

import pytest

from syntax_grammar import DEFAULT_CONFIG, UnmappedTokenKindError
from syntax_grammar.generator import quote

from .helpers import generate, node, rules, token


def render(*kinds, name="Token", **overrides):
    text = generate(node("SampleSyntax", token(name, *kinds), token("SemicolonToken", "SemicolonToken")), **overrides)
    return rules(text)["sample"]


class TestQuote:
    def test_plain(self) -> None:
        assert quote("break") == "'break'"

    def test_single_quote(self) -> None:
        assert quote("'") == "'\\''"

    def test_backslash(self) -> None:
        assert quote("\\") == "'\\\\'"


class TestTokenText:
    def test_end_of_file(self) -> None:
        assert render("EndOfFileToken") == ["EOF ';'"]

    @pytest.mark.parametrize("kind", ["EndOfDirectiveToken", "EndOfDocumentationCommentToken"])
    def test_end_of_trivia_is_dropped(self, kind: str) -> None:
        assert render(kind) == ["';'"]

    @pytest.mark.parametrize("kind", ["OmittedTypeArgumentToken", "OmittedArraySizeExpressionToken"])
    def test_omitted_is_epsilon(self, kind: str) -> None:
        assert render(kind) == ["/* epsilon */ ';'"]

    @pytest.mark.parametrize(
        "kind, expected",
        [
            ("IdentifierToken", "identifier_token"),
            ("NumericLiteralToken", "numeric_literal_token"),
            ("StringLiteralToken", "string_literal_token"),
            ("CharacterLiteralToken", "character_literal_token"),
            ("InterpolatedStringTextToken", "interpolated_string_text_token"),
        ],
    )
    def test_lexical_kinds(self, kind: str, expected: str) -> None:
        assert render(kind) == [f"{expected} ';'"]

    def test_quote_character(self) -> None:
        assert render("SingleQuoteToken") == ["'\\'' ';'"]

    def test_keyword_spelling(self) -> None:
        assert render("ArgListKeyword") == ["'__arglist' ';'"]

    def test_identifier_field_without_kinds(self) -> None:
        assert render(name="Identifier") == ["identifier_token ';'"]

    def test_field_name_names_the_kind(self) -> None:
        assert render(name="DotToken") == ["'.' ';'"]

    def test_unknown_kind(self) -> None:
        with pytest.raises(UnmappedTokenKindError):
            render("NoSuchToken")

    def test_kind_without_spelling(self) -> None:
        with pytest.raises(UnmappedTokenKindError) as excinfo:
            render("Utf8StringLiteralToken")
        assert excinfo.value.kind == "Utf8StringLiteralToken"

    def test_extra_token_kinds_from_config(self) -> None:
        assert render("BacktickToken", token_texts={"BacktickToken": "`"}) == ["'`' ';'"]

    def test_default_table_is_untouched(self) -> None:
        render("BacktickToken", token_texts={"BacktickToken": "`"})
        assert "BacktickToken" not in DEFAULT_CONFIG.token_texts
