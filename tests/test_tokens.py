from dataclasses import FrozenInstanceError

import pytest

from loxscan.lexer import KEYWORDS, NumberLiteral, StringLiteral, Token, TokenKind, render_literal, scan
from loxscan.text import TextRange, slice_text_range


def test_token_kind_names_are_the_printed_form() -> None:
    assert TokenKind.LEFT_PAREN.name == "LEFT_PAREN"
    assert TokenKind.BANG_EQUAL.name == "BANG_EQUAL"
    assert TokenKind.EOF_LOX.name == "EOF_LOX"


def test_token_kind_order_is_fixed() -> None:
    ordered = list(TokenKind)

    assert ordered[0] == TokenKind.LEFT_PAREN
    assert ordered.index(TokenKind.STAR) < ordered.index(TokenKind.BANG)
    assert ordered.index(TokenKind.LESS_EQUAL) < ordered.index(TokenKind.IDENTIFIER)
    assert ordered.index(TokenKind.NUMBER) < ordered.index(TokenKind.AND)
    assert ordered[-1] == TokenKind.EOF_LOX
    assert len(ordered) == 39


def test_keyword_table_has_sixteen_reserved_words() -> None:
    assert len(KEYWORDS) == 16
    assert all(kind.is_keyword for kind in KEYWORDS.values())
    assert sorted(KEYWORDS) == sorted(kind.name.lower() for kind in TokenKind if kind.is_keyword)


def test_keyword_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        KEYWORDS["let"] = TokenKind.VAR  # type: ignore[index]


def test_is_literal_only_for_string_and_number() -> None:
    assert {kind for kind in TokenKind if kind.is_literal} == {TokenKind.STRING, TokenKind.NUMBER}


def test_render_number_token() -> None:
    token = scan("123")[0]

    assert token.render() == "NUMBER 123 123.000000"
    assert str(token) == token.render()


def test_render_string_token() -> None:
    token = scan('"hi there"')[0]

    assert token.render() == 'STRING "hi there" hi there'


def test_render_non_literal_tokens() -> None:
    tokens = scan("foo >=")

    assert [token.render() for token in tokens] == [
        "IDENTIFIER foo ",
        "GREATER_EQUAL >= ",
        "EOF_LOX  ",
    ]


def test_render_literal_variants() -> None:
    assert render_literal(None) == ""
    assert render_literal(NumberLiteral(2.5)) == "2.500000"
    assert render_literal(StringLiteral("x")) == "x"


def test_render_literal_rejects_other_values() -> None:
    with pytest.raises(TypeError):
        render_literal(1.0)  # type: ignore[arg-type]


def test_tokens_are_immutable() -> None:
    token = Token(TokenKind.DOT, ".", None, 1, TextRange(0, 1))

    with pytest.raises(FrozenInstanceError):
        token.line = 2  # type: ignore[misc]


def test_token_outlives_its_source_string() -> None:
    source = "print 1;"
    tokens = scan(source)
    del source

    assert tokens[0].lexeme == "print"


def test_text_range_invariants() -> None:
    with pytest.raises(ValueError, match="start > end"):
        TextRange(3, 1)
    with pytest.raises(ValueError, match="negative"):
        TextRange(-1, 1)

    empty = TextRange.empty(4)
    assert empty.is_empty()
    assert empty.len() == 0
    assert TextRange(1, 4).len() == 3
    assert slice_text_range("abcdef", TextRange(1, 4)) == "bcd"
