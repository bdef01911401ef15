"""Lexer."""

from loxscan.lexer.scanner import ErrorSink, Scanner, dump_tokens, scan, token_text
from loxscan.lexer.tokens import (
    KEYWORDS,
    Literal,
    NumberLiteral,
    StringLiteral,
    Token,
    TokenKind,
    render_literal,
)

__all__ = [
    "KEYWORDS",
    "ErrorSink",
    "Literal",
    "NumberLiteral",
    "Scanner",
    "StringLiteral",
    "Token",
    "TokenKind",
    "dump_tokens",
    "render_literal",
    "scan",
    "token_text",
]
