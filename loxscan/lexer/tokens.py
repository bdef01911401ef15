"""Lexer tokens."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum, auto
from types import MappingProxyType
from typing import Final

from loxscan.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Single-character tokens
    # -------------------------
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }
    COMMA = auto()  # ,
    DOT = auto()  # .
    MINUS = auto()  # -
    PLUS = auto()  # +
    SEMICOLON = auto()  # ;
    SLASH = auto()  # /
    STAR = auto()  # *

    # -------------------------
    # One or two character tokens
    # -------------------------
    BANG = auto()  # !
    BANG_EQUAL = auto()  # !=
    EQUAL = auto()  # =
    EQUAL_EQUAL = auto()  # ==
    GREATER = auto()  # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()  # <
    LESS_EQUAL = auto()  # <=

    # -------------------------
    # Literals
    # -------------------------
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # -------------------------
    # Keywords
    # -------------------------
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF_LOX = auto()

    @property
    def is_keyword(self) -> bool:
        return TokenKind.AND <= self <= TokenKind.WHILE

    @property
    def is_literal(self) -> bool:
        return self in (TokenKind.STRING, TokenKind.NUMBER)


@dataclass(frozen=True, slots=True)
class NumberLiteral:
    """Value of a NUMBER token."""

    value: float

    def render(self) -> str:
        return f"{self.value:f}"


@dataclass(frozen=True, slots=True)
class StringLiteral:
    """Value of a STRING token, quotes stripped."""

    value: str

    def render(self) -> str:
        return self.value


Literal = NumberLiteral | StringLiteral


def render_literal(literal: Literal | None) -> str:
    match literal:
        case None:
            return ""
        case NumberLiteral() | StringLiteral():
            return literal.render()
        case _:
            raise TypeError(f"Not a token literal: {literal!r}")


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token.

    `lexeme` is a copy of the matched source text and `range` locates it in
    the source, so a token stays valid after the source string is dropped.
    """

    kind: TokenKind
    lexeme: str
    literal: Literal | None
    line: int
    range: TextRange

    def render(self) -> str:
        """Printable form: `<KIND_NAME> <lexeme> <literal-or-empty>`."""
        return f"{self.kind.name} {self.lexeme} {render_literal(self.literal)}"

    def __str__(self) -> str:
        return self.render()


KEYWORDS: Final[Mapping[str, TokenKind]] = MappingProxyType(
    {
        "and": TokenKind.AND,
        "class": TokenKind.CLASS,
        "else": TokenKind.ELSE,
        "false": TokenKind.FALSE,
        "for": TokenKind.FOR,
        "fun": TokenKind.FUN,
        "if": TokenKind.IF,
        "nil": TokenKind.NIL,
        "or": TokenKind.OR,
        "print": TokenKind.PRINT,
        "return": TokenKind.RETURN,
        "super": TokenKind.SUPER,
        "this": TokenKind.THIS,
        "true": TokenKind.TRUE,
        "var": TokenKind.VAR,
        "while": TokenKind.WHILE,
    }
)
"""Reserved words. Read-only and shared by every scanner."""
