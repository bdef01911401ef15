"""Scanner."""

from collections.abc import Callable, Iterable

from loxscan.diagnostics import SCANNER_UNEXPECTED_CHARACTER, SCANNER_UNTERMINATED_STRING, Diagnostic
from loxscan.lexer.tokens import KEYWORDS, Literal, NumberLiteral, StringLiteral, Token, TokenKind
from loxscan.text import TextRange, slice_text_range

ErrorSink = Callable[[int, str], None]
"""Receives `(line, message)` for every malformed span. Return value is ignored."""

_SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "-": TokenKind.MINUS,
    "+": TokenKind.PLUS,
    ";": TokenKind.SEMICOLON,
    "*": TokenKind.STAR,
}

# operator -> (kind when followed by "=", kind otherwise)
_EQUAL_SUFFIX_TOKENS: dict[str, tuple[TokenKind, TokenKind]] = {
    "!": (TokenKind.BANG_EQUAL, TokenKind.BANG),
    "=": (TokenKind.EQUAL_EQUAL, TokenKind.EQUAL),
    "<": (TokenKind.LESS_EQUAL, TokenKind.LESS),
    ">": (TokenKind.GREATER_EQUAL, TokenKind.GREATER),
}


def _discard(line: int, message: str) -> None:
    return None


class Scanner:
    """Single-pass scanner turning Lox source into tokens.

    Malformed input is reported through `error_sink` and skipped; the scan
    itself always runs to the end of the source.
    """

    def __init__(self, source: str, error_sink: ErrorSink) -> None:
        self._source = source
        self._error_sink = error_sink
        self._tokens: list[Token] = []
        self._start = 0
        self._current = 0
        self._line = 1
        self._scanned = False

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def start(self) -> int:
        return self._start

    @property
    def current(self) -> int:
        return self._current

    @property
    def line(self) -> int:
        return self._line

    @property
    def is_at_end(self) -> bool:
        return self._current >= len(self._source)

    def scan_tokens(self) -> list[Token]:
        """Scan the whole source. The last token is always `EOF_LOX`."""
        if self._scanned:
            raise RuntimeError("Scanner instances scan exactly once; create a new Scanner")
        self._scanned = True

        while not self.is_at_end:
            self._start = self._current
            self._scan_token()

        self._tokens.append(
            Token(
                TokenKind.EOF_LOX,
                "",
                None,
                self._line,
                TextRange.empty(len(self._source)),
            )
        )
        return self._tokens

    def _scan_token(self) -> None:
        ch = self._advance()

        kind = _SINGLE_CHAR_TOKENS.get(ch)
        if kind is not None:
            self._add_token(kind)
            return

        pair = _EQUAL_SUFFIX_TOKENS.get(ch)
        if pair is not None:
            with_equal, alone = pair
            self._add_token(with_equal if self._match("=") else alone)
            return

        if ch == "/":
            if self._match("/"):
                self._skip_comment()
            else:
                self._add_token(TokenKind.SLASH)
            return

        if ch == " " or ch == "\r" or ch == "\t":
            return

        if ch == "\n":
            self._line += 1
            return

        if ch == '"':
            self._scan_string()
            return

        if _is_digit(ch):
            self._scan_number()
            return

        if _is_alpha(ch):
            self._scan_identifier()
            return

        self._report(SCANNER_UNEXPECTED_CHARACTER.message)

    def _skip_comment(self) -> None:
        # Do not consume the newline itself; it still has to bump the line.
        while self._peek() != "\n" and not self.is_at_end:
            self._advance()

    def _scan_string(self) -> None:
        while self._peek() != '"' and not self.is_at_end:
            if self._peek() == "\n":
                self._line += 1
            self._advance()

        if self.is_at_end:
            self._report(SCANNER_UNTERMINATED_STRING.message)
            return

        # closing quote
        self._advance()
        value = self._source[self._start + 1 : self._current - 1]
        self._add_token(TokenKind.STRING, StringLiteral(value))

    def _scan_number(self) -> None:
        while _is_digit(self._peek()):
            self._advance()

        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        text = self._source[self._start : self._current]
        self._add_token(TokenKind.NUMBER, NumberLiteral(float(text)))

    def _scan_identifier(self) -> None:
        while _is_alpha_numeric(self._peek()):
            self._advance()

        text = self._source[self._start : self._current]
        self._add_token(KEYWORDS.get(text, TokenKind.IDENTIFIER))

    def _match(self, expected: str) -> bool:
        if self.is_at_end or self._source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _peek(self) -> str:
        if self.is_at_end:
            return "\0"
        return self._source[self._current]

    def _peek_next(self) -> str:
        index = self._current + 1
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self) -> str:
        ch = self._source[self._current]
        self._current += 1
        return ch

    def _add_token(self, kind: TokenKind, literal: Literal | None = None) -> None:
        token_range = TextRange(self._start, self._current)
        lexeme = slice_text_range(self._source, token_range)
        self._tokens.append(Token(kind, lexeme, literal, self._line, token_range))

    def _report(self, message: str) -> None:
        self._error_sink(self._line, message)


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_alpha(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "_"


def _is_alpha_numeric(ch: str) -> bool:
    return _is_alpha(ch) or _is_digit(ch)


def scan(source: str, error_sink: ErrorSink | None = None) -> list[Token]:
    """Scan `source` with a fresh Scanner. Reports are dropped when no sink is given."""
    return Scanner(source, error_sink if error_sink is not None else _discard).scan_tokens()


def token_text(source: str, token: Token) -> str:
    """Get the text of a token from the source string based on its range."""
    return slice_text_range(source, token.range)


def dump_tokens(tokens: Iterable[Token], diagnostics: Iterable[Diagnostic] | None = None) -> None:
    """Print token list with kind, line, range, and text for debugging."""
    for i, tok in enumerate(tokens):
        print(f"{i:03d} {tok.kind.name:<14} line={tok.line} range={tok.range.as_tuple()} text={tok.lexeme!r}")

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} line={d.line} message={d.message}")
