"""Lox scanner package."""

from loxscan.diagnostics import Diagnostic, DiagnosticCollector, has_errors
from loxscan.lexer import KEYWORDS, Scanner, Token, TokenKind, scan
from loxscan.session import Lox, RunResult, SessionOptions

__version__ = "0.1.0"

__all__ = [
    "KEYWORDS",
    "Diagnostic",
    "DiagnosticCollector",
    "Lox",
    "RunResult",
    "Scanner",
    "SessionOptions",
    "Token",
    "TokenKind",
    "has_errors",
    "scan",
]
