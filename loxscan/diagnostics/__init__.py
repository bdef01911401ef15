"""Diagnostics."""

from loxscan.diagnostics.codes import (
    SCANNER_ERROR,
    SCANNER_UNEXPECTED_CHARACTER,
    SCANNER_UNTERMINATED_STRING,
    DiagnosticSpec,
)
from loxscan.diagnostics.diagnostic import Diagnostic, Severity
from loxscan.diagnostics.report import DiagnosticCollector, collect_diagnostics, has_errors

__all__ = [
    "SCANNER_ERROR",
    "SCANNER_UNEXPECTED_CHARACTER",
    "SCANNER_UNTERMINATED_STRING",
    "Diagnostic",
    "DiagnosticCollector",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "has_errors",
]
