"""Diagnostics core types."""

from dataclasses import dataclass

from loxscan.diagnostics.codes import DiagnosticSpec, Severity


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic reported while scanning."""

    code: str
    message: str
    line: int
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(spec: DiagnosticSpec, line: int, message: str | None = None) -> "Diagnostic":
        return Diagnostic(
            code=spec.code,
            message=spec.message if message is None else message,
            line=line,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )

    def __str__(self) -> str:
        label = "Error" if self.severity == "error" else "Warning"
        return f"[line {self.line}] {label}: {self.message}"
