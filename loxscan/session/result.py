"""Scan result carrier returned by driver runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from loxscan.diagnostics import has_errors

if TYPE_CHECKING:
    from loxscan.diagnostics import Diagnostic
    from loxscan.lexer import Token


@dataclass(frozen=True, slots=True)
class RunResult:
    """Tokens and diagnostics produced by scanning one source text."""

    source: str
    tokens: list[Token]
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)
