"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from loxscan.diagnostics.codes import SCANNER_ERROR, SCANNER_SPECS, DiagnosticSpec
from loxscan.diagnostics.diagnostic import Diagnostic

_SPECS_BY_MESSAGE: dict[str, DiagnosticSpec] = {spec.message: spec for spec in SCANNER_SPECS}


class DiagnosticCollector:
    """Error sink that records every report as a `Diagnostic`.

    Stands in for a global "had error" flag: the caller owns the collector
    and decides what the accumulated diagnostics mean.
    """

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def __call__(self, line: int, message: str) -> None:
        spec = _SPECS_BY_MESSAGE.get(message, SCANNER_ERROR)
        self._diagnostics.append(Diagnostic.from_spec(spec, line, message))

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def has_errors(self) -> bool:
        return has_errors(self._diagnostics)

    def __len__(self) -> int:
        return len(self._diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._diagnostics)


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)
