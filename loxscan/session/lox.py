"""Driver session: feed source to the scanner and print what comes out."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from loxscan.diagnostics import DiagnosticCollector
from loxscan.lexer import Scanner
from loxscan.session.options import SessionOptions
from loxscan.session.result import RunResult


class Lox:
    """One interactive or batch session.

    `had_error` is session state owned by the caller, never module-global.
    """

    def __init__(self, out: TextIO | None = None, options: SessionOptions | None = None) -> None:
        self._out = out if out is not None else sys.stdout
        self._options = options if options is not None else SessionOptions()
        self.had_error = False

    @property
    def options(self) -> SessionOptions:
        return self._options

    def run(self, source: str) -> RunResult:
        """Scan `source`, print diagnostics then tokens, and remember any error."""
        collector = DiagnosticCollector()
        tokens = Scanner(source, collector).scan_tokens()

        for diagnostic in collector:
            self._write(str(diagnostic))
        if self._options.show_tokens:
            for token in tokens:
                self._write(token.render())

        result = RunResult(source=source, tokens=tokens, diagnostics=collector.diagnostics)
        if result.has_errors:
            self.had_error = True
        return result

    def run_file(self, path: str | Path) -> RunResult:
        """Scan the exact contents of `path`, line endings untouched.

        Raises `OSError` when it cannot be read and `UnicodeDecodeError` when it is not UTF-8.
        """
        source = Path(path).read_bytes().decode("utf-8")
        return self.run(source)

    def run_prompt(self, lines: Iterable[str]) -> list[RunResult]:
        """Run each input line on its own; an error on one line does not stick to the next."""
        results: list[RunResult] = []
        self._out.write(self._options.prompt)
        self._out.flush()
        for line in lines:
            results.append(self.run(line.rstrip("\n")))
            self.had_error = False
            self._out.write(self._options.prompt)
            self._out.flush()
        self._out.write("\n")
        return results

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.write("\n")
