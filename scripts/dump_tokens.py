#!/usr/bin/env python
"""Dump every token (and any diagnostics) of a Lox file for debugging."""

from __future__ import annotations

import argparse
from pathlib import Path

from loxscan.diagnostics import DiagnosticCollector
from loxscan.lexer import Scanner, Token


def format_token(idx: int, token: Token) -> str:
    return (
        f"[{idx}] kind={token.kind.name} "
        f"lexeme={token.lexeme!r} "
        f"literal={token.literal!r} "
        f"line={token.line} "
        f"span=({token.range.start},{token.range.end})"
    )


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump tokens of a Lox source file")
    parser.add_argument("input", type=Path, help="Lox source file")
    parser.add_argument("-o", "--output", type=Path, default=None, help="Write the dump here instead of stdout")
    args = parser.parse_args()

    text = args.input.read_text(encoding="utf-8")
    collector = DiagnosticCollector()
    tokens = Scanner(text, collector).scan_tokens()

    lines = [format_token(idx, token) for idx, token in enumerate(tokens)]
    lines.extend(f"{d.code}: {d}" for d in collector)

    if args.output is None:
        print("\n".join(lines))
        return 0

    args.output.parent.mkdir(parents=True, exist_ok=True)
    with args.output.open("w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")

    print(f"Wrote {len(tokens)} tokens to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
