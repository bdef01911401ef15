"""Command-line entrypoint: `loxscan [script]`."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import NoReturn

from loxscan.session import Lox, SessionOptions

# sysexits.h
EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66

USAGE = "Usage: loxscan [script]"


class UsageError(Exception):
    """Raised instead of argparse's own exit so bad arguments map to EX_USAGE."""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="loxscan",
        description="Scan a Lox script (or interactive input) and print its tokens.",
        epilog="Put a script path that starts with '-' after '--', e.g. `loxscan -- -x.lox`.",
    )
    parser.add_argument("script", nargs="*", help="Lox source file; omit for an interactive prompt")
    parser.add_argument("--prompt", default="> ", help="Prompt shown in interactive mode (default: '> ')")
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only print diagnostics, not tokens",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    try:
        args = build_parser().parse_args(argv)
    except UsageError as exc:
        print(f"loxscan: {exc}", file=sys.stderr)
        print(USAGE)
        return EX_USAGE

    if len(args.script) > 1:
        print(USAGE)
        return EX_USAGE

    lox = Lox(options=SessionOptions(prompt=args.prompt, show_tokens=not args.quiet))

    if args.script:
        path = args.script[0]
        try:
            lox.run_file(path)
        except OSError as exc:
            print(f"loxscan: cannot read {path}: {exc.strerror or exc}", file=sys.stderr)
            return EX_NOINPUT
        except UnicodeDecodeError as exc:
            print(f"loxscan: {path} is not valid UTF-8: {exc.reason}", file=sys.stderr)
            return EX_DATAERR
        return EX_DATAERR if lox.had_error else EX_OK

    lox.run_prompt(sys.stdin)
    return EX_OK


if __name__ == "__main__":
    raise SystemExit(main())
