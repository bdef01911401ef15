"""Driver session around the scanner."""

from loxscan.session.lox import Lox
from loxscan.session.options import SessionOptions
from loxscan.session.result import RunResult

__all__ = [
    "Lox",
    "RunResult",
    "SessionOptions",
]
