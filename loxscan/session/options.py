"""Driver session configuration."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SessionOptions:
    """Knobs for how a `Lox` session reports its output."""

    prompt: str = "> "
    show_tokens: bool = True
