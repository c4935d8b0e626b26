"""Top-level rendering: message in a bubble, mascot underneath."""

from __future__ import annotations

from papjesz.constants.layout import TAB_REPLACEMENT, WRAP_WIDTH
from papjesz.layout import compose_bubble, wrap


def normalize(message: str) -> str:
    """Expand every tab in *message* to four spaces."""
    return message.replace("\t", TAB_REPLACEMENT)


def assemble(bubble: str, mascot: str) -> str:
    """Join the bubble and the mascot, leaving the mascot untouched."""
    return f"{bubble}\n{mascot}"


def render(message: str, mascot: str) -> str:
    """Render *message* in a speech bubble followed by *mascot*."""
    lines = wrap(normalize(message), WRAP_WIDTH)
    return assemble(compose_bubble(lines), mascot)
