"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "papjesz"
CLI_DESCRIPTION: str = "\n".join(
    (
        f"{BRAND_NAME} says what you tell it to.",
        "",
        "With no MESSAGE, the message is read from piped stdin, or drawn at",
        "random from the bundled corpus when stdin is a terminal.",
    )
)
