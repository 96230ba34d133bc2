"""Rich Console factory and theme for envoverview output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

from envoverview.domain.types import BadgeTone

ENV_THEME = Theme(
    {
        "env.ok": "bold green",
        "env.error": "bold red",
        "env.warning": "bold yellow",
        "env.op": "bold cyan",
        "env.key": "dim",
        "env.title": "bold",
        "env.name": "bold",
        "env.badge.primary": "bold blue",
        "env.badge.default": "dim",
    }
)

_TONE_STYLES: dict[str, str] = {
    BadgeTone.PRIMARY: "env.badge.primary",
    BadgeTone.DEFAULT: "env.badge.default",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=ENV_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    if not isinstance(console.file, StringIO):
        raise TypeError("console is not backed by StringIO; use create_console()")
    return console.file.getvalue()


def style_for_tone(tone: BadgeTone | None) -> str:
    """Return the Rich style name for a badge tone."""
    if tone is None:
        return ""
    return _TONE_STYLES.get(tone, "")
