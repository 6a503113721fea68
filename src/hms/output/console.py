"""Rich Console factory and theme for hms output.

Consoles render into a StringIO buffer so every renderer returns a
plain ``str``.  In non-TTY environments (tests, pipes) Rich automatically
disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

HMS_THEME = Theme(
    {
        "hms.ok": "bold green",
        "hms.error": "bold red",
        "hms.warning": "bold yellow",
        "hms.op": "bold cyan",
        "hms.key": "dim",
        "hms.value": "bold",
        "hms.missing": "dim italic",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=HMS_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
