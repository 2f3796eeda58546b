"""Rich Console factory and theme for tutorctl output.

Consoles render to a StringIO buffer so formatters can return strings.
Rich disables color codes on its own when there is no terminal (tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TUTOR_THEME = Theme(
    {
        "tutor.ok": "bold green",
        "tutor.error": "bold red",
        "tutor.op": "bold cyan",
        "tutor.key": "dim",
        "tutor.student": "bold blue",
        "tutor.lesson": "bold magenta",
        "tutor.done": "green",
        "tutor.pending": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=TUTOR_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
