"""Rich Console factory and theme for finpatterns output.

Consoles render into a StringIO buffer so renderers return plain strings.
Rich drops colour codes on its own when the target is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

FIN_THEME = Theme(
    {
        "fin.ok": "bold green",
        "fin.error": "bold red",
        "fin.warning": "bold yellow",
        "fin.op": "bold cyan",
        "fin.key": "dim",
        "fin.name": "bold blue",
        "fin.money": "green",
        "fin.section": "bold magenta",
        "fin.theme.dark": "white on grey11",
        "fin.theme.light": "black on grey93",
        "fin.theme.high-contrast": "bold yellow on black",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console writing to an in-memory buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Fixed render width (defaults to 100).
    """
    return Console(
        file=StringIO(),
        theme=FIN_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Return everything written to a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_theme(theme: str) -> str:
    """Rich style name for a dashboard theme, or "" if unthemed."""
    style = f"fin.theme.{theme}"
    return style if style in FIN_THEME.styles else ""
