"""Rich Console factory and theme for imperium output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

IMPERIUM_THEME = Theme(
    {
        "imp.ok": "bold green",
        "imp.error": "bold red",
        "imp.warning": "bold yellow",
        "imp.op": "bold cyan",
        "imp.key": "dim",
        "imp.code": "bold blue",
        "imp.gregorian": "magenta",
        "imp.element.millennium": "bold",
        "imp.element.year": "green",
        "imp.element.year_fraction": "cyan",
        "imp.element.check_number": "yellow",
    }
)

_ELEMENT_STYLES: dict[str, str] = {
    "millennium": "imp.element.millennium",
    "year": "imp.element.year",
    "year_fraction": "imp.element.year_fraction",
    "check_number": "imp.element.check_number",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=IMPERIUM_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_element(kind: str) -> str:
    """Return the Rich style name for a date element kind."""
    return _ELEMENT_STYLES.get(kind, "")
