"""Theme and buffered Console used by the renderers.

Renderers print into an in-memory Console and return the text, so
``format_result`` stays a pure string function. Color is dropped
automatically when the output is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

EDU_THEME = Theme(
    {
        "edu.ok": "bold green",
        "edu.error": "bold red",
        "edu.warning": "bold yellow",
        "edu.op": "bold cyan",
        "edu.key": "dim",
        "edu.id": "bold blue",
        "edu.name": "bold",
        "edu.type.unit": "green",
        "edu.type.result": "magenta",
    }
)

_TYPE_STYLES: dict[str, str] = {
    "Unit": "edu.type.unit",
    "Result": "edu.type.result",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=EDU_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Return everything printed to a console from :func:`create_console`."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_type(node_type: str) -> str:
    """Return the Rich style name for a node type."""
    return _TYPE_STYLES.get(node_type, "")
