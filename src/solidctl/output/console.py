"""Rich console and theme for human-readable output.

Renderers print into a StringIO-backed console and hand the text back,
so ``format_result()`` stays a pure ``ServiceResult -> str`` function.
Rich drops ANSI codes by itself when the target is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SOLID_THEME = Theme(
    {
        "solid.ok": "bold green",
        "solid.error": "bold red",
        "solid.warning": "bold yellow",
        "solid.op": "bold cyan",
        "solid.key": "dim",
        "solid.id": "bold blue",
        "solid.money": "magenta",
        # principle families
        "solid.family.oop": "green",
        "solid.family.solid": "blue",
        # error codes
        "solid.code.invalid_argument": "yellow",
        "solid.code.invalid_state": "red",
        "solid.code.payment_declined": "magenta",
    }
)

DEFAULT_WIDTH = 120


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """A themed console writing to an in-memory buffer.

    *width* defaults to :data:`DEFAULT_WIDTH` so table layout does not
    depend on the caller's terminal.
    """
    return Console(
        file=StringIO(),
        theme=SOLID_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    """Everything printed to a console made by :func:`create_console`."""
    buffer = console.file
    if not isinstance(buffer, StringIO):
        msg = "console was not created by create_console()"
        raise TypeError(msg)
    return buffer.getvalue()


def _theme_style(prefix: str, name: str) -> str:
    style = f"{prefix}.{name.lower()}"
    return style if style in SOLID_THEME.styles else ""


def style_for_family(family: str) -> str:
    """Theme style for a principle family, or ``""`` if it has none."""
    return _theme_style("solid.family", family)


def style_for_code(code: str) -> str:
    """Theme style for a ServiceError code such as ``INVALID_STATE``."""
    return _theme_style("solid.code", code)
