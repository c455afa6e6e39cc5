"""Command group: make animals speak through one call site."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from solidctl.commands._base import SolidGroup

if TYPE_CHECKING:
    from solidctl.commands._context import AppContext


@click.group(
    cls=SolidGroup,
    examples="""\
  solidctl animals speak dog cat bird
  solidctl animals speak dog:Rex cat:Tom""",
)
def animals() -> None:
    """Polymorphic dispatch over registered animals."""


@animals.command(
    examples="""\
  solidctl animals speak dog cat bird
  solidctl animals speak dog:Rex""",
)
@click.argument("kinds", nargs=-1, required=True)
@click.pass_obj
def speak(app: AppContext, kinds: tuple[str, ...]) -> None:
    """Make each KIND (or KIND:NAME) speak."""
    from solidctl.domain.animals import create_animal
    from solidctl.services.capabilities import chorus

    app.load_plugins()

    def _run() -> dict[str, Any]:
        herd = []
        for token in kinds:
            kind, _, name = token.partition(":")
            herd.append(create_animal(kind, name or None))
        return {"count": len(herd), "lines": chorus(herd)}

    app.emit(app.run("animals_speak", _run, meta=app.plugin_meta()))
