"""Command group: start and stop vehicles through the Vehicle capability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from solidctl.commands._base import SolidGroup

if TYPE_CHECKING:
    from solidctl.commands._context import AppContext


@click.group(
    cls=SolidGroup,
    examples="""\
  solidctl vehicles drive "car:Model 3" motorcycle:Ducati bicycle:Brompton""",
)
def vehicles() -> None:
    """Composition over inheritance for engines."""


@vehicles.command(
    examples="""\
  solidctl vehicles drive "car:Model 3"
  solidctl vehicles drive bicycle:Brompton motorcycle:Ducati""",
)
@click.argument("tokens", nargs=-1, required=True)
@click.pass_obj
def drive(app: AppContext, tokens: tuple[str, ...]) -> None:
    """Start then stop each KIND:MODEL vehicle."""
    from solidctl.domain.vehicles import parse_vehicle
    from solidctl.services.capabilities import drive_all

    def _run() -> dict[str, Any]:
        fleet = [parse_vehicle(t) for t in tokens]
        return {"count": len(fleet), "lines": drive_all(fleet)}

    app.emit(app.run("vehicles_drive", _run))
