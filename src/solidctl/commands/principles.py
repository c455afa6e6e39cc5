"""Command group: browse the design-principles catalogue."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from solidctl.commands._base import SolidGroup

if TYPE_CHECKING:
    from solidctl.commands._context import AppContext


@click.group(
    cls=SolidGroup,
    examples="""\
  solidctl principles list
  solidctl principles list --family solid
  solidctl principles show lsp""",
)
def principles() -> None:
    """The OOP and SOLID principles this package demonstrates."""


@principles.command(
    name="list",
    examples="""\
  solidctl principles list
  solidctl principles list --family oop""",
)
@click.option("--family", type=click.Choice(["oop", "solid"]), default=None)
@click.pass_obj
def list_cmd(app: AppContext, family: str | None) -> None:
    """List principles, optionally filtered by family."""
    from solidctl.domain.principles import list_principles
    from solidctl.services.contracts import PrincipleListData, dump_validated, principle_item

    def _run() -> dict[str, Any]:
        items = [principle_item(p) for p in list_principles(family)]
        return dump_validated(PrincipleListData, {"count": len(items), "items": items})

    app.emit(app.run("principles_list", _run))


@principles.command(
    examples="""\
  solidctl principles show srp
  solidctl -v principles show dip""",
)
@click.argument("key")
@click.pass_obj
def show(app: AppContext, key: str) -> None:
    """Show the flaw, the remedy, and the module for one principle."""
    from solidctl.domain.principles import get_principle
    from solidctl.services.contracts import principle_item

    app.emit(app.run("principle_show", lambda: principle_item(get_principle(key), full=True)))
