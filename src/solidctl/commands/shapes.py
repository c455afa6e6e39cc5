"""Command group: area and volume through the shape capabilities."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from solidctl.commands._base import SolidGroup
from solidctl.domain.errors import InvalidArgument

if TYPE_CHECKING:
    from solidctl.commands._context import AppContext


@click.group(
    cls=SolidGroup,
    examples="""\
  solidctl shapes area circle:2 square:3 rectangle:4x5
  solidctl shapes volume cube:2 sphere:1
  solidctl shapes kinds""",
)
def shapes() -> None:
    """Compute areas and volumes without branching on shape type."""


@shapes.command(
    examples="""\
  solidctl shapes area circle:2
  solidctl shapes area square:3 rectangle:4x5
  solidctl -v shapes area cube:2""",
)
@click.argument("tokens", nargs=-1, required=True)
@click.pass_obj
def area(app: AppContext, tokens: tuple[str, ...]) -> None:
    """Report the area of each KIND:DIMS shape and the total."""
    from solidctl.domain.shapes import parse_shape
    from solidctl.services.capabilities import area_report, total_area
    from solidctl.services.contracts import AreaData, dump_validated

    app.load_plugins()

    def _run() -> dict[str, Any]:
        parsed = [parse_shape(t) for t in tokens]
        return dump_validated(
            AreaData,
            {"count": len(parsed), "total_area": total_area(parsed), "items": area_report(parsed)},
        )

    app.emit(app.run("shapes_area", _run, meta=app.plugin_meta()))


@shapes.command(
    examples="""\
  solidctl shapes volume cube:2
  solidctl shapes volume cube:2 sphere:1""",
)
@click.argument("tokens", nargs=-1, required=True)
@click.pass_obj
def volume(app: AppContext, tokens: tuple[str, ...]) -> None:
    """Report the total volume of KIND:DIMS solids.

    Flat shapes are rejected: they do not implement the volume capability.
    """
    from solidctl.domain.shapes import VolumeMeasurable, parse_shape
    from solidctl.services.capabilities import total_volume
    from solidctl.services.contracts import VolumeData, dump_validated

    app.load_plugins()

    def _run() -> dict[str, Any]:
        solids: list[VolumeMeasurable] = []
        for token in tokens:
            shape = parse_shape(token)
            if not isinstance(shape, VolumeMeasurable):
                raise InvalidArgument(f"{token!r} has no volume", shape=token)
            solids.append(shape)
        return dump_validated(
            VolumeData, {"count": len(solids), "total_volume": total_volume(solids)}
        )

    app.emit(app.run("shapes_volume", _run, meta=app.plugin_meta()))


@shapes.command(
    examples="""\
  solidctl shapes kinds
  solidctl --json shapes kinds""",
)
@click.pass_obj
def kinds(app: AppContext) -> None:
    """List registered shape kinds and their dimensions."""
    from solidctl.domain.shapes import SHAPE_REGISTRY, VolumeMeasurable

    app.load_plugins()

    def _run() -> dict[str, Any]:
        items = [
            {
                "kind": name,
                "dimensions": "x".join(cls.dimensions),
                "solid": issubclass(cls, VolumeMeasurable),
            }
            for name, cls in sorted(SHAPE_REGISTRY.items())
        ]
        return {"count": len(items), "items": items}

    app.emit(app.run("shape_kinds", _run, meta=app.plugin_meta()))
