"""Subcommand modules for solidctl.

Provides register_commands() which uses deferred imports to keep
``solidctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups on the root CLI group."""
    from solidctl.commands.account import account
    from solidctl.commands.animals import animals
    from solidctl.commands.orders import orders
    from solidctl.commands.principles import principles
    from solidctl.commands.shapes import shapes
    from solidctl.commands.users import users
    from solidctl.commands.vehicles import vehicles

    cli.add_command(account)
    cli.add_command(shapes)
    cli.add_command(animals)
    cli.add_command(vehicles)
    cli.add_command(users)
    cli.add_command(orders)
    cli.add_command(principles)
