"""Click base classes that add an ``--examples`` flag.

``solidctl <group> --examples`` prints the group's own examples followed by
those of each subcommand; ``solidctl <group> <command> --examples`` prints
only that command's. The flag is eager, so required arguments are not
checked first.
"""

from __future__ import annotations

from typing import Any

import click


def _show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    command = ctx.command
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(getattr(command, "examples", "") or "")
    if isinstance(command, click.Group):
        for name in command.list_commands(ctx):
            sub_examples = getattr(command.get_command(ctx, name), "examples", None)
            if sub_examples:
                click.echo(f"\n{ctx.command_path} {name}:")
                click.echo(sub_examples)
    ctx.exit(0)


def _examples_option() -> click.Option:
    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_show_examples,
        help="Show usage examples and exit.",
    )


class SolidCommand(click.Command):
    """Command that accepts ``examples=`` and exposes it as ``--examples``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option())


class SolidGroup(click.Group):
    """Group counterpart of :class:`SolidCommand`.

    Subcommands are built as ``SolidCommand`` so they take ``examples=``
    without an explicit ``cls=``.
    """

    command_class = SolidCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option())
