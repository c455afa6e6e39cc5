"""solidctl command line: global flags, settings, and command registration."""

from __future__ import annotations

from typing import Any

import click

from solidctl import __version__
from solidctl.commands import register_commands
from solidctl.commands._context import AppContext
from solidctl.config.settings import SolidSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="solidctl")
@click.option("--json", "json_output", is_flag=True, help="Print the result envelope as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="One status line per command.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logs and extra result detail.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option("--no-plugins", is_flag=True, help="Skip plugin discovery for this run.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Read this TOML file instead of searching for solidctl.toml.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, no_plugins: bool, **flags: bool) -> None:
    """solidctl: run the object-oriented and SOLID design examples."""
    overrides: dict[str, Any] = dict(flags)
    if no_plugins:
        overrides["plugins"] = {"enabled": False}
    ctx.obj = AppContext(SolidSettings.from_cli(config_path=config_path, **overrides))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
