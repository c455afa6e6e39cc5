"""Parametrized help tests for all CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from solidctl.cli import cli

# (CLI args, expected keywords in output)
HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--help"], ["account", "shapes", "animals", "vehicles", "users", "orders", "principles"]),
    (["--help"], ["--json", "--quiet", "--verbose", "--log-json", "--no-plugins", "--config"]),
    (["account", "--help"], ["simulate"]),
    (["account", "simulate", "--help"], ["OPENING", "STEPS", "--owner"]),
    (["shapes", "--help"], ["area", "volume", "kinds"]),
    (["shapes", "area", "--help"], ["TOKENS"]),
    (["shapes", "volume", "--help"], ["TOKENS"]),
    (["shapes", "kinds", "--help"], []),
    (["animals", "--help"], ["speak"]),
    (["animals", "speak", "--help"], ["KIND"]),
    (["vehicles", "--help"], ["drive"]),
    (["vehicles", "drive", "--help"], ["KIND:MODEL"]),
    (["users", "--help"], ["register"]),
    (["users", "register", "--help"], ["--user", "NAME,AGE,EMAIL"]),
    (["orders", "--help"], ["place"]),
    (["orders", "place", "--help"], ["CUSTOMER", "AMOUNT", "--processor"]),
    (["principles", "--help"], ["list", "show"]),
    (["principles", "list", "--help"], ["--family"]),
    (["principles", "show", "--help"], ["KEY"]),
]


def _help_id(args_keywords: tuple[list[str], list[str]]) -> str:
    """Generate a readable test ID from args."""
    args, _ = args_keywords
    return "_".join(a for a in args if a != "--help") or "root"


@pytest.mark.usefixtures("_isolated_cwd")
@pytest.mark.parametrize(
    "args,expected_keywords",
    HELP_COMMANDS,
    ids=[_help_id(item) for item in HELP_COMMANDS],
)
def test_command_help(cli_runner: CliRunner, args: list[str], expected_keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    for kw in expected_keywords:
        assert kw in result.output, f"Expected '{kw}' in help output for {args}"
