"""Locating and reading ``solidctl.toml``.

Lookup order: the ``SOLIDCTL_CONFIG`` environment variable, then the
first ``solidctl.toml`` found walking up from the working directory.
``--config`` bypasses both (see :meth:`SolidSettings.from_cli`).
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import click

from solidctl.config.models import SolidConfig

CONFIG_FILENAME = "solidctl.toml"
CONFIG_ENV_VAR = "SOLIDCTL_CONFIG"


def _ancestors(start: Path) -> Iterator[Path]:
    current = start.resolve()
    yield current
    yield from current.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect for *start* (default: cwd), if any.

    A ``SOLIDCTL_CONFIG`` that names a missing file disables discovery
    rather than falling back to the walk-up.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    for directory in _ancestors(start or Path.cwd()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path*; malformed TOML is reported as a CLI error, not a traceback."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


def load_config(path: Path | None = None, cwd: Path | None = None) -> SolidConfig:
    """Validate the sections of *path* (or the discovered file) against the models.

    With no file at all the code defaults apply.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return SolidConfig()
    return SolidConfig.model_validate(read_toml(path))
