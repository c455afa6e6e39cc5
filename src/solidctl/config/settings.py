"""``SolidSettings``: the one settings object every command reads.

Values come from, in falling priority: keyword arguments (the CLI flags),
``SOLIDCTL_*`` environment variables with ``__`` between nested names,
the ``solidctl.toml`` in effect, and the defaults on the section models.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from solidctl.config.discovery import find_config, read_toml
from solidctl.config.models import AccountConfig, PaymentsConfig, PluginsConfig, UsersConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by one parsed TOML file (or nothing)."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._sections: dict[str, Any] = (
            read_toml(toml_path) if toml_path and toml_path.is_file() else {}
        )

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._sections.get(field_name), field_name, field_name in self._sections

    def __call__(self) -> dict[str, Any]:
        return self._sections


# TOML path for the settings object currently being built on this thread.
_tls = threading.local()


@contextmanager
def _toml_source(path: Path | None) -> Iterator[None]:
    _tls.toml_path = path
    try:
        yield
    finally:
        _tls.toml_path = None


def _resolve_toml(config_path: str | None, start: Path | None) -> Path | None:
    """An explicit --config wins; a missing explicit file means no TOML at all."""
    if config_path:
        explicit = Path(config_path)
        return explicit if explicit.is_file() else None
    return find_config(start)


class SolidSettings(BaseSettings):
    """Frozen settings held by ``AppContext`` for the length of one command."""

    model_config = {
        "frozen": True,
        "env_prefix": "SOLIDCTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    account: AccountConfig = Field(default_factory=AccountConfig)
    payments: PaymentsConfig = Field(default_factory=PaymentsConfig)
    users: UsersConfig = Field(default_factory=UsersConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # dotenv and secrets directories are not read.
        toml = TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None))
        return init_settings, env_settings, toml

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> SolidSettings:
        """Settings for one invocation, with *cli_flags* overriding every other source.

        The TOML file is *config_path* when given, otherwise the one
        :func:`find_config` reports for *start*.
        """
        toml_path = _resolve_toml(config_path, start)
        with _toml_source(toml_path):
            return cls(config_path=toml_path, **cli_flags)
