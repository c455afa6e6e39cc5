"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, solidctl.toml only contains
overrides. An empty file is a valid configuration.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field


class AccountConfig(BaseModel):
    """[account] section."""

    model_config = {"frozen": True}

    currency: str = "USD"
    owner: str = "demo"


class PaymentsConfig(BaseModel):
    """[payments] section."""

    model_config = {"frozen": True}

    processor: str = "credit_card"
    limit: Decimal = Field(default=Decimal("10000"), gt=0)


class UsersConfig(BaseModel):
    """[users] section."""

    model_config = {"frozen": True}

    repository: Literal["memory", "sql"] = "memory"
    database_url: str = "sqlite://"


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: str | None = None


class SolidConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    account: AccountConfig = Field(default_factory=AccountConfig)
    payments: PaymentsConfig = Field(default_factory=PaymentsConfig)
    users: UsersConfig = Field(default_factory=UsersConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
