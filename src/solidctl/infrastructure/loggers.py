"""Providers for the :class:`~solidctl.domain.contracts.Logger` contract."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import structlog


class StructlogLogger:
    """Writes each business event through structlog.

    Output routing and format are set once by
    :func:`solidctl.config.logging.configure_logging`.
    """

    def __init__(self, name: str = "solidctl.events") -> None:
        self._log = structlog.get_logger(name)

    def log(self, message: str, **fields: object) -> None:
        self._log.info(message, **fields)


@dataclass(frozen=True)
class LogRecord:
    message: str
    fields: dict[str, Any] = field(default_factory=dict)


class MemoryLogger:
    """Keeps every message in memory, oldest first."""

    def __init__(self) -> None:
        self.records: list[LogRecord] = []

    def log(self, message: str, **fields: object) -> None:
        self.records.append(LogRecord(message, dict(fields)))

    @property
    def messages(self) -> list[str]:
        return [r.message for r in self.records]
