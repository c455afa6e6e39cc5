"""Shared pytest fixtures and test helpers for solidctl tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from solidctl.domain.animals import ANIMAL_REGISTRY
from solidctl.domain.shapes import SHAPE_REGISTRY
from solidctl.infrastructure.database.engine import init_database
from solidctl.infrastructure.loggers import MemoryLogger
from solidctl.infrastructure.payments import PAYMENT_PROCESSORS
from solidctl.infrastructure.repositories import InMemoryUserRepository


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def memory_logger() -> MemoryLogger:
    return MemoryLogger()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def db_engine() -> Generator[Engine]:
    """In-memory SQLite engine with all tables created."""
    engine = init_database()
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture(autouse=True)
def _restore_registries() -> Generator[None]:
    """Undo registrations made by plugins or tests."""
    shapes = dict(SHAPE_REGISTRY)
    animals = dict(ANIMAL_REGISTRY)
    processors = dict(PAYMENT_PROCESSORS)
    yield
    SHAPE_REGISTRY.clear()
    SHAPE_REGISTRY.update(shapes)
    ANIMAL_REGISTRY.clear()
    ANIMAL_REGISTRY.update(animals)
    PAYMENT_PROCESSORS.clear()
    PAYMENT_PROCESSORS.update(processors)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test (the CLI reconfigures it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    solid = logging.getLogger("solidctl")
    solid_level = solid.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    solid.setLevel(solid_level)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no solidctl.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("SOLIDCTL_"):
            monkeypatch.delenv(key, raising=False)
