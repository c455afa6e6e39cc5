"""Tests for database engine setup and initialization."""

from pathlib import Path

from sqlalchemy import insert, inspect, select, text
from sqlalchemy.engine import Engine

from solidctl.infrastructure.database.engine import create_db_engine, init_database
from solidctl.infrastructure.database.schema import users


class TestCreateDbEngine:
    def test_foreign_keys_enabled(self) -> None:
        engine = create_db_engine()
        with engine.connect() as conn:
            assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1

    def test_in_memory_connections_share_state(self) -> None:
        engine = init_database()
        with engine.begin() as conn:
            conn.execute(insert(users).values(email="a@example.com", name="A", age=30))
        with engine.connect() as conn:
            assert conn.execute(select(users.c.email)).scalars().all() == ["a@example.com"]


class TestInitDatabase:
    def test_creates_users_table(self, db_engine: Engine) -> None:
        assert "users" in inspect(db_engine).get_table_names()

    def test_file_database(self, tmp_path: Path) -> None:
        url = f"sqlite:///{tmp_path / 'users.db'}"
        engine = init_database(url)
        engine.dispose()
        assert (tmp_path / "users.db").exists()

    def test_idempotent(self, tmp_path: Path) -> None:
        url = f"sqlite:///{tmp_path / 'users.db'}"
        init_database(url).dispose()
        engine = init_database(url)
        assert "users" in inspect(engine).get_table_names()
        engine.dispose()
