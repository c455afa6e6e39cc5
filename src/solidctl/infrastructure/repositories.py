"""Providers for the :class:`~solidctl.domain.contracts.UserRepository` contract.

Each repository is an ordinary object owned by whoever constructs it.
There is no module-level user collection.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from sqlalchemy import insert, select

from solidctl.domain.errors import InvalidState
from solidctl.domain.users import User
from solidctl.infrastructure.database.schema import users

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


class InMemoryUserRepository:
    """Users keyed by email, in insertion order."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def __len__(self) -> int:
        return len(self._users)

    def add(self, user: User) -> None:
        if user.email in self._users:
            raise InvalidState(f"User {user.email!r} already exists", email=user.email)
        self._users[user.email] = user

    def get(self, email: str) -> User | None:
        return self._users.get(email.strip().lower())

    def all(self) -> Iterator[User]:
        return iter(list(self._users.values()))


class SqlUserRepository:
    """Users stored in the ``users`` table through SQLAlchemy Core."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def add(self, user: User) -> None:
        with self._engine.begin() as conn:
            existing = conn.execute(
                select(users.c.email).where(users.c.email == user.email)
            ).first()
            if existing is not None:
                raise InvalidState(f"User {user.email!r} already exists", email=user.email)
            conn.execute(insert(users).values(email=user.email, name=user.name, age=user.age))

    def get(self, email: str) -> User | None:
        with self._engine.connect() as conn:
            row = conn.execute(
                select(users).where(users.c.email == email.strip().lower())
            ).first()
        if row is None:
            return None
        return User(name=row.name, age=row.age, email=row.email)

    def all(self) -> Iterator[User]:
        with self._engine.connect() as conn:
            rows = conn.execute(select(users).order_by(users.c.id)).all()
        return iter([User(name=r.name, age=r.age, email=r.email) for r in rows])
