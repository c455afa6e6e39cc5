"""Dependency contracts held by orchestrators.

Orchestrators type-hint against these protocols, never against concrete
providers. Providers are supplied once at construction.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from solidctl.domain.orders import Order
    from solidctl.domain.users import User


@runtime_checkable
class Logger(Protocol):
    """Records one message per business event."""

    def log(self, message: str, **fields: object) -> None: ...


@runtime_checkable
class PaymentProcessor(Protocol):
    """Charges an order and returns a provider reference.

    Raises ``PaymentDeclined`` when the charge is refused.
    """

    name: str

    def pay(self, order: Order) -> str: ...


@runtime_checkable
class UserRepository(Protocol):
    """Owns the collection of registered users."""

    def add(self, user: User) -> None: ...

    def get(self, email: str) -> User | None: ...

    def all(self) -> Iterator[User]: ...
