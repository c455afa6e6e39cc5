"""Guarded value holder: a bank account that can never be overdrawn.

The balance is private state; callers *tell* the account to deposit or
withdraw and the account enforces its own invariant.

INVARIANT: ``balance >= 0`` at every point observable by other code.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum

from solidctl.domain.errors import InvalidState
from solidctl.domain.guards import (
    exact_sum,
    require_non_negative_amount,
    require_positive_amount,
)


class TransactionKind(StrEnum):
    """Kinds of committed balance changes."""

    OPEN = "open"
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"


@dataclass(frozen=True)
class Transaction:
    """One committed balance change."""

    kind: TransactionKind
    amount: Decimal
    balance_after: Decimal


class BankAccount:
    """Account whose balance only changes through guarded mutators.

    Construction fails with ``InvalidArgument`` for a negative opening
    balance. ``deposit`` and ``withdraw`` take a strictly positive amount;
    ``withdraw`` fails with ``InvalidState`` when it would overdraw and
    leaves the balance untouched.

    Usage::

        account = BankAccount(100)
        account.deposit(50)   # balance 150
        account.withdraw(200) # InvalidState, balance still 150
    """

    def __init__(self, opening_balance: object = 0, *, owner: str = "") -> None:
        balance = require_non_negative_amount(opening_balance, "opening_balance")
        self._owner = owner
        self._balance = balance
        self._lock = threading.Lock()
        self._history: list[Transaction] = [
            Transaction(TransactionKind.OPEN, balance, balance),
        ]

    def __repr__(self) -> str:
        return f"BankAccount(owner={self._owner!r}, balance={self._balance})"

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def balance(self) -> Decimal:
        """Current balance. Never mutates, never fails."""
        return self._balance

    def get_balance(self) -> Decimal:
        return self._balance

    @property
    def history(self) -> tuple[Transaction, ...]:
        """Committed transactions, oldest first."""
        with self._lock:
            return tuple(self._history)

    def deposit(self, amount: object) -> Decimal:
        """Add *amount* to the balance and return the new balance.

        An amount the balance cannot absorb without rounding is an
        ``InvalidArgument`` and leaves the account untouched.
        """
        value = require_positive_amount(amount)
        with self._lock:
            self._balance = exact_sum(self._balance, value)
            self._history.append(Transaction(TransactionKind.DEPOSIT, value, self._balance))
            return self._balance

    def withdraw(self, amount: object) -> Decimal:
        """Subtract *amount* from the balance and return the new balance.

        The check and the update happen under one lock so concurrent
        withdrawals cannot both pass the check.
        """
        value = require_positive_amount(amount)
        with self._lock:
            if value > self._balance:
                raise InvalidState(
                    "Insufficient funds",
                    balance=str(self._balance),
                    requested=str(value),
                )
            self._balance = exact_sum(self._balance, -value)
            self._history.append(Transaction(TransactionKind.WITHDRAW, value, self._balance))
            return self._balance
