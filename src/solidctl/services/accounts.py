"""AccountService: logs every committed balance change.

The account enforces its own invariant; this service only records what
happened. A rejected mutation is never logged and always re-raised.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from solidctl.domain.account import BankAccount

if TYPE_CHECKING:
    from solidctl.domain.contracts import Logger


class AccountService:
    def __init__(self, event_log: Logger) -> None:
        self._event_log = event_log

    def open(self, opening_balance: object = 0, *, owner: str = "") -> BankAccount:
        account = BankAccount(opening_balance, owner=owner)
        self._event_log.log("account.opened", owner=owner, balance=str(account.balance))
        return account

    def deposit(self, account: BankAccount, amount: object) -> Decimal:
        balance = account.deposit(amount)
        self._event_log.log("account.deposit", owner=account.owner, balance=str(balance))
        return balance

    def withdraw(self, account: BankAccount, amount: object) -> Decimal:
        balance = account.withdraw(amount)
        self._event_log.log("account.withdraw", owner=account.owner, balance=str(balance))
        return balance
