"""Command group: guarded bank-account operations."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from solidctl.commands._base import SolidGroup
from solidctl.domain.errors import InvalidArgument, SolidError
from solidctl.services.result import failure

if TYPE_CHECKING:
    from solidctl.commands._context import AppContext
    from solidctl.domain.account import BankAccount


@click.group(
    cls=SolidGroup,
    examples="""\
  solidctl account simulate 100 deposit:50 withdraw:30
  solidctl account simulate 100 deposit:50 withdraw:200
  solidctl --json account simulate 0 deposit:12.50""",
)
def account() -> None:
    """Open an account and apply guarded deposits and withdrawals."""


@account.command(
    examples="""\
  solidctl account simulate 100 deposit:50 withdraw:30
  solidctl account simulate 0 --owner alice deposit:10""",
)
@click.argument("opening")
@click.argument("steps", nargs=-1)
@click.option("--owner", default=None, help="Account owner (default from [account] owner).")
@click.pass_obj
def simulate(app: AppContext, opening: str, steps: tuple[str, ...], owner: str | None) -> None:
    """Open with OPENING balance, then apply each deposit:N / withdraw:N step in order.

    Stops at the first rejected step; the reported balance is the balance
    the account held when it stopped.
    """
    from solidctl.services.contracts import account_payload

    svc = app.account_service()
    actions = {"deposit": svc.deposit, "withdraw": svc.withdraw}
    acct: BankAccount | None = None
    try:
        acct = svc.open(opening, owner=owner or app.settings.account.owner)
        for step in steps:
            kind, _, amount = step.partition(":")
            action = actions.get(kind.strip().lower())
            if action is None:
                raise InvalidArgument(
                    f"Unknown step {step!r}; use deposit:N or withdraw:N", step=step
                )
            action(acct, amount)
    except SolidError as exc:
        data = account_payload(acct) if acct is not None else None
        result = failure("account_simulate", exc, data=data)
    else:
        meta = {"currency": app.settings.account.currency, "steps": len(steps)}
        result = app.succeed("account_simulate", account_payload(acct), meta=meta)
    app.emit(result)
