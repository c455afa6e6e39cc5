"""Command group: order placement through an injected payment processor."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from solidctl.commands._base import SolidGroup

if TYPE_CHECKING:
    from solidctl.commands._context import AppContext


@click.group(
    cls=SolidGroup,
    examples="""\
  solidctl orders place alice 25.00
  solidctl orders place bob 99.90 --processor paypal""",
)
def orders() -> None:
    """Place orders without knowing the concrete payment provider."""


@orders.command(
    examples="""\
  solidctl orders place alice 25.00
  solidctl --json orders place bob 99.90 --processor paypal""",
)
@click.argument("customer")
@click.argument("amount")
@click.option(
    "--processor",
    default=None,
    help="Payment processor name (default from [payments] processor).",
)
@click.pass_obj
def place(app: AppContext, customer: str, amount: str, processor: str | None) -> None:
    """Charge CUSTOMER for AMOUNT and print the receipt."""
    from solidctl.services.contracts import receipt_payload

    def _run() -> dict[str, Any]:
        receipt = app.order_service(processor).place_order(customer, amount)
        return receipt_payload(receipt)

    meta = {"limit": str(app.settings.payments.limit)}
    app.emit(app.run("place_order", _run, meta=meta))
