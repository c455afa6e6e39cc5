"""OrderService: places orders through an injected payment processor."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from typing import TYPE_CHECKING

from solidctl.domain.guards import require_positive_amount, require_text
from solidctl.domain.orders import Order, Receipt

if TYPE_CHECKING:
    from solidctl.domain.contracts import Logger, PaymentProcessor

logger = logging.getLogger(__name__)


def new_order_id() -> str:
    return f"ORD-{uuid.uuid4().hex[:12]}"


class OrderService:
    """Validates an order, charges it once, and logs it once.

    ``PaymentDeclined`` (or any other processor failure) reaches the caller
    unchanged; nothing is logged for a failed charge.
    """

    def __init__(
        self,
        processor: PaymentProcessor,
        event_log: Logger,
        *,
        currency: str = "USD",
        id_factory: Callable[[], str] = new_order_id,
    ) -> None:
        self._processor = processor
        self._event_log = event_log
        self._currency = currency
        self._id_factory = id_factory

    def place_order(self, customer: object, amount: object) -> Receipt:
        order = Order(
            order_id=self._id_factory(),
            customer=require_text(customer, "customer"),
            amount=require_positive_amount(amount),
            currency=self._currency,
        )
        reference = self._processor.pay(order)
        self._event_log.log(
            "order.placed",
            order_id=order.order_id,
            amount=str(order.amount),
            processor=self._processor.name,
        )
        logger.debug("Placed %s via %s", order.order_id, self._processor.name)
        return Receipt(
            order_id=order.order_id,
            customer=order.customer,
            amount=order.amount,
            currency=order.currency,
            processor=self._processor.name,
            reference=reference,
        )
