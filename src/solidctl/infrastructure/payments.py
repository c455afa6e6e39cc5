"""Providers for the :class:`~solidctl.domain.contracts.PaymentProcessor` contract.

No provider talks to a real gateway. Each one enforces a per-payment
limit and hands back a deterministic reference so receipts are
reproducible.
"""

from __future__ import annotations

import hashlib
import logging
from decimal import Decimal
from typing import TYPE_CHECKING, ClassVar

from solidctl.domain.errors import InvalidArgument, PaymentDeclined
from solidctl.domain.guards import require_positive_amount

if TYPE_CHECKING:
    from solidctl.domain.contracts import PaymentProcessor
    from solidctl.domain.orders import Order

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = Decimal("10000")


class _LimitedProcessor:
    """Shared limit check; subclasses pick the name and reference prefix."""

    name: ClassVar[str] = ""
    prefix: ClassVar[str] = ""

    def __init__(self, limit: object = DEFAULT_LIMIT) -> None:
        self.limit = require_positive_amount(limit, "limit")

    def pay(self, order: Order) -> str:
        if order.amount > self.limit:
            logger.debug("%s declined %s: over limit %s", self.name, order.order_id, self.limit)
            raise PaymentDeclined(
                f"{self.name} declined {order.amount} {order.currency}: over limit {self.limit}",
                order_id=order.order_id,
                limit=str(self.limit),
            )
        digest = hashlib.sha256(f"{self.name}:{order.order_id}".encode()).hexdigest()[:10]
        return f"{self.prefix}-{digest}"


class CreditCardProcessor(_LimitedProcessor):
    name: ClassVar[str] = "credit_card"
    prefix: ClassVar[str] = "CC"


class PayPalProcessor(_LimitedProcessor):
    name: ClassVar[str] = "paypal"
    prefix: ClassVar[str] = "PP"


PAYMENT_PROCESSORS: dict[str, type[PaymentProcessor]] = {
    CreditCardProcessor.name: CreditCardProcessor,
    PayPalProcessor.name: PayPalProcessor,
}


def register_payment_processor(name: str, processor_cls: type[PaymentProcessor]) -> None:
    """Register a processor class under *name*. Built-in names are reserved.

    The class must be constructible with a single ``limit`` argument and
    provide ``name`` and ``pay(order)``.
    """
    normalized = name.strip().lower()
    if not normalized:
        msg = "Processor name must not be empty"
        raise ValueError(msg)
    if not isinstance(processor_cls, type) or not callable(getattr(processor_cls, "pay", None)):
        msg = f"Processor {normalized!r} must define pay(order)"
        raise TypeError(msg)
    existing = PAYMENT_PROCESSORS.get(normalized)
    if existing is not None and existing is not processor_cls:
        msg = f"Processor {normalized!r} is already registered"
        raise ValueError(msg)
    PAYMENT_PROCESSORS[normalized] = processor_cls


def create_payment_processor(name: str, *, limit: object = DEFAULT_LIMIT) -> PaymentProcessor:
    """Instantiate the processor registered under *name*."""
    normalized = name.strip().lower()
    processor_cls = PAYMENT_PROCESSORS.get(normalized)
    if processor_cls is None:
        known = ", ".join(sorted(PAYMENT_PROCESSORS))
        raise InvalidArgument(
            f"Unknown payment processor {name!r} (known: {known})", processor=name
        )
    return processor_cls(limit)
