"""Order and receipt value objects."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Order:
    """A validated request to charge *customer* for *amount*."""

    order_id: str
    customer: str
    amount: Decimal
    currency: str = "USD"


@dataclass(frozen=True)
class Receipt:
    """Proof that a payment provider accepted an order."""

    order_id: str
    customer: str
    amount: Decimal
    currency: str
    processor: str
    reference: str
