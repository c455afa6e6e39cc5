"""Tests for payment processors and their registry."""

from decimal import Decimal

import pytest

from solidctl.domain.contracts import PaymentProcessor
from solidctl.domain.errors import InvalidArgument, PaymentDeclined
from solidctl.domain.orders import Order
from solidctl.infrastructure.payments import (
    PAYMENT_PROCESSORS,
    CreditCardProcessor,
    PayPalProcessor,
    create_payment_processor,
    register_payment_processor,
)


def _order(amount: str = "50", order_id: str = "ORD-1") -> Order:
    return Order(order_id=order_id, customer="ada", amount=Decimal(amount))


class BankTransferProcessor:
    name = "bank_transfer"

    def __init__(self, limit: object) -> None:
        self.limit = limit

    def pay(self, order: Order) -> str:
        return f"BT-{order.order_id}"


class TestProcessors:
    @pytest.mark.parametrize(
        ("cls", "prefix"), [(CreditCardProcessor, "CC-"), (PayPalProcessor, "PP-")]
    )
    def test_reference_prefix(self, cls: type, prefix: str) -> None:
        ref = cls().pay(_order())
        assert ref.startswith(prefix)
        assert len(ref) == len(prefix) + 10

    def test_reference_is_deterministic(self) -> None:
        processor = CreditCardProcessor()
        assert processor.pay(_order()) == processor.pay(_order())
        assert processor.pay(_order()) != processor.pay(_order(order_id="ORD-2"))

    def test_satisfies_contract(self) -> None:
        assert isinstance(PayPalProcessor(), PaymentProcessor)

    def test_at_limit_accepted(self) -> None:
        assert CreditCardProcessor(limit="100").pay(_order("100"))

    def test_over_limit_declined(self) -> None:
        with pytest.raises(PaymentDeclined) as exc_info:
            CreditCardProcessor(limit=100).pay(_order("100.01"))
        assert exc_info.value.code == "PAYMENT_DECLINED"
        assert exc_info.value.detail == {"order_id": "ORD-1", "limit": "100"}

    @pytest.mark.parametrize("limit", [0, -5, "abc"])
    def test_bad_limit(self, limit: object) -> None:
        with pytest.raises(InvalidArgument):
            CreditCardProcessor(limit=limit)


class TestRegistry:
    def test_create_by_name(self) -> None:
        processor = create_payment_processor(" PayPal ", limit=Decimal("5"))
        assert isinstance(processor, PayPalProcessor)
        assert processor.limit == Decimal("5")

    def test_unknown_name(self) -> None:
        with pytest.raises(InvalidArgument, match="Unknown payment processor"):
            create_payment_processor("bitcoin")

    def test_register_new_processor(self) -> None:
        register_payment_processor("bank_transfer", BankTransferProcessor)
        processor = create_payment_processor("bank_transfer")
        assert processor.pay(_order()) == "BT-ORD-1"

    def test_cannot_replace_builtin(self) -> None:
        with pytest.raises(ValueError):
            register_payment_processor("paypal", BankTransferProcessor)
        assert PAYMENT_PROCESSORS["paypal"] is PayPalProcessor

    def test_class_without_pay_rejected(self) -> None:
        with pytest.raises(TypeError):
            register_payment_processor("broken", dict)

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValueError):
            register_payment_processor("", BankTransferProcessor)
