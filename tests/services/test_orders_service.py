"""Tests for OrderService orchestration."""

from decimal import Decimal

import pytest

from solidctl.domain.errors import InvalidArgument, PaymentDeclined
from solidctl.domain.orders import Order
from solidctl.infrastructure.loggers import MemoryLogger
from solidctl.infrastructure.payments import CreditCardProcessor, PayPalProcessor
from solidctl.services.orders import OrderService, new_order_id


class StubProcessor:
    name = "stub"

    def __init__(self, error: Exception | None = None) -> None:
        self.orders: list[Order] = []
        self._error = error

    def pay(self, order: Order) -> str:
        self.orders.append(order)
        if self._error is not None:
            raise self._error
        return "STUB-1"


def _ids() -> str:
    return "ORD-fixed"


class TestPlaceOrder:
    def test_pays_once_and_logs_once(self, memory_logger: MemoryLogger) -> None:
        processor = StubProcessor()
        receipt = OrderService(processor, memory_logger, id_factory=_ids).place_order(
            "ada", "19.99"
        )
        assert len(processor.orders) == 1
        assert processor.orders[0].amount == Decimal("19.99")
        assert receipt.reference == "STUB-1"
        assert receipt.processor == "stub"
        assert receipt.order_id == "ORD-fixed"
        assert memory_logger.messages == ["order.placed"]

    def test_processor_failure_propagates_unchanged(self, memory_logger: MemoryLogger) -> None:
        declined = PaymentDeclined("card refused")
        service = OrderService(StubProcessor(error=declined), memory_logger)
        with pytest.raises(PaymentDeclined) as exc_info:
            service.place_order("ada", 10)
        assert exc_info.value is declined
        assert memory_logger.records == []

    @pytest.mark.parametrize(("customer", "amount"), [("", 10), ("ada", 0), ("ada", "x")])
    def test_invalid_order_never_reaches_processor(
        self, memory_logger: MemoryLogger, customer: str, amount: object
    ) -> None:
        processor = StubProcessor()
        with pytest.raises(InvalidArgument):
            OrderService(processor, memory_logger).place_order(customer, amount)
        assert processor.orders == []

    def test_processors_are_interchangeable(self, memory_logger: MemoryLogger) -> None:
        for processor in (CreditCardProcessor(), PayPalProcessor()):
            receipt = OrderService(processor, memory_logger).place_order("ada", 5)
            assert receipt.processor == processor.name

    def test_currency_from_service(self, memory_logger: MemoryLogger) -> None:
        receipt = OrderService(StubProcessor(), memory_logger, currency="EUR").place_order(
            "ada", 5
        )
        assert receipt.currency == "EUR"


def test_new_order_id_format() -> None:
    order_id = new_order_id()
    assert order_id.startswith("ORD-")
    assert len(order_id) == 16
    assert new_order_id() != order_id
