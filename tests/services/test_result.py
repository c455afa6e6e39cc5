"""Tests for ServiceResult and the success/failure helpers."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from solidctl.domain.errors import InvalidState, PaymentDeclined
from solidctl.services.result import ServiceError, ServiceResult, failure, success


class TestServiceResult:
    def test_success(self) -> None:
        result = success("place_order", {"order_id": "ORD-1"}, warnings=["slow"])
        assert result.ok
        assert result.data == {"order_id": "ORD-1"}
        assert result.warnings == ["slow"]
        assert result.error is None

    def test_frozen(self) -> None:
        result = success("op", {})
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]

    def test_json_round_trip_shape(self) -> None:
        result = ServiceResult(
            ok=False, op="op", error=ServiceError(code="X", message="boom")
        )
        dumped = result.model_dump()
        assert dumped["error"] == {"code": "X", "message": "boom", "detail": {}}


class TestFailure:
    def test_keeps_code_message_detail(self) -> None:
        exc = InvalidState("Insufficient funds", balance=Decimal("150"), requested="200")
        result = failure("account_simulate", exc)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_STATE"
        assert result.error.message == "Insufficient funds"
        assert result.error.detail == {"balance": "150", "requested": "200"}

    def test_partial_data(self) -> None:
        result = failure("place_order", PaymentDeclined("no"), data={"balance": "1"})
        assert result.data == {"balance": "1"}
        assert result.error is not None
        assert result.error.code == "PAYMENT_DECLINED"

    def test_plain_values_pass_through(self) -> None:
        result = failure("op", InvalidState("x", n=1, flag=True, empty=None))
        assert result.error is not None
        assert result.error.detail == {"n": 1, "flag": True, "empty": None}
