"""Tests for output mode selection."""

import json

from solidctl.domain.errors import InvalidArgument
from solidctl.output.formatters import OutputSettings, format_result
from solidctl.services.result import failure, success


class TestFormatResult:
    def test_json_wins(self) -> None:
        result = success("place_order", {"order_id": "ORD-1"})
        out = format_result(result, settings=OutputSettings(json_output=True, quiet=True))
        parsed = json.loads(out)
        assert parsed["ok"] is True
        assert parsed["op"] == "place_order"
        assert parsed["data"] == {"order_id": "ORD-1"}

    def test_quiet_success(self) -> None:
        out = format_result(success("shapes_area", {}), settings=OutputSettings(quiet=True))
        assert out == "OK: shapes_area"

    def test_quiet_failure(self) -> None:
        result = failure("shapes_area", InvalidArgument("radius must be positive"))
        out = format_result(result, settings=OutputSettings(quiet=True))
        assert out == "ERROR: shapes_area — radius must be positive"

    def test_json_failure_carries_code(self) -> None:
        result = failure("users_register", InvalidArgument("bad age", field="age"))
        parsed = json.loads(format_result(result, settings=OutputSettings(json_output=True)))
        assert parsed["ok"] is False
        assert parsed["error"]["code"] == "INVALID_ARGUMENT"
        assert parsed["error"]["detail"] == {"field": "age"}

    def test_default_is_rich(self) -> None:
        out = format_result(success("anything", {"x": 1}))
        assert "OK" in out
        assert "x: 1" in out
