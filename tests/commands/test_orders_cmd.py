"""Tests for the orders command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from solidctl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestPlace:
    def test_default_processor(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "orders", "place", "alice", "25.00"])
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["processor"] == "credit_card"
        assert data["reference"].startswith("CC-")
        assert data["amount"] == "25.00"
        assert data["currency"] == "USD"
        assert data["order_id"].startswith("ORD-")

    def test_processor_flag(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "orders", "place", "bob", "99.90", "--processor", "paypal"]
        )
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["reference"].startswith("PP-")

    def test_processor_from_env(
        self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SOLIDCTL_PAYMENTS__PROCESSOR", "paypal")
        result = cli_runner.invoke(cli, ["--json", "orders", "place", "bob", "5"])
        assert json.loads(result.output)["data"]["processor"] == "paypal"

    def test_declined_over_limit(self, cli_runner: CliRunner) -> None:
        with open("solidctl.toml", "w", encoding="utf-8") as fh:
            fh.write("[payments]\nlimit = 50\n")
        result = cli_runner.invoke(cli, ["--json", "orders", "place", "alice", "50.01"])
        assert result.exit_code == 1
        error = json.loads(result.output)["error"]
        assert error["code"] == "PAYMENT_DECLINED"
        assert error["detail"]["limit"] == "50"

    def test_unknown_processor(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "orders", "place", "alice", "5", "--processor", "bitcoin"]
        )
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "INVALID_ARGUMENT"

    def test_invalid_amount(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["orders", "place", "alice", "0"])
        assert result.exit_code == 1
        assert "amount must be positive" in result.output

    def test_json_meta_carries_limit(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "orders", "place", "alice", "5"])
        envelope = json.loads(result.output)
        assert envelope["meta"] == {"limit": "10000"}
        assert envelope["warnings"] == []

    def test_verbose_shows_meta(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "orders", "place", "alice", "5"])
        assert result.exit_code == 0
        assert "meta:" in result.output
        assert "limit: 10000" in result.output

    def test_meta_hidden_without_verbose(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["orders", "place", "alice", "5"])
        assert "meta:" not in result.output
