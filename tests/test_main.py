"""Tests for the command-line entry point."""

import json

import pytest

from grid_estimator.main import EXIT_INVALID_SETTINGS, main

EXAMPLE_ARGS = [
    "--balance", "1000",
    "--buy-fee", "0.1",
    "--sell-fee", "0.1",
    "--price", "10000",
    "--min-trade-amount", "0.001",
    "--coverage", "50",
    "--buy-down-interval", "100",
    "--profit-interval", "50",
]


@pytest.mark.usefixtures("restore_root_logger")
class TestMain:
    def test_prints_estimate(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(EXAMPLE_ARGS) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["buy_quantity"] == "0.00266400"
        assert payload["settings"]["reserve"] == "0"
        assert len(payload["free_fall_trades"]) == 49
        assert payload["results_errors"] == []

    def test_trades_only(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([*EXAMPLE_ARGS, "--trades-only"]) == 0
        trades = json.loads(capsys.readouterr().out)
        assert trades[0]["sell_price"] == "10050.00000000"

    def test_invalid_settings(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([*EXAMPLE_ARGS, "--reserve", "5000"]) == EXIT_INVALID_SETTINGS
        payload = json.loads(capsys.readouterr().out)
        assert payload["errors"] == [
            {
                "field": "quote_currency_balance",
                "kind": "relative_constraint_violation",
                "message": "must be more than reserve",
            }
        ]
