"""Shared test fixtures for the grid settings estimator."""

import logging
from decimal import Decimal

import pytest

from grid_estimator.config import AdvisorySettings, AppSettings, SimulationSettings
from grid_estimator.models import Settings


@pytest.fixture
def app_settings() -> AppSettings:
    """Return AppSettings with test defaults."""
    return AppSettings(
        log_level="DEBUG",
        simulation=SimulationSettings(max_trades=10_000),
        advisory=AdvisorySettings(exchange_name="GDAX"),
    )


@pytest.fixture
def example_settings() -> Settings:
    """BTC-like market: 1000 quote balance, 0.1% fees, price 10,000, 50% coverage."""
    return Settings(
        quote_currency_balance=Decimal("1000"),
        reserve=Decimal("0"),
        buy_fee=Decimal("0.1"),
        sell_fee=Decimal("0.1"),
        base_currency_price=Decimal("10000"),
        min_trade_amount=Decimal("0.001"),
        coverage=50,
        buy_down_interval=Decimal("100"),
        profit_interval=Decimal("50"),
    )


@pytest.fixture
def example_input() -> dict[str, object]:
    """Raw input equivalent to example_settings, as a form would submit it."""
    return {
        "quote_currency_balance": "1000",
        "buy_fee": "0.1",
        "sell_fee": "0.1",
        "base_currency_price": "10000",
        "min_trade_amount": "0.001",
        "coverage": "50",
        "buy_down_interval": "100",
        "profit_interval": "50",
    }


@pytest.fixture
def restore_root_logger():
    """setup_logging() replaces root handlers; put the test runner's back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
