"""Order sizing, free-fall ladder simulation and advisory checks."""

from grid_estimator.sizing.advisories import collect_results_errors
from grid_estimator.sizing.quantity import (
    calculate_buy_quantity,
    calculate_quote_profit_per_sell,
    calculate_zero_balance_price,
    derive_metrics,
)
from grid_estimator.sizing.simulator import FreeFallSimulator

__all__ = [
    "FreeFallSimulator",
    "calculate_buy_quantity",
    "calculate_quote_profit_per_sell",
    "calculate_zero_balance_price",
    "collect_results_errors",
    "derive_metrics",
]
