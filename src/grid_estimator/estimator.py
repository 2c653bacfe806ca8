"""Settings estimator: sizing, free-fall ladder and advisories in one call.

Component order per estimate:
1. QuantityCalculator (derive_metrics) -- buy/sell quantity, profit, zero balance price
2. FreeFallSimulator -- descending trade ladder using the fixed quantity
3. Advisory pass -- minimum order and negative profit warnings
"""

import time
import uuid
from collections.abc import Mapping

import structlog

from grid_estimator.config import AppSettings
from grid_estimator.logging import get_logger
from grid_estimator.models import EstimateResult, Settings
from grid_estimator.sizing.advisories import collect_results_errors
from grid_estimator.sizing.quantity import derive_metrics
from grid_estimator.sizing.simulator import FreeFallSimulator
from grid_estimator.validation import validate_settings

logger = get_logger(__name__)


class SettingsEstimator:
    """Computes grid bot sizing results for validated settings.

    Holds no per-estimate state; every call builds fresh result containers,
    so one instance can serve any number of independent estimates.

    Args:
        app_settings: Simulation guards and advisory wording.
            Defaults to AppSettings().
    """

    def __init__(self, app_settings: AppSettings | None = None) -> None:
        if app_settings is None:
            app_settings = AppSettings()
        self._app_settings = app_settings
        self._simulator = FreeFallSimulator(app_settings.simulation)

    def estimate(self, settings: Settings) -> EstimateResult:
        """Derive metrics, simulate the free-fall ladder and attach advisories.

        Args:
            settings: Validated estimator settings.

        Returns:
            EstimateResult with rounded metrics, trades and warning strings.
            Every log event emitted during the call carries the same
            estimate_id.
        """
        with structlog.contextvars.bound_contextvars(estimate_id=uuid.uuid4().hex[:12]):
            return self._run(settings)

    def _run(self, settings: Settings) -> EstimateResult:
        start_time = time.monotonic()

        logger.info(
            "estimate_starting",
            balance=str(settings.quote_currency_balance),
            reserve=str(settings.reserve),
            price=str(settings.base_currency_price),
            coverage=settings.coverage,
        )

        metrics = derive_metrics(settings)
        simulation = self._simulator.run(settings, metrics.buy_quantity)
        metrics.warnings.extend(
            collect_results_errors(settings, metrics, self._app_settings.advisory)
        )

        for warning in metrics.warnings:
            logger.warning("estimate_advisory", message=warning)

        elapsed = time.monotonic() - start_time

        logger.info(
            "estimate_complete",
            buy_quantity=str(metrics.buy_quantity),
            quote_profit_per_sell=str(metrics.quote_profit_per_sell),
            zero_balance_price=str(metrics.zero_balance_price),
            trades=len(simulation.trades),
            stop_reason=simulation.stop_reason.value,
            elapsed_seconds=round(elapsed, 4),
        )

        return EstimateResult(
            settings=settings,
            buy_quantity=metrics.buy_quantity,
            sell_quantity=metrics.sell_quantity,
            quote_profit_per_sell=metrics.quote_profit_per_sell,
            zero_balance_price=metrics.zero_balance_price,
            free_fall_trades=simulation.trades,
            results_errors=metrics.warnings,
            stop_reason=simulation.stop_reason,
        )

    def estimate_from_input(self, raw: Mapping[str, object]) -> EstimateResult:
        """Validate raw input, then estimate.

        Raises:
            SettingsValidationError: If the input is not a valid Settings value.
        """
        return self.estimate(validate_settings(raw))
