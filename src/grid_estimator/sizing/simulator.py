"""Free-fall trade ladder simulation.

Projects the buy-low/sell-higher steps a grid bot would take while the price
falls by buy_down_interval each step, starting at the current price, until
the next buy would cost more than the remaining balance.

CRITICAL: All monetary values use Decimal. Never use float for prices, quantities, or fees.
"""

from decimal import Decimal, localcontext

from grid_estimator.config import SimulationSettings
from grid_estimator.logging import get_logger
from grid_estimator.models import (
    DECIMAL_CONTEXT,
    Settings,
    SimulationResult,
    StopReason,
    TradeRecord,
    round2,
    round8,
)
from grid_estimator.sizing.quantity import as_proportion

logger = get_logger(__name__)


class FreeFallSimulator:
    """Simulates the descending trade ladder for a fixed order quantity.

    State carried between steps is the remaining balance plus the buy and
    sell prices, both stepping down by buy_down_interval. The sell price is
    seeded profit_interval above the current price.

    Two guards bound the loop for inputs where the balance alone would not:
    the ladder stops before a step whose buy price is zero or negative, and
    after max_trades recorded steps.

    Args:
        simulation_settings: Loop guards. Defaults to SimulationSettings().
    """

    def __init__(self, simulation_settings: SimulationSettings | None = None) -> None:
        if simulation_settings is None:
            simulation_settings = SimulationSettings()
        self._settings = simulation_settings

    def run(self, settings: Settings, buy_quantity: Decimal) -> SimulationResult:
        """Run the ladder until the balance can no longer fund a step.

        Per step:
        1. cost = buy_price * qty; buy fee on cost; total_cost = cost + fee
        2. revenue = sell_price * qty; sell fee on revenue;
           total_revenue = revenue - fee
        3. If total_cost > balance, stop without recording the step
        4. Record the step (balance 2 dp, everything else 8 dp)
        5. balance -= total_cost; both prices -= buy_down_interval

        Args:
            settings: Validated estimator settings.
            buy_quantity: Order size from the quantity calculator.

        Returns:
            SimulationResult with trades in generation order (highest price
            first) and the reason the ladder stopped.
        """
        result = SimulationResult()
        trades = result.trades

        with localcontext(DECIMAL_CONTEXT):
            buy_fee_rate = as_proportion(settings.buy_fee)
            sell_fee_rate = as_proportion(settings.sell_fee)

            balance = settings.effective_balance
            buy_price = settings.base_currency_price
            sell_price = settings.base_currency_price + settings.profit_interval

            while True:
                cost = buy_price * buy_quantity
                buy_fee = buy_fee_rate * cost
                total_cost = cost + buy_fee

                sell_quantity = buy_quantity
                revenue = sell_price * sell_quantity
                sell_fee = sell_fee_rate * revenue
                total_revenue = revenue - sell_fee

                if total_cost > balance:
                    break
                # The step is affordable; the guards only decide whether it is recorded.
                if buy_price <= 0:
                    result.stop_reason = StopReason.PRICE_FLOOR
                    break
                if len(trades) >= self._settings.max_trades:
                    result.stop_reason = StopReason.ITERATION_CAP
                    break

                trades.append(
                    TradeRecord(
                        balance=round2(balance),
                        buy_price=round8(buy_price),
                        buy_quantity=round8(buy_quantity),
                        cost=round8(cost),
                        buy_fee=round8(buy_fee),
                        total_cost=round8(total_cost),
                        sell_price=round8(sell_price),
                        sell_quantity=round8(sell_quantity),
                        revenue=round8(revenue),
                        sell_fee=round8(sell_fee),
                        total_revenue=round8(total_revenue),
                        quote_profit=round8(total_revenue - total_cost),
                    )
                )

                balance -= total_cost
                buy_price -= settings.buy_down_interval
                sell_price -= settings.buy_down_interval

        if result.stop_reason is not StopReason.BALANCE_EXHAUSTED:
            logger.warning(
                "free_fall_truncated",
                stop_reason=result.stop_reason.value,
                trades=len(trades),
                remaining_balance=str(balance),
                max_trades=self._settings.max_trades,
            )
        else:
            logger.debug(
                "free_fall_complete",
                trades=len(trades),
                remaining_balance=str(balance),
            )

        return result
