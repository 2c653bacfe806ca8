"""Data models for the grid settings estimator.

Defines the validated input (Settings), the closed-form metrics derived from
it (DerivedMetrics), the per-step free-fall ladder record (TradeRecord) and
the combined output returned to callers (EstimateResult).

CRITICAL: All monetary values use Decimal. Never use float for prices, quantities, or fees.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Context, Decimal
from enum import Enum

# Working context for intermediate algebra. Only surfaced values are rounded.
# With inputs bounded to 1E-18 <= |x| < 1E+19 (validation.MAX_ADJUSTED_EXPONENT)
# no surfaced value needs more than ~125 digits at 8 fractional places.
DECIMAL_CONTEXT = Context(prec=200, rounding=ROUND_HALF_UP)

EIGHT_PLACES = Decimal("0.00000001")
TWO_PLACES = Decimal("0.01")


def round8(value: Decimal) -> Decimal:
    """Round half-up to 8 fractional digits."""
    return value.quantize(EIGHT_PLACES, context=DECIMAL_CONTEXT)


def round2(value: Decimal) -> Decimal:
    """Round half-up to 2 fractional digits."""
    return value.quantize(TWO_PLACES, context=DECIMAL_CONTEXT)


@dataclass(frozen=True)
class Settings:
    """Validated estimator input.

    Fee and coverage fields are percentages on a 0-100 scale, not fractions.
    Build instances through validation.validate_settings() when the values
    come from outside the process.
    """

    quote_currency_balance: Decimal
    buy_fee: Decimal
    sell_fee: Decimal
    base_currency_price: Decimal
    min_trade_amount: Decimal
    coverage: int
    buy_down_interval: Decimal
    profit_interval: Decimal
    reserve: Decimal = Decimal("0")

    @property
    def effective_balance(self) -> Decimal:
        """Trading balance after the reserve is held back."""
        return self.quote_currency_balance - self.reserve

    def to_dict(self) -> dict:
        """Serialize to dict for JSON output, Decimals as strings."""
        return {
            "quote_currency_balance": str(self.quote_currency_balance),
            "reserve": str(self.reserve),
            "buy_fee": str(self.buy_fee),
            "sell_fee": str(self.sell_fee),
            "base_currency_price": str(self.base_currency_price),
            "min_trade_amount": str(self.min_trade_amount),
            "coverage": self.coverage,
            "buy_down_interval": str(self.buy_down_interval),
            "profit_interval": str(self.profit_interval),
        }


@dataclass
class DerivedMetrics:
    """Order sizing metrics computed once from Settings.

    Attributes:
        buy_quantity: Fixed order size used for every ladder step (8 dp).
        sell_quantity: Always equal to buy_quantity.
        quote_profit_per_sell: Net quote profit of one round trip at the
            current price (8 dp).
        zero_balance_price: Price at which the coverage band is spent (8 dp).
        warnings: Advisory messages, filled in by the advisory pass.
    """

    buy_quantity: Decimal
    sell_quantity: Decimal
    quote_profit_per_sell: Decimal
    zero_balance_price: Decimal
    warnings: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class TradeRecord:
    """One simulated buy-low/sell-higher step of the free-fall ladder.

    balance is rounded to 2 fractional digits, every other monetary field
    to 8. All values were computed at full precision before rounding.
    """

    balance: Decimal
    buy_price: Decimal
    buy_quantity: Decimal
    cost: Decimal
    buy_fee: Decimal
    total_cost: Decimal
    sell_price: Decimal
    sell_quantity: Decimal
    revenue: Decimal
    sell_fee: Decimal
    total_revenue: Decimal
    quote_profit: Decimal

    def to_dict(self) -> dict:
        """Serialize to dict for JSON output, Decimals as strings."""
        return {
            "balance": str(self.balance),
            "buy_price": str(self.buy_price),
            "buy_quantity": str(self.buy_quantity),
            "cost": str(self.cost),
            "buy_fee": str(self.buy_fee),
            "total_cost": str(self.total_cost),
            "sell_price": str(self.sell_price),
            "sell_quantity": str(self.sell_quantity),
            "revenue": str(self.revenue),
            "sell_fee": str(self.sell_fee),
            "total_revenue": str(self.total_revenue),
            "quote_profit": str(self.quote_profit),
        }


class StopReason(str, Enum):
    """Why the free-fall ladder stopped."""

    BALANCE_EXHAUSTED = "balance_exhausted"
    PRICE_FLOOR = "price_floor"
    ITERATION_CAP = "iteration_cap"


@dataclass
class SimulationResult:
    """Ordered free-fall ladder, highest price first."""

    trades: list[TradeRecord] = field(default_factory=list)
    stop_reason: StopReason = StopReason.BALANCE_EXHAUSTED


@dataclass
class EstimateResult:
    """Everything the estimator returns for one Settings value."""

    settings: Settings
    buy_quantity: Decimal
    sell_quantity: Decimal
    quote_profit_per_sell: Decimal
    zero_balance_price: Decimal
    free_fall_trades: list[TradeRecord] = field(default_factory=list)
    results_errors: list[str] = field(default_factory=list)
    stop_reason: StopReason = StopReason.BALANCE_EXHAUSTED

    def to_dict(self) -> dict:
        """Serialize to dict for JSON output.

        Converts all Decimal values to str for JSON compatibility.
        """
        return {
            "settings": self.settings.to_dict(),
            "buy_quantity": str(self.buy_quantity),
            "sell_quantity": str(self.sell_quantity),
            "quote_profit_per_sell": str(self.quote_profit_per_sell),
            "zero_balance_price": str(self.zero_balance_price),
            "free_fall_trades": [t.to_dict() for t in self.free_fall_trades],
            "results_errors": list(self.results_errors),
            "stop_reason": self.stop_reason.value,
        }
