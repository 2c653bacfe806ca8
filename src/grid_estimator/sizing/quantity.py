"""Closed-form order quantity and profit metrics for the grid strategy.

All calculations use Decimal arithmetic exclusively -- no float conversions.
Intermediate algebra runs in a 200-digit context; rounding to 8 fractional
digits happens only when a value is surfaced as a result.

Buy quantity derivation:
  The strategy buys the same quantity every buy_down_interval while the
  price falls across the covered band. Total capital deployed is the sum of
  a linearly declining cost curve, which integrates to
      balance = qty * (1 + buy_fee) * price^2 * cov * (2 - cov) / (2 * interval)
  Solving for qty gives the closed form in calculate_buy_quantity().
"""

from decimal import Decimal, localcontext

from grid_estimator.models import DECIMAL_CONTEXT, DerivedMetrics, Settings, round8

HUNDRED = Decimal("100")


def as_proportion(percent: Decimal | int) -> Decimal:
    """Convert a 0-100 percentage to a fraction."""
    return Decimal(percent) / HUNDRED


def calculate_buy_quantity(settings: Settings) -> Decimal:
    """Solve for the per-step order size that spends the balance over the coverage band.

    Formula:
        cov = coverage / 100
        dividend = buy_down_interval * 2 * effective_balance
        divisor = (1 + buy_fee / 100) * base_currency_price^2 * cov * (2 - cov)

    Validated input guarantees divisor > 0.

    Args:
        settings: Validated estimator settings.

    Returns:
        dividend / divisor rounded half-up to 8 fractional digits.
    """
    with localcontext(DECIMAL_CONTEXT):
        cov = as_proportion(settings.coverage)
        dividend = settings.buy_down_interval * 2 * settings.effective_balance
        divisor = (
            (1 + as_proportion(settings.buy_fee))
            * settings.base_currency_price**2
            * cov
            * (2 - cov)
        )
        return round8(dividend / divisor)


def calculate_quote_profit_per_sell(
    settings: Settings,
    buy_price: Decimal,
    quantity: Decimal,
) -> Decimal:
    """Net quote profit of buying at buy_price and selling profit_interval higher.

    revenue = (buy_price + profit_interval) * quantity * (1 - sell_fee / 100)
    cost = buy_price * quantity * (1 + buy_fee / 100)

    Args:
        settings: Validated estimator settings.
        buy_price: Price the buy leg fills at.
        quantity: Base quantity bought and sold.

    Returns:
        revenue - cost rounded half-up to 8 fractional digits.
    """
    with localcontext(DECIMAL_CONTEXT):
        ask = buy_price + settings.profit_interval
        revenue = ask * quantity * (1 - as_proportion(settings.sell_fee))
        cost = buy_price * quantity * (1 + as_proportion(settings.buy_fee))
        return round8(revenue - cost)


def calculate_zero_balance_price(settings: Settings) -> Decimal:
    """Price level at which the coverage band is fully spent."""
    with localcontext(DECIMAL_CONTEXT):
        price = settings.base_currency_price
        return round8(price - price * as_proportion(settings.coverage))


def derive_metrics(settings: Settings) -> DerivedMetrics:
    """Compute the sizing metrics for one Settings value.

    Pure and deterministic: identical settings give identical Decimals.
    The returned warnings list is empty and owned by this result.
    """
    buy_quantity = calculate_buy_quantity(settings)
    return DerivedMetrics(
        buy_quantity=buy_quantity,
        sell_quantity=buy_quantity,
        quote_profit_per_sell=calculate_quote_profit_per_sell(
            settings, settings.base_currency_price, buy_quantity
        ),
        zero_balance_price=calculate_zero_balance_price(settings),
    )
