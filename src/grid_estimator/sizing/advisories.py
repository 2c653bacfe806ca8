"""Advisory checks on derived metrics.

Advisories never abort the estimate; they are returned as human-readable
strings next to the results. Each check runs independently, so both can fire.
"""

from grid_estimator.config import AdvisorySettings
from grid_estimator.models import DerivedMetrics, Settings

NEGATIVE_PROFIT_MESSAGE = "Your profit is negative."


def min_order_message(exchange_name: str) -> str:
    """Warning shown when the order size is below the exchange minimum."""
    return (
        f"{exchange_name}'s minimum order amount requirement is not met. "
        "Adjust your settings."
    )


def collect_results_errors(
    settings: Settings,
    metrics: DerivedMetrics,
    advisory_settings: AdvisorySettings | None = None,
) -> list[str]:
    """Return the advisory messages for one set of metrics.

    Args:
        settings: Validated estimator settings (for min_trade_amount).
        metrics: Metrics derived from the same settings.
        advisory_settings: Message wording. Defaults to AdvisorySettings().

    Returns:
        A new list, in check order: minimum order, then negative profit.
    """
    if advisory_settings is None:
        advisory_settings = AdvisorySettings()

    errors: list[str] = []
    if metrics.buy_quantity < settings.min_trade_amount:
        errors.append(min_order_message(advisory_settings.exchange_name))
    if metrics.quote_profit_per_sell < 0:
        errors.append(NEGATIVE_PROFIT_MESSAGE)
    return errors
