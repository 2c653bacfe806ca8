"""Command-line entry point for the grid settings estimator.

Reads the strategy parameters from arguments, prints the estimate as JSON on
stdout and logs to stderr. Guards and advisory wording come from AppSettings
(environment variables / .env).

Exit codes: 0 on success, 2 when the parameters fail validation.
"""

import argparse
import json
import sys

from grid_estimator.config import AppSettings
from grid_estimator.estimator import SettingsEstimator
from grid_estimator.exceptions import SettingsValidationError
from grid_estimator.logging import get_logger, setup_logging

EXIT_INVALID_SETTINGS = 2

# (argument flag, Settings field, help)
_ARGUMENTS = (
    ("--balance", "quote_currency_balance", "quote currency available for trading"),
    ("--reserve", "reserve", "quote currency held back (default 0)"),
    ("--buy-fee", "buy_fee", "buy fee percentage, 0-100"),
    ("--sell-fee", "sell_fee", "sell fee percentage, 0-100"),
    ("--price", "base_currency_price", "current base currency price"),
    ("--min-trade-amount", "min_trade_amount", "exchange minimum order size"),
    ("--coverage", "coverage", "percentage of the price range to cover, 1-100"),
    ("--buy-down-interval", "buy_down_interval", "price step between buys"),
    ("--profit-interval", "profit_interval", "markup between buy and sell price"),
)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser. Values stay strings until validation."""
    parser = argparse.ArgumentParser(
        prog="grid-estimator",
        description="Estimate grid bot order size and project free-fall trades.",
    )
    for flag, dest, help_text in _ARGUMENTS:
        parser.add_argument(flag, dest=dest, help=help_text)
    parser.add_argument(
        "--trades-only",
        action="store_true",
        help="print only the free-fall trades",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Synchronous entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    settings = AppSettings()
    setup_logging(settings.log_level, settings.log_format)
    logger = get_logger("grid_estimator.main")

    raw = {dest: getattr(args, dest) for _, dest, _ in _ARGUMENTS}
    estimator = SettingsEstimator(settings)

    try:
        result = estimator.estimate_from_input(raw)
    except SettingsValidationError as e:
        logger.error("invalid_settings", errors=[err.to_dict() for err in e.errors])
        print(json.dumps({"errors": [err.to_dict() for err in e.errors]}, indent=2))
        return EXIT_INVALID_SETTINGS

    payload = result.to_dict()
    if args.trades_only:
        payload = payload["free_fall_trades"]
    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
