"""Grid trading bot settings estimator.

Derives the per-step order quantity for a grid strategy from balance, fees,
price and coverage, and projects the trades it would make in a free fall.
"""

from grid_estimator.estimator import SettingsEstimator
from grid_estimator.exceptions import EstimatorError, SettingsValidationError
from grid_estimator.models import EstimateResult, Settings, StopReason, TradeRecord
from grid_estimator.validation import FieldError, ViolationKind, validate_settings

__all__ = [
    "EstimateResult",
    "EstimatorError",
    "FieldError",
    "Settings",
    "SettingsEstimator",
    "SettingsValidationError",
    "StopReason",
    "TradeRecord",
    "ViolationKind",
    "validate_settings",
]
