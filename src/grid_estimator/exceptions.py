"""Custom exceptions for the grid settings estimator.

Advisory conditions (minimum order not met, negative profit) are not
exceptions; they are returned as strings alongside the results.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from grid_estimator.validation import FieldError


class EstimatorError(Exception):
    """Base exception for all estimator errors."""


class SettingsValidationError(EstimatorError, ValueError):
    """Raised when raw input cannot be turned into valid Settings.

    Carries every field-level violation found, not just the first one.
    """

    def __init__(self, errors: list[FieldError]) -> None:
        self.errors = list(errors)
        summary = "; ".join(f"{e.field} {e.message}" for e in self.errors)
        super().__init__(f"invalid settings: {summary}")
