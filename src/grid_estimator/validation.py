"""Explicit input validation for estimator settings.

Raw input (CLI arguments, JSON payloads, form values) is coerced to Decimal
and checked eagerly, before any derived computation runs. Every violation is
collected so callers can report all offending fields at once.

Floats are converted through str() so that 0.1 becomes Decimal("0.1"), not
its binary approximation.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum

from grid_estimator.exceptions import SettingsValidationError
from grid_estimator.models import Settings

REQUIRED_FIELDS = (
    "quote_currency_balance",
    "buy_fee",
    "sell_fee",
    "base_currency_price",
    "min_trade_amount",
    "coverage",
    "buy_down_interval",
    "profit_interval",
)

POSITIVE_FIELDS = (
    "quote_currency_balance",
    "base_currency_price",
    "buy_down_interval",
    "profit_interval",
)

NON_NEGATIVE_FIELDS = ("buy_fee", "sell_fee", "reserve")

MIN_COVERAGE = 1
MAX_COVERAGE = 100

# Non-zero amounts must satisfy 1E-18 <= |x| < 1E+19.
MAX_ADJUSTED_EXPONENT = 18
MAGNITUDE_FIELDS = (*POSITIVE_FIELDS, *NON_NEGATIVE_FIELDS, "min_trade_amount")


class ViolationKind(str, Enum):
    """Category of a field-level validation failure."""

    INVALID_VALUE = "invalid_value"
    RANGE_VIOLATION = "range_violation"
    NON_POSITIVE_VALUE = "non_positive_value"
    NON_NEGATIVE_VALUE = "non_negative_value"
    RELATIVE_CONSTRAINT_VIOLATION = "relative_constraint_violation"


@dataclass(frozen=True)
class FieldError:
    """A single rejected field with the constraint it violated."""

    field: str
    kind: ViolationKind
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "kind": self.kind.value, "message": self.message}


def _to_decimal(value: object) -> Decimal | None:
    """Coerce a raw value to a finite Decimal, or None if impossible."""
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        value = str(value)
    if isinstance(value, str):
        value = value.strip()
    if not isinstance(value, (Decimal, int, str)):
        return None
    try:
        result = Decimal(value)
    except InvalidOperation:
        return None
    if not result.is_finite():
        return None
    return result


def _parse(raw: Mapping[str, object]) -> tuple[dict[str, Decimal], list[FieldError]]:
    values: dict[str, Decimal] = {}
    errors: list[FieldError] = []

    for name in (*REQUIRED_FIELDS, "reserve"):
        value = raw.get(name)
        if value is None or value == "":
            if name == "reserve":
                values[name] = Decimal("0")
            else:
                errors.append(FieldError(name, ViolationKind.INVALID_VALUE, "is required"))
            continue

        parsed = _to_decimal(value)
        if parsed is None:
            errors.append(FieldError(name, ViolationKind.INVALID_VALUE, "is not a number"))
            continue
        values[name] = parsed

    return values, errors


def collect_field_errors(raw: Mapping[str, object]) -> list[FieldError]:
    """Return every field-level violation in raw input (empty if valid)."""
    values, errors = _parse(raw)

    coverage = values.get("coverage")
    if coverage is not None and (
        coverage != coverage.to_integral_value()
        or not MIN_COVERAGE <= coverage <= MAX_COVERAGE
    ):
        errors.append(
            FieldError(
                "coverage",
                ViolationKind.RANGE_VIOLATION,
                f"must be a whole number between {MIN_COVERAGE} and {MAX_COVERAGE}",
            )
        )

    for name in MAGNITUDE_FIELDS:
        value = values.get(name)
        if value is not None and value != 0 and abs(value.adjusted()) > MAX_ADJUSTED_EXPONENT:
            errors.append(
                FieldError(
                    name,
                    ViolationKind.RANGE_VIOLATION,
                    f"must be zero or between 1E-{MAX_ADJUSTED_EXPONENT} "
                    f"and 1E+{MAX_ADJUSTED_EXPONENT + 1} in absolute value",
                )
            )

    for name in POSITIVE_FIELDS:
        value = values.get(name)
        if value is not None and value <= 0:
            errors.append(
                FieldError(name, ViolationKind.NON_POSITIVE_VALUE, "must be greater than 0")
            )

    for name in NON_NEGATIVE_FIELDS:
        value = values.get(name)
        if value is not None and value < 0:
            errors.append(
                FieldError(
                    name,
                    ViolationKind.NON_NEGATIVE_VALUE,
                    "must be greater than or equal to 0",
                )
            )

    balance = values.get("quote_currency_balance")
    reserve = values.get("reserve")
    if balance is not None and reserve is not None and balance <= reserve:
        errors.append(
            FieldError(
                "quote_currency_balance",
                ViolationKind.RELATIVE_CONSTRAINT_VIOLATION,
                "must be more than reserve",
            )
        )

    return errors


def validate_settings(raw: Mapping[str, object]) -> Settings:
    """Validate raw input and build an immutable Settings value.

    Args:
        raw: Mapping of field name to raw value (str, int, float or Decimal).
            reserve is optional and defaults to 0.

    Returns:
        Settings with Decimal fields and an integer coverage.

    Raises:
        SettingsValidationError: If any field is missing, unparseable or
            violates its constraint. Carries all violations found.
    """
    errors = collect_field_errors(raw)
    if errors:
        raise SettingsValidationError(errors)

    values, _ = _parse(raw)
    return Settings(
        quote_currency_balance=values["quote_currency_balance"],
        reserve=values["reserve"],
        buy_fee=values["buy_fee"],
        sell_fee=values["sell_fee"],
        base_currency_price=values["base_currency_price"],
        min_trade_amount=values["min_trade_amount"],
        coverage=int(values["coverage"]),
        buy_down_interval=values["buy_down_interval"],
        profit_interval=values["profit_interval"],
    )
