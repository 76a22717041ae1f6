"""Parameter validation for the projection engine.

Fails fast on the first violation. Pure: no defaults applied, no clamping.
"""

import math

from carcost.models.loan import DownPaymentKind, LoanParameters

COST_FIELDS = (
    "insurance_per_year",
    "act_fee_per_year",
    "road_tax_per_year",
    "maintenance_per_year",
    "fuel_per_month",
)


class ValidationError(ValueError):
    """Raised when a parameter set cannot be projected."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")


def _require_non_negative(params: LoanParameters, field: str) -> None:
    value = getattr(params, field)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(field, "must be a number")
    if not math.isfinite(value):
        raise ValidationError(field, "must be a finite number")
    if value < 0:
        raise ValidationError(field, "must be >= 0")


def validate(params: LoanParameters) -> LoanParameters:
    """Return params unchanged if valid, else raise ValidationError.

    Down payment must not exceed the price in either form, so the
    financed amount is never negative.
    """
    _require_non_negative(params, "car_price")

    term = params.term_months
    if isinstance(term, bool) or not isinstance(term, int):
        raise ValidationError("term_months", "must be an integer")
    if term < 1:
        raise ValidationError("term_months", "must be >= 1")

    _require_non_negative(params, "annual_interest_rate_percent")
    for field in COST_FIELDS:
        _require_non_negative(params, field)

    if not isinstance(params.down_payment_kind, DownPaymentKind):
        raise ValidationError("down_payment_kind", "must be 'percent' or 'fixed'")
    _require_non_negative(params, "down_payment_value")

    if params.down_payment_kind is DownPaymentKind.PERCENT:
        if params.down_payment_value > 100:
            raise ValidationError("down_payment_value", "percent must be between 0 and 100")
    elif params.down_payment_value > params.car_price:
        raise ValidationError("down_payment_value", "must not exceed car_price")

    return params
