"""Workers' compensation calculators: commuted value, AWW, NPV tables."""
from app.calculators.errors import (
    CalculatorError,
    InputValidationError,
    InvalidStateError,
    ValidationErrorKind,
)
from app.calculators.commuted_value import (
    FALLBACK_DISCOUNT_RATE,
    FALLBACK_MAX_COMPENSATION_RATE,
    compute_commuted_value,
    discounted_weeks_factor,
    select_discount_rate,
)
from app.calculators.compensation_rate import (
    average_weekly_wage_four_quarters,
    compensation_rate_from_aww,
)
from app.calculators.npv_table import NpvFactorRow, npv_factor_table

__all__ = [
    "CalculatorError",
    "InputValidationError",
    "InvalidStateError",
    "ValidationErrorKind",
    "FALLBACK_DISCOUNT_RATE",
    "FALLBACK_MAX_COMPENSATION_RATE",
    "compute_commuted_value",
    "discounted_weeks_factor",
    "select_discount_rate",
    "average_weekly_wage_four_quarters",
    "compensation_rate_from_aww",
    "NpvFactorRow",
    "npv_factor_table",
]
