"""Payment schedule engine: rate conversions, loan adjustments and scheduling."""

from credit_schedule.engine.adjuster import LoanAdjuster, check_policy_range, good_payer_reduction
from credit_schedule.engine.rates import (
    annual_to_monthly_cok,
    annual_to_monthly_effective,
    nominal_to_effective_annual,
    present_value,
)
from credit_schedule.engine.schedule import ScheduleCalculator, round_money

__all__ = [
    "LoanAdjuster",
    "ScheduleCalculator",
    "annual_to_monthly_cok",
    "annual_to_monthly_effective",
    "check_policy_range",
    "good_payer_reduction",
    "nominal_to_effective_annual",
    "present_value",
    "round_money",
]
