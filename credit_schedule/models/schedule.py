"""Schedule models: adjusted loan, schedule rows and the full result."""

from dataclasses import dataclass
from decimal import Decimal

from credit_schedule.models.enums import GracePeriodKind
from credit_schedule.models.request import ScheduleRequest


@dataclass(frozen=True)
class AdjustedLoan:
    """A request after rate conversion and bonus adjustments.

    ``request`` is the caller's untouched input; the adjusted values live
    alongside it.
    """

    request: ScheduleRequest
    effective_annual_rate: float  # Percent
    loan_amount: float  # Financed principal after bonuses
    good_payer_reduction: float = 0.0
    green_bonus_reduction: float = 0.0


@dataclass(frozen=True)
class SchedulePeriod:
    """One row of the payment schedule (all amounts rounded to cents)."""

    period_index: int  # 1..N
    annual_rate_percent: Decimal  # TEA
    monthly_rate_percent: Decimal  # TEM
    opening_balance: Decimal
    amortization: Decimal
    interest: Decimal
    lien_insurance_amount: Decimal
    all_risk_insurance_amount: Decimal
    commission: Decimal  # Physical shipping
    total_fee: Decimal


@dataclass(frozen=True)
class ScheduleResult:
    """Full payment schedule with its net present value."""

    periods: tuple[SchedulePeriod, ...]
    net_present_value: Decimal
    internal_rate_of_return: Decimal  # Not computed yet, always 0.00
    loan_amount: Decimal
    grace_period_kind: GracePeriodKind = GracePeriodKind.NONE
    grace_period_months: int = 0
