"""Loan amount adjustments applied before scheduling."""

import logging

from credit_schedule.config import BonusBracket, PolicyConfig
from credit_schedule.engine.rates import DAY_COUNT_BASE, nominal_to_effective_annual
from credit_schedule.exceptions import OutOfPolicyRangeError
from credit_schedule.models.enums import InterestRateKind
from credit_schedule.models.request import ScheduleRequest
from credit_schedule.models.schedule import AdjustedLoan

logger = logging.getLogger(__name__)


def good_payer_reduction(property_value: float, brackets: tuple[BonusBracket, ...]) -> float:
    """Return the good payer reduction for a property value.

    The first bracket strictly containing the value wins; values equal to a
    bracket bound, or outside every bracket, get no reduction.
    """
    for bracket in brackets:
        if bracket.contains(property_value):
            return bracket.reduction
    return 0.0


def check_policy_range(loan_amount: float, property_value: float, policy: PolicyConfig) -> None:
    """Ensure the loan stays within the allowed share of the property value.

    Raises
    ------
    OutOfPolicyRangeError
        If the loan is above ``max_loan_ratio`` or below ``min_loan_ratio``
        of the property value.
    """
    upper = property_value * policy.max_loan_ratio
    lower = property_value * policy.min_loan_ratio
    if loan_amount > upper or loan_amount < lower:
        raise OutOfPolicyRangeError(
            f"The loan amount {loan_amount:.2f} must be between "
            f"{policy.min_loan_ratio:.1%} and {policy.max_loan_ratio:.0%} of the "
            f"property value ({lower:.2f} - {upper:.2f})"
        )


class LoanAdjuster:
    """Derive the financed amount and effective rate from a request.

    Steps, in order:

    1. Nominal rates are converted to effective annual rates.
    2. The good payer bonus reduces the loan by the bracket amount.
    3. The loan-to-value band is checked.
    4. The green bonus reduces the loan by a flat amount. It runs after
       the band check and is not re-validated.
    """

    def __init__(
        self,
        policy: PolicyConfig | None = None,
        day_count_base: int = DAY_COUNT_BASE,
    ) -> None:
        self.policy = policy or PolicyConfig()
        self.day_count_base = day_count_base

    def adjust(self, request: ScheduleRequest) -> AdjustedLoan:
        """Return the adjusted loan for ``request`` without modifying it."""
        rate = request.annual_rate
        if request.interest_rate_kind == InterestRateKind.NOMINAL:
            rate = nominal_to_effective_annual(rate, self.day_count_base)
            logger.debug("Converted nominal rate %.4f%% to effective %.4f%%", request.annual_rate, rate)

        loan_amount = request.loan_amount

        good_payer = 0.0
        if request.has_good_payer_bonus:
            good_payer = good_payer_reduction(request.property_value, self.policy.good_payer_brackets)
            loan_amount -= good_payer

        check_policy_range(loan_amount, request.property_value, self.policy)

        green = 0.0
        if request.has_green_bonus:
            green = self.policy.green_bonus_amount
            loan_amount -= green

        return AdjustedLoan(
            request=request,
            effective_annual_rate=rate,
            loan_amount=loan_amount,
            good_payer_reduction=good_payer,
            green_bonus_reduction=green,
        )
