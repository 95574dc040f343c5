"""French-system payment schedule with NPV accumulation."""

import logging
from decimal import ROUND_HALF_UP, Decimal

from credit_schedule.config import ScheduleConfig
from credit_schedule.engine.rates import (
    annual_to_monthly_cok,
    annual_to_monthly_effective,
    present_value,
)
from credit_schedule.models.schedule import AdjustedLoan, SchedulePeriod, ScheduleResult

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


def round_money(value: float) -> Decimal:
    """Round a float to cents, ties away from zero."""
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


class ScheduleCalculator:
    """Build the period-by-period schedule for an adjusted loan.

    The level installment is re-derived every period from the remaining
    balance and remaining term rather than computed once up front. Lien
    insurance is folded into the rate used to size that installment, so
    the installment covers interest, lien insurance and amortization.
    All-risk insurance and the shipping commission are flat monthly
    charges added on top.
    """

    def __init__(self, config: ScheduleConfig | None = None) -> None:
        self.config = config or ScheduleConfig()

    def calculate(self, loan: AdjustedLoan) -> ScheduleResult:
        """Compute the schedule and its NPV.

        Parameters
        ----------
        loan : AdjustedLoan
            Output of ``LoanAdjuster.adjust``.

        Returns
        -------
        ScheduleResult
            Rows 1..N with amounts rounded to cents and the NPV of the cash
            flows discounted at the monthly COK.
        """
        request = loan.request
        n = request.number_of_payments

        monthly_cok = annual_to_monthly_cok(request.cok_rate)
        monthly_effective_rate = annual_to_monthly_effective(
            loan.effective_annual_rate,
            self.config.day_count_base,
            self.config.days_per_month,
        )
        lien_rate = request.lien_insurance_rate / 100
        monthly_interest_rate = monthly_effective_rate + lien_rate

        monthly_all_risk = request.property_value * ((request.all_risk_insurance_rate / 100) / 12)
        monthly_shipping = self.config.physical_shipping_fee if request.has_physical_shipping else 0.0

        logger.debug(
            "Scheduling %d payments: TEA=%.6f%% TEM=%.8f COK=%.8f",
            n,
            loan.effective_annual_rate,
            monthly_effective_rate,
            monthly_cok,
        )

        balance = loan.loan_amount
        npv = present_value(balance, monthly_cok, 0)

        annual_rate_percent = round_money(loan.effective_annual_rate)
        monthly_rate_percent = round_money(monthly_effective_rate * 100)
        all_risk_rounded = round_money(monthly_all_risk)
        shipping_rounded = round_money(monthly_shipping)

        periods = []
        for i in range(n):
            interest = balance * monthly_effective_rate
            lien_insurance = balance * lien_rate

            fee = balance * (monthly_interest_rate / (1 - (1 + monthly_interest_rate) ** -(n - i)))

            amortization = fee - interest - lien_insurance
            total_fee = fee + monthly_all_risk + monthly_shipping

            periods.append(
                SchedulePeriod(
                    period_index=i + 1,
                    annual_rate_percent=annual_rate_percent,
                    monthly_rate_percent=monthly_rate_percent,
                    opening_balance=round_money(balance),
                    amortization=round_money(amortization),
                    interest=round_money(interest),
                    lien_insurance_amount=round_money(lien_insurance),
                    all_risk_insurance_amount=all_risk_rounded,
                    commission=shipping_rounded,
                    total_fee=round_money(total_fee),
                )
            )

            balance -= amortization
            npv += present_value(-fee - monthly_all_risk - monthly_shipping, monthly_cok, i + 1)

        return ScheduleResult(
            periods=tuple(periods),
            net_present_value=round_money(npv),
            internal_rate_of_return=Decimal("0.00"),
            loan_amount=round_money(loan.loan_amount),
            grace_period_kind=request.grace_period_kind,
            grace_period_months=request.grace_period_months,
        )
