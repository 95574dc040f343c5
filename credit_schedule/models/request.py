"""Request models consumed by the credit service."""

from dataclasses import dataclass

from credit_schedule.models.enums import GracePeriodKind, InterestRateKind
from credit_schedule.validation import (
    Constraint,
    boolean,
    constrained,
    ensure_valid,
    integer,
    member_of,
    non_negative,
    not_blank,
    positive,
    required,
)


_RATE_KINDS = {kind.value for kind in InterestRateKind}


def _coerce_rate_kind(request: "ScheduleRequest") -> None:
    # Accept "nominal" / "EFFECTIVE" style strings; anything else is left for
    # the member_of constraint to report.
    value = request.interest_rate_kind
    if isinstance(value, str) and not isinstance(value, InterestRateKind):
        if value.lower() in _RATE_KINDS:
            object.__setattr__(request, "interest_rate_kind", InterestRateKind(value.lower()))


@dataclass(frozen=True)
class ScheduleRequest:
    """Financing parameters for a payment schedule.

    Rates are expressed in percent (``10.5`` means 10.5%). Instances are
    validated on construction and never modified afterwards; bonus
    adjustments produce a separate ``AdjustedLoan``.
    """

    annual_rate: float = constrained(positive())
    cok_rate: float = constrained(non_negative())
    number_of_payments: int = constrained(integer(), positive())
    property_value: float = constrained(positive())
    loan_amount: float = constrained(positive())
    lien_insurance_rate: float = constrained(non_negative())
    all_risk_insurance_rate: float = constrained(non_negative())
    has_physical_shipping: bool = constrained(required(), boolean())
    has_good_payer_bonus: bool = constrained(required(), boolean())
    has_green_bonus: bool = constrained(required(), boolean())
    interest_rate_kind: InterestRateKind = constrained(member_of(InterestRateKind))
    currency_name: str = constrained(not_blank(), default="sol")
    bank_name: str = constrained(not_blank(), default="interbank")
    grace_period_months: int = constrained(integer(), non_negative(), default=0)
    is_total_grace: bool = constrained(boolean(), default=False)
    is_partial_grace: bool = constrained(boolean(), default=False)

    __object_constraints__ = (
        Constraint(
            lambda r: not (r.is_total_grace and r.is_partial_grace),
            "grace period cannot be both total and partial",
        ),
    )

    def __post_init__(self) -> None:
        _coerce_rate_kind(self)
        ensure_valid(self)

    @property
    def grace_period_kind(self) -> GracePeriodKind:
        return GracePeriodKind.from_flags(self.is_total_grace, self.is_partial_grace)


@dataclass(frozen=True)
class CreateCreditRequest:
    """Request to persist a named credit for a user."""

    user_id: int = constrained(integer(), positive())
    name: str = constrained(not_blank())
    financing: ScheduleRequest = constrained(required())

    def __post_init__(self) -> None:
        ensure_valid(self)
