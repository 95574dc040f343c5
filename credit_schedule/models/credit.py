"""Credit records kept by the data store."""

from dataclasses import dataclass
from datetime import datetime

from credit_schedule.models.enums import InterestRateKind
from credit_schedule.models.reference import Bank, Currency, InterestRateType


@dataclass
class GracePeriod:
    """Grace window stored with a credit (metadata only)."""

    grace_period_id: int | None
    amount_months: int
    is_total: bool
    is_partial: bool


@dataclass
class Credit:
    """Persisted credit entity."""

    credit_id: int | None  # Assigned by the store on save
    name: str
    user_id: int
    rate: float
    cok_rate: float
    number_of_payments: int
    loan_amount: float
    property_value: float
    lien_insurance_rate: float
    all_risk_insurance_rate: float
    has_good_payer_bonus: bool
    has_green_bonus: bool
    has_physical_shipping: bool
    grace_period_id: int
    interest_rate_kind: InterestRateKind
    currency_name: str
    bank_name: str
    created_at: datetime | None = None


@dataclass(frozen=True)
class CreditSummary:
    """Read model returned when listing a user's credits."""

    credit_id: int
    name: str
    rate: float
    number_of_payments: int
    loan_amount: float
    property_value: float
    lien_insurance_rate: float
    all_risk_insurance_rate: float
    has_good_payer_bonus: bool
    has_green_bonus: bool
    has_physical_shipping: bool
    grace_period: GracePeriod
    interest_rate: InterestRateType
    currency: Currency
    bank: Bank
