"""Domain models for credit schedules."""

from credit_schedule.models.credit import Credit, CreditSummary, GracePeriod
from credit_schedule.models.enums import GracePeriodKind, InterestRateKind
from credit_schedule.models.reference import Bank, Currency, InterestRateType, User
from credit_schedule.models.request import CreateCreditRequest, ScheduleRequest
from credit_schedule.models.schedule import AdjustedLoan, SchedulePeriod, ScheduleResult

__all__ = [
    "AdjustedLoan",
    "Bank",
    "CreateCreditRequest",
    "Credit",
    "CreditSummary",
    "Currency",
    "GracePeriod",
    "GracePeriodKind",
    "InterestRateKind",
    "InterestRateType",
    "ScheduleRequest",
    "SchedulePeriod",
    "ScheduleResult",
    "User",
]
