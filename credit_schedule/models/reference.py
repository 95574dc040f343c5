"""Reference records resolved by name or id before scheduling."""

from dataclasses import dataclass

from credit_schedule.models.enums import InterestRateKind


@dataclass
class User:
    """Credit applicant."""

    user_id: int
    username: str
    email: str


@dataclass
class Bank:
    """Lending bank."""

    bank_id: int
    name: str


@dataclass
class Currency:
    """Currency a credit is denominated in."""

    currency_id: int
    name: str
    symbol: str = ""


@dataclass
class InterestRateType:
    """Supported interest-rate quotation."""

    type_id: int
    kind: InterestRateKind
