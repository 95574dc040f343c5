"""In-memory credit data store with referential integrity."""

from dataclasses import dataclass, field
from datetime import datetime

from credit_schedule.exceptions import EntityNotFoundError, ReferentialIntegrityError
from credit_schedule.models import (
    Bank,
    Credit,
    Currency,
    GracePeriod,
    InterestRateKind,
    InterestRateType,
    User,
)


@dataclass
class CreditDataStore:
    """In-memory store for credits and the reference data they point to.

    Banks and currencies are looked up by case-insensitive name, interest
    rate types by kind. Grace periods and credits get sequential ids on save.
    """

    # Reference data
    users: dict[int, User] = field(default_factory=dict)
    banks: dict[str, Bank] = field(default_factory=dict)
    currencies: dict[str, Currency] = field(default_factory=dict)
    interest_rate_types: dict[InterestRateKind, InterestRateType] = field(default_factory=dict)

    # Credit data
    grace_periods: dict[int, GracePeriod] = field(default_factory=dict)
    credits: dict[int, Credit] = field(default_factory=dict)

    # Relationship indexes
    _user_credits: dict[int, list[int]] = field(default_factory=dict)

    _next_ids: dict[str, int] = field(default_factory=lambda: {
        "grace_periods": 1,
        "credits": 1,
    })

    @classmethod
    def with_defaults(cls) -> "CreditDataStore":
        """Create a store seeded with the reference data the bank offers."""
        store = cls()
        store.add_bank(Bank(bank_id=1, name="interbank"))
        store.add_currency(Currency(currency_id=1, name="sol", symbol="S/"))
        store.add_currency(Currency(currency_id=2, name="dolar", symbol="$"))
        store.add_interest_rate_type(InterestRateType(type_id=1, kind=InterestRateKind.NOMINAL))
        store.add_interest_rate_type(InterestRateType(type_id=2, kind=InterestRateKind.EFFECTIVE))
        return store

    def add_user(self, user: User) -> None:
        """Add a user to the store."""
        self.users[user.user_id] = user
        self._user_credits.setdefault(user.user_id, [])

    def add_bank(self, bank: Bank) -> None:
        """Add a bank to the store."""
        self.banks[bank.name.lower()] = bank

    def add_currency(self, currency: Currency) -> None:
        """Add a currency to the store."""
        self.currencies[currency.name.lower()] = currency

    def add_interest_rate_type(self, rate_type: InterestRateType) -> None:
        """Add an interest rate type to the store."""
        self.interest_rate_types[rate_type.kind] = rate_type

    # Lookups
    def get_user(self, user_id: int) -> User:
        """Get a user by id."""
        if user_id not in self.users:
            raise EntityNotFoundError("User doesn't exist")
        return self.users[user_id]

    def get_bank(self, name: str) -> Bank:
        """Get a bank by name."""
        bank = self.banks.get(name.lower())
        if bank is None:
            raise EntityNotFoundError("Bank doesn't exist")
        return bank

    def get_currency(self, name: str) -> Currency:
        """Get a currency by name."""
        currency = self.currencies.get(name.lower())
        if currency is None:
            raise EntityNotFoundError("Currency doesn't exist")
        return currency

    def get_interest_rate_type(self, kind: InterestRateKind) -> InterestRateType:
        """Get an interest rate type by kind."""
        rate_type = self.interest_rate_types.get(kind)
        if rate_type is None:
            raise EntityNotFoundError("Interest rate doesn't exist")
        return rate_type

    def get_grace_period(self, grace_period_id: int) -> GracePeriod:
        """Get a grace period by id."""
        if grace_period_id not in self.grace_periods:
            raise EntityNotFoundError(f"Grace period {grace_period_id} not found")
        return self.grace_periods[grace_period_id]

    def user_exists(self, user_id: int) -> bool:
        return user_id in self.users

    def credit_exists(self, credit_id: int) -> bool:
        return credit_id in self.credits

    # Persistence
    def save_grace_period(self, grace_period: GracePeriod) -> int:
        """Store a grace period, assigning its id."""
        grace_period.grace_period_id = self._take_id("grace_periods")
        self.grace_periods[grace_period.grace_period_id] = grace_period
        return grace_period.grace_period_id

    def delete_grace_period(self, grace_period_id: int) -> None:
        """Delete a grace period by id."""
        if grace_period_id not in self.grace_periods:
            raise EntityNotFoundError(f"Grace period {grace_period_id} not found")
        del self.grace_periods[grace_period_id]

    def save_credit(self, credit: Credit) -> int:
        """Store a credit, assigning its id."""
        if credit.user_id not in self.users:
            raise ReferentialIntegrityError(f"User {credit.user_id} not found")

        if credit.grace_period_id not in self.grace_periods:
            raise ReferentialIntegrityError(f"Grace period {credit.grace_period_id} not found")

        if credit.created_at is None:
            credit.created_at = datetime.now()
        credit.credit_id = self._take_id("credits")
        self.credits[credit.credit_id] = credit
        self._user_credits[credit.user_id].append(credit.credit_id)
        return credit.credit_id

    def find_credits_by_user(self, user_id: int) -> list[Credit]:
        """Get all credits for a user, in creation order."""
        credit_ids = self._user_credits.get(user_id, [])
        return [self.credits[cid] for cid in credit_ids]

    def delete_credit(self, credit_id: int) -> None:
        """Delete a credit and the grace period it owns."""
        if credit_id not in self.credits:
            raise EntityNotFoundError(f"Credit {credit_id} not found")

        credit = self.credits.pop(credit_id)
        self._user_credits[credit.user_id].remove(credit_id)
        self.grace_periods.pop(credit.grace_period_id, None)

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {
            "users": len(self.users),
            "banks": len(self.banks),
            "currencies": len(self.currencies),
            "interest_rate_types": len(self.interest_rate_types),
            "grace_periods": len(self.grace_periods),
            "credits": len(self.credits),
        }

    def _take_id(self, sequence: str) -> int:
        next_id = self._next_ids[sequence]
        self._next_ids[sequence] = next_id + 1
        return next_id
