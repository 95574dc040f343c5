"""Sample users, schedule requests and credit requests."""

from typing import Iterator

from credit_schedule.generators.base import BaseGenerator
from credit_schedule.models import CreateCreditRequest, InterestRateKind, ScheduleRequest, User


def sample_schedule_request(cok_rate: float = 15.0) -> ScheduleRequest:
    """Return the reference scenario used to check the schedule by hand.

    10.5% effective annual rate, 240 payments, a 150 000 loan on a 200 000
    property, 0.028% lien and 0.30% all-risk insurance, physical shipping
    and no bonuses.
    """
    return ScheduleRequest(
        annual_rate=10.5,
        cok_rate=cok_rate,
        number_of_payments=240,
        property_value=200000,
        loan_amount=150000,
        lien_insurance_rate=0.0280,
        all_risk_insurance_rate=0.30,
        has_physical_shipping=True,
        has_good_payer_bonus=False,
        has_green_bonus=False,
        interest_rate_kind=InterestRateKind.EFFECTIVE,
        currency_name="sol",
        bank_name="interbank",
        grace_period_months=6,
    )


class UserGenerator(BaseGenerator):
    """Generate users with sequential ids."""

    def __init__(self, seed: int | None = None, start_id: int = 1) -> None:
        super().__init__(seed)
        self._next_id = start_id

    def generate(self) -> User:
        """Generate a user."""
        user = User(
            user_id=self._next_id,
            username=self.fake.user_name(),
            email=self.fake.email(),
        )
        self._next_id += 1
        return user

    def generate_batch(self, count: int) -> Iterator[User]:
        """Generate ``count`` users."""
        for _ in range(count):
            yield self.generate()


class ScheduleRequestGenerator(BaseGenerator):
    """Generate schedule requests that pass the loan-to-value check.

    Good payer bonuses are off by default: some brackets reduce the loan
    by more than a typical loan in that bracket, which would make most
    generated requests fail the policy check.
    """

    PAYMENT_TERMS = [60, 120, 180, 240, 300]

    def __init__(
        self,
        seed: int | None = None,
        nominal_rate_share: float = 0.3,
        green_bonus_rate: float = 0.2,
        good_payer_rate: float = 0.0,
    ) -> None:
        super().__init__(seed)
        self.nominal_rate_share = nominal_rate_share
        self.green_bonus_rate = green_bonus_rate
        self.good_payer_rate = good_payer_rate

    def generate(self) -> ScheduleRequest:
        """Generate a schedule request."""
        property_value = self.rng.randint(80, 600) * 1000
        # 50-85% loan-to-value, rounded to the thousand
        loan_amount = round(property_value * self.rng.uniform(0.50, 0.85) / 1000) * 1000

        kind = (
            InterestRateKind.NOMINAL
            if self.rng.random() < self.nominal_rate_share
            else InterestRateKind.EFFECTIVE
        )

        return ScheduleRequest(
            annual_rate=round(self.rng.uniform(7.0, 14.0), 2),
            cok_rate=round(self.rng.uniform(8.0, 20.0), 2),
            number_of_payments=self.rng.choice(self.PAYMENT_TERMS),
            property_value=float(property_value),
            loan_amount=float(loan_amount),
            lien_insurance_rate=round(self.rng.uniform(0.02, 0.05), 4),
            all_risk_insurance_rate=round(self.rng.uniform(0.20, 0.40), 2),
            has_physical_shipping=self.rng.random() < 0.5,
            has_good_payer_bonus=self.rng.random() < self.good_payer_rate,
            has_green_bonus=self.rng.random() < self.green_bonus_rate,
            interest_rate_kind=kind,
        )

    def generate_batch(self, count: int) -> Iterator[ScheduleRequest]:
        """Generate ``count`` schedule requests."""
        for _ in range(count):
            yield self.generate()


class CreditRequestGenerator(BaseGenerator):
    """Generate named credit requests for existing users."""

    def __init__(self, seed: int | None = None) -> None:
        super().__init__(seed)
        self._requests = ScheduleRequestGenerator(seed=seed)

    def generate(self, user_id: int) -> CreateCreditRequest:
        """Generate a credit request for ``user_id``."""
        return CreateCreditRequest(
            user_id=user_id,
            name=f"Credito {self.fake.unique.word().capitalize()}",
            financing=self._requests.generate(),
        )
