"""Credit service: payment schedules and credit record management."""

import logging

from credit_schedule.config import CreditScheduleConfig
from credit_schedule.engine import LoanAdjuster, ScheduleCalculator
from credit_schedule.exceptions import (
    DuplicateCreditError,
    EntityNotFoundError,
    OperationFailedError,
    OutOfPolicyRangeError,
)
from credit_schedule.models import (
    CreateCreditRequest,
    Credit,
    CreditSummary,
    GracePeriod,
    ScheduleRequest,
    ScheduleResult,
)
from credit_schedule.store import CreditDataStore
from credit_schedule.validation import check

logger = logging.getLogger(__name__)

CREDIT_SAVED_MESSAGE = "Credit data saved successfully!!"
CREDIT_DELETED_MESSAGE = "Credit deleted successfully!!"


class CreditService:
    """Entry point for schedule computation and credit CRUD.

    Parameters
    ----------
    store : CreditDataStore | None
        Lookup and persistence collaborator. Defaults to a store seeded
        with the bank's reference data.
    config : CreditScheduleConfig | None
        Policy and schedule conventions.
    """

    def __init__(
        self,
        store: CreditDataStore | None = None,
        config: CreditScheduleConfig | None = None,
    ) -> None:
        self.store = store if store is not None else CreditDataStore.with_defaults()
        self.config = config or CreditScheduleConfig()
        self.adjuster = LoanAdjuster(self.config.policy, self.config.schedule.day_count_base)
        self.calculator = ScheduleCalculator(self.config.schedule)

    def compute_schedule(self, request: ScheduleRequest) -> ScheduleResult:
        """Compute the payment schedule for a request.

        Raises
        ------
        ValidationError
            If any declared field constraint is violated.
        EntityNotFoundError
            If the interest rate type, currency or bank is unknown.
        OutOfPolicyRangeError
            If the adjusted loan falls outside the loan-to-value band.
        """
        check(request).unwrap()
        self._resolve_references(request)

        try:
            adjusted = self.adjuster.adjust(request)
        except OutOfPolicyRangeError as e:
            logger.warning("Rejected schedule request: %s", e)
            raise

        result = self.calculator.calculate(adjusted)
        logger.debug(
            "Computed %d periods for loan %.2f (NPV=%s)",
            len(result.periods),
            adjusted.loan_amount,
            result.net_present_value,
        )
        return result

    def create_credit(self, request: CreateCreditRequest) -> str:
        """Persist a named credit for a user.

        Raises
        ------
        ValidationError
            If the request is invalid.
        EntityNotFoundError
            If the user or a referenced record does not exist.
        DuplicateCreditError
            If the user already has a credit with the same name.
        OperationFailedError
            If saving fails unexpectedly.
        """
        check(request).unwrap()
        financing = request.financing

        user = self.store.get_user(request.user_id)
        self._resolve_references(financing)

        if any(c.name == request.name for c in self.store.find_credits_by_user(user.user_id)):
            raise DuplicateCreditError(f"Credit with {request.name} already exists")

        grace_period_id = None
        try:
            grace_period_id = self.store.save_grace_period(
                GracePeriod(
                    grace_period_id=None,
                    amount_months=financing.grace_period_months,
                    is_total=financing.is_total_grace,
                    is_partial=financing.is_partial_grace,
                )
            )
            credit_id = self.store.save_credit(
                Credit(
                    credit_id=None,
                    name=request.name,
                    user_id=user.user_id,
                    rate=financing.annual_rate,
                    cok_rate=financing.cok_rate,
                    number_of_payments=financing.number_of_payments,
                    loan_amount=financing.loan_amount,
                    property_value=financing.property_value,
                    lien_insurance_rate=financing.lien_insurance_rate,
                    all_risk_insurance_rate=financing.all_risk_insurance_rate,
                    has_good_payer_bonus=financing.has_good_payer_bonus,
                    has_green_bonus=financing.has_green_bonus,
                    has_physical_shipping=financing.has_physical_shipping,
                    grace_period_id=grace_period_id,
                    interest_rate_kind=financing.interest_rate_kind,
                    currency_name=financing.currency_name,
                    bank_name=financing.bank_name,
                )
            )
        except Exception as e:
            # Roll back the grace period saved above
            if grace_period_id is not None:
                self.store.delete_grace_period(grace_period_id)
            logger.error("Failed to save credit %r for user %s: %s", request.name, user.user_id, e)
            raise OperationFailedError("The operation failed") from e

        logger.info(
            "Saved credit %s (%r) for user %s",
            credit_id,
            request.name,
            user.user_id,
            extra={"extra": {"credit_id": credit_id, "user_id": user.user_id}},
        )
        return CREDIT_SAVED_MESSAGE

    def list_credits_by_user(self, user_id: int) -> list[CreditSummary]:
        """List a user's credits with their resolved reference records."""
        if not self.store.user_exists(user_id):
            raise EntityNotFoundError(f"User with id {user_id} doesn't exist in the database")

        return [self._to_summary(credit) for credit in self.store.find_credits_by_user(user_id)]

    def delete_credit(self, credit_id: int) -> str:
        """Delete a credit by id."""
        if not self.store.credit_exists(credit_id):
            raise EntityNotFoundError(f"Credit with id {credit_id} doesn't exist in the database")

        try:
            self.store.delete_credit(credit_id)
        except Exception as e:
            logger.error("Failed to delete credit %s: %s", credit_id, e)
            raise OperationFailedError("The operation failed") from e

        logger.info("Deleted credit %s", credit_id, extra={"extra": {"credit_id": credit_id}})
        return CREDIT_DELETED_MESSAGE

    def _resolve_references(self, request: ScheduleRequest) -> None:
        self.store.get_interest_rate_type(request.interest_rate_kind)
        self.store.get_currency(request.currency_name)
        self.store.get_bank(request.bank_name)

    def _to_summary(self, credit: Credit) -> CreditSummary:
        return CreditSummary(
            credit_id=credit.credit_id,
            name=credit.name,
            rate=credit.rate,
            number_of_payments=credit.number_of_payments,
            loan_amount=credit.loan_amount,
            property_value=credit.property_value,
            lien_insurance_rate=credit.lien_insurance_rate,
            all_risk_insurance_rate=credit.all_risk_insurance_rate,
            has_good_payer_bonus=credit.has_good_payer_bonus,
            has_green_bonus=credit.has_green_bonus,
            has_physical_shipping=credit.has_physical_shipping,
            grace_period=self.store.get_grace_period(credit.grace_period_id),
            interest_rate=self.store.get_interest_rate_type(credit.interest_rate_kind),
            currency=self.store.get_currency(credit.currency_name),
            bank=self.store.get_bank(credit.bank_name),
        )
