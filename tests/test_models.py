"""Tests for request and schedule models."""

from dataclasses import FrozenInstanceError, replace

import pytest

from credit_schedule.exceptions import ValidationError
from credit_schedule.models import (
    CreateCreditRequest,
    GracePeriodKind,
    InterestRateKind,
    ScheduleRequest,
)


def _request(**overrides: object) -> ScheduleRequest:
    fields = dict(
        annual_rate=10.5,
        cok_rate=15.0,
        number_of_payments=240,
        property_value=200000.0,
        loan_amount=150000.0,
        lien_insurance_rate=0.028,
        all_risk_insurance_rate=0.30,
        has_physical_shipping=True,
        has_good_payer_bonus=False,
        has_green_bonus=False,
        interest_rate_kind=InterestRateKind.EFFECTIVE,
    )
    fields.update(overrides)
    return ScheduleRequest(**fields)


class TestScheduleRequest:
    """Tests for ScheduleRequest construction."""

    def test_defaults(self) -> None:
        request = _request()

        assert request.currency_name == "sol"
        assert request.bank_name == "interbank"
        assert request.grace_period_months == 0
        assert request.grace_period_kind == GracePeriodKind.NONE

    def test_frozen(self) -> None:
        request = _request()

        with pytest.raises(FrozenInstanceError):
            request.loan_amount = 1.0  # type: ignore[misc]

    def test_rate_kind_from_string(self) -> None:
        assert _request(interest_rate_kind="NOMINAL").interest_rate_kind == InterestRateKind.NOMINAL
        assert _request(interest_rate_kind="effective").interest_rate_kind == InterestRateKind.EFFECTIVE

    def test_unknown_rate_kind(self) -> None:
        with pytest.raises(ValidationError, match="interest_rate_kind must be one of: nominal, effective"):
            _request(interest_rate_kind="simple")

    def test_negative_loan_rejected(self) -> None:
        with pytest.raises(ValidationError, match="loan_amount must be greater than 0"):
            _request(loan_amount=-100.0)

    def test_violations_aggregated(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            _request(annual_rate=0, number_of_payments=0, property_value=-1, bank_name="")

        assert str(exc_info.value) == (
            "annual_rate must be greater than 0, "
            "number_of_payments must be greater than 0, "
            "property_value must be greater than 0, "
            "bank_name must not be blank"
        )

    def test_missing_flag_rejected(self) -> None:
        with pytest.raises(ValidationError, match="has_green_bonus must not be null"):
            _request(has_green_bonus=None)

    def test_fractional_payments_rejected(self) -> None:
        with pytest.raises(ValidationError, match="number_of_payments must be an integer"):
            _request(number_of_payments=12.5)

    def test_fractional_grace_months_rejected(self) -> None:
        with pytest.raises(ValidationError, match="grace_period_months must be an integer"):
            _request(grace_period_months=1.5)

    @pytest.mark.parametrize(
        "flag",
        [
            "has_physical_shipping",
            "has_good_payer_bonus",
            "has_green_bonus",
            "is_total_grace",
            "is_partial_grace",
        ],
    )
    def test_string_flag_rejected(self, flag: str) -> None:
        with pytest.raises(ValidationError, match=f"{flag} must be true or false"):
            _request(**{flag: "false"})

    def test_grace_period_kinds(self) -> None:
        assert _request(is_total_grace=True).grace_period_kind == GracePeriodKind.TOTAL
        assert _request(is_partial_grace=True).grace_period_kind == GracePeriodKind.PARTIAL

    def test_grace_period_total_and_partial(self) -> None:
        with pytest.raises(ValidationError, match="grace period cannot be both total and partial"):
            _request(is_total_grace=True, is_partial_grace=True)

    def test_replace_revalidates(self) -> None:
        with pytest.raises(ValidationError):
            replace(_request(), cok_rate=-1.0)


class TestCreateCreditRequest:
    """Tests for CreateCreditRequest construction."""

    def test_valid(self) -> None:
        request = CreateCreditRequest(user_id=1, name="Casa", financing=_request())

        assert request.financing.loan_amount == 150000.0

    def test_violations(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            CreateCreditRequest(user_id=0, name=" ", financing=None)  # type: ignore[arg-type]

        assert exc_info.value.errors == (
            "user_id must be greater than 0",
            "name must not be blank",
            "financing must not be null",
        )

    def test_fractional_user_id_rejected(self) -> None:
        with pytest.raises(ValidationError, match="user_id must be an integer"):
            CreateCreditRequest(user_id=1.5, name="Casa", financing=_request())  # type: ignore[arg-type]


class TestGracePeriodKind:
    """Tests for GracePeriodKind.from_flags."""

    def test_total_wins(self) -> None:
        assert GracePeriodKind.from_flags(True, True) == GracePeriodKind.TOTAL

    def test_none(self) -> None:
        assert GracePeriodKind.from_flags(False, False) == GracePeriodKind.NONE
