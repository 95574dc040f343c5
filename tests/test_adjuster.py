"""Tests for bonus adjustments and the loan-to-value check."""

from dataclasses import replace

import pytest

from credit_schedule.config import BonusBracket, PolicyConfig
from credit_schedule.engine.adjuster import LoanAdjuster, check_policy_range, good_payer_reduction
from credit_schedule.engine.rates import nominal_to_effective_annual
from credit_schedule.exceptions import OutOfPolicyRangeError
from credit_schedule.models import InterestRateKind, ScheduleRequest

BRACKETS = PolicyConfig().good_payer_brackets


@pytest.fixture
def adjuster() -> LoanAdjuster:
    return LoanAdjuster()


class TestGoodPayerReduction:
    """Tests for good_payer_reduction bracket lookup."""

    @pytest.mark.parametrize(
        ("property_value", "expected"),
        [
            (65200, 0),
            (65201, 25700),
            (93099, 25700),
            (93100, 0),
            (93101, 214000),
            (139400, 0),
            (139401, 19600),
            (232200, 0),
            (232201, 10800),
            (343899, 10800),
            (343900, 0),
            (500000, 0),
            (50000, 0),
        ],
    )
    def test_brackets(self, property_value: float, expected: float) -> None:
        """Bracket bounds are excluded on both sides."""
        assert good_payer_reduction(property_value, BRACKETS) == expected

    def test_custom_brackets(self) -> None:
        brackets = (BonusBracket(0, 1000, 50),)

        assert good_payer_reduction(500, brackets) == 50
        assert good_payer_reduction(1000, brackets) == 0

    def test_no_brackets(self) -> None:
        assert good_payer_reduction(100000, ()) == 0


class TestCheckPolicyRange:
    """Tests for check_policy_range."""

    def test_exactly_ninety_percent_accepted(self) -> None:
        check_policy_range(0.9 * 200000, 200000, PolicyConfig())

    def test_above_ninety_percent_rejected(self) -> None:
        with pytest.raises(OutOfPolicyRangeError):
            check_policy_range(0.91 * 200000, 200000, PolicyConfig())

    def test_below_floor_rejected(self) -> None:
        with pytest.raises(OutOfPolicyRangeError):
            check_policy_range(14000, 200000, PolicyConfig())

    def test_floor_accepted(self) -> None:
        check_policy_range(15000.5, 200000, PolicyConfig())

    def test_custom_ratios(self) -> None:
        policy = PolicyConfig(min_loan_ratio=0.2, max_loan_ratio=0.5)

        check_policy_range(50000, 100000, policy)
        with pytest.raises(OutOfPolicyRangeError):
            check_policy_range(60000, 100000, policy)


class TestLoanAdjuster:
    """Tests for LoanAdjuster.adjust."""

    def test_effective_rate_unchanged(self, adjuster: LoanAdjuster, sample_request: ScheduleRequest) -> None:
        adjusted = adjuster.adjust(sample_request)

        assert adjusted.effective_annual_rate == 10.5
        assert adjusted.loan_amount == 150000
        assert adjusted.good_payer_reduction == 0
        assert adjusted.green_bonus_reduction == 0

    def test_nominal_rate_converted(self, adjuster: LoanAdjuster, sample_request: ScheduleRequest) -> None:
        request = replace(sample_request, annual_rate=12.0, interest_rate_kind=InterestRateKind.NOMINAL)

        adjusted = adjuster.adjust(request)

        assert adjusted.effective_annual_rate == nominal_to_effective_annual(12.0)
        assert request.annual_rate == 12.0
        assert adjusted.request is request

    def test_good_payer_on_bracket_bound(self, adjuster: LoanAdjuster, sample_request: ScheduleRequest) -> None:
        """A property valued exactly at a bound gets no reduction."""
        request = replace(
            sample_request, property_value=93100, loan_amount=50000, has_good_payer_bonus=True
        )

        adjusted = adjuster.adjust(request)

        assert adjusted.good_payer_reduction == 0
        assert adjusted.loan_amount == 50000

    def test_good_payer_below_bound(self, adjuster: LoanAdjuster, sample_request: ScheduleRequest) -> None:
        request = replace(
            sample_request, property_value=93099, loan_amount=80000, has_good_payer_bonus=True
        )

        adjusted = adjuster.adjust(request)

        assert adjusted.good_payer_reduction == 25700
        assert adjusted.loan_amount == 54300

    def test_good_payer_above_bound_exceeds_loan(
        self, adjuster: LoanAdjuster, sample_request: ScheduleRequest
    ) -> None:
        """The second bracket reduction is larger than any loan it could apply to."""
        request = replace(
            sample_request, property_value=93101, loan_amount=80000, has_good_payer_bonus=True
        )

        with pytest.raises(OutOfPolicyRangeError):
            adjuster.adjust(request)

    def test_good_payer_applied_before_range_check(
        self, adjuster: LoanAdjuster, sample_request: ScheduleRequest
    ) -> None:
        """A loan above 90% is accepted when the bonus brings it back in range."""
        request = replace(
            sample_request, property_value=150000, loan_amount=140000, has_good_payer_bonus=True
        )

        adjusted = adjuster.adjust(request)

        assert adjusted.loan_amount == 120400

    def test_good_payer_ignored_without_flag(
        self, adjuster: LoanAdjuster, sample_request: ScheduleRequest
    ) -> None:
        request = replace(sample_request, property_value=150000, loan_amount=100000)

        assert adjuster.adjust(request).loan_amount == 100000

    def test_range_rejection(self, adjuster: LoanAdjuster, sample_request: ScheduleRequest) -> None:
        request = replace(sample_request, loan_amount=0.91 * 200000)

        with pytest.raises(OutOfPolicyRangeError):
            adjuster.adjust(request)

    def test_range_upper_bound_accepted(self, adjuster: LoanAdjuster, sample_request: ScheduleRequest) -> None:
        request = replace(sample_request, loan_amount=0.9 * 200000)

        assert adjuster.adjust(request).loan_amount == 0.9 * 200000

    def test_green_bonus_applied(self, adjuster: LoanAdjuster, sample_request: ScheduleRequest) -> None:
        request = replace(sample_request, has_green_bonus=True)

        adjusted = adjuster.adjust(request)

        assert adjusted.green_bonus_reduction == 5400
        assert adjusted.loan_amount == 144600

    def test_green_bonus_after_range_check(
        self, adjuster: LoanAdjuster, sample_request: ScheduleRequest
    ) -> None:
        """The green bonus can take the loan below the floor without rejection."""
        request = replace(sample_request, property_value=100000, loan_amount=8000, has_green_bonus=True)

        adjusted = adjuster.adjust(request)

        assert adjusted.loan_amount == 2600

    def test_green_bonus_not_counted_in_range_check(
        self, adjuster: LoanAdjuster, sample_request: ScheduleRequest
    ) -> None:
        request = replace(sample_request, property_value=100000, loan_amount=92000, has_green_bonus=True)

        with pytest.raises(OutOfPolicyRangeError):
            adjuster.adjust(request)

    def test_both_bonuses(self, adjuster: LoanAdjuster, sample_request: ScheduleRequest) -> None:
        request = replace(
            sample_request,
            property_value=250000,
            loan_amount=200000,
            has_good_payer_bonus=True,
            has_green_bonus=True,
        )

        adjusted = adjuster.adjust(request)

        assert adjusted.loan_amount == 200000 - 10800 - 5400

    def test_custom_green_amount(self, sample_request: ScheduleRequest) -> None:
        adjuster = LoanAdjuster(PolicyConfig(green_bonus_amount=1000))
        request = replace(sample_request, has_green_bonus=True)

        assert adjuster.adjust(request).loan_amount == 149000
