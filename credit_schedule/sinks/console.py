"""Console sink for inspecting schedules during development."""

from credit_schedule.models import ScheduleResult

_COLUMNS = (
    ("#", "period_index", 5),
    ("Balance", "opening_balance", 14),
    ("Amortization", "amortization", 14),
    ("Interest", "interest", 12),
    ("Lien ins.", "lien_insurance_amount", 11),
    ("All-risk ins.", "all_risk_insurance_amount", 14),
    ("Commission", "commission", 11),
    ("Total fee", "total_fee", 12),
)


class ConsoleSink:
    """Print schedules to stdout as a fixed-width table."""

    def __init__(self, max_periods: int | None = None) -> None:
        """Initialize console sink.

        Parameters
        ----------
        max_periods : int | None
            Maximum periods to print per schedule (None for all).
        """
        self.max_periods = max_periods
        self._counts: dict[str, int] = {}

    def write_schedule(self, name: str, result: ScheduleResult) -> None:
        """Print one schedule."""
        width = sum(w for _, _, w in _COLUMNS)
        print(f"\n{'=' * width}")
        print(f"Schedule: {name} ({len(result.periods)} periods, loan {result.loan_amount})")
        print("=" * width)
        print("".join(title.rjust(w) for title, _, w in _COLUMNS))

        periods = result.periods[: self.max_periods] if self.max_periods else result.periods
        for period in periods:
            print("".join(str(getattr(period, attr)).rjust(w) for _, attr, w in _COLUMNS))

        if self.max_periods and len(result.periods) > self.max_periods:
            print(f"... and {len(result.periods) - self.max_periods} more periods")

        print("-" * width)
        if result.periods:
            first = result.periods[0]
            print(f"TEA: {first.annual_rate_percent}%  TEM: {first.monthly_rate_percent}%")
        print(f"NPV: {result.net_present_value}  IRR: {result.internal_rate_of_return}")

        self._counts[name] = len(result.periods)

    def close(self) -> None:
        """Print summary."""
        print(f"\n{'=' * 40}")
        print("Console Sink Summary")
        print("=" * 40)
        for name, count in self._counts.items():
            print(f"  {name}: {count} periods")
