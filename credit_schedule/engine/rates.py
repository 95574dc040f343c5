"""Interest-rate conversions.

Percent inputs use the quoting convention (``10.5`` means 10.5%). Monthly
outputs are fractions (``0.0083`` means 0.83%) because they feed the
schedule arithmetic directly.
"""

DAY_COUNT_BASE = 360
DAYS_PER_MONTH = 30


def nominal_to_effective_annual(nominal_percent: float, day_count_base: int = DAY_COUNT_BASE) -> float:
    """Convert a nominal annual rate (TNA) to an effective annual rate (TEA).

    Compounds daily over a banking year of ``day_count_base`` days.

    Parameters
    ----------
    nominal_percent : float
        Nominal annual rate in percent.
    day_count_base : int
        Days in the banking year.

    Returns
    -------
    float
        Effective annual rate in percent.
    """
    daily = nominal_percent / 100 / day_count_base
    return ((1 + daily) ** day_count_base - 1) * 100


def annual_to_monthly_effective(
    annual_effective_percent: float,
    day_count_base: int = DAY_COUNT_BASE,
    days_per_month: int = DAYS_PER_MONTH,
) -> float:
    """Convert a TEA in percent to a monthly effective rate (TEM) fraction.

    Goes through the daily effective rate first and then compounds it over
    ``days_per_month`` days; the result differs slightly from a direct
    ``(1 + tea) ** (1 / 12) - 1`` and the schedule depends on this path.
    """
    daily = (1 + annual_effective_percent / 100) ** (1 / day_count_base) - 1
    return (1 + daily) ** days_per_month - 1


def annual_to_monthly_cok(annual_cok_percent: float) -> float:
    """Convert an annual opportunity cost of capital in percent to a monthly fraction."""
    return (1 + annual_cok_percent / 100) ** (1 / 12) - 1


def present_value(flow: float, rate: float, period: int) -> float:
    """Discount ``flow`` occurring at ``period`` back to period 0."""
    return flow / (1 + rate) ** period
