"""Enumeration types for credit entities."""

from enum import Enum


class InterestRateKind(str, Enum):
    NOMINAL = "nominal"
    EFFECTIVE = "effective"


class GracePeriodKind(str, Enum):
    NONE = "NONE"
    TOTAL = "TOTAL"  # No payment at all during the window
    PARTIAL = "PARTIAL"  # Interest-only during the window

    @classmethod
    def from_flags(cls, is_total: bool, is_partial: bool) -> "GracePeriodKind":
        """Map the total/partial flag pair to a kind."""
        if is_total:
            return cls.TOTAL
        if is_partial:
            return cls.PARTIAL
        return cls.NONE
