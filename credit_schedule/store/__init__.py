"""Data stores for credit records."""

from credit_schedule.store.credit import CreditDataStore

__all__ = ["CreditDataStore"]
