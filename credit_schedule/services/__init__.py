"""Services composing the schedule engine with the data store."""

from credit_schedule.services.credit_service import CreditService

__all__ = ["CreditService"]
