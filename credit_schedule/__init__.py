"""Mortgage payment schedules with insurance, bonuses and NPV."""

from credit_schedule.config import CreditScheduleConfig
from credit_schedule.models import ScheduleRequest, ScheduleResult
from credit_schedule.services import CreditService

__version__ = "0.1.0"

__all__ = ["CreditScheduleConfig", "CreditService", "ScheduleRequest", "ScheduleResult"]
