"""Seeded sample data generators."""

from credit_schedule.generators.credit import (
    CreditRequestGenerator,
    ScheduleRequestGenerator,
    UserGenerator,
    sample_schedule_request,
)

__all__ = [
    "CreditRequestGenerator",
    "ScheduleRequestGenerator",
    "UserGenerator",
    "sample_schedule_request",
]
