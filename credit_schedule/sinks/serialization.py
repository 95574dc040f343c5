"""Shared serialization utilities for sinks."""

from dataclasses import asdict
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from credit_schedule.models import ScheduleResult


def dataclass_to_dict(obj: Any) -> dict:
    """Convert dataclass to dict with proper serialization."""
    result = {}
    for key, value in asdict(obj).items():
        result[key] = serialize_value(value)
    return result


def schedule_to_dict(result: ScheduleResult) -> dict:
    """Convert a schedule to the response payload.

    Periods come first, then the NPV and IRR, followed by the financed
    amount and grace period metadata.
    """
    return {
        "periods": [dataclass_to_dict(period) for period in result.periods],
        "net_present_value": serialize_value(result.net_present_value),
        "internal_rate_of_return": serialize_value(result.internal_rate_of_return),
        "loan_amount": serialize_value(result.loan_amount),
        "grace_period": {
            "kind": serialize_value(result.grace_period_kind),
            "months": result.grace_period_months,
        },
    }


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
