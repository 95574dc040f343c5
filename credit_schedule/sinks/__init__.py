"""Output sinks for exporting computed schedules."""

from credit_schedule.sinks.console import ConsoleSink
from credit_schedule.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "JsonFileSink"]
