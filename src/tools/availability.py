"""
Appointment availability against the fixed weekly booking window.

Requests are accepted Monday to Friday from the opening hour up to and
including the closing hour exactly (17:00 by default). Anything that
cannot be parsed into a real calendar date and clock time is rejected.
"""

import logging
import re
from datetime import date, time
from typing import Optional, TypedDict

from src.config import settings

logger = logging.getLogger(__name__)

_DATE_PATTERN = re.compile(r"^\s*(\d{1,4})-(\d{1,2})-(\d{1,2})\s*$", re.ASCII)
_TIME_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{1,2})(?::\d{1,2})?\s*$", re.ASCII)

# date.weekday(): Monday == 0 ... Sunday == 6
LAST_WORKING_WEEKDAY = 4


class AvailabilityResult(TypedDict):
    """Result from check_availability."""

    available: bool
    date: str
    time: str
    reason: Optional[str]
    message: str


def parse_date(value: str) -> Optional[date]:
    """Parse ``YYYY-MM-DD`` into a naive calendar date, None if invalid."""
    if not isinstance(value, str):
        return None
    match = _DATE_PATTERN.match(value)
    if not match:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_time(value: str) -> Optional[time]:
    """Parse ``HH:MM`` (seconds ignored), None if invalid."""
    if not isinstance(value, str):
        return None
    match = _TIME_PATTERN.match(value)
    if not match:
        return None
    hour, minute = (int(part) for part in match.groups())
    try:
        return time(hour, minute)
    except ValueError:
        return None


def describe_window() -> str:
    """Human readable booking window, e.g. ``Mon–Fri 8:00 AM–5:00 PM``."""
    return (
        f"Mon–Fri {_format_hour(settings.hours.open_hour)}"
        f"–{_format_hour(settings.hours.close_hour)}"
    )


def _format_hour(hour: int) -> str:
    suffix = "AM" if hour < 12 else "PM"
    return f"{hour % 12 or 12}:00 {suffix}"


def _rejection_reason(date_str: str, time_str: str) -> Optional[str]:
    requested_date = parse_date(date_str)
    requested_time = parse_time(time_str)
    if requested_date is None or requested_time is None:
        return "invalid_input"

    if requested_date.weekday() > LAST_WORKING_WEEKDAY:
        return "weekend"

    hour, minute = requested_time.hour, requested_time.minute
    if hour < settings.hours.open_hour or hour > settings.hours.close_hour:
        return "outside_hours"
    if hour == settings.hours.close_hour and minute != 0:
        return "outside_hours"
    return None


def is_available(date_str: str, time_str: str) -> bool:
    """Return True when the date/time falls inside the booking window."""
    return _rejection_reason(date_str, time_str) is None


def check_availability(date_str: str, time_str: str) -> AvailabilityResult:
    """
    Check a requested appointment slot and explain any rejection.

    ``reason`` is one of ``invalid_input``, ``weekend`` or
    ``outside_hours`` when unavailable, otherwise None.
    """
    reason = _rejection_reason(date_str, time_str)
    if reason is None:
        return {
            "available": True,
            "date": date_str,
            "time": time_str,
            "reason": None,
            "message": f"{date_str} at {time_str} is within our booking window.",
        }

    logger.info("Availability rejected (%s): %r %r", reason, date_str, time_str)
    return {
        "available": False,
        "date": date_str,
        "time": time_str,
        "reason": reason,
        "message": f"Outside our booking window ({describe_window()}).",
    }
