from __future__ import annotations

from datetime import date, datetime, time, timedelta

from ..core.constants import DATE_FORMAT, TIME_FORMAT
from ..core.exceptions import ValidationError


def parse_iso_date(value: str | date) -> date:
    """Parse YYYY-MM-DD string into date (dates pass through, datetimes are truncated)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date (YYYY-MM-DD): {value!r}")


def parse_hhmm(value: str | time) -> time:
    if isinstance(value, time):
        return value
    try:
        return datetime.strptime((value or "").strip(), TIME_FORMAT).time()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid time (HH:MM): {value!r}")


def hours_between(start: time, end: time) -> float:
    """Elapsed hours from start to end on the same nominal day.

    Negative when end is before start.
    """
    anchor = date(2000, 1, 1)
    delta = datetime.combine(anchor, end) - datetime.combine(anchor, start)
    return delta.total_seconds() / 3600


def start_of_week(value: date) -> date:
    """Monday of the week containing value."""
    return value - timedelta(days=value.weekday())


def start_of_month(value: date) -> date:
    return value.replace(day=1)


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()
