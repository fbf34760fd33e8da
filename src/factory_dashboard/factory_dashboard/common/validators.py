from __future__ import annotations

from datetime import date, time
from typing import Iterable

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_progress(value: int) -> int:
    try:
        progress = int(value)
    except (TypeError, ValueError):
        raise ValidationError("Progress must be a number")
    if progress < 0 or progress > 100:
        raise ValidationError("Progress must be between 0 and 100")
    return progress


def require_date_order(start: date, end: date) -> None:
    if end < start:
        raise ValidationError("End date must not be before start date")


def require_time_order(start: time, end: time) -> None:
    if end <= start:
        raise ValidationError("End time must be after start time")


def unique_ids(values: Iterable[str]) -> tuple[str, ...]:
    """Drop duplicates, keeping first-seen order."""
    return tuple(dict.fromkeys(v for v in values if v))
