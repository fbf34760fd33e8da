from __future__ import annotations

from datetime import date
from typing import Callable, Iterable, Sequence, TypeVar

from ..core.enums import RangeMode

T = TypeVar("T")

FieldGetter = Callable[[T], str]


def _within(value: date, start: date, end: date) -> bool:
    return start <= value <= end


def in_range(records: Iterable[T], start: date, end: date, date_of: Callable[[T], date]) -> list[T]:
    """Keep single-date records whose date falls in [start, end] inclusive."""
    return [r for r in records if _within(date_of(r), start, end)]


def in_span_range(
    records: Iterable[T],
    start: date,
    end: date,
    *,
    mode: RangeMode = RangeMode.TOUCHES,
    start_of: Callable[[T], date] = lambda r: r.start_date,
    end_of: Callable[[T], date] = lambda r: r.end_date,
) -> list[T]:
    """Keep span records matched against the [start, end] window.

    TOUCHES: the record's start or end date lies inside the window. A record
    that starts before and ends after the window is dropped.
    OVERLAP: any intersection between the two intervals.
    """

    if mode == RangeMode.OVERLAP:
        return [r for r in records if start_of(r) <= end and end_of(r) >= start]
    return [r for r in records if _within(start_of(r), start, end) or _within(end_of(r), start, end)]


def search(records: Iterable[T], query: str, fields: Sequence[FieldGetter]) -> list[T]:
    """Case-insensitive substring match over the given display fields.

    An empty query keeps every record.
    """

    items = list(records)
    if not query:
        return items

    needle = query.lower()
    return [r for r in items if any(needle in (get(r) or "").lower() for get in fields)]
