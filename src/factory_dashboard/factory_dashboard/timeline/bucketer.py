from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Callable, Iterable, Optional, Sequence, TypeVar

from ..common.datetime_utils import today_local
from ..core.constants import TIMELINE_PAD_DAYS
from ..core.enums import Granularity
from ..users.model import User
from .factory import TimeUnitFactory

T = TypeVar("T")

_units = TimeUnitFactory()


@dataclass(frozen=True)
class UserChart:
    user_id: str
    user_name: str
    buckets: dict[str, int]


@dataclass(frozen=True)
class GanttCell:
    start: date
    label: str
    sublabel: str


@dataclass(frozen=True)
class GanttBar:
    record: Any
    offset: int
    length: int
    progress: int

    @property
    def progress_length(self) -> float:
        """Filled part of the bar, in the same units as ``length``."""
        return self.length * self.progress / 100


@dataclass(frozen=True)
class GanttLayout:
    granularity: Granularity
    origin: date
    horizon: date
    unit_count: int
    cells: list[GanttCell]
    bars: list[GanttBar]


def bucket(records: Iterable[T], granularity: "Granularity | str", date_of: Callable[[T], date]) -> dict[str, int]:
    """Count records per week/month label, in first-seen order.

    Only labels with at least one record appear.
    """

    unit = _units.for_granularity(granularity)
    counts: dict[str, int] = {}
    for r in records:
        label = unit.bucket_label(date_of(r))
        counts[label] = counts.get(label, 0) + 1
    return counts


def user_charts(
    users: Sequence[User],
    records: Sequence[T],
    granularity: "Granularity | str",
    *,
    date_of: Callable[[T], date],
    belongs_to: Callable[[T, str], bool],
) -> list[UserChart]:
    """One chart per user shown; users with no records get no chart.

    ``users`` is expected to be already narrowed to the identities the
    caller may see.
    """

    charts: list[UserChart] = []
    for u in users:
        owned = [r for r in records if belongs_to(r, u.user_id)]
        buckets = bucket(owned, granularity, date_of)
        if buckets:
            charts.append(UserChart(user_id=u.user_id, user_name=u.name, buckets=buckets))
    return charts


def layout(
    records: Sequence[Any],
    granularity: "Granularity | str",
    *,
    today: Optional[date] = None,
) -> GanttLayout:
    """Gantt timeline for span records (anything with start_date/end_date/progress)."""

    unit = _units.for_granularity(granularity)
    items = list(records)

    if not items:
        origin = horizon = today or today_local()
        unit_count = 0
    else:
        origin = min(r.start_date for r in items) - timedelta(days=TIMELINE_PAD_DAYS)
        horizon = max(r.end_date for r in items) + timedelta(days=TIMELINE_PAD_DAYS)
        unit_count = unit.diff(origin, horizon) + 1

    first_cell = unit.cell_start(origin)
    cells = []
    for i in range(max(unit_count, 1)):
        start = unit.add(first_cell, i)
        label, sublabel = unit.cell_label(start)
        cells.append(GanttCell(start=start, label=label, sublabel=sublabel))

    bars = [
        GanttBar(
            record=r,
            offset=unit.diff(origin, r.start_date),
            length=max(unit.diff(r.start_date, r.end_date) + 1, 1),
            progress=int(r.progress),
        )
        for r in items
    ]

    return GanttLayout(
        granularity=unit.granularity,
        origin=origin,
        horizon=horizon,
        unit_count=unit_count,
        cells=cells,
        bars=bars,
    )
