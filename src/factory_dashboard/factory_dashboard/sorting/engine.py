from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Optional, TypeVar

from ..common.datetime_utils import hours_between
from ..common.lookups import EntityLookup
from ..core.enums import SortDirection
from ..core.exceptions import ValidationError
from ..manpower.model import ManpowerTask
from ..masterplan.model import MasterPlanTask
from ..projects.model import Project
from .keys import SortKey

T = TypeVar("T")

KeyFunc = Callable[[T], Any]


@dataclass(frozen=True)
class SortState:
    """Current column ordering of a table."""

    key: SortKey
    direction: SortDirection = SortDirection.ASC

    @staticmethod
    def toggle(current: Optional["SortState"], key: "str | SortKey") -> "SortState":
        """Ordering after the user clicks ``key``.

        Clicking the active ascending column flips it to descending; any other
        click (new column, or active descending column) starts ascending.
        """

        key = SortKey.parse(key)
        if current is not None and current.key == key and current.direction == SortDirection.ASC:
            return SortState(key, SortDirection.DESC)
        return SortState(key, SortDirection.ASC)


def sort_records(
    records: Iterable[T],
    state: Optional[SortState],
    key_funcs: Mapping[SortKey, KeyFunc],
) -> list[T]:
    """Stable sort; equal keys keep their incoming relative order in both directions."""

    items = list(records)
    if state is None:
        return items

    key_func = key_funcs.get(state.key)
    if key_func is None:
        raise ValidationError(f"Cannot sort by {state.key.value!r} here")

    return sorted(items, key=key_func, reverse=state.direction == SortDirection.DESC)


def span_days(record: Project | MasterPlanTask) -> int:
    """end - start in whole days, without the inclusive +1 used for display."""
    return (record.end_date - record.start_date).days


def manpower_hours(task: ManpowerTask) -> float:
    return hours_between(task.start_time, task.end_time)


def manpower_sort_keys(lookup: EntityLookup) -> dict[SortKey, KeyFunc]:
    return {
        SortKey.DATE: lambda t: t.work_date,
        SortKey.DESCRIPTION: lambda t: t.description or "",
        SortKey.START_TIME: lambda t: t.start_time,
        SortKey.END_TIME: lambda t: t.end_time,
        SortKey.USER: lambda t: lookup.user_name(t.user_id),
        SortKey.FACTORY: lambda t: lookup.factory_name(t.factory_id),
        SortKey.DURATION: manpower_hours,
    }


def project_sort_keys(lookup: EntityLookup) -> dict[SortKey, KeyFunc]:
    return {
        SortKey.NAME: lambda p: p.name or "",
        SortKey.STATUS: lambda p: p.status.value,
        SortKey.PROGRESS: lambda p: p.progress,
        SortKey.START_DATE: lambda p: p.start_date,
        SortKey.END_DATE: lambda p: p.end_date,
        SortKey.FACTORY: lambda p: lookup.factory_name(p.factory_id),
        SortKey.DURATION: span_days,
    }


def master_plan_sort_keys(lookup: EntityLookup) -> dict[SortKey, KeyFunc]:
    return {
        SortKey.NAME: lambda t: t.name or "",
        SortKey.STATUS: lambda t: t.status.value,
        SortKey.PROGRESS: lambda t: t.progress,
        SortKey.START_DATE: lambda t: t.start_date,
        SortKey.END_DATE: lambda t: t.end_date,
        SortKey.PROJECT: lambda t: lookup.project_name(t.project_id),
        SortKey.DURATION: span_days,
    }
