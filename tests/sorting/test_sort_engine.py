from __future__ import annotations

from datetime import date, time

import pytest

from src.factory_dashboard.factory_dashboard.common.lookups import EntityLookup
from src.factory_dashboard.factory_dashboard.core.enums import SortDirection
from src.factory_dashboard.factory_dashboard.core.exceptions import ValidationError
from src.factory_dashboard.factory_dashboard.manpower.model import ManpowerTask
from src.factory_dashboard.factory_dashboard.sorting.engine import (
    SortState,
    manpower_sort_keys,
    project_sort_keys,
    sort_records,
)
from src.factory_dashboard.factory_dashboard.sorting.keys import SortKey
from src.factory_dashboard.factory_dashboard.users.model import User


def _task(task_id: str, hours: int, user_id: str = "u1") -> ManpowerTask:
    return ManpowerTask(
        task_id=task_id,
        user_id=user_id,
        factory_id="f1",
        description=task_id,
        work_date=date(2026, 2, 25),
        start_time=time(8, 0),
        end_time=time(8 + hours, 0),
    )


def _ids(records):
    return [r.task_id for r in records]


def test_toggle_cycles_asc_desc_and_resets_on_new_key():
    first = SortState.toggle(None, "duration")
    assert first == SortState(SortKey.DURATION, SortDirection.ASC)

    second = SortState.toggle(first, "duration")
    assert second.direction == SortDirection.DESC

    assert SortState.toggle(second, "duration").direction == SortDirection.ASC
    assert SortState.toggle(second, "startTime") == SortState(SortKey.START_TIME, SortDirection.ASC)


def test_sort_key_parse_accepts_camel_case_and_rejects_unknown():
    assert SortKey.parse("startDate") is SortKey.START_DATE
    assert SortKey.parse("end_time") is SortKey.END_TIME

    with pytest.raises(ValidationError):
        SortKey.parse("color")


def test_duration_sort_is_stable_in_both_directions():
    xs = [_task("a", 4), _task("b", 2), _task("c", 4), _task("d", 1)]
    keys = manpower_sort_keys(EntityLookup.build())

    asc = sort_records(xs, SortState(SortKey.DURATION), keys)
    assert _ids(asc) == ["d", "b", "a", "c"]

    desc = sort_records(asc, SortState(SortKey.DURATION, SortDirection.DESC), keys)
    assert _ids(desc) == ["a", "c", "b", "d"]


def test_no_sort_state_keeps_incoming_order():
    xs = [_task("b", 2), _task("a", 1)]

    out = sort_records(xs, None, manpower_sort_keys(EntityLookup.build()))

    assert _ids(out) == ["b", "a"]
    assert out is not xs


def test_user_sort_uses_display_name_and_unknown_sorts_first():
    lookup = EntityLookup.build(
        users=[
            User(user_id="u1", username="somchai", password_hash="", name="Somchai", role="Engineer"),
            User(user_id="u2", username="somsri", password_hash="", name="Somsri", role="Technician"),
        ]
    )
    xs = [_task("a", 1, "u2"), _task("b", 1, "ghost"), _task("c", 1, "u1")]

    out = sort_records(xs, SortState(SortKey.USER), manpower_sort_keys(lookup))

    assert _ids(out) == ["b", "c", "a"]


def test_key_not_available_for_entity_is_rejected():
    with pytest.raises(ValidationError):
        sort_records([], SortState(SortKey.USER), project_sort_keys(EntityLookup.build()))
