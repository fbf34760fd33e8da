"""Flat, display-ready rows for the spreadsheet export.

One row per visible record, in the order the records are passed in.
Joined names are resolved; unresolved references show as "Unknown".
"""

from __future__ import annotations

from typing import Iterable

from ..common.lookups import EntityLookup
from ..core.constants import DATE_FORMAT, TIME_FORMAT, UNKNOWN_LABEL
from ..manpower.model import ManpowerTask
from ..masterplan.model import MasterPlanTask
from ..projects.model import Project
from ..sorting.engine import manpower_hours, span_days

MANPOWER_COLUMNS = [
    "Date",
    "User",
    "Role",
    "Factory",
    "Location",
    "Task",
    "Time",
    "StartTime",
    "EndTime",
    "Duration",
]

PROJECT_COLUMNS = [
    "ProjectName",
    "Factory",
    "Location",
    "Status",
    "Progress",
    "StartDate",
    "EndDate",
    "Duration",
    "AssignedUsers",
]

MASTER_PLAN_COLUMNS = [
    "Project",
    "TaskName",
    "Status",
    "Progress",
    "StartDate",
    "EndDate",
    "Duration",
]


def format_hours(hours: float) -> str:
    return f"{hours:.2f}"


def inclusive_days(record: Project | MasterPlanTask) -> int:
    """Day count shown on screen: both start and end day included."""
    return span_days(record) + 1


def manpower_rows(tasks: Iterable[ManpowerTask], lookup: EntityLookup) -> list[dict[str, str]]:
    rows: list[dict[str, str]] = []
    for t in tasks:
        user = lookup.user(t.user_id)
        factory = lookup.factory(t.factory_id)
        start = t.start_time.strftime(TIME_FORMAT)
        end = t.end_time.strftime(TIME_FORMAT)
        rows.append(
            {
                "Date": t.work_date.strftime(DATE_FORMAT),
                "User": user.name if user else UNKNOWN_LABEL,
                "Role": user.role if user else UNKNOWN_LABEL,
                "Factory": factory.name if factory else UNKNOWN_LABEL,
                "Location": factory.location if factory else UNKNOWN_LABEL,
                "Task": t.description,
                "Time": f"{start} - {end}",
                "StartTime": start,
                "EndTime": end,
                "Duration": format_hours(manpower_hours(t)),
            }
        )
    return rows


def project_rows(projects: Iterable[Project], lookup: EntityLookup) -> list[dict[str, str]]:
    rows: list[dict[str, str]] = []
    for p in projects:
        factory = lookup.factory(p.factory_id)
        assigned = ", ".join(lookup.user_name(uid, UNKNOWN_LABEL) for uid in p.assigned_user_ids)
        rows.append(
            {
                "ProjectName": p.name,
                "Factory": factory.name if factory else UNKNOWN_LABEL,
                "Location": factory.location if factory else UNKNOWN_LABEL,
                "Status": p.status.value,
                "Progress": f"{p.progress}%",
                "StartDate": p.start_date.strftime(DATE_FORMAT),
                "EndDate": p.end_date.strftime(DATE_FORMAT),
                "Duration": str(inclusive_days(p)),
                "AssignedUsers": assigned,
            }
        )
    return rows


def master_plan_rows(tasks: Iterable[MasterPlanTask], lookup: EntityLookup) -> list[dict[str, str]]:
    rows: list[dict[str, str]] = []
    for t in tasks:
        rows.append(
            {
                "Project": lookup.project_name(t.project_id, UNKNOWN_LABEL),
                "TaskName": t.name,
                "Status": t.status.value,
                "Progress": f"{t.progress}%",
                "StartDate": t.start_date.strftime(DATE_FORMAT),
                "EndDate": t.end_date.strftime(DATE_FORMAT),
                "Duration": str(inclusive_days(t)),
            }
        )
    return rows
