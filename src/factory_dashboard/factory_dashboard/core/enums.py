from __future__ import annotations

from enum import Enum


class ProjectStatus(str, Enum):
    """Status shared by projects and master-plan tasks."""

    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class Granularity(str, Enum):
    """Calendar unit used for chart buckets and Gantt cells."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class RangeMode(str, Enum):
    """How a span record (start..end) is matched against a date window.

    TOUCHES keeps a record when either endpoint falls inside the window.
    A record spanning the whole window with both endpoints outside it is
    not kept. OVERLAP keeps any record whose interval intersects the window.
    """

    TOUCHES = "touches"
    OVERLAP = "overlap"
