from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import ProjectStatus


@dataclass(frozen=True)
class MasterPlanTask:
    """Domain entity: a phase of a Project drawn on the master-plan Gantt."""

    task_id: str
    project_id: str
    name: str
    status: ProjectStatus
    progress: int
    start_date: date
    end_date: date
