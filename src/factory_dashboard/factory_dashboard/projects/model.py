from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import ProjectStatus


@dataclass(frozen=True)
class Project:
    """Domain entity: Project, visible to admins and its assigned users."""

    project_id: str
    name: str
    factory_id: str
    status: ProjectStatus
    progress: int
    start_date: date
    end_date: date
    assigned_user_ids: tuple[str, ...] = ()
