from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..access.policy import can_edit_master_plan_task, can_edit_project, visible_master_plan_tasks, visible_projects
from ..common.datetime_utils import parse_iso_date
from ..common.ids import new_id
from ..common.lookups import EntityLookup
from ..common.validators import require_date_order, require_non_empty, require_progress
from ..core.constants import ALL_PROJECTS
from ..core.enums import Granularity, ProjectStatus
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..export.rows import master_plan_rows
from ..filtering.query import ListQuery
from ..filtering.range_search import in_span_range, search
from ..projects.model import Project
from ..projects.repository import ProjectRepository
from ..sorting.engine import master_plan_sort_keys, sort_records
from ..timeline.bucketer import GanttLayout, layout
from ..users.model import User
from ..users.service import AuthService
from .model import MasterPlanTask
from .repository import MasterPlanTaskRepository

logger = logging.getLogger(__name__)


class MasterPlanService:
    """Use cases of the master plan screen (task table + Gantt)."""

    def __init__(self, tasks: MasterPlanTaskRepository, projects: ProjectRepository, auth: AuthService):
        self._tasks = tasks
        self._projects = projects
        self._auth = auth

    def _lookup(self) -> EntityLookup:
        return EntityLookup.build(projects=self._projects.projects())

    def visible_projects(self) -> list[Project]:
        """Projects offered in the project filter and the task form."""
        return visible_projects(self._projects.projects(), self._auth.require_user())

    def list_tasks(self, query: ListQuery = ListQuery()) -> list[MasterPlanTask]:
        """Access -> project filter -> optional date range -> search -> sort."""
        identity = self._auth.require_user()
        lookup = self._lookup()

        items = visible_master_plan_tasks(self._tasks.master_plan_tasks(), identity, lookup.project)
        if query.project_id and query.project_id != ALL_PROJECTS:
            items = [t for t in items if t.project_id == query.project_id]
        if query.has_range:
            items = in_span_range(items, query.start, query.end, mode=query.range_mode)
        items = search(
            items,
            query.search,
            [
                lambda t: t.name,
                lambda t: lookup.project_name(t.project_id),
            ],
        )
        return sort_records(items, query.sort, master_plan_sort_keys(lookup))

    def gantt(
        self,
        query: ListQuery = ListQuery(),
        granularity: Granularity = Granularity.DAY,
        *,
        today: Optional[date] = None,
    ) -> GanttLayout:
        return layout(self.list_tasks(query), granularity, today=today)

    def export_rows(self, query: ListQuery = ListQuery()) -> list[dict[str, str]]:
        return master_plan_rows(self.list_tasks(query), self._lookup())

    def _build(
        self,
        *,
        identity: User,
        task_id: str,
        project_id: str,
        name: str,
        status: "ProjectStatus | str",
        progress: int,
        start_date: "date | str",
        end_date: "date | str",
    ) -> MasterPlanTask:
        project = self._projects.get_project(project_id)
        if project is None:
            raise ValidationError("Project does not exist")
        if not can_edit_project(project, identity):
            raise AuthorizationError("You are not assigned to this project")

        try:
            status = ProjectStatus(status)
        except ValueError:
            raise ValidationError(f"Unknown status: {status!r}")

        start = parse_iso_date(start_date)
        end = parse_iso_date(end_date)
        require_date_order(start, end)

        return MasterPlanTask(
            task_id=task_id,
            project_id=project_id,
            name=require_non_empty(name, "Task name"),
            status=status,
            progress=require_progress(progress),
            start_date=start,
            end_date=end,
        )

    def add_task(
        self,
        *,
        project_id: str,
        name: str,
        start_date: "date | str",
        end_date: "date | str",
        status: "ProjectStatus | str" = ProjectStatus.NOT_STARTED,
        progress: int = 0,
    ) -> MasterPlanTask:
        identity = self._auth.require_user()
        task = self._build(
            identity=identity,
            task_id=new_id("mpt"),
            project_id=project_id,
            name=name,
            status=status,
            progress=progress,
            start_date=start_date,
            end_date=end_date,
        )
        self._tasks.add_master_plan_task(task)
        logger.info("master plan task %s added to %s by %s", task.task_id, project_id, identity.user_id)
        return task

    def update_task(
        self,
        *,
        task_id: str,
        project_id: str,
        name: str,
        status: "ProjectStatus | str",
        progress: int,
        start_date: "date | str",
        end_date: "date | str",
    ) -> MasterPlanTask:
        identity = self._auth.require_user()
        existing = next((t for t in self._tasks.master_plan_tasks() if t.task_id == task_id), None)
        if existing is None:
            raise NotFoundError("Task does not exist")
        if not can_edit_master_plan_task(existing, identity, self._projects.get_project):
            raise AuthorizationError("You cannot edit this task")

        task = self._build(
            identity=identity,
            task_id=task_id,
            project_id=project_id,
            name=name,
            status=status,
            progress=progress,
            start_date=start_date,
            end_date=end_date,
        )
        self._tasks.update_master_plan_task(task)
        logger.info("master plan task %s updated by %s", task_id, identity.user_id)
        return task
