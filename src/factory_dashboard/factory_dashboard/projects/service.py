from __future__ import annotations

import logging
from datetime import date
from typing import Iterable

from ..access.policy import can_edit_project, visible_projects, visible_users
from ..common.datetime_utils import parse_iso_date
from ..common.ids import new_id
from ..common.lookups import EntityLookup
from ..common.validators import require_date_order, require_non_empty, require_progress, unique_ids
from ..core.enums import Granularity, ProjectStatus
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..export.rows import project_rows
from ..factories.repository import FactoryRepository
from ..filtering.query import ListQuery
from ..filtering.range_search import in_span_range, search
from ..sorting.engine import project_sort_keys, sort_records
from ..timeline.bucketer import UserChart, user_charts
from ..users.model import User
from ..users.repository import UserRepository
from ..users.service import AuthService
from .model import Project
from .repository import ProjectRepository

logger = logging.getLogger(__name__)


class ProjectService:
    """Use cases of the project tracking screen."""

    def __init__(
        self,
        projects: ProjectRepository,
        users: UserRepository,
        factories: FactoryRepository,
        auth: AuthService,
    ):
        self._projects = projects
        self._users = users
        self._factories = factories
        self._auth = auth

    def _lookup(self) -> EntityLookup:
        return EntityLookup.build(users=self._users.users(), factories=self._factories.factories())

    def list_projects(self, query: ListQuery = ListQuery()) -> list[Project]:
        identity = self._auth.require_user()
        lookup = self._lookup()

        items = visible_projects(self._projects.projects(), identity)
        if query.has_range:
            items = in_span_range(items, query.start, query.end, mode=query.range_mode)
        items = search(
            items,
            query.search,
            [
                lambda p: p.name,
                lambda p: lookup.factory_name(p.factory_id),
            ],
        )
        return sort_records(items, query.sort, project_sort_keys(lookup))

    def charts(self, query: ListQuery = ListQuery(), granularity: Granularity = Granularity.WEEK) -> list[UserChart]:
        """Projects per assigned user, bucketed by project start date."""
        identity = self._auth.require_user()
        projects = self.list_projects(query)
        return user_charts(
            visible_users(self._users.users(), identity),
            projects,
            granularity,
            date_of=lambda p: p.start_date,
            belongs_to=lambda p, user_id: user_id in p.assigned_user_ids,
        )

    def export_rows(self, query: ListQuery = ListQuery()) -> list[dict[str, str]]:
        return project_rows(self.list_projects(query), self._lookup())

    def _build(
        self,
        *,
        identity: User,
        project_id: str,
        name: str,
        factory_id: str,
        status: "ProjectStatus | str",
        progress: int,
        start_date: "date | str",
        end_date: "date | str",
        assigned_user_ids: Iterable[str],
    ) -> Project:
        if not self._factories.get_factory(factory_id):
            raise ValidationError("Factory does not exist")

        try:
            status = ProjectStatus(status)
        except ValueError:
            raise ValidationError(f"Unknown status: {status!r}")

        start = parse_iso_date(start_date)
        end = parse_iso_date(end_date)
        require_date_order(start, end)

        assigned = unique_ids(assigned_user_ids)
        if not identity.is_admin and not assigned:
            assigned = (identity.user_id,)
        for uid in assigned:
            if not self._users.get_user(uid):
                raise ValidationError(f"User {uid} does not exist")

        return Project(
            project_id=project_id,
            name=require_non_empty(name, "Project name"),
            factory_id=factory_id,
            status=status,
            progress=require_progress(progress),
            start_date=start,
            end_date=end,
            assigned_user_ids=assigned,
        )

    def add_project(
        self,
        *,
        name: str,
        factory_id: str,
        start_date: "date | str",
        end_date: "date | str",
        status: "ProjectStatus | str" = ProjectStatus.NOT_STARTED,
        progress: int = 0,
        assigned_user_ids: Iterable[str] = (),
    ) -> Project:
        identity = self._auth.require_user()
        project = self._build(
            identity=identity,
            project_id=new_id("p"),
            name=name,
            factory_id=factory_id,
            status=status,
            progress=progress,
            start_date=start_date,
            end_date=end_date,
            assigned_user_ids=assigned_user_ids,
        )
        if not can_edit_project(project, identity):
            raise ValidationError("You must be assigned to the projects you create")

        self._projects.add_project(project)
        logger.info("project %s created by %s", project.project_id, identity.user_id)
        return project

    def update_project(
        self,
        *,
        project_id: str,
        name: str,
        factory_id: str,
        status: "ProjectStatus | str",
        progress: int,
        start_date: "date | str",
        end_date: "date | str",
        assigned_user_ids: Iterable[str],
    ) -> Project:
        identity = self._auth.require_user()
        existing = self._projects.get_project(project_id)
        if existing is None:
            raise NotFoundError("Project does not exist")
        if not can_edit_project(existing, identity):
            raise AuthorizationError("You cannot edit this project")

        project = self._build(
            identity=identity,
            project_id=project_id,
            name=name,
            factory_id=factory_id,
            status=status,
            progress=progress,
            start_date=start_date,
            end_date=end_date,
            assigned_user_ids=assigned_user_ids,
        )
        if not can_edit_project(project, identity):
            raise ValidationError("You cannot remove yourself from a project")

        self._projects.update_project(project)
        logger.info("project %s updated by %s", project_id, identity.user_id)
        return project
