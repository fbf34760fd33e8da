from __future__ import annotations

import logging
from datetime import date, time

from ..access.policy import can_edit_manpower_task, visible_manpower_tasks, visible_users
from ..common.datetime_utils import parse_hhmm, parse_iso_date
from ..common.ids import new_id
from ..common.lookups import EntityLookup
from ..common.validators import require_non_empty, require_time_order
from ..core.enums import Granularity
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..export.rows import manpower_rows
from ..factories.repository import FactoryRepository
from ..filtering.query import ListQuery
from ..filtering.range_search import in_range, search
from ..sorting.engine import manpower_sort_keys, sort_records
from ..timeline.bucketer import UserChart, user_charts
from ..users.repository import UserRepository
from ..users.service import AuthService
from .model import ManpowerTask
from .repository import ManpowerTaskRepository

logger = logging.getLogger(__name__)


class ManpowerService:
    """Use cases of the manpower tracking screen."""

    def __init__(
        self,
        tasks: ManpowerTaskRepository,
        users: UserRepository,
        factories: FactoryRepository,
        auth: AuthService,
    ):
        self._tasks = tasks
        self._users = users
        self._factories = factories
        self._auth = auth

    def _lookup(self) -> EntityLookup:
        return EntityLookup.build(users=self._users.users(), factories=self._factories.factories())

    def list_tasks(self, query: ListQuery = ListQuery()) -> list[ManpowerTask]:
        """Access -> date range -> search -> sort."""
        identity = self._auth.require_user()
        lookup = self._lookup()

        items = visible_manpower_tasks(self._tasks.manpower_tasks(), identity)
        if query.has_range:
            items = in_range(items, query.start, query.end, lambda t: t.work_date)
        items = search(
            items,
            query.search,
            [
                lambda t: t.description,
                lambda t: lookup.user_name(t.user_id),
                lambda t: lookup.factory_name(t.factory_id),
            ],
        )
        return sort_records(items, query.sort, manpower_sort_keys(lookup))

    def charts(self, query: ListQuery = ListQuery(), granularity: Granularity = Granularity.WEEK) -> list[UserChart]:
        identity = self._auth.require_user()
        tasks = self.list_tasks(query)
        return user_charts(
            visible_users(self._users.users(), identity),
            tasks,
            granularity,
            date_of=lambda t: t.work_date,
            belongs_to=lambda t, user_id: t.user_id == user_id,
        )

    def export_rows(self, query: ListQuery = ListQuery()) -> list[dict[str, str]]:
        return manpower_rows(self.list_tasks(query), self._lookup())

    def _build(
        self,
        *,
        task_id: str,
        user_id: str,
        factory_id: str,
        description: str,
        work_date: "date | str",
        start_time: "time | str",
        end_time: "time | str",
    ) -> ManpowerTask:
        if not self._users.get_user(user_id):
            raise ValidationError("User does not exist")
        if not self._factories.get_factory(factory_id):
            raise ValidationError("Factory does not exist")

        start = parse_hhmm(start_time)
        end = parse_hhmm(end_time)
        require_time_order(start, end)

        return ManpowerTask(
            task_id=task_id,
            user_id=user_id,
            factory_id=factory_id,
            description=require_non_empty(description, "Description"),
            work_date=parse_iso_date(work_date),
            start_time=start,
            end_time=end,
        )

    def add_task(
        self,
        *,
        factory_id: str,
        description: str,
        work_date: "date | str",
        start_time: "time | str",
        end_time: "time | str",
        user_id: str | None = None,
    ) -> ManpowerTask:
        identity = self._auth.require_user()
        user_id = user_id or identity.user_id
        if not identity.is_admin and user_id != identity.user_id:
            raise AuthorizationError("You can only log tasks for yourself")

        task = self._build(
            task_id=new_id("mt"),
            user_id=user_id,
            factory_id=factory_id,
            description=description,
            work_date=work_date,
            start_time=start_time,
            end_time=end_time,
        )
        self._tasks.add_manpower_task(task)
        logger.info("manpower task %s logged by %s", task.task_id, identity.user_id)
        return task

    def update_task(
        self,
        *,
        task_id: str,
        user_id: str,
        factory_id: str,
        description: str,
        work_date: "date | str",
        start_time: "time | str",
        end_time: "time | str",
    ) -> ManpowerTask:
        identity = self._auth.require_user()
        existing = next((t for t in self._tasks.manpower_tasks() if t.task_id == task_id), None)
        if existing is None:
            raise NotFoundError("Task does not exist")
        if not can_edit_manpower_task(existing, identity):
            raise AuthorizationError("You cannot edit this task")

        task = self._build(
            task_id=task_id,
            user_id=user_id,
            factory_id=factory_id,
            description=description,
            work_date=work_date,
            start_time=start_time,
            end_time=end_time,
        )
        if not can_edit_manpower_task(task, identity):
            raise AuthorizationError("You cannot assign tasks to another user")

        self._tasks.update_manpower_task(task)
        logger.info("manpower task %s updated by %s", task_id, identity.user_id)
        return task
