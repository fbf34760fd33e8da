from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence, TypeVar

from ..core.exceptions import NotFoundError, ValidationError
from ..factories.model import Factory
from ..manpower.model import ManpowerTask
from ..masterplan.model import MasterPlanTask
from ..projects.model import Project
from ..users.model import User

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _replace(items: tuple[T, ...], record: T, key: Callable[[T], str]) -> tuple[T, ...]:
    record_id = key(record)
    if not any(key(item) == record_id for item in items):
        raise NotFoundError(f"Record {record_id} does not exist")
    return tuple(record if key(item) == record_id else item for item in items)


class InMemoryEntityStore:
    """Single source of truth for the dashboard.

    Every collection is an immutable tuple. Mutations rebind a new tuple and
    return it, so a snapshot handed to a reader never changes underneath it.
    Records are never removed.
    """

    def __init__(
        self,
        *,
        users: Sequence[User] = (),
        factories: Sequence[Factory] = (),
        manpower_tasks: Sequence[ManpowerTask] = (),
        projects: Sequence[Project] = (),
        master_plan_tasks: Sequence[MasterPlanTask] = (),
    ):
        self._users = tuple(users)
        self._factories = tuple(factories)
        self._manpower_tasks = tuple(manpower_tasks)
        self._projects = tuple(projects)
        self._master_plan_tasks = tuple(master_plan_tasks)
        self._current_user_id: Optional[str] = None

    # Users
    def users(self) -> tuple[User, ...]:
        return self._users

    def get_user(self, user_id: str) -> Optional[User]:
        return next((u for u in self._users if u.user_id == user_id), None)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._users if u.username == username), None)

    def add_user(self, user: User) -> tuple[User, ...]:
        if self.get_user_by_username(user.username):
            raise ValidationError("Username already exists")
        self._users = self._users + (user,)
        logger.info("user added id=%s username=%s", user.user_id, user.username)
        return self._users

    # Factories
    def factories(self) -> tuple[Factory, ...]:
        return self._factories

    def get_factory(self, factory_id: str) -> Optional[Factory]:
        return next((f for f in self._factories if f.factory_id == factory_id), None)

    def add_factory(self, factory: Factory) -> tuple[Factory, ...]:
        self._factories = self._factories + (factory,)
        logger.info("factory added id=%s", factory.factory_id)
        return self._factories

    # Manpower tasks
    def manpower_tasks(self) -> tuple[ManpowerTask, ...]:
        return self._manpower_tasks

    def add_manpower_task(self, task: ManpowerTask) -> tuple[ManpowerTask, ...]:
        self._manpower_tasks = self._manpower_tasks + (task,)
        logger.debug("manpower task added id=%s", task.task_id)
        return self._manpower_tasks

    def update_manpower_task(self, task: ManpowerTask) -> tuple[ManpowerTask, ...]:
        self._manpower_tasks = _replace(self._manpower_tasks, task, lambda t: t.task_id)
        logger.debug("manpower task updated id=%s", task.task_id)
        return self._manpower_tasks

    # Projects
    def projects(self) -> tuple[Project, ...]:
        return self._projects

    def get_project(self, project_id: str) -> Optional[Project]:
        return next((p for p in self._projects if p.project_id == project_id), None)

    def add_project(self, project: Project) -> tuple[Project, ...]:
        self._projects = self._projects + (project,)
        logger.debug("project added id=%s", project.project_id)
        return self._projects

    def update_project(self, project: Project) -> tuple[Project, ...]:
        self._projects = _replace(self._projects, project, lambda p: p.project_id)
        logger.debug("project updated id=%s", project.project_id)
        return self._projects

    # Master plan tasks
    def master_plan_tasks(self) -> tuple[MasterPlanTask, ...]:
        return self._master_plan_tasks

    def add_master_plan_task(self, task: MasterPlanTask) -> tuple[MasterPlanTask, ...]:
        self._master_plan_tasks = self._master_plan_tasks + (task,)
        logger.debug("master plan task added id=%s", task.task_id)
        return self._master_plan_tasks

    def update_master_plan_task(self, task: MasterPlanTask) -> tuple[MasterPlanTask, ...]:
        self._master_plan_tasks = _replace(self._master_plan_tasks, task, lambda t: t.task_id)
        logger.debug("master plan task updated id=%s", task.task_id)
        return self._master_plan_tasks

    # Session
    @property
    def current_user_id(self) -> Optional[str]:
        return self._current_user_id

    def set_session(self, user_id: str) -> None:
        self._current_user_id = user_id

    def clear_session(self) -> None:
        self._current_user_id = None
