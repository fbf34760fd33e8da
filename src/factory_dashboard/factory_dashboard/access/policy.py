from __future__ import annotations

from typing import Callable, Iterable, Optional

from ..manpower.model import ManpowerTask
from ..masterplan.model import MasterPlanTask
from ..projects.model import Project
from ..users.model import User

ProjectLookup = Callable[[str], Optional[Project]]


def can_edit_manpower_task(task: ManpowerTask, identity: Optional[User]) -> bool:
    if identity is None:
        return False
    return identity.is_admin or task.user_id == identity.user_id


def can_edit_project(project: Project, identity: Optional[User]) -> bool:
    if identity is None:
        return False
    return identity.is_admin or identity.user_id in project.assigned_user_ids


def can_edit_master_plan_task(task: MasterPlanTask, identity: Optional[User], get_project: ProjectLookup) -> bool:
    """Mirrors the parent project; an unresolved parent is only editable by admins."""
    if identity is None:
        return False
    if identity.is_admin:
        return True
    project = get_project(task.project_id)
    return project is not None and can_edit_project(project, identity)


def visible_manpower_tasks(tasks: Iterable[ManpowerTask], identity: Optional[User]) -> list[ManpowerTask]:
    return [t for t in tasks if can_edit_manpower_task(t, identity)]


def visible_projects(projects: Iterable[Project], identity: Optional[User]) -> list[Project]:
    return [p for p in projects if can_edit_project(p, identity)]


def visible_master_plan_tasks(
    tasks: Iterable[MasterPlanTask],
    identity: Optional[User],
    get_project: ProjectLookup,
) -> list[MasterPlanTask]:
    return [t for t in tasks if can_edit_master_plan_task(t, identity, get_project)]


def visible_users(users: Iterable[User], identity: Optional[User]) -> list[User]:
    """Users whose charts the identity may see: everyone for admins, else only itself."""
    if identity is None:
        return []
    if identity.is_admin:
        return list(users)
    return [u for u in users if u.user_id == identity.user_id]
