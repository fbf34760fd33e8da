from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any, Mapping, Optional

from werkzeug.security import generate_password_hash

from ..common.datetime_utils import parse_hhmm, parse_iso_date
from ..common.validators import require_date_order, require_progress, require_time_order, unique_ids
from ..core.exceptions import ValidationError
from ..core.enums import ProjectStatus
from ..factories.model import Factory
from ..manpower.model import ManpowerTask
from ..masterplan.model import MasterPlanTask
from ..projects.model import Project
from ..users.model import User
from .memory_store import InMemoryEntityStore

logger = logging.getLogger(__name__)

# Demo data loaded when no SEED_PATH is configured.
# Plaintext passwords are hashed by build_store() and never kept in the store.
DEFAULT_SEED: dict[str, list[dict[str, Any]]] = {
    "users": [
        {"id": "admin", "username": "Admin", "password": "Pass@5601", "name": "Administrator", "role": "Admin", "isAdmin": True},
        {"id": "u1", "username": "somchai", "password": "password", "name": "Somchai", "role": "Engineer", "isAdmin": False},
        {"id": "u2", "username": "somsri", "password": "password", "name": "Somsri", "role": "Technician", "isAdmin": False},
    ],
    "factories": [
        {"id": "f1", "name": "Factory A", "location": "Bangkok"},
        {"id": "f2", "name": "Factory B", "location": "Rayong"},
    ],
    "manpowerTasks": [
        {"id": "mt1", "userId": "u1", "factoryId": "f1", "description": "Maintenance", "date": "2026-02-25", "startTime": "08:00", "endTime": "12:00"},
        {"id": "mt2", "userId": "u2", "factoryId": "f2", "description": "Inspection", "date": "2026-02-25", "startTime": "13:00", "endTime": "17:00"},
    ],
    "projects": [
        {"id": "p1", "name": "Upgrade Line 1", "factoryId": "f1", "status": "In Progress", "progress": 45, "startDate": "2026-02-01", "endDate": "2026-03-15", "assignedUserIds": ["u1"]},
        {"id": "p2", "name": "New Installation", "factoryId": "f2", "status": "Not Started", "progress": 0, "startDate": "2026-03-01", "endDate": "2026-04-30", "assignedUserIds": ["u1", "u2"]},
    ],
    "masterPlanTasks": [
        {"id": "mpt1", "projectId": "p1", "name": "Design Phase", "status": "Completed", "progress": 100, "startDate": "2026-02-01", "endDate": "2026-02-10"},
        {"id": "mpt2", "projectId": "p1", "name": "Implementation", "status": "In Progress", "progress": 30, "startDate": "2026-02-11", "endDate": "2026-03-10"},
        {"id": "mpt3", "projectId": "p2", "name": "Planning", "status": "Not Started", "progress": 0, "startDate": "2026-03-01", "endDate": "2026-03-15"},
    ],
}


def load_seed(path: str | Path) -> dict[str, Any]:
    """Read a seed file with the same shape as DEFAULT_SEED."""

    path = Path(path)
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Seed file {path} must contain a JSON object")
    return data


def _user(raw: Mapping[str, Any], *, method: Optional[str]) -> User:
    password_hash = raw.get("passwordHash")
    if not password_hash:
        kwargs = {"method": method} if method else {}
        password_hash = generate_password_hash(str(raw["password"]), **kwargs)
    return User(
        user_id=str(raw["id"]),
        username=str(raw["username"]),
        password_hash=password_hash,
        name=str(raw["name"]),
        role=str(raw.get("role", "")),
        is_admin=bool(raw.get("isAdmin", False)),
    )


def _factory(raw: Mapping[str, Any]) -> Factory:
    return Factory(factory_id=str(raw["id"]), name=str(raw["name"]), location=str(raw.get("location", "")))


def _span(raw: Mapping[str, Any]) -> tuple[date, date]:
    start = parse_iso_date(raw["startDate"])
    end = parse_iso_date(raw["endDate"])
    require_date_order(start, end)
    return start, end


def _manpower_task(raw: Mapping[str, Any]) -> ManpowerTask:
    start = parse_hhmm(raw["startTime"])
    end = parse_hhmm(raw["endTime"])
    require_time_order(start, end)
    return ManpowerTask(
        task_id=str(raw["id"]),
        user_id=str(raw["userId"]),
        factory_id=str(raw["factoryId"]),
        description=str(raw.get("description", "")),
        work_date=parse_iso_date(raw["date"]),
        start_time=start,
        end_time=end,
    )


def _project(raw: Mapping[str, Any]) -> Project:
    start, end = _span(raw)
    return Project(
        project_id=str(raw["id"]),
        name=str(raw["name"]),
        factory_id=str(raw["factoryId"]),
        status=ProjectStatus(raw.get("status", ProjectStatus.NOT_STARTED.value)),
        progress=require_progress(raw.get("progress", 0)),
        start_date=start,
        end_date=end,
        assigned_user_ids=unique_ids(str(uid) for uid in raw.get("assignedUserIds", [])),
    )


def _master_plan_task(raw: Mapping[str, Any]) -> MasterPlanTask:
    start, end = _span(raw)
    return MasterPlanTask(
        task_id=str(raw["id"]),
        project_id=str(raw["projectId"]),
        name=str(raw["name"]),
        status=ProjectStatus(raw.get("status", ProjectStatus.NOT_STARTED.value)),
        progress=require_progress(raw.get("progress", 0)),
        start_date=start,
        end_date=end,
    )


def build_store(
    seed: Optional[Mapping[str, Any]] = None,
    *,
    password_hash_method: Optional[str] = None,
) -> InMemoryEntityStore:
    seed = DEFAULT_SEED if seed is None else seed

    users = [_user(u, method=password_hash_method) for u in seed.get("users", [])]
    seen: set[str] = set()
    for u in users:
        if u.username in seen:
            raise ValidationError(f"Duplicate username in seed: {u.username!r}")
        seen.add(u.username)

    store = InMemoryEntityStore(
        users=users,
        factories=[_factory(f) for f in seed.get("factories", [])],
        manpower_tasks=[_manpower_task(t) for t in seed.get("manpowerTasks", [])],
        projects=[_project(p) for p in seed.get("projects", [])],
        master_plan_tasks=[_master_plan_task(t) for t in seed.get("masterPlanTasks", [])],
    )
    logger.info(
        "store seeded users=%d factories=%d manpower_tasks=%d projects=%d master_plan_tasks=%d",
        len(store.users()),
        len(store.factories()),
        len(store.manpower_tasks()),
        len(store.projects()),
        len(store.master_plan_tasks()),
    )
    return store
