from __future__ import annotations

from datetime import date

from src.factory_dashboard.factory_dashboard.access.policy import (
    can_edit_master_plan_task,
    visible_manpower_tasks,
    visible_master_plan_tasks,
    visible_projects,
    visible_users,
)
from src.factory_dashboard.factory_dashboard.core.enums import ProjectStatus
from src.factory_dashboard.factory_dashboard.masterplan.model import MasterPlanTask
from src.factory_dashboard.factory_dashboard.store.seed import build_store

FAST_HASH = "pbkdf2:sha256:1000"


def _store():
    return build_store(password_hash_method=FAST_HASH)


def test_non_admin_sees_only_own_manpower_tasks():
    store = _store()
    u1 = store.get_user("u1")

    visible = visible_manpower_tasks(store.manpower_tasks(), u1)

    assert [t.task_id for t in visible] == ["mt1"]


def test_admin_sees_every_collection_unchanged():
    store = _store()
    admin = store.get_user("admin")

    assert visible_manpower_tasks(store.manpower_tasks(), admin) == list(store.manpower_tasks())
    assert visible_projects(store.projects(), admin) == list(store.projects())
    assert visible_master_plan_tasks(store.master_plan_tasks(), admin, store.get_project) == list(store.master_plan_tasks())
    assert visible_users(store.users(), admin) == list(store.users())


def test_project_visible_iff_assigned():
    store = _store()

    for user in store.users():
        if user.is_admin:
            continue
        visible = {p.project_id for p in visible_projects(store.projects(), user)}
        expected = {p.project_id for p in store.projects() if user.user_id in p.assigned_user_ids}
        assert visible == expected


def test_master_plan_task_follows_parent_project():
    store = _store()
    u2 = store.get_user("u2")

    visible = visible_master_plan_tasks(store.master_plan_tasks(), u2, store.get_project)

    assert [t.task_id for t in visible] == ["mpt3"]
    assert not can_edit_master_plan_task(store.master_plan_tasks()[0], u2, store.get_project)


def test_orphan_master_plan_task_hidden_from_non_admins():
    store = _store()
    orphan = MasterPlanTask(
        task_id="x",
        project_id="missing",
        name="Orphan",
        status=ProjectStatus.NOT_STARTED,
        progress=0,
        start_date=date(2026, 1, 1),
        end_date=date(2026, 1, 2),
    )

    assert visible_master_plan_tasks([orphan], store.get_user("u1"), store.get_project) == []
    assert visible_master_plan_tasks([orphan], store.get_user("admin"), store.get_project) == [orphan]


def test_no_identity_sees_nothing():
    store = _store()

    assert visible_manpower_tasks(store.manpower_tasks(), None) == []
    assert visible_projects(store.projects(), None) == []
    assert visible_master_plan_tasks(store.master_plan_tasks(), None, store.get_project) == []
    assert visible_users(store.users(), None) == []


def test_non_admin_charts_only_for_self():
    store = _store()

    assert [u.user_id for u in visible_users(store.users(), store.get_user("u2"))] == ["u2"]
