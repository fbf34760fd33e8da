from __future__ import annotations

import json
from dataclasses import replace
from datetime import date

import pytest
from werkzeug.security import check_password_hash

from src.factory_dashboard.factory_dashboard.core.exceptions import NotFoundError, ValidationError
from src.factory_dashboard.factory_dashboard.factories.model import Factory
from src.factory_dashboard.factory_dashboard.store.seed import DEFAULT_SEED, build_store, load_seed

FAST_HASH = "pbkdf2:sha256:1000"


def test_seed_is_loaded_and_passwords_are_hashed():
    store = build_store(password_hash_method=FAST_HASH)

    assert [u.user_id for u in store.users()] == ["admin", "u1", "u2"]
    assert len(store.master_plan_tasks()) == 3

    admin = store.get_user_by_username("Admin")
    assert admin.password_hash != "Pass@5601"
    assert check_password_hash(admin.password_hash, "Pass@5601")


def test_seed_is_injectable():
    store = build_store(
        {"factories": [{"id": "fx", "name": "Plant X", "location": "Chonburi"}]},
        password_hash_method=FAST_HASH,
    )

    assert store.users() == ()
    assert store.get_factory("fx").name == "Plant X"


def test_load_seed_reads_json_file(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps(DEFAULT_SEED), encoding="utf-8")

    store = build_store(load_seed(path), password_hash_method=FAST_HASH)

    assert store.get_project("p2").assigned_user_ids == ("u1", "u2")
    assert store.manpower_tasks()[0].work_date == date(2026, 2, 25)


def test_update_returns_new_collection_and_keeps_old_snapshot():
    store = build_store(password_hash_method=FAST_HASH)
    before = store.projects()

    updated = replace(store.get_project("p1"), progress=80)
    after = store.update_project(updated)

    assert after is store.projects()
    assert store.get_project("p1").progress == 80
    assert before[0].progress == 45
    assert [p.project_id for p in after] == ["p1", "p2"]


def test_update_unknown_id_raises():
    store = build_store(password_hash_method=FAST_HASH)
    ghost = replace(store.manpower_tasks()[0], task_id="nope")

    with pytest.raises(NotFoundError):
        store.update_manpower_task(ghost)


def test_add_appends_and_usernames_stay_unique():
    store = build_store(password_hash_method=FAST_HASH)

    factories = store.add_factory(Factory(factory_id="f3", name="Factory C", location="Chiang Mai"))
    assert factories[-1].factory_id == "f3"

    with pytest.raises(ValidationError):
        store.add_user(store.get_user("u1"))


def test_session_pointer():
    store = build_store(password_hash_method=FAST_HASH)
    assert store.current_user_id is None

    store.set_session("u1")
    assert store.current_user_id == "u1"

    store.clear_session()
    assert store.current_user_id is None


def _seed_with(**extra):
    seed = {
        "users": [{"id": "u1", "username": "somchai", "password": "password", "name": "Somchai", "role": "Engineer"}],
        "factories": [{"id": "f1", "name": "Factory A", "location": "Bangkok"}],
    }
    seed.update(extra)
    return seed


def test_seed_rejects_duplicate_usernames():
    twin = {"id": "u9", "username": "somchai", "password": "other", "name": "Twin", "role": "Engineer"}
    seed = _seed_with()
    seed["users"].append(twin)

    with pytest.raises(ValidationError):
        build_store(seed, password_hash_method=FAST_HASH)


@pytest.mark.parametrize(
    "extra",
    [
        {"projects": [{"id": "p9", "name": "X", "factoryId": "f1", "progress": 250, "startDate": "2026-03-01", "endDate": "2026-03-10"}]},
        {"projects": [{"id": "p9", "name": "X", "factoryId": "f1", "startDate": "2026-03-10", "endDate": "2026-03-01"}]},
        {"masterPlanTasks": [{"id": "t9", "projectId": "p1", "name": "X", "progress": -5, "startDate": "2026-03-01", "endDate": "2026-03-02"}]},
        {"masterPlanTasks": [{"id": "t9", "projectId": "p1", "name": "X", "startDate": "2026-03-02", "endDate": "2026-03-01"}]},
        {"manpowerTasks": [{"id": "m9", "userId": "u1", "factoryId": "f1", "description": "X", "date": "2026-03-01", "startTime": "12:00", "endTime": "08:00"}]},
    ],
)
def test_seed_records_are_validated(extra):
    with pytest.raises(ValidationError):
        build_store(_seed_with(**extra), password_hash_method=FAST_HASH)
