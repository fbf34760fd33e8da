from __future__ import annotations

import importlib
import json

import config.testing
from config import get_settings_module
from src.factory_dashboard.factory_dashboard.main import create_app
from src.factory_dashboard.factory_dashboard.store.seed import DEFAULT_SEED


def test_settings_module_follows_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    assert get_settings_module() == "config.production"

    monkeypatch.setenv("APP_ENV", "TEST")
    assert get_settings_module() == "config.testing"

    monkeypatch.delenv("APP_ENV")
    assert get_settings_module() == "config.development"


def test_create_app_wires_seeded_services(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    container = create_app()

    assert len(container.store.users()) == len(DEFAULT_SEED["users"])
    assert container.auth_service.login("somchai", "password")
    assert [t.task_id for t in container.manpower_service.list_tasks()] == ["mt1"]


def test_create_app_reads_seed_file(monkeypatch, tmp_path):
    seed = {
        "users": [
            {"id": "a1", "username": "boss", "password": "letmein", "name": "Boss", "role": "Manager", "isAdmin": True}
        ],
        "factories": [],
    }
    path = tmp_path / "seed.json"
    path.write_text(json.dumps(seed), encoding="utf-8")
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setenv("SEED_PATH", str(path))

    importlib.reload(config.testing)
    try:
        container = create_app()
    finally:
        monkeypatch.delenv("SEED_PATH")
        importlib.reload(config.testing)

    assert container.auth_service.login("boss", "letmein")
    assert container.auth_service.current_user().is_admin
    assert container.store.projects() == ()
