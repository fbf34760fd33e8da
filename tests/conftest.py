from __future__ import annotations

from datetime import date

import pytest

from src.factory_dashboard.factory_dashboard.container import build_container

FAST_HASH = "pbkdf2:sha256:1000"


@pytest.fixture
def container():
    return build_container(password_hash_method=FAST_HASH)


@pytest.fixture
def login(container):
    def _login(username: str, password: str = "password"):
        assert container.auth_service.login(username, password)
        return container.auth_service.current_user()

    return _login


@pytest.fixture
def as_admin(login):
    return login("Admin", "Pass@5601")


@pytest.fixture
def fixed_today() -> date:
    return date(2026, 10, 18)
