from __future__ import annotations

import pytest

from src.factory_dashboard.factory_dashboard.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ValidationError,
)


def test_admin_adds_user_who_can_log_in(container, as_admin):
    user = container.settings_service.add_user(
        username="kanya",
        password="secret1",
        name="Kanya",
        role="Planner",
    )

    assert user.password_hash != "secret1"
    assert not user.is_admin

    container.auth_service.logout()
    assert container.auth_service.login("kanya", "secret1")
    assert container.auth_service.current_user() == user


def test_add_user_validation(container, as_admin):
    svc = container.settings_service

    with pytest.raises(ValidationError):
        svc.add_user(username="somchai", password="secret1", name="Dup", role="Engineer")
    with pytest.raises(ValidationError):
        svc.add_user(username="short", password="12345", name="Short", role="Engineer")
    with pytest.raises(ValidationError):
        svc.add_user(username=" ", password="secret1", name="Blank", role="Engineer")


def test_admin_adds_factory(container, as_admin):
    factory = container.settings_service.add_factory(name="Factory C", location="Chiang Mai")

    assert container.settings_service.list_factories()[-1] == factory


def test_non_admin_cannot_change_settings(container, login):
    login("somchai")
    svc = container.settings_service

    assert len(svc.list_users()) == 3
    with pytest.raises(AuthorizationError):
        svc.add_factory(name="Factory C", location="Chiang Mai")
    with pytest.raises(AuthorizationError):
        svc.add_user(username="x", password="secret1", name="X", role="Y")


def test_anonymous_cannot_read_settings(container):
    with pytest.raises(AuthenticationError):
        container.settings_service.list_factories()
