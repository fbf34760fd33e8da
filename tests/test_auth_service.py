from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.factory_dashboard.factory_dashboard.core.exceptions import AuthenticationError
from src.factory_dashboard.factory_dashboard.users.model import User
from src.factory_dashboard.factory_dashboard.users.service import AuthService


@dataclass
class InMemoryUsers:
    users_by_username: dict[str, User]

    def get_user(self, user_id: str) -> Optional[User]:
        return next((u for u in self.users_by_username.values() if u.user_id == user_id), None)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.users_by_username.get(username)


class InMemorySession:
    def __init__(self):
        self.current_user_id = None

    def set_session(self, user_id: str) -> None:
        self.current_user_id = user_id

    def clear_session(self) -> None:
        self.current_user_id = None


def _auth() -> tuple[AuthService, InMemorySession]:
    user = User(
        user_id="u1",
        username="somchai",
        password_hash=generate_password_hash("right", method="pbkdf2:sha256:1000"),
        name="Somchai",
        role="Engineer",
    )
    session = InMemorySession()
    return AuthService(InMemoryUsers({"somchai": user}), session), session


def test_login_success_sets_session():
    auth, session = _auth()

    assert auth.login("somchai", "right") is True
    assert session.current_user_id == "u1"
    assert auth.current_user().name == "Somchai"


def test_wrong_password_and_unknown_user_look_the_same():
    auth, session = _auth()

    assert auth.login("somchai", "wrong") is False
    assert auth.login("nobody", "right") is False
    assert session.current_user_id is None


def test_username_match_is_exact():
    auth, _ = _auth()

    assert auth.login("Somchai", "right") is False


def test_logout_returns_to_anonymous():
    auth, session = _auth()
    auth.login("somchai", "right")

    auth.logout()

    assert session.current_user_id is None
    assert auth.current_user() is None


def test_require_user_fails_fast_when_anonymous():
    auth, _ = _auth()

    with pytest.raises(AuthenticationError):
        auth.require_user()


def test_seeded_admin_can_login(container):
    assert container.auth_service.login("Admin", "Pass@5601")
    assert container.auth_service.current_user().is_admin
