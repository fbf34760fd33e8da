from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): services depend on this interface, not on the concrete store.
    """

    def users(self) -> Sequence[User]:
        raise NotImplementedError

    def get_user(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def get_user_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def add_user(self, user: User) -> Sequence[User]:
        raise NotImplementedError


class SessionRepository(Protocol):
    """Holds the authenticated-session pointer (one user id or nothing)."""

    @property
    def current_user_id(self) -> Optional[str]:
        raise NotImplementedError

    def set_session(self, user_id: str) -> None:
        raise NotImplementedError

    def clear_session(self) -> None:
        raise NotImplementedError
