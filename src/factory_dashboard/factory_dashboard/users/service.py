from __future__ import annotations

import logging
from typing import Optional

from werkzeug.security import check_password_hash

from ..core.exceptions import AuthenticationError
from .model import User
from .repository import SessionRepository, UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: authenticate user (login/logout) and expose the session identity.

    Session states: anonymous <-> authenticated. No timeout, no token.
    """

    def __init__(self, users: UserRepository, session: SessionRepository):
        self._users = users
        self._session = session

    def login(self, username: str, password: str) -> bool:
        """Start a session on exact username + password match.

        Unknown username and wrong password give the same False result.
        """

        user = self._users.get_user_by_username(username or "")

        try:
            ok = bool(user) and check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. unsupported or corrupted hash values
            ok = False

        if not ok:
            logger.info("login failed")
            return False

        self._session.set_session(user.user_id)
        logger.info("login ok user_id=%s", user.user_id)
        return True

    def logout(self) -> None:
        if self._session.current_user_id:
            logger.info("logout user_id=%s", self._session.current_user_id)
        self._session.clear_session()

    def current_user(self) -> Optional[User]:
        user_id = self._session.current_user_id
        if not user_id:
            return None
        return self._users.get_user(user_id)

    def require_user(self) -> User:
        user = self.current_user()
        if user is None:
            raise AuthenticationError("Please log in to continue")
        return user
