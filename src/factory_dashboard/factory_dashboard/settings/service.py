from __future__ import annotations

import logging
from typing import Optional

from werkzeug.security import generate_password_hash

from ..common.ids import new_id
from ..common.validators import require_min_length, require_non_empty
from ..core.exceptions import AuthorizationError, ValidationError
from ..factories.model import Factory
from ..factories.repository import FactoryRepository
from ..users.model import User
from ..users.repository import UserRepository
from ..users.service import AuthService

logger = logging.getLogger(__name__)


class SettingsService:
    """Use case: manage users and factories (admin)."""

    def __init__(
        self,
        users: UserRepository,
        factories: FactoryRepository,
        auth: AuthService,
        *,
        password_hash_method: Optional[str] = None,
    ):
        self._users = users
        self._factories = factories
        self._auth = auth
        self._password_hash_method = password_hash_method

    def _require_admin(self) -> User:
        identity = self._auth.require_user()
        if not identity.is_admin:
            raise AuthorizationError("Only administrators can change settings")
        return identity

    def list_users(self) -> list[User]:
        self._auth.require_user()
        return list(self._users.users())

    def list_factories(self) -> list[Factory]:
        self._auth.require_user()
        return list(self._factories.factories())

    def add_user(
        self,
        *,
        username: str,
        password: str,
        name: str,
        role: str,
        is_admin: bool = False,
    ) -> User:
        admin = self._require_admin()

        username = require_non_empty(username, "Username")
        name = require_non_empty(name, "Name")
        require_min_length(password, "Password", 6)

        if self._users.get_user_by_username(username):
            raise ValidationError("Username already exists")

        kwargs = {"method": self._password_hash_method} if self._password_hash_method else {}
        user = User(
            user_id=new_id("u"),
            username=username,
            password_hash=generate_password_hash(password, **kwargs),
            name=name,
            role=(role or "").strip(),
            is_admin=bool(is_admin),
        )
        self._users.add_user(user)
        logger.info("user %s created by %s", user.user_id, admin.user_id)
        return user

    def add_factory(self, *, name: str, location: str) -> Factory:
        admin = self._require_admin()
        factory = Factory(
            factory_id=new_id("f"),
            name=require_non_empty(name, "Factory name"),
            location=require_non_empty(location, "Location"),
        )
        self._factories.add_factory(factory)
        logger.info("factory %s created by %s", factory.factory_id, admin.user_id)
        return factory
