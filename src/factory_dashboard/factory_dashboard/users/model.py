from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: plain data object; ``role`` is a free-text job title, access is
    decided by ``is_admin`` only.
    """

    user_id: str
    username: str
    password_hash: str
    name: str
    role: str
    is_admin: bool = False
