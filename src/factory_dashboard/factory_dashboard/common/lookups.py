from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..factories.model import Factory
from ..projects.model import Project
from ..users.model import User


@dataclass(frozen=True)
class EntityLookup:
    """Id -> record indexes over one store snapshot, used for joins.

    Unresolved ids give None (or the supplied default for display names),
    never an exception.
    """

    users_by_id: dict[str, User]
    factories_by_id: dict[str, Factory]
    projects_by_id: dict[str, Project]

    @classmethod
    def build(
        cls,
        *,
        users: Iterable[User] = (),
        factories: Iterable[Factory] = (),
        projects: Iterable[Project] = (),
    ) -> "EntityLookup":
        return cls(
            users_by_id={u.user_id: u for u in users},
            factories_by_id={f.factory_id: f for f in factories},
            projects_by_id={p.project_id: p for p in projects},
        )

    def user(self, user_id: str) -> Optional[User]:
        return self.users_by_id.get(user_id)

    def factory(self, factory_id: str) -> Optional[Factory]:
        return self.factories_by_id.get(factory_id)

    def project(self, project_id: str) -> Optional[Project]:
        return self.projects_by_id.get(project_id)

    def user_name(self, user_id: str, default: str = "") -> str:
        u = self.user(user_id)
        return u.name if u else default

    def factory_name(self, factory_id: str, default: str = "") -> str:
        f = self.factory(factory_id)
        return f.name if f else default

    def project_name(self, project_id: str, default: str = "") -> str:
        p = self.project(project_id)
        return p.name if p else default
