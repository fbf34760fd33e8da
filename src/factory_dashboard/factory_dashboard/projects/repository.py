from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Project


class ProjectRepository(Protocol):
    def projects(self) -> Sequence[Project]:
        raise NotImplementedError

    def get_project(self, project_id: str) -> Optional[Project]:
        raise NotImplementedError

    def add_project(self, project: Project) -> Sequence[Project]:
        raise NotImplementedError

    def update_project(self, project: Project) -> Sequence[Project]:
        raise NotImplementedError
