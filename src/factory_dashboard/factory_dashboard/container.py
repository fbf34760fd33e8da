from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .export.excel import ExcelExporter
from .manpower.service import ManpowerService
from .masterplan.service import MasterPlanService
from .projects.service import ProjectService
from .settings.service import SettingsService
from .store.memory_store import InMemoryEntityStore
from .store.seed import build_store
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    store: InMemoryEntityStore

    auth_service: AuthService
    manpower_service: ManpowerService
    project_service: ProjectService
    master_plan_service: MasterPlanService
    settings_service: SettingsService
    exporter: ExcelExporter


def build_container(
    *,
    seed: Optional[Mapping[str, Any]] = None,
    store: Optional[InMemoryEntityStore] = None,
    password_hash_method: Optional[str] = None,
) -> Container:
    """Wire one store to every service.

    Pass ``store`` to reuse an existing store, otherwise one is built from
    ``seed`` (the bundled demo seed when None).
    """

    store = store or build_store(seed, password_hash_method=password_hash_method)

    auth_service = AuthService(store, store)
    manpower_service = ManpowerService(store, store, store, auth_service)
    project_service = ProjectService(store, store, store, auth_service)
    master_plan_service = MasterPlanService(store, store, auth_service)
    settings_service = SettingsService(store, store, auth_service, password_hash_method=password_hash_method)

    return Container(
        store=store,
        auth_service=auth_service,
        manpower_service=manpower_service,
        project_service=project_service,
        master_plan_service=master_plan_service,
        settings_service=settings_service,
        exporter=ExcelExporter(),
    )
