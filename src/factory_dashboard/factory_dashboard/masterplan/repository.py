from __future__ import annotations

from typing import Protocol, Sequence

from .model import MasterPlanTask


class MasterPlanTaskRepository(Protocol):
    def master_plan_tasks(self) -> Sequence[MasterPlanTask]:
        raise NotImplementedError

    def add_master_plan_task(self, task: MasterPlanTask) -> Sequence[MasterPlanTask]:
        raise NotImplementedError

    def update_master_plan_task(self, task: MasterPlanTask) -> Sequence[MasterPlanTask]:
        raise NotImplementedError
