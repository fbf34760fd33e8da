from __future__ import annotations

from typing import Protocol, Sequence

from .model import ManpowerTask


class ManpowerTaskRepository(Protocol):
    def manpower_tasks(self) -> Sequence[ManpowerTask]:
        raise NotImplementedError

    def add_manpower_task(self, task: ManpowerTask) -> Sequence[ManpowerTask]:
        raise NotImplementedError

    def update_manpower_task(self, task: ManpowerTask) -> Sequence[ManpowerTask]:
        """Replace the record with the same task_id.

        Returns the new collection.
        """

        raise NotImplementedError
