from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time


@dataclass(frozen=True)
class ManpowerTask:
    """Domain entity: one block of work logged by a user at a factory."""

    task_id: str
    user_id: str
    factory_id: str
    description: str
    work_date: date
    start_time: time
    end_time: time
