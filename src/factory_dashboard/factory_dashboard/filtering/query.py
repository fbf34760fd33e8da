from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.constants import ALL_PROJECTS
from ..core.enums import RangeMode
from ..sorting.engine import SortState


@dataclass(frozen=True)
class ListQuery:
    """Parameters the presentation layer passes for one table/chart render.

    The date window applies only when both ends are given. ``project_id``
    is used by the master plan only.
    """

    start: Optional[date] = None
    end: Optional[date] = None
    search: str = ""
    sort: Optional[SortState] = None
    range_mode: RangeMode = RangeMode.TOUCHES
    project_id: str = ALL_PROJECTS

    @property
    def has_range(self) -> bool:
        return self.start is not None and self.end is not None
