from __future__ import annotations

import re
from enum import Enum

from ..core.exceptions import ValidationError

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class SortKey(str, Enum):
    """Columns a table can be ordered by.

    Direct keys read a field of the record itself; derived keys join to a
    related entity's display name (user, factory, project) or compute an
    elapsed value (duration).
    """

    # direct
    DATE = "date"
    DESCRIPTION = "description"
    START_TIME = "start_time"
    END_TIME = "end_time"
    NAME = "name"
    STATUS = "status"
    PROGRESS = "progress"
    START_DATE = "start_date"
    END_DATE = "end_date"

    # derived
    USER = "user"
    FACTORY = "factory"
    PROJECT = "project"
    DURATION = "duration"

    @classmethod
    def parse(cls, value: "str | SortKey") -> "SortKey":
        """Accept enum members, snake_case values and camelCase column names."""
        if isinstance(value, SortKey):
            return value
        normalized = _CAMEL_BOUNDARY.sub("_", (value or "").strip()).lower()
        try:
            return cls(normalized)
        except ValueError:
            raise ValidationError(f"Unknown sort key: {value!r}")
