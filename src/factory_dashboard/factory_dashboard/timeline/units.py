from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, timedelta

from dateutil.relativedelta import relativedelta

from ..common.datetime_utils import start_of_month, start_of_week
from ..core.constants import MONTH_LABEL_FORMAT, WEEK_LABEL_FORMAT
from ..core.enums import Granularity
from ..core.exceptions import ValidationError


class TimeUnit(ABC):
    """Strategy Pattern: calendar arithmetic for one granularity.

    Differences count calendar boundaries crossed (days, Monday-started
    weeks, months), so week and month distances are never derived from a
    day count.
    """

    granularity: Granularity

    @abstractmethod
    def diff(self, earlier: date, later: date) -> int:
        raise NotImplementedError

    @abstractmethod
    def cell_start(self, value: date) -> date:
        """First day of the cell that contains value."""
        raise NotImplementedError

    @abstractmethod
    def add(self, value: date, count: int) -> date:
        raise NotImplementedError

    @abstractmethod
    def cell_label(self, value: date) -> tuple[str, str]:
        """(primary, secondary) header text for a Gantt cell."""
        raise NotImplementedError

    def bucket_label(self, value: date) -> str:
        raise ValidationError(f"Charts cannot be grouped by {self.granularity.value}")


class DayUnit(TimeUnit):
    granularity = Granularity.DAY

    def diff(self, earlier: date, later: date) -> int:
        return (later - earlier).days

    def cell_start(self, value: date) -> date:
        return value

    def add(self, value: date, count: int) -> date:
        return value + timedelta(days=count)

    def cell_label(self, value: date) -> tuple[str, str]:
        return value.strftime("%d"), value.strftime("%b")


class WeekUnit(TimeUnit):
    granularity = Granularity.WEEK

    def diff(self, earlier: date, later: date) -> int:
        return (start_of_week(later) - start_of_week(earlier)).days // 7

    def cell_start(self, value: date) -> date:
        return start_of_week(value)

    def add(self, value: date, count: int) -> date:
        return value + timedelta(weeks=count)

    def cell_label(self, value: date) -> tuple[str, str]:
        return f"W{value.isocalendar()[1]}", value.strftime("%y")

    def bucket_label(self, value: date) -> str:
        return start_of_week(value).strftime(WEEK_LABEL_FORMAT)


class MonthUnit(TimeUnit):
    granularity = Granularity.MONTH

    def diff(self, earlier: date, later: date) -> int:
        return (later.year - earlier.year) * 12 + (later.month - earlier.month)

    def cell_start(self, value: date) -> date:
        return start_of_month(value)

    def add(self, value: date, count: int) -> date:
        return value + relativedelta(months=count)

    def cell_label(self, value: date) -> tuple[str, str]:
        return value.strftime("%b"), value.strftime("%y")

    def bucket_label(self, value: date) -> str:
        return start_of_month(value).strftime(MONTH_LABEL_FORMAT)
