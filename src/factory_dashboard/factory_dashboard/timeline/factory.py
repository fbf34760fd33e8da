from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Granularity
from ..core.exceptions import ValidationError
from .units import DayUnit, MonthUnit, TimeUnit, WeekUnit


@dataclass
class TimeUnitFactory:
    """Factory Pattern: pick the calendar strategy for a granularity."""

    def for_granularity(self, granularity: "Granularity | str") -> TimeUnit:
        try:
            granularity = Granularity(granularity)
        except ValueError:
            raise ValidationError(f"Unknown granularity: {granularity!r}")

        if granularity == Granularity.WEEK:
            return WeekUnit()
        if granularity == Granularity.MONTH:
            return MonthUnit()
        return DayUnit()
