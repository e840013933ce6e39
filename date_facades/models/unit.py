"""Time unit model"""
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Union

from dateutil.relativedelta import relativedelta

from date_facades.constants import LONG_UNIT_ALIASES, SHORT_UNIT_ALIASES
from date_facades.exceptions import UnsupportedUnitError


class Unit(Enum):
    """Calendar or clock granularity used by manipulation and diff operations."""
    YEAR = "year"
    QUARTER = "quarter"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"

    @property
    def plural(self) -> str:
        return f"{self.value}s"

    @property
    def is_calendar(self) -> bool:
        """Units whose length depends on the calendar (months of varying length)."""
        return self in (Unit.YEAR, Unit.QUARTER, Unit.MONTH)

    @property
    def is_wall_clock(self) -> bool:
        """Units measured on local wall time rather than elapsed time."""
        return self in (Unit.WEEK, Unit.DAY)

    @property
    def is_elapsed(self) -> bool:
        """Units of fixed length added as absolute time (hour and shorter)."""
        return not self.is_calendar and not self.is_wall_clock

    @property
    def can_span(self) -> bool:
        """Whether start_of/end_of accept this unit."""
        return self is not Unit.MILLISECOND

    @classmethod
    def parse(cls, unit: Union[str, "Unit"], operation: str) -> "Unit":
        """
        Normalize a unit name or alias.

        Args:
            unit: Unit instance, name ("day"), plural ("days") or short alias ("d")
            operation: Name of the calling operation, used in error messages

        Returns:
            Unit member

        Raises:
            UnsupportedUnitError: If the unit is not recognized
        """
        if isinstance(unit, Unit):
            return unit
        if not isinstance(unit, str):
            raise UnsupportedUnitError(operation, unit)

        if unit in SHORT_UNIT_ALIASES:
            return cls(SHORT_UNIT_ALIASES[unit])

        name = unit.strip().lower()
        name = LONG_UNIT_ALIASES.get(name, name)
        if name.endswith("s"):
            name = name[:-1]

        try:
            return cls(name)
        except ValueError:
            raise UnsupportedUnitError(operation, unit) from None

    def shift_kwargs(self, amount: Union[int, float]) -> dict:
        """
        Keyword arguments for relativedelta (and Arrow.shift) moving by amount units.

        Args:
            amount: Number of units, negative to move backwards

        Returns:
            Dictionary such as {"days": 5}
        """
        if self is Unit.QUARTER:
            return {"months": amount * 3}
        if self is Unit.MILLISECOND:
            return {"microseconds": amount * 1000}
        return {self.plural: amount}

    def difference(self, first: datetime, second: datetime) -> int:
        """
        Whole units in first - second, truncated toward zero.

        Both datetimes are expected in the same (local) timezone.
        """
        if self.is_calendar:
            delta = relativedelta(first.replace(tzinfo=None), second.replace(tzinfo=None))
            months = delta.years * 12 + delta.months
            if self is Unit.YEAR:
                return int(months / 12)
            if self is Unit.QUARTER:
                return int(months / 3)
            return months

        if self.is_wall_clock:
            elapsed = first.replace(tzinfo=None) - second.replace(tzinfo=None)
        else:
            elapsed = first.astimezone(timezone.utc) - second.astimezone(timezone.utc)
        return int(elapsed / _FIXED_DURATIONS[self])


_FIXED_DURATIONS = {
    Unit.WEEK: timedelta(weeks=1),
    Unit.DAY: timedelta(days=1),
    Unit.HOUR: timedelta(hours=1),
    Unit.MINUTE: timedelta(minutes=1),
    Unit.SECOND: timedelta(seconds=1),
    Unit.MILLISECOND: timedelta(milliseconds=1),
}
