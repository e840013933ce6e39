"""Date formatting and manipulation backed by python-dateutil and Babel.

dateutil parses ISO-8601 strings and performs calendar arithmetic with
relativedelta; Babel renders CLDR patterns (yyyy, MM, dd, EEEE, hh, a, ...)
and relative times.
"""

import math
from datetime import date, datetime, time, timezone
from typing import Optional, Union

from babel.dates import format_datetime, format_timedelta
from dateutil import parser as date_parser
from dateutil import tz
from dateutil.relativedelta import relativedelta, MO, TU, WE, TH, FR, SA, SU

from date_facades.config import Config
from date_facades.constants import BOUNDS, DEFAULT_BOUNDS, FORMATS_BY_NAME
from date_facades.exceptions import InvalidBoundsError, UnsupportedUnitError
from date_facades.logging_config import get_logger
from date_facades.models.date_input import DateInput, LOCAL_TZ, is_epoch_millis, localize
from date_facades.models.unit import Unit

logger = get_logger(__name__)

# Indexed by ISO weekday - 1
WEEKDAYS = (MO, TU, WE, TH, FR, SA, SU)

_MIDNIGHT = relativedelta(hour=0, minute=0, second=0, microsecond=0)

# Absolute relativedelta fields that truncate a datetime to the start of a period.
# Weeks and quarters depend on the date itself and are built in _floor.
_FLOORS = {
    Unit.SECOND: relativedelta(microsecond=0),
    Unit.MINUTE: relativedelta(second=0, microsecond=0),
    Unit.HOUR: relativedelta(minute=0, second=0, microsecond=0),
    Unit.DAY: _MIDNIGHT,
    Unit.MONTH: _MIDNIGHT + relativedelta(day=1),
    Unit.YEAR: _MIDNIGHT + relativedelta(month=1, day=1),
}


def to_datetime(value: DateInput) -> Optional[datetime]:
    """
    Convert a date-like value to an aware datetime in local time.

    Args:
        value: datetime, date, ISO-8601 string or epoch milliseconds

    Returns:
        Aware datetime, or None if the value is not a date
    """
    try:
        if isinstance(value, datetime):
            return localize(value)
        if isinstance(value, date):
            return datetime.combine(value, time(), tzinfo=LOCAL_TZ)
        if is_epoch_millis(value):
            return datetime.fromtimestamp(value / 1000, tz=LOCAL_TZ)
        if isinstance(value, str):
            return localize(date_parser.isoparse(value))
    except (ValueError, TypeError, OverflowError, OSError) as e:
        logger.debug(f"Could not interpret {value!r} as a date: {e}")
        return None

    logger.debug(f"Unsupported date input type: {type(value).__name__}")
    return None


def _resolve(value: datetime) -> datetime:
    """Move wall times skipped by a DST transition forward."""
    return tz.resolve_imaginary(value)


class DateutilFormatter:
    """Date formatting utilities using Babel over dateutil-parsed datetimes."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()

    def _format(self, date: DateInput, template: str) -> str:
        value = to_datetime(date)
        if value is None:
            return self.config.invalid_date_text
        return format_datetime(value, template, locale=self.config.locale)

    def _named(self, date: DateInput, name: str) -> str:
        return self._format(date, FORMATS_BY_NAME[name].cldr_template)

    def _relative(self, value: datetime, reference: datetime) -> str:
        # Elapsed time in UTC so DST changes are counted
        delta = value.astimezone(timezone.utc) - reference.astimezone(timezone.utc)
        return format_timedelta(
            delta,
            threshold=self.config.relative_threshold,
            add_direction=True,
            locale=self.config.locale,
        )

    def iso_date(self, date: DateInput) -> str:
        """ISO 8601 date, e.g. "2025-09-26"."""
        return self._named(date, "iso_date")

    def short_date(self, date: DateInput) -> str:
        """Short date, e.g. "Sep 26, 2025"."""
        return self._named(date, "short_date")

    def long_date(self, date: DateInput) -> str:
        """Long date with day name, e.g. "Friday, September 26, 2025"."""
        return self._named(date, "long_date")

    def date_time(self, date: DateInput) -> str:
        """Date and time with AM/PM, e.g. "09/26/2025 10:45 AM"."""
        return self._named(date, "date_time")

    def readable_date_time(self, date: DateInput) -> str:
        """Readable date and time, e.g. "Sep 26, 2025 • 10:45 AM"."""
        return self._named(date, "readable_date_time")

    def time_only(self, date: DateInput) -> str:
        """Time in 24-hour format, e.g. "10:45:30"."""
        return self._named(date, "time_only")

    def time_12_hour(self, date: DateInput) -> str:
        """Time in 12-hour format, e.g. "10:45 AM"."""
        return self._named(date, "time_12_hour")

    def relative_time(self, date: DateInput) -> str:
        """Relative time from now, e.g. "2 hours ago" or "in 3 days"."""
        value = to_datetime(date)
        if value is None:
            return self.config.invalid_date_text
        return self._relative(value, datetime.now(timezone.utc))

    def relative_time_to(self, date: DateInput, to: DateInput) -> str:
        """
        Relative time from another date, e.g. "in 6 days".

        Babel counts a zero delta as future time, so the same instant reads
        "in 0 seconds" where the Arrow façade says "just now".
        """
        value = to_datetime(date)
        other = to_datetime(to)
        if value is None or other is None:
            return self.config.invalid_date_text
        return self._relative(value, other)

    def iso_date_time(self, date: DateInput) -> str:
        """Full ISO 8601 with offset, e.g. "2025-09-26T10:45:30+08:00"."""
        value = to_datetime(date)
        if value is None:
            return self.config.invalid_date_text
        return value.isoformat(timespec="seconds")

    def unix_timestamp(self, date: DateInput) -> Optional[int]:
        """Whole seconds since the epoch, or None for invalid input."""
        value = to_datetime(date)
        if value is None:
            return None
        return math.floor(value.timestamp())

    def month_year(self, date: DateInput) -> str:
        """Month and year, e.g. "September 2025"."""
        return self._named(date, "month_year")

    def year(self, date: DateInput) -> str:
        """Year only, e.g. "2025"."""
        return self._named(date, "year")

    def custom(self, date: DateInput, template: str) -> str:
        """
        Format with a CLDR pattern.

        Example:
            format_date.custom(datetime.now(), "dd/MM/yyyy")
        """
        return self._format(date, template)


class DateutilDateUtils:
    """Date manipulation utilities using dateutil's relativedelta."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()

    def _shift(self, date: DateInput, amount: Union[int, float], unit: Unit) -> Optional[datetime]:
        value = to_datetime(date)
        if value is None:
            return None
        shift = relativedelta(**unit.shift_kwargs(amount))
        if unit.is_elapsed:
            # Hours and shorter move absolute time, so shift in UTC
            return (value.astimezone(timezone.utc) + shift).astimezone(LOCAL_TZ)
        return _resolve(value + shift)

    def add(self, date: DateInput, amount: Union[int, float], unit: Union[str, Unit]) -> Optional[datetime]:
        """Add time to a date."""
        return self._shift(date, amount, Unit.parse(unit, "add"))

    def subtract(self, date: DateInput, amount: Union[int, float], unit: Union[str, Unit]) -> Optional[datetime]:
        """Subtract time from a date."""
        return self._shift(date, -amount, Unit.parse(unit, "subtract"))

    def _floor(self, value: datetime, unit: Unit) -> datetime:
        if unit is Unit.WEEK:
            week_start = WEEKDAYS[self.config.week_start - 1]
            return value + _MIDNIGHT + relativedelta(weekday=week_start(-1))
        if unit is Unit.QUARTER:
            first_month = (value.month - 1) // 3 * 3 + 1
            return value + _MIDNIGHT + relativedelta(month=first_month, day=1)
        return value + _FLOORS[unit]

    def _span_unit(self, unit: Union[str, Unit], operation: str) -> Unit:
        unit = Unit.parse(unit, operation)
        if not unit.can_span:
            raise UnsupportedUnitError(operation, unit.value, "periods must be a second or longer")
        return unit

    def start_of(self, date: DateInput, unit: Union[str, Unit]) -> Optional[datetime]:
        """Get start of time unit (day, month, year, etc.)"""
        unit = self._span_unit(unit, "start_of")
        value = to_datetime(date)
        if value is None:
            return None
        return _resolve(self._floor(value, unit))

    def end_of(self, date: DateInput, unit: Union[str, Unit]) -> Optional[datetime]:
        """Get end of time unit, the last microsecond of the period."""
        unit = self._span_unit(unit, "end_of")
        value = to_datetime(date)
        if value is None:
            return None
        start = self._floor(value, unit)
        return _resolve(start + relativedelta(**unit.shift_kwargs(1)) - relativedelta(microseconds=1))

    def is_before(self, date: DateInput, compare: DateInput) -> bool:
        """Check if date is before another date"""
        value = to_datetime(date)
        other = to_datetime(compare)
        if value is None or other is None:
            return False
        return value < other

    def is_after(self, date: DateInput, compare: DateInput) -> bool:
        """Check if date is after another date"""
        value = to_datetime(date)
        other = to_datetime(compare)
        if value is None or other is None:
            return False
        return value > other

    def is_between(self, date: DateInput, start: DateInput, end: DateInput, bounds: str = DEFAULT_BOUNDS) -> bool:
        """
        Check if date is between two dates.

        Args:
            date: Date to test
            start: Lower bound
            end: Upper bound
            bounds: "()" exclusive (default), "[]" inclusive, or "[)" / "(]"

        Returns:
            True if date lies in the range
        """
        if bounds not in BOUNDS:
            raise InvalidBoundsError(bounds)
        value = to_datetime(date)
        lower = to_datetime(start)
        upper = to_datetime(end)
        if value is None or lower is None or upper is None:
            return False

        after_start = lower <= value if bounds[0] == "[" else lower < value
        before_end = value <= upper if bounds[1] == "]" else value < upper
        return after_start and before_end

    def diff(self, date1: DateInput, date2: DateInput, unit: Optional[Union[str, Unit]] = None) -> Optional[int]:
        """
        Get difference between two dates.

        Returns:
            Whole units in date1 - date2 truncated toward zero (milliseconds
            when unit is omitted), or None for invalid input
        """
        unit = Unit.parse(unit, "diff") if unit is not None else Unit.MILLISECOND
        first = to_datetime(date1)
        second = to_datetime(date2)
        if first is None or second is None:
            return None
        return unit.difference(first, second)

    def is_valid(self, date: DateInput) -> bool:
        """Check if date is valid"""
        return to_datetime(date) is not None


format_date = DateutilFormatter()
date_utils = DateutilDateUtils()
