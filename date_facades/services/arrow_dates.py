"""Date formatting and manipulation backed by Arrow.

Format templates use Arrow's tokens (YYYY, MM, DD, dddd, hh, A, ...).
Relative times come from Arrow.humanize and calendar shifts from
Arrow.shift, which applies dateutil's relativedelta.
"""

from datetime import date, datetime
from typing import Optional, Union

import arrow
from arrow.parser import DateTimeParser

from date_facades.config import Config
from date_facades.constants import BOUNDS, DEFAULT_BOUNDS, FORMATS_BY_NAME
from date_facades.exceptions import InvalidBoundsError, UnsupportedUnitError
from date_facades.logging_config import get_logger
from date_facades.models.date_input import DateInput, LOCAL_TZ, is_epoch_millis, localize
from date_facades.models.unit import Unit

logger = get_logger(__name__)


def to_arrow(value: DateInput) -> Optional[arrow.Arrow]:
    """
    Wrap a date-like value as an Arrow in local time.

    Args:
        value: datetime, date, ISO-8601 string, epoch milliseconds or Arrow

    Returns:
        Arrow instance, or None if the value is not a date
    """
    try:
        if isinstance(value, arrow.Arrow):
            return value.to(LOCAL_TZ)
        if isinstance(value, datetime):
            return arrow.Arrow.fromdatetime(localize(value))
        if isinstance(value, date):
            return arrow.Arrow.fromdate(value, tzinfo=LOCAL_TZ)
        if is_epoch_millis(value):
            # datetime.fromtimestamp rejects out-of-range values that Arrow would rescale
            return arrow.Arrow.fromdatetime(datetime.fromtimestamp(value / 1000, tz=LOCAL_TZ))
        if isinstance(value, str):
            parsed = DateTimeParser().parse_iso(value)
            return arrow.Arrow.fromdatetime(localize(parsed))
    except (ValueError, TypeError, OverflowError, OSError) as e:
        logger.debug(f"Could not interpret {value!r} as a date: {e}")
        return None

    logger.debug(f"Unsupported date input type: {type(value).__name__}")
    return None


class ArrowFormatter:
    """Date formatting utilities using Arrow."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()

    def _format(self, date: DateInput, template: str) -> str:
        value = to_arrow(date)
        if value is None:
            return self.config.invalid_date_text
        return value.format(template, locale=self.config.locale)

    def _named(self, date: DateInput, name: str) -> str:
        return self._format(date, FORMATS_BY_NAME[name].arrow_template)

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
        value = to_arrow(date)
        if value is None:
            return self.config.invalid_date_text
        return value.humanize(locale=self.config.locale)

    def relative_time_to(self, date: DateInput, to: DateInput) -> str:
        """Relative time from another date, e.g. "in 6 days"."""
        value = to_arrow(date)
        other = to_arrow(to)
        if value is None or other is None:
            return self.config.invalid_date_text
        return value.humanize(other, locale=self.config.locale)

    def iso_date_time(self, date: DateInput) -> str:
        """Full ISO 8601 with offset, e.g. "2025-09-26T10:45:30+08:00"."""
        value = to_arrow(date)
        if value is None:
            return self.config.invalid_date_text
        return value.isoformat(timespec="seconds")

    def unix_timestamp(self, date: DateInput) -> Optional[int]:
        """Whole seconds since the epoch, or None for invalid input."""
        value = to_arrow(date)
        if value is None:
            return None
        return value.int_timestamp

    def month_year(self, date: DateInput) -> str:
        """Month and year, e.g. "September 2025"."""
        return self._named(date, "month_year")

    def year(self, date: DateInput) -> str:
        """Year only, e.g. "2025"."""
        return self._named(date, "year")

    def custom(self, date: DateInput, template: str) -> str:
        """
        Format with an Arrow token template.

        Example:
            format_date.custom(datetime.now(), "DD/MM/YYYY")
        """
        return self._format(date, template)


class ArrowDateUtils:
    """Date manipulation utilities using Arrow."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()

    def _shift(self, date: DateInput, amount: Union[int, float], unit: Unit) -> Optional[datetime]:
        value = to_arrow(date)
        if value is None:
            return None
        if unit.is_elapsed:
            # Hours and shorter move absolute time, so shift in UTC
            return value.to("UTC").shift(**unit.shift_kwargs(amount)).to(LOCAL_TZ).datetime
        return value.shift(**unit.shift_kwargs(amount)).datetime

    def add(self, date: DateInput, amount: Union[int, float], unit: Union[str, Unit]) -> Optional[datetime]:
        """Add time to a date."""
        return self._shift(date, amount, Unit.parse(unit, "add"))

    def subtract(self, date: DateInput, amount: Union[int, float], unit: Union[str, Unit]) -> Optional[datetime]:
        """Subtract time from a date."""
        return self._shift(date, -amount, Unit.parse(unit, "subtract"))

    def _span(self, date: DateInput, unit: Union[str, Unit], operation: str):
        unit = Unit.parse(unit, operation)
        if not unit.can_span:
            raise UnsupportedUnitError(operation, unit.value, "periods must be a second or longer")
        value = to_arrow(date)
        if value is None:
            return None
        return value.span(unit.value, week_start=self.config.week_start)

    def start_of(self, date: DateInput, unit: Union[str, Unit]) -> Optional[datetime]:
        """Get start of time unit (day, month, year, etc.)"""
        span = self._span(date, unit, "start_of")
        return span[0].datetime if span else None

    def end_of(self, date: DateInput, unit: Union[str, Unit]) -> Optional[datetime]:
        """Get end of time unit, the last microsecond of the period."""
        span = self._span(date, unit, "end_of")
        return span[1].datetime if span else None

    def is_before(self, date: DateInput, compare: DateInput) -> bool:
        """Check if date is before another date"""
        value = to_arrow(date)
        other = to_arrow(compare)
        if value is None or other is None:
            return False
        return value < other

    def is_after(self, date: DateInput, compare: DateInput) -> bool:
        """Check if date is after another date"""
        value = to_arrow(date)
        other = to_arrow(compare)
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
        value = to_arrow(date)
        lower = to_arrow(start)
        upper = to_arrow(end)
        if value is None or lower is None or upper is None:
            return False
        return value.is_between(lower, upper, bounds)

    def diff(self, date1: DateInput, date2: DateInput, unit: Optional[Union[str, Unit]] = None) -> Optional[int]:
        """
        Get difference between two dates.

        Args:
            date1: Minuend
            date2: Subtrahend
            unit: Unit of the result, milliseconds when omitted

        Returns:
            Whole units in date1 - date2 truncated toward zero, or None for invalid input
        """
        unit = Unit.parse(unit, "diff") if unit is not None else Unit.MILLISECOND
        first = to_arrow(date1)
        second = to_arrow(date2)
        if first is None or second is None:
            return None
        return unit.difference(first.datetime, second.datetime)

    def is_valid(self, date: DateInput) -> bool:
        """Check if date is valid"""
        return to_arrow(date) is not None


format_date = ArrowFormatter()
date_utils = ArrowDateUtils()
