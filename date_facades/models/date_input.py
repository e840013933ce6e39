"""Date-like input accepted by the façades"""
import math
from datetime import date, datetime
from typing import Any, Union

from dateutil import tz

# Native datetime, date, ISO-8601 string or epoch milliseconds. The Arrow
# façade also accepts arrow.Arrow instances.
DateInput = Union[datetime, date, str, int, float]

# Every façade result is expressed in local time
LOCAL_TZ = tz.tzlocal()


def is_epoch_millis(value: Any) -> bool:
    """Check if value is a finite number of milliseconds since the epoch."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def localize(value: datetime) -> datetime:
    """Attach local time to naive datetimes and convert aware ones to it."""
    if value.tzinfo is None:
        return value.replace(tzinfo=LOCAL_TZ)
    return value.astimezone(LOCAL_TZ)
