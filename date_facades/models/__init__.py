"""Data models for date-facades."""

from .date_input import DateInput, LOCAL_TZ, is_epoch_millis, localize
from .unit import Unit

__all__ = ["DateInput", "LOCAL_TZ", "Unit", "is_epoch_millis", "localize"]
