"""Date façades for date-facades.

This package provides two interchangeable backends with the same surface:
- arrow_dates: formatting and manipulation via Arrow
- dateutil_dates: formatting via Babel, parsing and arithmetic via python-dateutil
- display_service: Rich rendering of façade results
"""

from .arrow_dates import ArrowFormatter, ArrowDateUtils
from .dateutil_dates import DateutilFormatter, DateutilDateUtils
from .display_service import DisplayService

__all__ = [
    "ArrowFormatter",
    "ArrowDateUtils",
    "DateutilFormatter",
    "DateutilDateUtils",
    "DisplayService",
    "get_backend",
]


def get_backend(name: str, config=None):
    """
    Create the formatter and manipulation façades for a backend.

    Args:
        name: "arrow" or "dateutil"
        config: Optional Config shared by both façades

    Returns:
        Tuple of (formatter, date_utils)
    """
    if name == "arrow":
        return ArrowFormatter(config), ArrowDateUtils(config)
    if name == "dateutil":
        return DateutilFormatter(config), DateutilDateUtils(config)
    raise ValueError(f"Unknown backend '{name}'")
