"""Shared constants for date-facades."""

from dataclasses import dataclass
from typing import Dict, List


@dataclass
class FormatDefinition:
    """A named output format and its template in each token vocabulary."""

    name: str
    label: str
    arrow_template: str
    cldr_template: str


# Named formats shared by both façades. Arrow uses moment-style tokens,
# Babel uses CLDR/LDML tokens.
FORMATS: List[FormatDefinition] = [
    FormatDefinition("iso_date", "ISO date", "YYYY-MM-DD", "yyyy-MM-dd"),
    FormatDefinition("short_date", "Short date", "MMM DD, YYYY", "MMM dd, yyyy"),
    FormatDefinition("long_date", "Long date", "dddd, MMMM DD, YYYY", "EEEE, MMMM dd, yyyy"),
    FormatDefinition("date_time", "Date and time", "MM/DD/YYYY hh:mm A", "MM/dd/yyyy hh:mm a"),
    FormatDefinition(
        "readable_date_time", "Readable date and time",
        "MMM DD, YYYY • hh:mm A", "MMM dd, yyyy • hh:mm a",
    ),
    FormatDefinition("time_only", "Time (24h)", "HH:mm:ss", "HH:mm:ss"),
    FormatDefinition("time_12_hour", "Time (12h)", "hh:mm A", "hh:mm a"),
    FormatDefinition("month_year", "Month and year", "MMMM YYYY", "MMMM yyyy"),
    FormatDefinition("year", "Year", "YYYY", "yyyy"),
]

FORMATS_BY_NAME: Dict[str, FormatDefinition] = {fmt.name: fmt for fmt in FORMATS}

# Formats that are not plain templates
COMPUTED_FORMATS: List[str] = [
    "relative_time",
    "relative_time_to",
    "iso_date_time",
    "unix_timestamp",
    "custom",
]

FORMAT_NAMES: List[str] = [fmt.name for fmt in FORMATS] + COMPUTED_FORMATS


# Sentinel text returned by formatters for input that is not a date
INVALID_DATE_TEXT = "Invalid Date"


# Unit aliases. Short forms are case-sensitive ("M" is month, "m" is minute).
SHORT_UNIT_ALIASES = {
    "y": "year",
    "Q": "quarter",
    "M": "month",
    "w": "week",
    "d": "day",
    "D": "day",
    "h": "hour",
    "m": "minute",
    "s": "second",
    "ms": "millisecond",
}

LONG_UNIT_ALIASES = {
    "date": "day",
    "dates": "day",
}


# Range inclusivity: "(" / ")" exclusive, "[" / "]" inclusive
BOUNDS = ["()", "[]", "[)", "(]"]
DEFAULT_BOUNDS = "()"


# Backend names for the CLI
BACKENDS = ["arrow", "dateutil"]
DEFAULT_BACKEND = "arrow"


# Log record layouts: plain for -v, timestamped for --debug
LOG_FORMAT = "[%(name)s] %(levelname)s %(message)s"
DEBUG_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
