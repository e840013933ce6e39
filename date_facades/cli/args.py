"""Command-line argument parsing for date-facades."""

import argparse
from datetime import datetime
import re

from date_facades.__version__ import __version__
from date_facades.constants import BACKENDS, DEFAULT_BACKEND, FORMAT_NAMES


def parse_date_arg(text: str):
    """
    Interpret a command-line date.

    Args:
        text: "now", epoch milliseconds (digits only) or an ISO-8601 string

    Returns:
        datetime, int or the original string
    """
    if text == "now":
        return datetime.now()
    if re.fullmatch(r"-?\d+", text):
        return int(text)
    return text


def parse_amount(text: str):
    """Parse a shift amount, keeping whole numbers as int."""
    value = float(text)
    return int(value) if value.is_integer() else value


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Format and manipulate dates through Arrow or dateutil/Babel",
        epilog="Dates may be ISO-8601 strings, epoch milliseconds or 'now'.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"date-facades {__version__}")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument(
        "--backend",
        choices=BACKENDS,
        default=DEFAULT_BACKEND,
        help=f"Date library to delegate to (default: {DEFAULT_BACKEND})",
    )
    parser.add_argument("--locale", default="en_US", help="Locale for names and relative times")
    parser.add_argument(
        "--week-start",
        type=int,
        default=7,
        metavar="N",
        help="ISO weekday weeks start on, 1 = Monday ... 7 = Sunday (default: 7)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    show = subparsers.add_parser("show", help="Show every named format for a date")
    show.add_argument("date", type=parse_date_arg)
    show.add_argument("--to", type=parse_date_arg, help="Reference date for relative_time_to")

    fmt = subparsers.add_parser("format", help="Apply one named format")
    fmt.add_argument("name", help=f"One of: {', '.join(FORMAT_NAMES)}")
    fmt.add_argument("date", type=parse_date_arg)
    fmt.add_argument("--template", help="Token template for the custom format")
    fmt.add_argument("--to", type=parse_date_arg, help="Reference date for relative_time_to")

    for command in ("add", "subtract"):
        shift = subparsers.add_parser(command, help=f"{command.capitalize()} an amount of time")
        shift.add_argument("date", type=parse_date_arg)
        shift.add_argument("amount", type=parse_amount)
        shift.add_argument("unit", help="year, quarter, month, week, day, hour, minute, second, millisecond")

    for command in ("start-of", "end-of"):
        span = subparsers.add_parser(command, help=f"{command.replace('-', ' ').capitalize()} a period")
        span.add_argument("date", type=parse_date_arg)
        span.add_argument("unit", help="year, quarter, month, week, day, hour, minute or second")

    diff = subparsers.add_parser("diff", help="Difference between two dates")
    diff.add_argument("date1", type=parse_date_arg)
    diff.add_argument("date2", type=parse_date_arg)
    diff.add_argument("--unit", help="Unit of the result (default: milliseconds)")

    validate = subparsers.add_parser("validate", help="Check whether a date is valid")
    validate.add_argument("date", type=parse_date_arg)

    return parser.parse_args(argv)
