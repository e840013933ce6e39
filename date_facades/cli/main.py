"""Command-line interface for date-facades"""

import sys

from rich.console import Console
from rich.markup import escape

from date_facades.cli.args import parse_args
from date_facades.config import Config
from date_facades.constants import FORMAT_NAMES
from date_facades.exceptions import UnknownFormatError
from date_facades.logging_config import setup_logging, get_logger
from date_facades.services import DisplayService, get_backend

console = Console()
logger = get_logger(__name__)


def apply_format(formatter, name: str, value, template=None, to=None):
    """
    Apply a named format from a formatter façade.

    Args:
        formatter: ArrowFormatter or DateutilFormatter
        name: Format name, e.g. "iso_date"
        value: Date-like value
        template: Token template, required by "custom"
        to: Reference date, required by "relative_time_to"

    Returns:
        Formatted string, or int for "unix_timestamp"
    """
    if name not in FORMAT_NAMES:
        raise UnknownFormatError(name)
    if name == "custom":
        if template is None:
            raise ValueError("The custom format requires --template")
        return formatter.custom(value, template)
    if name == "relative_time_to":
        if to is None:
            raise ValueError("The relative_time_to format requires --to")
        return formatter.relative_time_to(value, to)
    return getattr(formatter, name)(value)


def main(argv=None):
    """Main entry point for the application."""
    parsed_args = None
    try:
        parsed_args = parse_args(argv)

        config = Config(
            locale=parsed_args.locale,
            week_start=parsed_args.week_start,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )

        setup_logging(config)

        if parsed_args.debug:
            console.print("[yellow]Debug mode enabled[/yellow]")
            console.print(f"[yellow]Backend:[/yellow] {parsed_args.backend}")
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {escape(str(value))}")

        formatter, date_utils = get_backend(parsed_args.backend, config)
        display = DisplayService(verbose=parsed_args.verbose, debug=parsed_args.debug)
        command = parsed_args.command
        logger.info(f"Running '{command}' with the {parsed_args.backend} backend")

        if command == "show":
            display.display_formats(parsed_args.date, formatter, parsed_args.to)
        elif command == "format":
            result = apply_format(
                formatter, parsed_args.name, parsed_args.date, parsed_args.template, parsed_args.to
            )
            display.display_result(parsed_args.name, result)
        elif command in ("add", "subtract"):
            operation = getattr(date_utils, command)
            result = operation(parsed_args.date, parsed_args.amount, parsed_args.unit)
            display.display_result(f"{command} {parsed_args.amount} {parsed_args.unit}", result)
        elif command in ("start-of", "end-of"):
            operation = getattr(date_utils, command.replace("-", "_"))
            result = operation(parsed_args.date, parsed_args.unit)
            display.display_result(f"{command} {parsed_args.unit}", result)
        elif command == "diff":
            result = date_utils.diff(parsed_args.date1, parsed_args.date2, parsed_args.unit)
            display.display_result(f"diff ({parsed_args.unit or 'milliseconds'})", result)
        elif command == "validate":
            valid = date_utils.is_valid(parsed_args.date)
            display.display_result("valid", valid)
            return 0 if valid else 1

        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if parsed_args is not None and parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
