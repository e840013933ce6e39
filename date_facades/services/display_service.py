"""Display service for façade results"""
from datetime import datetime
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from date_facades.constants import FORMATS
from date_facades.logging_config import get_logger
from date_facades.models.date_input import DateInput

console = Console()
logger = get_logger(__name__)


def render_value(result: Any) -> str:
    """Render a façade result as plain text."""
    if result is None:
        return "invalid date"
    if isinstance(result, datetime):
        return result.isoformat()
    if isinstance(result, bool):
        return "yes" if result else "no"
    return str(result)


class DisplayService:
    def __init__(self, verbose: bool = False, debug: bool = False):
        self.verbose = verbose
        self.debug_mode = debug

    def _caption(self, value: DateInput, formatter) -> Optional[str]:
        """Settings line shown under the table in verbose or debug mode."""
        if not (self.verbose or self.debug_mode):
            return None
        config = formatter.config
        parts = [f"locale {config.locale}", f"week starts on day {config.week_start}"]
        if self.debug_mode:
            parts.append(f"input type {type(value).__name__}")
        return escape(", ".join(parts))

    def display_formats(self, value: DateInput, formatter, reference: Optional[DateInput] = None) -> None:
        """Display a table with every named format applied to one date."""
        table = Table(
            title=f"{escape(str(value))} ({type(formatter).__name__})",
            caption=self._caption(value, formatter),
        )
        table.add_column("Format")
        table.add_column("Name", style="dim")
        table.add_column("Result")

        for fmt in FORMATS:
            result = getattr(formatter, fmt.name)(value)
            table.add_row(fmt.label, fmt.name, escape(render_value(result)))

        table.add_row("ISO date and time", "iso_date_time", escape(formatter.iso_date_time(value)))
        table.add_row("Unix timestamp", "unix_timestamp", render_value(formatter.unix_timestamp(value)))
        table.add_row("Relative to now", "relative_time", escape(formatter.relative_time(value)))
        if reference is not None:
            table.add_row(
                "Relative to reference",
                "relative_time_to",
                escape(formatter.relative_time_to(value, reference)),
            )

        console.print(table)
        logger.debug(f"Displayed {len(table.rows)} formats for {value!r}")

    def display_result(self, label: str, result: Any) -> None:
        """Display a single labelled result."""
        text = escape(render_value(result))
        if result is None:
            console.print(f"[bold]{escape(label)}:[/bold] [yellow]{text}[/yellow]")
        else:
            console.print(f"[bold]{escape(label)}:[/bold] {text}")
