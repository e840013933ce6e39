"""Tests for DisplayService"""
from datetime import datetime
from unittest.mock import patch

from date_facades.services.display_service import DisplayService, render_value
from date_facades.services.dateutil_dates import DateutilFormatter


class TestRenderValue:
    """Test plain-text rendering of façade results."""

    def test_none(self):
        assert render_value(None) == "invalid date"

    def test_datetime(self):
        assert render_value(datetime(2025, 9, 26, 10, 45)) == "2025-09-26T10:45:00"

    def test_bool(self):
        assert render_value(True) == "yes"
        assert render_value(False) == "no"

    def test_number(self):
        assert render_value(6) == "6"


class TestDisplayService:
    """Test Rich output."""

    @patch("date_facades.services.display_service.console")
    def test_display_formats_without_reference(self, mock_console, test_date):
        DisplayService().display_formats(test_date, DateutilFormatter())

        table = mock_console.print.call_args[0][0]
        assert table.row_count == 12
        assert [column.header for column in table.columns] == ["Format", "Name", "Result"]

    @patch("date_facades.services.display_service.console")
    def test_display_result(self, mock_console):
        DisplayService().display_result("diff (days)", 6)
        mock_console.print.assert_called_once_with("[bold]diff (days):[/bold] 6")

    @patch("date_facades.services.display_service.console")
    def test_display_invalid_result(self, mock_console):
        DisplayService().display_result("add 1 day", None)
        printed = mock_console.print.call_args[0][0]
        assert "[yellow]invalid date[/yellow]" in printed

    @patch("date_facades.services.display_service.console")
    def test_markup_is_escaped(self, mock_console):
        DisplayService().display_result("custom", "[bold] Friday")
        printed = mock_console.print.call_args[0][0]
        assert "\\[bold] Friday" in printed

    @patch("date_facades.services.display_service.console")
    def test_no_caption_by_default(self, mock_console, test_date):
        DisplayService().display_formats(test_date, DateutilFormatter())
        assert mock_console.print.call_args[0][0].caption is None

    @patch("date_facades.services.display_service.console")
    def test_verbose_caption_shows_settings(self, mock_console, test_date, config):
        DisplayService(verbose=True).display_formats(test_date, DateutilFormatter(config))

        caption = mock_console.print.call_args[0][0].caption
        assert "locale en_US" in caption
        assert "week starts on day 7" in caption
        assert "input type" not in caption

    @patch("date_facades.services.display_service.console")
    def test_debug_caption_shows_input_type(self, mock_console):
        DisplayService(debug=True).display_formats("2025-09-26", DateutilFormatter())
        assert "input type str" in mock_console.print.call_args[0][0].caption
