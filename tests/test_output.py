"""
Tests for console formatting and file export.
"""

import csv
import io
import json
from datetime import date

import pytest
from rich.console import Console

from swedish_holidays.core.engine import HolidayEngine
from swedish_holidays.data.schemas import Language
from swedish_holidays.output.exporter import HolidayExporter
from swedish_holidays.output.formatter import ConsoleFormatter


@pytest.fixture
def engine():
    """Create a HolidayEngine with no customizations."""
    return HolidayEngine()


@pytest.fixture
def console():
    """Create a Rich console writing to a buffer."""
    return Console(file=io.StringIO(), width=120, color_system=None)


class TestHolidayExporter:
    """Tests for HolidayExporter."""

    def test_export_json(self, engine, tmp_path):
        """Test exporting a year to JSON."""
        exporter = HolidayExporter(output_directory=str(tmp_path))
        holidays = engine.list_holidays(Language.SE, 2025)

        path = exporter.export_json(2025, Language.SE, holidays)

        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        assert data["year"] == 2025
        assert data["language"] == "SE"
        assert data["count"] == 22
        assert data["holidays"][0] == {
            "date": "2025-01-01",
            "name": "Nyårsdagen",
            "description": "Fast datum, 1 januari",
        }

    def test_export_json_to_given_path(self, engine, tmp_path):
        """Test exporting to an explicit file path."""
        target = tmp_path / "out" / "holidays.json"
        path = HolidayExporter().export_json(
            2025, Language.EN, engine.list_holidays(Language.EN, 2025), str(target)
        )
        assert path == str(target)
        assert target.exists()

    def test_export_csv(self, engine, tmp_path):
        """Test exporting a year to CSV with weekday names."""
        exporter = HolidayExporter(output_directory=str(tmp_path))
        path = exporter.export_csv(2025, Language.EN, engine.list_holidays(Language.EN, 2025))

        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))
        assert rows[0] == ["Date", "Weekday", "Name", "Description"]
        assert rows[1] == ["2025-01-01", "Wednesday", "New Year's Day", "Fixed date, January 1"]
        assert len(rows) == 23

    def test_export_csv_swedish_weekdays(self, engine, tmp_path):
        """Test that weekday names follow the language."""
        target = tmp_path / "holidays.csv"
        HolidayExporter().export_csv(
            2025, Language.SE, engine.list_holidays(Language.SE, 2025), str(target)
        )
        with open(target, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))
        assert rows[1][1] == "onsdag"


class TestConsoleFormatter:
    """Tests for ConsoleFormatter."""

    def test_print_holidays_for_year(self, engine, console):
        """Test printing a holiday table."""
        formatter = ConsoleFormatter(console)
        formatter.print_holidays_for_year(2025, Language.SE, engine.list_holidays(Language.SE, 2025))

        output = console.file.getvalue()
        assert "Svenska helgdagar 2025" in output
        assert "Midsommarafton" in output
        assert "2025-06-20" in output

    def test_print_check_result(self, engine, console):
        """Test printing holiday check results."""
        formatter = ConsoleFormatter(console)
        formatter.print_check_result(date(2025, 6, 6), engine.holidays_on(date(2025, 6, 6)))
        formatter.print_check_result(date(2025, 6, 5), [])

        output = console.file.getvalue()
        assert "2025-06-06 is a holiday: National Day of Sweden" in output
        assert "2025-06-05 is not a holiday" in output
