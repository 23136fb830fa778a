"""
Export functionality for holiday lists.
"""

import csv
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from swedish_holidays.data.holiday_names import WEEKDAY_NAMES
from swedish_holidays.data.schemas import Holiday, Language


class HolidayExporter:
    """Exports holiday lists to JSON and CSV files."""

    def __init__(
        self,
        output_directory: str = "results",
        timestamp_format: str = "%Y%m%d_%H%M%S",
    ):
        """
        Initialize the holiday exporter.

        Args:
            output_directory: Directory for output files.
            timestamp_format: Format string for timestamps in filenames.
        """
        self.output_directory = output_directory
        self.timestamp_format = timestamp_format

    def _ensure_output_dir(self) -> Path:
        """Ensure output directory exists and return path."""
        output_path = Path(self.output_directory)
        output_path.mkdir(parents=True, exist_ok=True)
        return output_path

    def _generate_filename(self, prefix: str, extension: str) -> str:
        """Generate a filename with timestamp."""
        timestamp = datetime.now().strftime(self.timestamp_format)
        return f"{prefix}_{timestamp}.{extension}"

    def _resolve_path(self, output_path: Optional[str], prefix: str, extension: str) -> Path:
        if output_path:
            file_path = Path(output_path)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            return file_path
        return self._ensure_output_dir() / self._generate_filename(prefix, extension)

    def export_json(
        self,
        year: int,
        language: Language,
        holidays: Sequence[Holiday],
        output_path: Optional[str] = None,
    ) -> str:
        """
        Export holidays to a JSON file.

        Args:
            year: Year of the holidays.
            language: Language of names and descriptions.
            holidays: Holidays to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(output_path, f"holidays_{year}", "json")

        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(
                self.holidays_to_dict(year, language, holidays),
                f,
                indent=2,
                ensure_ascii=False,
            )

        return str(file_path)

    def export_csv(
        self,
        year: int,
        language: Language,
        holidays: Sequence[Holiday],
        output_path: Optional[str] = None,
    ) -> str:
        """
        Export holidays to a CSV file.

        Args:
            year: Year of the holidays.
            language: Language for weekday names.
            holidays: Holidays to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(output_path, f"holidays_{year}", "csv")
        weekday_names = WEEKDAY_NAMES[language]

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["Date", "Weekday", "Name", "Description"])
            for holiday in holidays:
                writer.writerow([
                    holiday.date.isoformat(),
                    weekday_names[holiday.date.weekday()],
                    holiday.name,
                    holiday.description,
                ])

        return str(file_path)

    @staticmethod
    def holidays_to_dict(
        year: int, language: Language, holidays: Sequence[Holiday]
    ) -> Dict[str, Any]:
        """Convert a holiday list to a JSON-serializable dict."""
        return {
            "year": year,
            "language": language.value,
            "count": len(holidays),
            "holidays": [h.model_dump(mode="json") for h in holidays],
        }
