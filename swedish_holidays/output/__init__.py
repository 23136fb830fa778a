"""
Output formatting and export functionality.
"""

from swedish_holidays.output.formatter import ConsoleFormatter
from swedish_holidays.output.exporter import HolidayExporter

__all__ = ["ConsoleFormatter", "HolidayExporter"]
