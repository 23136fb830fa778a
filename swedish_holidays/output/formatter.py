"""
Console output formatting using Rich.
"""

from datetime import date
from typing import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from swedish_holidays.data.holiday_names import WEEKDAY_NAMES
from swedish_holidays.data.schemas import Holiday, Language


class ConsoleFormatter:
    """Formats holiday output for console display using Rich."""

    def __init__(self, console: Console = None):
        """
        Initialize the console formatter.

        Args:
            console: Rich console to print to (a new one if not provided).
        """
        self.console = console or Console()

    def print_holidays(
        self, holidays: Sequence[Holiday], language: Language, show_description: bool = True
    ) -> None:
        """
        Print a table of holidays.

        Args:
            holidays: Holidays to display.
            language: Language for weekday names and headers.
            show_description: Whether to include the date rule column.
        """
        swedish = language == Language.SE
        holiday_table = Table(title=f"[bold]{'Helgdagar' if swedish else 'Holidays'}[/bold]")
        holiday_table.add_column("Datum" if swedish else "Date", style="cyan", width=12)
        holiday_table.add_column("Dag" if swedish else "Day", style="dim", width=10)
        holiday_table.add_column("Namn" if swedish else "Name", style="white")
        if show_description:
            holiday_table.add_column("Regel" if swedish else "Rule", style="dim")

        weekday_names = WEEKDAY_NAMES[language]

        for holiday in holidays:
            row = [
                holiday.date.isoformat(),
                weekday_names[holiday.date.weekday()],
                holiday.name,
            ]
            if show_description:
                row.append(holiday.description)
            holiday_table.add_row(*row)

        self.console.print(holiday_table)

    def print_holidays_for_year(
        self, year: int, language: Language, holidays: Sequence[Holiday]
    ) -> None:
        """
        Print all holidays for a year.

        Args:
            year: Year.
            language: Language of the holidays.
            holidays: List of holidays.
        """
        title = "Svenska helgdagar" if language == Language.SE else "Swedish holidays"
        self.console.print()
        self.console.rule(f"[bold blue]{title} {year}[/bold blue]")
        self.console.print()

        if holidays:
            self.print_holidays(holidays, language)
        else:
            self.console.print("[dim]No holidays found for this year.[/dim]")

        self.console.print()

    def print_check_result(self, day: date, holidays: Sequence[Holiday]) -> None:
        """
        Print whether a date is a holiday.

        Args:
            day: The checked date.
            holidays: Holidays on that date (empty if none).
        """
        if holidays:
            names = ", ".join(h.name for h in holidays)
            self.console.print(
                Text.assemble(
                    (day.isoformat(), "cyan"),
                    " is a holiday: ",
                    (names, "bold green"),
                )
            )
        else:
            self.console.print(
                Text.assemble((day.isoformat(), "cyan"), " is ", ("not", "bold red"), " a holiday")
            )

    def print_error(self, message: str) -> None:
        """
        Print an error message.

        Args:
            message: Error message to display.
        """
        self.console.print(f"[bold red]Error:[/bold red] {message}")

    def print_success(self, message: str) -> None:
        """
        Print a success message.

        Args:
            message: Success message to display.
        """
        self.console.print(f"[bold green]Success:[/bold green] {message}")
