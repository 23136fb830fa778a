"""
CLI interface for the Swedish holiday calculator.
"""

import logging
import sys
from datetime import date, datetime

import click

from swedish_holidays import __version__
from swedish_holidays.config.manager import ConfigManager
from swedish_holidays.core.engine import HolidayEngine
from swedish_holidays.core.temporal import today
from swedish_holidays.data.schemas import Language
from swedish_holidays.output.exporter import HolidayExporter
from swedish_holidays.output.formatter import ConsoleFormatter

logger = logging.getLogger(__name__)

LANGUAGE_CHOICE = click.Choice([lang.value for lang in Language], case_sensitive=False)


def parse_date(date_str: str) -> date:
    """Parse date string in various formats."""
    formats = ["%Y-%m-%d", "%d.%m.%Y", "%d/%m/%Y", "%Y%m%d"]
    for fmt in formats:
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue
    raise ValueError(
        f"Invalid date format: {date_str}. Use YYYY-MM-DD, DD.MM.YYYY, or DD/MM/YYYY"
    )


def build_engine(config_path, language=None, prefetch=False):
    """Create an engine from configuration, optionally overriding the language."""
    cfg = ConfigManager(config_path).load_config()
    if language:
        cfg.default_language = Language.from_code(language)
    cfg.prefetch_enabled = prefetch and cfg.prefetch_enabled
    logger.debug(f"Default language: {cfg.default_language.value}, timezone: {cfg.reference_timezone}")
    return cfg, HolidayEngine.from_config(cfg)


@click.group()
@click.version_option(version=__version__, prog_name="swedish-holidays")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose):
    """Swedish Holidays - Swedish public holidays, eves and custom days."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@main.command(name="list")
@click.option(
    "--year", "-y",
    type=int,
    default=None,
    help="Year to show holidays for (default: current year)",
)
@click.option(
    "--lang", "-l",
    type=LANGUAGE_CHOICE,
    default=None,
    help="Language for names (default: from config)",
)
@click.option(
    "--output", "-o",
    type=click.Path(),
    help="Output file path (optional)",
)
@click.option(
    "--format", "-f",
    type=click.Choice(["json", "csv", "console"]),
    default="console",
    help="Output format (default: console)",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
def list_holidays(year, lang, output, format, config):
    """List the holidays of a year."""
    formatter = ConsoleFormatter()

    try:
        cfg, engine = build_engine(config, lang)
        if year is None:
            year = today(engine.timezone).year

        language = engine.default_language
        holiday_list = engine.list_holidays(language, year)

        if format == "console":
            formatter.print_holidays_for_year(year, language, holiday_list)
            return

        exporter = HolidayExporter(output_directory=cfg.output_directory)
        if format == "json":
            path = exporter.export_json(year, language, holiday_list, output)
        else:
            path = exporter.export_csv(year, language, holiday_list, output)
        formatter.print_success(f"Holidays saved to {path}")

    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)


@main.command()
@click.argument("day")
@click.option(
    "--lang", "-l",
    type=LANGUAGE_CHOICE,
    default=None,
    help="Language for names (default: from config)",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
def check(day, lang, config):
    """Check whether DAY is a holiday. Exits with status 1 if it is not."""
    formatter = ConsoleFormatter()

    try:
        check_date = parse_date(day)
        _, engine = build_engine(config, lang)
        holidays_on_day = engine.holidays_on(check_date)
    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(2)

    formatter.print_check_result(check_date, holidays_on_day)
    if not holidays_on_day:
        sys.exit(1)


@main.command(name="today")
@click.option(
    "--lang", "-l",
    type=LANGUAGE_CHOICE,
    default=None,
    help="Language for names (default: from config)",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
def today_cmd(lang, config):
    """Check whether today (Europe/Stockholm) is a holiday."""
    formatter = ConsoleFormatter()

    try:
        _, engine = build_engine(config, lang)
    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(2)

    current = today(engine.timezone)
    formatter.print_check_result(current, engine.holidays_on(current))


@main.command()
@click.option(
    "--year", "-y",
    type=int,
    default=None,
    help="Year (default: current year)",
)
def easter(year):
    """Show the date of Easter Sunday."""
    formatter = ConsoleFormatter()

    try:
        if year is None:
            year = today().year
        easter_date = HolidayEngine().easter_sunday(year)
    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)

    formatter.console.print(f"Easter Sunday {year}: [bold cyan]{easter_date.isoformat()}[/bold cyan]")


@main.command()
@click.option(
    "--host", "-h",
    default=None,
    help="Host to bind to (default: from config or 0.0.0.0)",
)
@click.option(
    "--port", "-p",
    type=int,
    default=None,
    help="Port to bind to (default: from config or 8000)",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
def serve(host, port, config):
    """Start the FastAPI server."""
    formatter = ConsoleFormatter()

    try:
        import uvicorn
    except ImportError:
        formatter.print_error("uvicorn is required for the API server. Install it with: pip install uvicorn")
        sys.exit(1)

    try:
        cfg = ConfigManager(config).load_config()
    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)

    api_host = host or cfg.api_host
    api_port = port or cfg.api_port

    formatter.console.print(f"Starting API server at http://{api_host}:{api_port}")
    formatter.console.print("Press Ctrl+C to stop")
    formatter.console.print()

    uvicorn.run(
        "swedish_holidays.api:app",
        host=api_host,
        port=api_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
