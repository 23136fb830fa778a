"""
FastAPI REST API for the Swedish holiday calculator.
"""

import logging
from datetime import date
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from swedish_holidays import __version__
from swedish_holidays.config.manager import ConfigManager
from swedish_holidays.core.engine import HolidayEngine
from swedish_holidays.data.holiday_names import WEEKDAY_NAMES
from swedish_holidays.data.schemas import Holiday, Language
from swedish_holidays.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

MIN_YEAR = 1
MAX_YEAR = 9999

# Load configuration
config_manager = ConfigManager()
config = config_manager.load_config()

# Initialize components
engine = HolidayEngine.from_config(config)
logger.debug(f"API engine ready, default language {engine.default_language.value}")


# API Models
class HolidayResponse(BaseModel):
    """Response model for a single holiday."""

    date: date
    weekday: str
    name: str
    description: str


class CheckResponse(BaseModel):
    """Response model for a holiday check."""

    date: date
    is_holiday: bool
    holidays: List[HolidayResponse]


class EasterResponse(BaseModel):
    """Response model for an Easter Sunday lookup."""

    year: int
    easter_sunday: date


def _to_response(holiday: Holiday, language: Language) -> HolidayResponse:
    return HolidayResponse(
        date=holiday.date,
        weekday=WEEKDAY_NAMES[language][holiday.date.weekday()],
        name=holiday.name,
        description=holiday.description,
    )


def _validate_year(year: int) -> None:
    if year < MIN_YEAR or year > MAX_YEAR:
        raise HTTPException(
            status_code=400,
            detail=f"Year must be between {MIN_YEAR} and {MAX_YEAR}",
        )


# FastAPI app
app = FastAPI(
    title="Swedish Holidays API",
    description="Swedish public holidays, eves and custom days",
    version=__version__,
)


@app.get("/")
async def root():
    """API root endpoint with basic info."""
    return {
        "name": "Swedish Holidays API",
        "version": __version__,
        "endpoints": {
            "GET /holidays/{year}": "List holidays for a year",
            "GET /check/{day}": "Check whether a date is a holiday",
            "GET /easter/{year}": "Date of Easter Sunday",
        },
    }


@app.get("/holidays/{year}", response_model=List[HolidayResponse])
async def get_holidays(
    year: int,
    lang: Optional[str] = Query(None, description="Language code: SE or EN"),
):
    """
    Get all holidays for a specific year.

    Args:
        year: Year (e.g., 2025, 2026)
        lang: Language code (default: configured language)
    """
    _validate_year(year)
    language = Language.from_code(lang) if lang else engine.default_language

    try:
        holidays = engine.list_holidays(language, year)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return [_to_response(h, language) for h in holidays]


@app.get("/check/{day}", response_model=CheckResponse)
async def check_day(
    day: date,
    lang: Optional[str] = Query(None, description="Language code: SE or EN"),
):
    """
    Check whether a date is a holiday.

    Args:
        day: Date in format YYYY-MM-DD
        lang: Language code (default: configured language)
    """
    language = Language.from_code(lang) if lang else engine.default_language
    holidays = engine.holidays_on(day, language)

    return CheckResponse(
        date=day,
        is_holiday=engine.is_holiday(day),
        holidays=[_to_response(h, language) for h in holidays],
    )


@app.get("/easter/{year}", response_model=EasterResponse)
async def get_easter(year: int):
    """Get the date of Easter Sunday for a year."""
    _validate_year(year)
    return EasterResponse(year=year, easter_sunday=engine.easter_sunday(year))


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__, "cached_entries": len(engine.cache)}
