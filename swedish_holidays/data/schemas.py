"""
Data models for the Swedish holiday calculator using Pydantic.
"""

import datetime
from enum import Enum
from typing import Callable, FrozenSet, Optional, Tuple, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, field_validator

from swedish_holidays.exceptions import InvalidArgumentError


class Language(str, Enum):
    """Languages available for holiday names and descriptions."""

    SE = "SE"  # Svenska
    EN = "EN"  # English

    @classmethod
    def from_code(cls, code: Union["Language", str]) -> "Language":
        """
        Resolve a language code to a Language.

        Matching is case-insensitive. Unknown codes fall back to English.

        Args:
            code: Language member or code string such as 'SE', 'sv' or 'en'.

        Returns:
            The matching Language.

        Raises:
            InvalidArgumentError: If code is None.
        """
        if code is None:
            raise InvalidArgumentError("Language code must not be None")
        if isinstance(code, Language):
            return code

        lang = str(code).lower().strip()

        # Handle common variations
        if lang in ("se", "sv", "swedish", "svenska", "sv-se", "sv_se"):
            return cls.SE

        return cls.EN


class HolidayKind(str, Enum):
    """The standard Swedish holidays, in calculation order."""

    NEW_YEARS_DAY = "new_years_day"
    EPIPHANY_EVE = "epiphany_eve"
    EPIPHANY = "epiphany"
    WALPURGIS_EVE = "walpurgis_eve"
    MAY_DAY = "may_day"
    NATIONAL_DAY = "national_day"
    CHRISTMAS_EVE = "christmas_eve"
    CHRISTMAS_DAY = "christmas_day"
    ST_STEPHENS_DAY = "st_stephens_day"
    NEW_YEARS_EVE = "new_years_eve"
    MAUNDY_THURSDAY = "maundy_thursday"
    GOOD_FRIDAY = "good_friday"
    EASTER_EVE = "easter_eve"
    EASTER_SUNDAY = "easter_sunday"
    EASTER_MONDAY = "easter_monday"
    ASCENSION_DAY = "ascension_day"
    WHITSUN_EVE = "whitsun_eve"
    PENTECOST = "pentecost"
    MIDSUMMER_EVE = "midsummer_eve"
    MIDSUMMER_DAY = "midsummer_day"
    ALL_SAINTS_EVE = "all_saints_eve"
    ALL_SAINTS_DAY = "all_saints_day"


class Holiday(BaseModel):
    """A holiday occurrence with a localized name and date rule description."""

    model_config = ConfigDict(frozen=True)

    date: datetime.date = Field(..., description="Date of the holiday")
    name: str = Field(..., description="Name of the holiday in the chosen language")
    description: str = Field(..., description="How the date of the holiday is determined")


# A rule returns the holiday it defines for (year, language), or None when it
# does not apply that year. Rules must be deterministic; results are cached.
HolidayRule = Callable[[int, Language], Optional[Holiday]]


class CustomizationSnapshot(BaseModel):
    """Immutable view of the customizations in effect at one point in time."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    fixed_additions: Tuple[Holiday, ...] = Field(
        default=(), description="Custom holidays, each applying to its own year only"
    )
    standard_removals: FrozenSet[datetime.date] = Field(
        default=frozenset(), description="Dates excluded from the standard holidays"
    )
    rules: Tuple[Callable, ...] = Field(
        default=(), description="Rule callbacks evaluated per year and language"
    )
    version: int = Field(default=0, ge=0, description="Incremented on every change")

    @property
    def is_empty(self) -> bool:
        """Whether no customization is in effect."""
        return not (self.fixed_additions or self.standard_removals or self.rules)


class Config(BaseModel):
    """Configuration for the Swedish holiday calculator."""

    default_language: Language = Field(
        default=Language.EN, description="Language used when none is given"
    )
    reference_timezone: str = Field(
        default="Europe/Stockholm", description="Timezone used to resolve instants to dates"
    )
    prefetch_enabled: bool = Field(default=True, description="Warm the cache on engine creation")
    prefetch_years_before: int = Field(default=1, ge=0, le=10, description="Past years to warm")
    prefetch_years_after: int = Field(default=2, ge=0, le=10, description="Future years to warm")
    output_format: str = Field(default="json", description="Default export format: json or csv")
    output_directory: str = Field(default="results", description="Directory for output files")
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="API server port")

    @field_validator("default_language", mode="before")
    @classmethod
    def parse_language(cls, v):
        """Accept language codes such as 'sv' or 'en'."""
        if v is None or isinstance(v, Language):
            return v
        return Language.from_code(v)

    @field_validator("reference_timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Ensure the timezone is a known IANA zone."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            raise ValueError(f"Unknown timezone: {v}")
        return v
