"""
Holiday engine combining standard calculation, customizations and caching.
"""

import logging
import threading
from datetime import date
from typing import Any, FrozenSet, Iterable, List, Optional, Tuple, Union
from zoneinfo import ZoneInfo

from swedish_holidays.core.cache import ResultCache
from swedish_holidays.core.customization import CustomizationStore
from swedish_holidays.core.standard import StandardHolidayCalculator
from swedish_holidays.core.temporal import REFERENCE_TIMEZONE, to_reference_date, today
from swedish_holidays.data.schemas import Config, Holiday, HolidayKind, HolidayRule, Language
from swedish_holidays.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

LanguageLike = Union[Language, str]


class HolidayEngine:
    """Answers holiday queries for Sweden, honoring runtime customizations."""

    def __init__(
        self,
        default_language: LanguageLike = Language.EN,
        timezone: ZoneInfo = REFERENCE_TIMEZONE,
        calculator: Optional[StandardHolidayCalculator] = None,
        store: Optional[CustomizationStore] = None,
        cache: Optional[ResultCache] = None,
    ):
        """
        Initialize the holiday engine.

        Args:
            default_language: Language used when a query does not name one.
            timezone: Reference timezone for instants and for "today".
            calculator: Standard holiday calculator (created if not provided).
            store: Customization store (created if not provided).
            cache: Result cache (created if not provided).
        """
        self._default_language = Language.from_code(default_language)
        self._language_lock = threading.Lock()
        self.timezone = timezone
        self.calculator = calculator if calculator is not None else StandardHolidayCalculator()
        self.store = store if store is not None else CustomizationStore()
        self.cache = cache if cache is not None else ResultCache()
        self.store.add_listener(self.cache.invalidate_all)

    @classmethod
    def from_config(cls, config: Config) -> "HolidayEngine":
        """
        Create an engine from configuration, warming the cache if enabled.

        Args:
            config: Loaded configuration.

        Returns:
            Configured HolidayEngine.
        """
        engine = cls(
            default_language=config.default_language,
            timezone=ZoneInfo(config.reference_timezone),
        )
        if config.prefetch_enabled:
            current_year = today(engine.timezone).year
            engine.warm_up(
                range(
                    current_year - config.prefetch_years_before,
                    current_year + config.prefetch_years_after + 1,
                )
            )
        return engine

    @property
    def default_language(self) -> Language:
        """Language used by queries that do not specify one."""
        return self._default_language

    @default_language.setter
    def default_language(self, language: LanguageLike) -> None:
        self.set_default_language(language)

    def set_default_language(self, language: LanguageLike) -> None:
        """
        Change the default language. Cached results are kept.

        Raises:
            InvalidArgumentError: If language is None.
        """
        with self._language_lock:
            self._default_language = Language.from_code(language)

    def _resolve_language(self, language: Optional[LanguageLike]) -> Language:
        if language is None:
            return self._default_language
        return Language.from_code(language)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_holidays(
        self, language: Optional[LanguageLike] = None, year: Optional[int] = None
    ) -> Tuple[Holiday, ...]:
        """
        List the holidays of a year, customizations applied, sorted by date.

        Repeated calls return the same cached tuple until the customizations
        change or the cache is cleared.

        Args:
            language: Language or language code (default language if None).
            year: Calendar year (current year if None).

        Returns:
            Tuple of holidays in ascending date order.
        """
        lang = self._resolve_language(language)
        if year is None:
            year = today(self.timezone).year

        cached = self.cache.get(year, lang)
        if cached is not None:
            return cached

        generation = self.cache.generation
        holidays = self._compute(year, lang)
        result = self.cache.put_if_absent(year, lang, holidays, generation)
        self.cache.put_date_set_if_absent(
            year, frozenset(h.date for h in holidays), generation
        )
        return result

    def is_holiday(self, value: Any) -> bool:
        """
        Check whether a date or point in time is a holiday.

        Args:
            value: date, datetime, timestamp or ISO string (see to_reference_date).

        Returns:
            True if the resolved date is a holiday.

        Raises:
            InvalidArgumentError: If value is None.
        """
        day = to_reference_date(value, self.timezone)
        return day in self._date_set(day.year)

    def is_holiday_today(self) -> bool:
        """Check whether today, in the reference timezone, is a holiday."""
        return self.is_holiday(today(self.timezone))

    def holidays_on(self, value: Any, language: Optional[LanguageLike] = None) -> List[Holiday]:
        """
        Get the holidays falling on one date.

        Args:
            value: Date or point in time to look up.
            language: Language or language code (default language if None).

        Returns:
            Holidays on that date, empty if it is not a holiday.
        """
        day = to_reference_date(value, self.timezone)
        return [h for h in self.list_holidays(language, day.year) if h.date == day]

    def get_holiday(
        self, kind: HolidayKind, year: int, language: Optional[LanguageLike] = None
    ) -> Holiday:
        """
        Get a standard holiday, ignoring customizations.

        Useful for looking up base dates, e.g. before removing a holiday
        or inside a custom rule.
        """
        return self.calculator.get_holiday(kind, year, self._resolve_language(language))

    def easter_sunday(self, year: int) -> date:
        """Date of Easter Sunday for the year."""
        return self.calculator.easter_sunday(year)

    def warm_up(self, years: Optional[Iterable[int]] = None) -> None:
        """
        Populate the cache for the given years in both languages.

        Args:
            years: Years to compute (default: previous, current and next two).
        """
        if years is None:
            current_year = today(self.timezone).year
            years = range(current_year - 1, current_year + 3)

        for year in years:
            for lang in Language:
                self.list_holidays(lang, year)
        logger.debug(f"Holiday cache warmed: {len(self.cache)} entries")

    # ------------------------------------------------------------------
    # Customization
    # ------------------------------------------------------------------

    def add_custom_holiday(self, holiday_date: Any, name: str, description: str) -> None:
        """
        Add a custom holiday applying to the year of holiday_date only.

        Datetimes, timestamps and ISO strings are resolved to a date in the
        reference timezone, as for is_holiday().
        """
        if holiday_date is None:
            raise InvalidArgumentError("Date must not be None")
        self.store.add_fixed_holiday(
            to_reference_date(holiday_date, self.timezone), name, description
        )

    def remove_standard_holiday(self, holiday_date: Any) -> None:
        """Exclude any standard holiday on the date holiday_date resolves to."""
        self.store.remove_standard_holiday(to_reference_date(holiday_date, self.timezone))

    def add_custom_holiday_rule(self, rule: HolidayRule) -> None:
        """Register a rule evaluated for every year and language."""
        self.store.add_rule(rule)

    def clear_custom_additions(self) -> None:
        """Remove all custom fixed holidays."""
        self.store.clear_fixed_additions()

    def clear_standard_removals(self) -> None:
        """Restore all removed standard holidays."""
        self.store.clear_removals()

    def clear_custom_rules(self) -> None:
        """Remove all custom rules."""
        self.store.clear_rules()

    def clear_all_customizations(self) -> None:
        """Remove every customization."""
        self.store.clear_all()

    def clear_cache(self) -> None:
        """Drop all cached results."""
        self.cache.invalidate_all()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _date_set(self, year: int) -> FrozenSet[date]:
        dates = self.cache.get_date_set(year)
        if dates is not None:
            return dates

        holidays = self.list_holidays(self._default_language, year)
        dates = self.cache.get_date_set(year)
        if dates is None:
            # Invalidated while populating
            dates = frozenset(h.date for h in holidays)
        return dates

    def _compute(self, year: int, language: Language) -> Tuple[Holiday, ...]:
        snapshot = self.store.snapshot()

        holidays = [
            h
            for h in self.calculator.calculate_standard(year, language)
            if h.date not in snapshot.standard_removals
        ]
        holidays.extend(h for h in snapshot.fixed_additions if h.date.year == year)
        for rule in snapshot.rules:
            holiday = rule(year, language)
            if holiday is not None:
                holidays.append(holiday)

        # sorted() is stable, ties keep insertion order
        holidays = sorted(holidays, key=lambda h: h.date)
        logger.debug(f"Computed {len(holidays)} holidays for {year}/{language.value}")
        return tuple(holidays)
