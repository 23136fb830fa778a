"""
Tests for the standard Swedish holiday calculator.
"""

import calendar
from datetime import date, timedelta

import holidays as holidays_lib
import pytest

from swedish_holidays.core.computus import easter_sunday
from swedish_holidays.core.standard import StandardHolidayCalculator
from swedish_holidays.data.holiday_names import HOLIDAY_NAMES
from swedish_holidays.data.schemas import HolidayKind, Language
from swedish_holidays.exceptions import InvalidArgumentError


@pytest.fixture
def calculator():
    """Create a StandardHolidayCalculator instance."""
    return StandardHolidayCalculator()


def by_kind(calculator, year, language=Language.EN):
    """Map each HolidayKind to its date for a year."""
    holidays = calculator.calculate_standard(year, language)
    return {kind: h.date for kind, h in zip(HolidayKind, holidays)}


class TestCalculateStandard:
    """Tests for StandardHolidayCalculator.calculate_standard."""

    def test_returns_all_holidays(self, calculator):
        """Test that every year has the 22 standard holidays."""
        assert len(calculator.calculate_standard(2025, Language.EN)) == 22
        assert len(calculator.calculate_standard(2026, Language.SE)) == 22

    def test_calculation_order(self, calculator):
        """Test that holidays come in calculation order, not date order."""
        holidays = calculator.calculate_standard(2025, Language.EN)
        assert holidays[0].name == "New Year's Day"
        assert holidays[9].name == "New Year's Eve"
        assert holidays[-1].name == "All Saints' Day"

    def test_dates_2025(self, calculator):
        """Test the holiday dates of 2025."""
        dates = by_kind(calculator, 2025)
        assert dates[HolidayKind.MAUNDY_THURSDAY] == date(2025, 4, 17)
        assert dates[HolidayKind.GOOD_FRIDAY] == date(2025, 4, 18)
        assert dates[HolidayKind.EASTER_EVE] == date(2025, 4, 19)
        assert dates[HolidayKind.EASTER_SUNDAY] == date(2025, 4, 20)
        assert dates[HolidayKind.EASTER_MONDAY] == date(2025, 4, 21)
        assert dates[HolidayKind.ASCENSION_DAY] == date(2025, 5, 29)
        assert dates[HolidayKind.WHITSUN_EVE] == date(2025, 6, 7)
        assert dates[HolidayKind.PENTECOST] == date(2025, 6, 8)
        assert dates[HolidayKind.MIDSUMMER_EVE] == date(2025, 6, 20)
        assert dates[HolidayKind.MIDSUMMER_DAY] == date(2025, 6, 21)
        assert dates[HolidayKind.ALL_SAINTS_EVE] == date(2025, 10, 31)
        assert dates[HolidayKind.ALL_SAINTS_DAY] == date(2025, 11, 1)

    def test_dates_2026(self, calculator):
        """Test the holiday dates of 2026."""
        dates = by_kind(calculator, 2026)
        assert dates[HolidayKind.GOOD_FRIDAY] == date(2026, 4, 3)
        assert dates[HolidayKind.EASTER_MONDAY] == date(2026, 4, 6)
        assert dates[HolidayKind.ASCENSION_DAY] == date(2026, 5, 14)
        assert dates[HolidayKind.PENTECOST] == date(2026, 5, 24)
        assert dates[HolidayKind.MIDSUMMER_EVE] == date(2026, 6, 19)
        assert dates[HolidayKind.MIDSUMMER_DAY] == date(2026, 6, 20)
        assert dates[HolidayKind.ALL_SAINTS_EVE] == date(2026, 10, 30)
        assert dates[HolidayKind.ALL_SAINTS_DAY] == date(2026, 10, 31)

    def test_fixed_dates(self, calculator):
        """Test that fixed holidays keep their month and day."""
        dates = by_kind(calculator, 2031)
        assert dates[HolidayKind.NEW_YEARS_DAY] == date(2031, 1, 1)
        assert dates[HolidayKind.EPIPHANY_EVE] == date(2031, 1, 5)
        assert dates[HolidayKind.EPIPHANY] == date(2031, 1, 6)
        assert dates[HolidayKind.WALPURGIS_EVE] == date(2031, 4, 30)
        assert dates[HolidayKind.MAY_DAY] == date(2031, 5, 1)
        assert dates[HolidayKind.NATIONAL_DAY] == date(2031, 6, 6)
        assert dates[HolidayKind.CHRISTMAS_EVE] == date(2031, 12, 24)
        assert dates[HolidayKind.CHRISTMAS_DAY] == date(2031, 12, 25)
        assert dates[HolidayKind.ST_STEPHENS_DAY] == date(2031, 12, 26)
        assert dates[HolidayKind.NEW_YEARS_EVE] == date(2031, 12, 31)

    def test_easter_relative_offsets(self, calculator):
        """Test the distance of movable holidays from Easter across many years."""
        for year in range(1950, 2101):
            dates = by_kind(calculator, year)
            easter = easter_sunday(year)
            assert dates[HolidayKind.EASTER_SUNDAY] == easter
            assert dates[HolidayKind.MAUNDY_THURSDAY] == easter - timedelta(days=3)
            assert dates[HolidayKind.GOOD_FRIDAY] == easter - timedelta(days=2)
            assert dates[HolidayKind.EASTER_EVE] == easter - timedelta(days=1)
            assert dates[HolidayKind.EASTER_MONDAY] == easter + timedelta(days=1)
            assert dates[HolidayKind.ASCENSION_DAY] == easter + timedelta(days=39)
            assert dates[HolidayKind.PENTECOST] == easter + timedelta(days=49)
            assert dates[HolidayKind.WHITSUN_EVE] == easter + timedelta(days=48)

    def test_weekday_range_holidays(self, calculator):
        """Test that Midsummer and All Saints fall on the right weekday and window."""
        for year in range(1950, 2101):
            dates = by_kind(calculator, year)

            midsummer_eve = dates[HolidayKind.MIDSUMMER_EVE]
            assert midsummer_eve.weekday() == calendar.FRIDAY
            assert date(year, 6, 19) <= midsummer_eve <= date(year, 6, 25)
            assert dates[HolidayKind.MIDSUMMER_DAY] == midsummer_eve + timedelta(days=1)

            all_saints_eve = dates[HolidayKind.ALL_SAINTS_EVE]
            assert all_saints_eve.weekday() == calendar.FRIDAY
            assert date(year, 10, 30) <= all_saints_eve <= date(year, 11, 5)
            assert dates[HolidayKind.ALL_SAINTS_DAY] == all_saints_eve + timedelta(days=1)

    def test_deterministic(self, calculator):
        """Test that two calculations of the same year are equal."""
        assert calculator.calculate_standard(2027, Language.SE) == calculator.calculate_standard(
            2027, Language.SE
        )

    def test_languages_share_dates(self, calculator):
        """Test that the language only changes names, not dates."""
        english = calculator.calculate_standard(2025, Language.EN)
        swedish = calculator.calculate_standard(2025, Language.SE)
        assert [h.date for h in english] == [h.date for h in swedish]
        assert [h.name for h in english] != [h.name for h in swedish]

    def test_invalid_year(self, calculator):
        """Test that a non-positive year is rejected."""
        with pytest.raises(InvalidArgumentError):
            calculator.calculate_standard(0, Language.EN)

    def test_none_language(self, calculator):
        """Test that a missing language is rejected."""
        with pytest.raises(InvalidArgumentError):
            calculator.calculate_standard(2025, None)


class TestHolidayNames:
    """Tests for localized names and descriptions."""

    def test_english_names(self, calculator):
        """Test a selection of English names."""
        names = [h.name for h in calculator.calculate_standard(2025, Language.EN)]
        assert "New Year's Day" in names
        assert "Good Friday" in names
        assert "National Day of Sweden" in names
        assert "Midsummer Eve" in names
        assert "St. Stephen's Day" in names

    def test_swedish_names(self, calculator):
        """Test a selection of Swedish names."""
        names = [h.name for h in calculator.calculate_standard(2025, Language.SE)]
        assert "Nyårsdagen" in names
        assert "Långfredagen" in names
        assert "Sveriges nationaldag" in names
        assert "Midsommarafton" in names
        assert "Annandag jul" in names

    def test_every_kind_has_both_languages(self):
        """Test that each holiday has a non-empty name and description per language."""
        for kind in HolidayKind:
            for language in Language:
                name, description = HOLIDAY_NAMES[kind][language]
                assert name
                assert description

    def test_descriptions(self, calculator):
        """Test that descriptions explain the date rule."""
        holiday = calculator.get_holiday(HolidayKind.NEW_YEARS_DAY, 2025, Language.EN)
        assert holiday.description == "Fixed date, January 1"
        holiday = calculator.get_holiday(HolidayKind.NEW_YEARS_DAY, 2025, Language.SE)
        assert holiday.description == "Fast datum, 1 januari"

    @pytest.mark.parametrize(
        "kind,description",
        [
            (HolidayKind.MAUNDY_THURSDAY, "Rörligt datum, torsdagen före Påskdagen"),
            (HolidayKind.EASTER_MONDAY, "Rörligt datum, dagen efter påskdagen (d.v.s. en måndag)"),
            (HolidayKind.WHITSUN_EVE, "Rörligt datum, dagen före pingstdagen (d.v.s. en lördag)"),
            (
                HolidayKind.MIDSUMMER_EVE,
                "Rörligt datum, fredagen mellan 19 juni och 25 juni (fredagen före midsommardagen)",
            ),
            (
                HolidayKind.EASTER_SUNDAY,
                "Rörligt datum, första söndagen efter ecklesiastisk fullmåne, efter vårdagjämningen",
            ),
        ],
    )
    def test_swedish_movable_descriptions(self, calculator, kind, description):
        """Test the Swedish wording of movable holiday descriptions."""
        assert calculator.get_holiday(kind, 2025, Language.SE).description == description


class TestGetHoliday:
    """Tests for StandardHolidayCalculator.get_holiday."""

    def test_matches_full_calculation(self, calculator):
        """Test that single lookups agree with the full list."""
        full = calculator.calculate_standard(2026, Language.SE)
        for kind, expected in zip(HolidayKind, full):
            assert calculator.get_holiday(kind, 2026, Language.SE) == expected

    def test_accepts_kind_value(self, calculator):
        """Test that the kind can be given as its string value."""
        holiday = calculator.get_holiday("pentecost", 2025, Language.EN)
        assert holiday.date == date(2025, 6, 8)

    def test_none_kind(self, calculator):
        """Test that a missing kind is rejected."""
        with pytest.raises(InvalidArgumentError):
            calculator.get_holiday(None, 2025, Language.EN)


class TestAgainstHolidaysLibrary:
    """Cross-check public holidays against the python-holidays package."""

    PUBLIC_KINDS = [
        HolidayKind.NEW_YEARS_DAY,
        HolidayKind.EPIPHANY,
        HolidayKind.GOOD_FRIDAY,
        HolidayKind.EASTER_SUNDAY,
        HolidayKind.EASTER_MONDAY,
        HolidayKind.MAY_DAY,
        HolidayKind.ASCENSION_DAY,
        HolidayKind.PENTECOST,
        HolidayKind.NATIONAL_DAY,
        HolidayKind.MIDSUMMER_DAY,
        HolidayKind.ALL_SAINTS_DAY,
        HolidayKind.CHRISTMAS_DAY,
        HolidayKind.ST_STEPHENS_DAY,
    ]

    @pytest.mark.parametrize("year", range(2020, 2036))
    def test_public_holidays_match(self, calculator, year):
        """Test that each public holiday is also a holiday in python-holidays."""
        reference = holidays_lib.Sweden(years=year)
        dates = by_kind(calculator, year)
        for kind in self.PUBLIC_KINDS:
            assert dates[kind] in reference, f"{kind.value} {dates[kind]} not in reference"
