"""
Static bilingual names and date rule descriptions for the standard holidays.
"""

from typing import Dict, Tuple

from swedish_holidays.data.schemas import HolidayKind, Language

# (name, description) per holiday and language
HOLIDAY_NAMES: Dict[HolidayKind, Dict[Language, Tuple[str, str]]] = {
    HolidayKind.NEW_YEARS_DAY: {
        Language.SE: ("Nyårsdagen", "Fast datum, 1 januari"),
        Language.EN: ("New Year's Day", "Fixed date, January 1"),
    },
    HolidayKind.EPIPHANY_EVE: {
        Language.SE: ("Trettondagsafton", "Fast datum, 5 januari"),
        Language.EN: ("Epiphany Eve", "Fixed date, January 5"),
    },
    HolidayKind.EPIPHANY: {
        Language.SE: ("Trettondedag jul", "Fast datum, 6 januari"),
        Language.EN: ("Epiphany", "Fixed date, January 6"),
    },
    HolidayKind.WALPURGIS_EVE: {
        Language.SE: ("Valborgsmässoafton", "Fast datum, 30 april"),
        Language.EN: ("Walpurgis Eve", "Fixed date, April 30"),
    },
    HolidayKind.MAY_DAY: {
        Language.SE: ("Första maj", "Fast datum, 1 maj"),
        Language.EN: ("May Day", "Fixed date, May 1"),
    },
    HolidayKind.NATIONAL_DAY: {
        Language.SE: ("Sveriges nationaldag", "Fast datum, 6 juni"),
        Language.EN: ("National Day of Sweden", "Fixed date, June 6"),
    },
    HolidayKind.CHRISTMAS_EVE: {
        Language.SE: ("Julafton", "Fast datum, 24 december"),
        Language.EN: ("Christmas Eve", "Fixed date, December 24"),
    },
    HolidayKind.CHRISTMAS_DAY: {
        Language.SE: ("Juldagen", "Fast datum, 25 december"),
        Language.EN: ("Christmas Day", "Fixed date, December 25"),
    },
    HolidayKind.ST_STEPHENS_DAY: {
        Language.SE: ("Annandag jul", "Fast datum, 26 december"),
        Language.EN: ("St. Stephen's Day", "Fixed date, December 26"),
    },
    HolidayKind.NEW_YEARS_EVE: {
        Language.SE: ("Nyårsafton", "Fast datum, 31 december"),
        Language.EN: ("New Year's Eve", "Fixed date, December 31"),
    },
    HolidayKind.MAUNDY_THURSDAY: {
        Language.SE: ("Skärtorsdagen", "Rörligt datum, torsdagen före Påskdagen"),
        Language.EN: ("Maundy Thursday", "Movable date, Thursday before Easter Sunday"),
    },
    HolidayKind.GOOD_FRIDAY: {
        Language.SE: ("Långfredagen", "Rörligt datum, fredagen före Påskdagen"),
        Language.EN: ("Good Friday", "Movable date, Friday before Easter Sunday"),
    },
    HolidayKind.EASTER_EVE: {
        Language.SE: ("Påskafton", "Rörligt datum, lördagen före Påskdagen"),
        Language.EN: ("Easter Eve", "Movable date, Saturday before Easter Sunday"),
    },
    HolidayKind.EASTER_SUNDAY: {
        Language.SE: (
            "Påskdagen",
            "Rörligt datum, första söndagen efter ecklesiastisk fullmåne, "
            "efter vårdagjämningen",
        ),
        Language.EN: (
            "Easter Sunday",
            "Movable date, first Sunday after the ecclesiastical full moon "
            "following the vernal equinox",
        ),
    },
    HolidayKind.EASTER_MONDAY: {
        Language.SE: ("Annandag påsk", "Rörligt datum, dagen efter påskdagen (d.v.s. en måndag)"),
        Language.EN: ("Easter Monday", "Movable date, the day after Easter Sunday (Monday)"),
    },
    HolidayKind.ASCENSION_DAY: {
        Language.SE: ("Kristi himmelsfärdsdag", "Rörligt datum, sjätte torsdagen efter påskdagen"),
        Language.EN: ("Ascension Day", "Movable date, the sixth Thursday after Easter Sunday"),
    },
    HolidayKind.WHITSUN_EVE: {
        Language.SE: ("Pingstafton", "Rörligt datum, dagen före pingstdagen (d.v.s. en lördag)"),
        Language.EN: ("Whitsun Eve", "Movable date, the day before Pentecost (Saturday)"),
    },
    HolidayKind.PENTECOST: {
        Language.SE: ("Pingstdagen", "Rörligt datum, sjunde söndagen efter påskdagen"),
        Language.EN: ("Pentecost", "Movable date, seventh Sunday after Easter Sunday"),
    },
    HolidayKind.MIDSUMMER_EVE: {
        Language.SE: (
            "Midsommarafton",
            "Rörligt datum, fredagen mellan 19 juni och 25 juni (fredagen före midsommardagen)",
        ),
        Language.EN: ("Midsummer Eve", "Movable date, Friday between June 19 and June 25"),
    },
    HolidayKind.MIDSUMMER_DAY: {
        Language.SE: ("Midsommardagen", "Rörligt datum, lördagen mellan 20 juni och 26 juni"),
        Language.EN: ("Midsummer Day", "Movable date, Saturday between June 20 and June 26"),
    },
    HolidayKind.ALL_SAINTS_EVE: {
        Language.SE: (
            "Allhelgonaafton",
            "Rörligt datum, fredagen mellan 30 oktober och 5 november",
        ),
        Language.EN: (
            "All Saints' Eve",
            "Movable date, Friday between October 30 and November 5",
        ),
    },
    HolidayKind.ALL_SAINTS_DAY: {
        Language.SE: (
            "Alla helgons dag",
            "Rörligt datum, lördagen mellan 31 oktober och 6 november",
        ),
        Language.EN: (
            "All Saints' Day",
            "Movable date, Saturday between October 31 and November 6",
        ),
    },
}

WEEKDAY_NAMES: Dict[Language, Tuple[str, ...]] = {
    Language.SE: ("måndag", "tisdag", "onsdag", "torsdag", "fredag", "lördag", "söndag"),
    Language.EN: ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
}
