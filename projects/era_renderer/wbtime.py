from typing import Optional

import pywikibot as pwb

from era_renderer.era import Era
from era_renderer.language import Language
from era_renderer.precision import Precision

URL_PROLEPTIC_JULIAN_CALENDAR = "http://www.wikidata.org/entity/Q1985786"
URL_PROLEPTIC_GREGORIAN_CALENDAR = "http://www.wikidata.org/entity/Q1985727"

CALENDAR_JULIAN = "julian"
CALENDAR_GREGORIAN = "gregorian"

# first year in which the Gregorian calendar was in use
GREGORIAN_REFORM_YEAR = 1582


def create_from_WbTime(item: pwb.WbTime, language: Language = Language.ENGLISH) -> Era:
    """
    Converts a Wikidata time value to an era, keeping its precision.

    Raises:
        ValueError: If the precision is coarser than a millennium or finer
            than a day.
    """
    precision = Precision.from_code(item.precision)
    era = Era.new(item.year, item.month, item.day, precision)
    return era.with_language(language)


def get_calendarmodel(year: int, calendar: Optional[str] = None) -> str:
    if calendar is None:
        if year < GREGORIAN_REFORM_YEAR:
            calendar = CALENDAR_JULIAN
        else:
            calendar = CALENDAR_GREGORIAN
    if calendar == CALENDAR_JULIAN:
        return URL_PROLEPTIC_JULIAN_CALENDAR
    if calendar == CALENDAR_GREGORIAN:
        return URL_PROLEPTIC_GREGORIAN_CALENDAR

    raise RuntimeError(f"Unrecognized calendar {calendar}")


def create_wikidata_item(era: Era, calendar: Optional[str] = None) -> pwb.WbTime:
    """
    Converts an era to a Wikidata time value with the same precision.
    Month and day the precision does not use are left to WbTime's defaults.
    """
    return pwb.WbTime(
        era.year,
        era.month or None,
        era.day or None,
        precision=int(era.precision),
        calendarmodel=get_calendarmodel(era.year, calendar),
    )
