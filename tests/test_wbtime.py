# tests/test_wbtime.py

import pytest
import pywikibot as pwb

from era_renderer import era as er
from era_renderer.language import Language
from era_renderer.precision import Precision
from era_renderer.wbtime import (
    URL_PROLEPTIC_GREGORIAN_CALENDAR,
    URL_PROLEPTIC_JULIAN_CALENDAR,
    create_from_WbTime,
    create_wikidata_item,
    get_calendarmodel,
)


def make_wbtime(year, month=None, day=None, precision=11):
    return pwb.WbTime(
        year=year,
        month=month,
        day=day,
        precision=precision,
        calendarmodel=URL_PROLEPTIC_JULIAN_CALENDAR,
    )


def test_create_from_wbtime_keeps_precision():
    item = make_wbtime(-910, 9, 17, precision=11)
    assert create_from_WbTime(item) == er.day(-910, 9, 17)

    item = make_wbtime(-910, 9, 17, precision=7)
    value = create_from_WbTime(item)
    assert value == er.century(-910)
    assert str(value) == "10th century BCE"


def test_create_from_wbtime_language():
    item = make_wbtime(-910, precision=8)
    value = create_from_WbTime(item, Language.GERMAN)
    assert str(value) == "910er v.Chr."


@pytest.mark.parametrize("precision", [0, 3, 5, 12, 14])
def test_create_from_wbtime_unsupported_precision(precision):
    item = make_wbtime(1900, 1, 1, precision=precision)
    with pytest.raises(ValueError):
        create_from_WbTime(item)


def test_from_date_accepts_wbtime():
    item = make_wbtime(1582, 10, 4)
    assert str(er.from_date(item, Precision.MONTH)) == "1582-10"


def test_calendarmodel():
    assert get_calendarmodel(1581) == URL_PROLEPTIC_JULIAN_CALENDAR
    assert get_calendarmodel(-910) == URL_PROLEPTIC_JULIAN_CALENDAR
    assert get_calendarmodel(1582) == URL_PROLEPTIC_GREGORIAN_CALENDAR
    assert get_calendarmodel(1000, "gregorian") == URL_PROLEPTIC_GREGORIAN_CALENDAR
    assert get_calendarmodel(2000, "julian") == URL_PROLEPTIC_JULIAN_CALENDAR
    with pytest.raises(RuntimeError, match="Unrecognized calendar"):
        get_calendarmodel(2000, "hijri")


def test_create_wikidata_item():
    item = create_wikidata_item(er.day(2024, 9, 17))
    assert (item.year, item.month, item.day) == (2024, 9, 17)
    assert item.precision == 11
    assert item.calendarmodel == URL_PROLEPTIC_GREGORIAN_CALENDAR

    item = create_wikidata_item(er.century(-910))
    assert item.year == -910
    assert item.precision == 7
    assert item.calendarmodel == URL_PROLEPTIC_JULIAN_CALENDAR


def test_wikidata_item_roundtrip():
    value = er.millennium(-2001)
    assert create_from_WbTime(create_wikidata_item(value)) == value
