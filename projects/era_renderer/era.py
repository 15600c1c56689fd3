from dataclasses import dataclass, replace
from typing import Optional, Union

from era_renderer.language import Language, get_language
from era_renderer.precision import Precision
from era_renderer.renderer import render


@dataclass(frozen=True)
class Era:
    """
    A date at a chosen precision, from a single day up to a millennium.

    Negative years are BCE years, there is no year zero: year -1 is 1 BCE.
    The year is stored as given; the BCE/CE conversion happens when the era
    is rendered. Month and day are 0 when the precision does not use them.
    Nothing is validated, calendar correctness is up to the caller.
    """

    year: int
    month: int = 0
    day: int = 0
    precision: Precision = Precision.DAY
    language: Language = Language.ENGLISH

    @classmethod
    def new(cls, year: int, month: int, day: int, precision: Precision) -> "Era":
        """
        Pass year, month, day, and precision.
        Depending on precision, day and/or month will be ignored.
        """
        precision = Precision(precision)
        return cls(
            year=year,
            month=month if precision.has_month else 0,
            day=day if precision.has_day else 0,
            precision=precision,
        )

    def with_language(self, language: Union[Language, str]) -> "Era":
        return replace(self, language=get_language(language))

    @property
    def is_bce(self) -> bool:
        return self.year < 0

    @property
    def decade_number(self) -> int:
        # Any year in range 2010-2019 is in the 2010s, -919 to -910 in the 910s BCE.
        return (abs(self.year) // 10) * 10

    @property
    def century_number(self) -> int:
        # Any year in range 1801-1900 is in the 19th century.
        return (abs(self.year) + 99) // 100

    @property
    def millennium_number(self) -> int:
        # Any year in range 1001-2000 is in the 2nd millennium.
        return (abs(self.year) + 999) // 1000

    def as_string(self, language: Optional[Union[Language, str]] = None) -> str:
        return render(self, language)

    def __str__(self) -> str:
        return render(self)


def from_date(date, precision: Precision = Precision.DAY) -> Era:
    """
    Derives an era from anything with year, month and day attributes,
    such as datetime.date or pywikibot.WbTime.
    Depending on precision, day and/or month will be ignored.
    """
    return Era.new(date.year, date.month, date.day, precision)


def day(year: int, month: int, day: int) -> Era:
    return Era.new(year, month, day, Precision.DAY)


def month(year: int, month: int) -> Era:
    return Era.new(year, month, 0, Precision.MONTH)


def year(year: int) -> Era:
    return Era.new(year, 0, 0, Precision.YEAR)


def decade(year: int) -> Era:
    """Pass any year in the decade, e.g. 2015 for the 2010s."""
    return Era.new(year, 0, 0, Precision.DECADE)


def century(year: int) -> Era:
    """Pass any year in the century, e.g. 1850 for the 19th century."""
    return Era.new(year, 0, 0, Precision.CENTURY)


def millennium(year: int) -> Era:
    return Era.new(year, 0, 0, Precision.MILLENNIUM)
