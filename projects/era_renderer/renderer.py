from typing import TYPE_CHECKING, Optional, Union

from era_renderer.language import Language, Lexicon, get_language
from era_renderer.precision import Precision

if TYPE_CHECKING:
    from era_renderer.era import Era


def _with_era(text: str, lexicon: Lexicon, year: int) -> str:
    era = lexicon.era(year)
    if era:
        return f"{text} {era}"
    return text


def _decade_to_string(era: "Era", lexicon: Lexicon) -> str:
    text = f"{era.decade_number}{lexicon.decade_suffix}"
    return _with_era(text, lexicon, era.year)


def _ordinal_to_string(number: int, word: str, lexicon: Lexicon, year: int) -> str:
    text = f"{lexicon.ordinal(number)} {word}"
    return _with_era(text, lexicon, year)


def render(era: "Era", language: Optional[Union[Language, str]] = None) -> str:
    """
    Returns the display string of an era.

    Day, month and year precision give the signed ISO-like form
    ("-910-09-17") in every language. Decades, centuries and millennia are
    described with the words of the language, e.g. "10th century BCE" or
    "10. Jahrhundert v.Chr.". Year 0 has no such description and gives "0".

    Args:
        era (Era): The value to render.
        language (Language | str, optional): Overrides the era's own language.
    """
    lexicon = get_language(language or era.language).lexicon
    precision = era.precision

    if precision == Precision.DAY:
        return f"{era.year}-{era.month:02}-{era.day:02}"
    elif precision == Precision.MONTH:
        return f"{era.year}-{era.month:02}"
    elif precision == Precision.YEAR:
        return f"{era.year}"

    if era.year == 0:
        return "0"
    if precision == Precision.DECADE:
        return _decade_to_string(era, lexicon)
    elif precision == Precision.CENTURY:
        return _ordinal_to_string(era.century_number, lexicon.century, lexicon, era.year)
    elif precision == Precision.MILLENNIUM:
        return _ordinal_to_string(
            era.millennium_number, lexicon.millennium, lexicon, era.year
        )
    raise ValueError(f"Unknown precision {precision}")
