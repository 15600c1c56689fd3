"""Describe dates as localized eras: "2024", "910s BCE", "4. Jahrhundert".

Typical use::

    from era_renderer import century

    century(-910).as_string("de")   # "10. Jahrhundert v.Chr."

The Wikidata bridge lives in era_renderer.wbtime and needs pywikibot.
"""

from era_renderer.era import (
    Era,
    century,
    day,
    decade,
    from_date,
    millennium,
    month,
    year,
)
from era_renderer.language import Language, Lexicon
from era_renderer.precision import Precision
from era_renderer.renderer import render

__all__ = [
    "Era",
    "Language",
    "Lexicon",
    "Precision",
    "century",
    "day",
    "decade",
    "from_date",
    "millennium",
    "month",
    "render",
    "year",
]
