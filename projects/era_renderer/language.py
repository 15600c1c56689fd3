import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, FrozenSet, Tuple, Union

import yaml

logger = logging.getLogger("era_renderer")

LEXICON_DIR = Path(__file__).resolve().parent
LEXICON_PATH = LEXICON_DIR / "lexicon.yaml"

REQUIRED_FIELDS = ("era_bce", "decade_suffix", "century", "millennium", "ordinal")


class Language(Enum):
    ENGLISH = "en"
    GERMAN = "de"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> "Language":
        """
        Returns the language for a language code such as "de".
        Unsupported codes fall back to English.
        """
        normalized = code.strip().lower()
        for language in cls:
            if language.value == normalized:
                return language
        logger.info(f"Unsupported language code '{code}', using en")
        return cls.ENGLISH

    @property
    def lexicon(self) -> "Lexicon":
        return LEXICONS[self]


@dataclass(frozen=True)
class Lexicon:
    """
    The words and suffixes one language needs to describe an era.
    """

    code: str
    era_bce: str
    decade_suffix: str
    century: str
    millennium: str
    ordinal_default: str
    era_ce: str = ""
    # (last digit, suffix) pairs
    ordinal_suffixes: Tuple[Tuple[int, str], ...] = ()
    # last two digits that take ordinal_default regardless of the last digit
    ordinal_exceptions: FrozenSet[int] = frozenset()

    @classmethod
    def from_config(cls, code: str, config: dict) -> "Lexicon":
        missing = [key for key in REQUIRED_FIELDS if key not in config]
        if missing:
            raise RuntimeError(f"Lexicon for '{code}' is missing {', '.join(missing)}")
        ordinal = config["ordinal"] or {}
        if "default" not in ordinal:
            raise RuntimeError(f"Lexicon for '{code}' has no default ordinal suffix")
        suffixes = ordinal.get("suffixes") or {}
        return cls(
            code=code,
            era_bce=config["era_bce"],
            era_ce=config.get("era_ce") or "",
            decade_suffix=config["decade_suffix"] or "",
            century=config["century"],
            millennium=config["millennium"],
            ordinal_default=ordinal["default"],
            ordinal_suffixes=tuple(
                sorted((int(k), v) for k, v in suffixes.items())
            ),
            ordinal_exceptions=frozenset(
                int(n) for n in ordinal.get("exceptions") or []
            ),
        )

    def era(self, year: int) -> str:
        if year < 0:
            return self.era_bce
        return self.era_ce

    def ordinal(self, number: int) -> str:
        n = abs(number)
        if n % 100 in self.ordinal_exceptions:
            return f"{number}{self.ordinal_default}"
        suffix = dict(self.ordinal_suffixes).get(n % 10, self.ordinal_default)
        return f"{number}{suffix}"


def load_lexicon_config(path: Path = LEXICON_PATH) -> dict:
    with path.open(encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_lexicons(path: Path = LEXICON_PATH) -> Dict[Language, Lexicon]:
    """
    Reads a lexicon file and returns the lexicon of every language.

    Raises:
        RuntimeError: If a language has no entry, or an entry is incomplete.
    """
    config = load_lexicon_config(path)
    logger.debug(f"Loaded lexicon file {path} with {len(config)} entries")

    lexicons = {}
    for language in Language:
        if language.value not in config:
            raise RuntimeError(f"No lexicon for language '{language.value}' in {path}")
        lexicons[language] = Lexicon.from_config(language.value, config[language.value])

    known = {language.value for language in Language}
    for code in config:
        if code not in known:
            logger.warning(f"Ignored lexicon '{code}', it has no Language member")

    return lexicons


def get_language(language: Union[Language, str]) -> Language:
    if isinstance(language, Language):
        return language
    return Language.from_code(language)


LEXICONS = load_lexicons()
