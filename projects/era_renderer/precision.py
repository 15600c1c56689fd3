from enum import IntEnum
from typing import Union


class Precision(IntEnum):
    """
    Granularity of an era value.

    The values are the Wikidata time precision codes, so a precision read
    from a WbTime can be used directly.
    """

    DAY = 11
    MONTH = 10
    YEAR = 9
    DECADE = 8
    CENTURY = 7
    MILLENNIUM = 6

    def __str__(self) -> str:
        return f"{self.value}"

    @classmethod
    def from_code(cls, value: Union[int, str]) -> "Precision":
        """
        Returns the precision for a Wikidata precision code.

        Args:
            value (int | str): The precision code, 6 (millennium) to 11 (day).

        Raises:
            ValueError: If the code is not one of the supported precisions.
        """
        try:
            return cls(int(value))
        except ValueError:
            raise ValueError(
                f"Unsupported precision value {value}; values 6-11 are supported"
            ) from None

    @classmethod
    def from_name(cls, name: str) -> "Precision":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown precision {name}") from None

    @property
    def has_month(self) -> bool:
        return self >= Precision.MONTH

    @property
    def has_day(self) -> bool:
        return self == Precision.DAY
