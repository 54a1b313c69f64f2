from __future__ import annotations

import logging
import operator
from dataclasses import dataclass
from enum import Enum
from typing import Literal, Optional, Tuple, Union

from .errors import InvalidDateError

logger = logging.getLogger(__name__)

TimeUnit = Literal["days", "hours", "minutes", "seconds"]

UNITS_PER_DAY = {"days": 1.0, "hours": 24.0, "minutes": 1440.0, "seconds": 86400.0}


class CalendarKind(str, Enum):
    JULIAN = "julian"
    LILIAN = "lilian"
    DAY360 = "360day"
    DAY365 = "365day"

    @classmethod
    def parse(cls, token: Union[str, "CalendarKind", None]) -> "CalendarKind":
        """
        Map a calendar token to a CalendarKind.

        Tokens are case-sensitive. None and unknown tokens fall back to JULIAN.
        """
        if isinstance(token, CalendarKind):
            return token
        if token is None:
            return cls.JULIAN
        for kind in cls:
            if kind.value == token:
                return kind
        logger.debug("Unrecognised calendar %r, using %r", token, cls.JULIAN.value)
        return cls.JULIAN


CalendarLike = Union[str, CalendarKind, None]


@dataclass(frozen=True)
class CivilDate:
    """Day, month and year in astronomical numbering (year 0 is 1 BC)."""
    day: int
    month: int
    year: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.day, self.month, self.year)

    def __str__(self) -> str:
        sign = "-" if self.year < 0 else ""
        return f"{sign}{abs(self.year):04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class CivilDateTime:
    day: int
    month: int
    year: int
    hour: Optional[int] = None
    minute: Optional[int] = None
    second: Optional[int] = None

    @classmethod
    def from_date(cls, d: CivilDate, hour: Optional[int] = None, minute: Optional[int] = None,
                  second: Optional[int] = None) -> "CivilDateTime":
        return cls(d.day, d.month, d.year, hour, minute, second)

    @property
    def date(self) -> CivilDate:
        return CivilDate(self.day, self.month, self.year)

    @property
    def has_time(self) -> bool:
        return self.hour is not None or self.minute is not None or self.second is not None

    @property
    def fracday(self) -> float:
        """Time of day as a fraction of a day; missing fields count as zero."""
        return (self.hour or 0) / 24.0 + (self.minute or 0) / 1440.0 + (self.second or 0) / 86400.0

    def as_tuple(self) -> Tuple[int, int, int, int, int, int]:
        return (self.day, self.month, self.year, self.hour or 0, self.minute or 0, self.second or 0)

    def __str__(self) -> str:
        return f"{self.date} {self.hour or 0:02d}:{self.minute or 0:02d}:{self.second or 0:02d}"


DateLike = Union[CivilDate, CivilDateTime, Tuple[int, ...]]


@dataclass(frozen=True)
class UnitsSpec:
    """Parsed '<unit> since <reference>' string."""
    unit: TimeUnit
    reference: CivilDateTime

    @property
    def per_day(self) -> float:
        return UNITS_PER_DAY[self.unit]


def as_field(value, name: str) -> int:
    """Integer value of a date or time field; InvalidDateError for anything else."""
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidDateError(f"{name} must be an integer, got {value!r}") from None


def as_datetime(value: DateLike) -> CivilDateTime:
    """Normalise a CivilDate, CivilDateTime or (day, month, year[, h, m, s]) tuple."""
    if isinstance(value, CivilDateTime):
        return value
    if isinstance(value, CivilDate):
        return CivilDateTime.from_date(value)
    fields = tuple(value)
    if not (3 <= len(fields) <= 6):
        raise TypeError(f"Expected (day, month, year[, hour, minute, second]), got {value!r}")
    names = ("day", "month", "year", "hour", "minute", "second")
    return CivilDateTime(*(as_field(f, name) for f, name in zip(fields, names)))


def as_date(value: DateLike) -> CivilDate:
    return as_datetime(value).date
