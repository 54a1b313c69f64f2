"""
caljd.engines.mixed
-------------------
The astronomical Julian Day calendar: Julian calendar up to 4 Oct 1582,
Gregorian calendar from 15 Oct 1582. Years use astronomical numbering, so
year 0 is 1 BC and JDN 0 is 1 Jan -4712.

The classic floating-point constants are evaluated in exact integer form:
    floor(365.25 * Y)       == (1461 * Y) // 4
    floor(30.6001 * M)      == (306001 * M) // 10000
    floor((B - 122.1) / 365.25)           == (100 * B - 12210) // 36525
    floor((Z - 1867216.25) / 36524.25)    == (4 * Z - 7468865) // 146097
so the algorithm holds for negative years as well.
"""

from __future__ import annotations

from caljd.core.errors import GregorianGapError
from caljd.core.types import CalendarKind, CivilDate
from caljd.engines.calendar import CalendarEngine
from caljd.engines.specs import MONTHS_365, MixedCalendarParams


def _ordinal(day: int, month: int, year: int) -> int:
    return day + 31 * (month + 12 * year)


def _floor_30_6001(m: int) -> int:
    return (306001 * m) // 10000


class MixedCalendarEngine(CalendarEngine):
    def __init__(self, params: MixedCalendarParams, kind: CalendarKind = CalendarKind.JULIAN):
        super().__init__(kind, params)
        self._julian_last = _ordinal(*params.julian_last_day)
        self._gregorian_first = _ordinal(*params.gregorian_first_day)
        self._reform_year = params.gregorian_first_day[2]

    # ---------------------------------------------------------
    # Leap years and month lengths
    # ---------------------------------------------------------

    def is_leap_year(self, year: int) -> bool:
        if year <= self._reform_year:
            return year % 4 == 0
        return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0

    def days_in_month(self, year: int, month: int) -> int:
        if month == 2 and self.is_leap_year(year):
            return 29
        return MONTHS_365[month - 1]

    def is_gregorian(self, d: CivilDate) -> bool:
        return _ordinal(d.day, d.month, d.year) >= self._gregorian_first

    def validate(self, d: CivilDate) -> None:
        super().validate(d)
        key = _ordinal(d.day, d.month, d.year)
        if self._julian_last < key < self._gregorian_first:
            raise GregorianGapError(
                f"{d} falls in the days skipped by the Gregorian reform"
            )

    # ---------------------------------------------------------
    # Integer arithmetic
    # ---------------------------------------------------------

    def _encode(self, d: CivilDate) -> int:
        # January and February count as months 13 and 14 of the previous year
        if d.month > 2:
            jm, jy = d.month, d.year
        else:
            jm, jy = d.month + 12, d.year - 1

        if self.is_gregorian(d):
            a = jy // 100
            b = 2 - a + a // 4
        else:
            b = 0

        return (1461 * (jy + 4716)) // 4 + _floor_30_6001(jm + 1) + d.day + b - 1524

    def _decode(self, n: int) -> CivilDate:
        if n < self.params.gregorian_first_jdn:
            a = n
        else:
            g = (4 * n - 7468865) // 146097
            a = n + 1 + g - g // 4

        b = a + 1524
        c = (100 * b - 12210) // 36525
        d = (1461 * c) // 4
        e = ((b - d) * 10000) // 306001

        day = b - d - _floor_30_6001(e)
        month = e - 1 if e < 14 else e - 13
        year = c - 4716 if month > 2 else c - 4715
        return CivilDate(day, month, year)
