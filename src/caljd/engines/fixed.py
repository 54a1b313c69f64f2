"""
caljd.engines.fixed
-------------------
Synthetic calendars with a constant year (360day, 365day), as used by
climate-model output. There is no leap day and no reform gap.

Day 0 is 1 Jan of year 0. Negative years are mirrored: a date in year -y
gets the negated day number of the same date in year y, so day numbers run
backwards within a negative year.
"""

from __future__ import annotations

from itertools import accumulate
from typing import Tuple

from caljd.core.types import CalendarKind, CivilDate
from caljd.engines.calendar import CalendarEngine
from caljd.engines.specs import FixedCalendarParams


class FixedCalendarEngine(CalendarEngine):
    def __init__(self, kind: CalendarKind, params: FixedCalendarParams):
        super().__init__(kind, params)
        self.months: Tuple[int, ...] = tuple(params.month_lengths)
        self.year_length = params.year_length
        # Days before the first of each month
        self._month_starts = (0,) + tuple(accumulate(self.months))[:-1]

    def days_in_month(self, year: int, month: int) -> int:
        return self.months[month - 1]

    def _encode(self, d: CivilDate) -> int:
        n = abs(d.year) * self.year_length + self._month_starts[d.month - 1] + (d.day - 1)
        return -n if d.year < 0 else n

    def _decode(self, n: int) -> CivilDate:
        # Year truncates towards zero
        year = abs(n) // self.year_length
        if n < 0:
            year = -year
        remainder = abs(n) % self.year_length + 1
        month = 1
        for length in self.months:
            if remainder <= length:
                break
            remainder -= length
            month += 1
        return CivilDate(remainder, month, year)
