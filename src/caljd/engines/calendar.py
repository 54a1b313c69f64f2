"""
caljd.engines.calendar
----------------------
Shared machinery of all calendar engines: field validation, the day-number
range guard, and the fractional-day encode/decode around the integer
arithmetic each calendar supplies.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Optional

from caljd.core.errors import DayNumberOverflowError, InvalidDateError
from caljd.core.time import fraction_of_day, nudge as _nudge, split_fraction
from caljd.core.types import CalendarKind, CivilDate, CivilDateTime, as_field
from caljd.engines.specs import DAY_NUMBER_MAX, DAY_NUMBER_MIN


def check_day_number(n: int) -> int:
    if not (DAY_NUMBER_MIN <= n <= DAY_NUMBER_MAX):
        raise DayNumberOverflowError(
            f"Day number {n} outside [{DAY_NUMBER_MIN}, {DAY_NUMBER_MAX}]"
        )
    return n


def check_time(hour: Optional[int], minute: Optional[int], second: Optional[int]) -> None:
    if hour is not None:
        hour = as_field(hour, "hour")
    if minute is not None:
        minute = as_field(minute, "minute")
    if second is not None:
        second = as_field(second, "second")
    if hour is not None and not (0 <= hour <= 23):
        raise InvalidDateError(f"hour must be in 0..23, got {hour}")
    if minute is not None and not (0 <= minute <= 59):
        raise InvalidDateError(f"minute must be in 0..59, got {minute}")
    if second is not None and not (0 <= second <= 59):
        raise InvalidDateError(f"second must be in 0..59, got {second}")


def _integer_date(d: CivilDate) -> CivilDate:
    return CivilDate(as_field(d.day, "day"), as_field(d.month, "month"), as_field(d.year, "year"))


class CalendarEngine:
    """
    Base engine. Subclasses implement `days_in_month`, `_encode` and `_decode`
    on validated input; everything else is shared.
    """
    kind: CalendarKind
    # Fractional day values begin half a day before the integer day number.
    noon_offset = 0.5

    def __init__(self, kind: CalendarKind, params: Any):
        self.kind = kind
        self.params = params

    # ---------------------------------------------------------
    # Calendar-specific arithmetic
    # ---------------------------------------------------------

    def days_in_month(self, year: int, month: int) -> int:
        raise NotImplementedError

    def _encode(self, d: CivilDate) -> int:
        raise NotImplementedError

    def _decode(self, n: int) -> CivilDate:
        raise NotImplementedError

    # ---------------------------------------------------------
    # Integer day numbers
    # ---------------------------------------------------------

    def validate(self, d: CivilDate) -> None:
        d = _integer_date(d)
        if not (1 <= d.month <= 12):
            raise InvalidDateError(f"month must be in 1..12, got {d.month}")
        n_days = self.days_in_month(d.year, d.month)
        if not (1 <= d.day <= n_days):
            raise InvalidDateError(
                f"day must be in 1..{n_days} for {d.year}-{d.month:02d} ({self.kind.value}), got {d.day}"
            )

    def to_jdn(self, d: CivilDate) -> int:
        d = _integer_date(d)
        self.validate(d)
        return check_day_number(self._encode(d))

    def from_jdn(self, n: int) -> CivilDate:
        return self._decode(check_day_number(as_field(n, "day number")))

    # ---------------------------------------------------------
    # Fractional days
    # ---------------------------------------------------------

    def to_fractional(
        self, dt: CivilDateTime, fracday: Optional[float] = None, *, nudge: bool = True
    ) -> float:
        check_time(dt.hour, dt.minute, dt.second)
        h = fraction_of_day(dt.hour, dt.minute, dt.second, fracday)
        if not (0.0 <= h < 1.0):
            raise InvalidDateError(f"fracday must be in [0, 1), got {h}")
        x = float(self.to_jdn(dt.date)) + (h - self.noon_offset)
        return _nudge(x) if nudge else x

    def from_fractional(self, x: float) -> CivilDateTime:
        if not math.isfinite(x):
            raise InvalidDateError(f"fractional day must be finite, got {x}")
        shifted = x + self.noon_offset
        z = math.floor(shifted)
        d = self.from_jdn(z)
        hour, minute, second, carry = split_fraction(shifted - z)
        if carry:
            d = self.from_jdn(self._encode(d) + 1)
        return CivilDateTime.from_date(d, hour, minute, second)

    def info(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "params": self.params.__dict__}
