from __future__ import annotations

from typing import Optional

from caljd.core.types import CalendarKind, CivilDate, CivilDateTime
from caljd.engines.calendar import CalendarEngine
from caljd.engines.mixed import MixedCalendarEngine
from caljd.engines.specs import LilianParams


class LilianCalendarEngine(CalendarEngine):
    """
    Lilian day numbers: the julian day number shifted so that day 1 is
    15 Oct 1582. Every conversion delegates to the mixed calendar.
    """
    # Lilian fractional days begin at midnight
    noon_offset = 0.0

    def __init__(self, params: LilianParams):
        super().__init__(CalendarKind.LILIAN, params)
        self.base = MixedCalendarEngine(params.base)

    def days_in_month(self, year: int, month: int) -> int:
        return self.base.days_in_month(year, month)

    def validate(self, d: CivilDate) -> None:
        self.base.validate(d)

    def _encode(self, d: CivilDate) -> int:
        return self.base._encode(d) - self.params.jdn_offset

    def _decode(self, n: int) -> CivilDate:
        return self.base.from_jdn(n + self.params.jdn_offset)

    def to_fractional(
        self, dt: CivilDateTime, fracday: Optional[float] = None, *, nudge: bool = True
    ) -> float:
        return self.base.to_fractional(dt, fracday, nudge=nudge) - self.params.fractional_offset

    def from_fractional(self, x: float) -> CivilDateTime:
        return self.base.from_fractional(x + self.params.fractional_offset)
