from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Tuple, Union

from ..core.types import CalendarKind


# ============================================================
# SHARED LIMITS
# ============================================================

# Day numbers are kept within signed 32 bits
DAY_NUMBER_MIN = -(2 ** 31)
DAY_NUMBER_MAX = 2 ** 31 - 1


# ============================================================
# JULIAN / GREGORIAN CONSTANTS
# ============================================================

# Last Julian and first Gregorian civil day, (day, month, year)
JULIAN_LAST_DAY = (4, 10, 1582)
GREGORIAN_FIRST_DAY = (15, 10, 1582)

# Day number of 15 Oct 1582
GREGORIAN_FIRST_JDN = 2299161

# Lilian day 1 is 15 Oct 1582
LILIAN_JDN_OFFSET = 2299160
LILIAN_FRACTIONAL_OFFSET = 2299159.5

# IMSL day 0 is 1 Jan 1900
IMSL_JDN_OFFSET = 2415021

MONTHS_365 = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
MONTHS_360 = (30,) * 12


def _ordinal(dmy: Tuple[int, int, int]) -> int:
    # Same day+31*(month+12*year) ordering key the cutover test uses
    d, m, y = dmy
    return d + 31 * (m + 12 * y)


@dataclass(frozen=True)
class MixedCalendarParams:
    """Julian calendar up to `julian_last_day`, Gregorian from `gregorian_first_day`."""
    julian_last_day: Tuple[int, int, int] = JULIAN_LAST_DAY
    gregorian_first_day: Tuple[int, int, int] = GREGORIAN_FIRST_DAY
    gregorian_first_jdn: int = GREGORIAN_FIRST_JDN

    def __post_init__(self) -> None:
        if _ordinal(self.julian_last_day) >= _ordinal(self.gregorian_first_day):
            raise ValueError("julian_last_day must precede gregorian_first_day")


@dataclass(frozen=True)
class LilianParams:
    base: MixedCalendarParams = MixedCalendarParams()
    jdn_offset: int = LILIAN_JDN_OFFSET
    fractional_offset: float = LILIAN_FRACTIONAL_OFFSET


@dataclass(frozen=True)
class FixedCalendarParams:
    """Constant year built from a month-length table; no leap days."""
    month_lengths: Tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.month_lengths) != 12:
            raise ValueError("month_lengths must list 12 months")
        if any(m <= 0 for m in self.month_lengths):
            raise ValueError("month lengths must be positive")

    @property
    def year_length(self) -> int:
        return sum(self.month_lengths)


CalendarParams = Union[MixedCalendarParams, LilianParams, FixedCalendarParams]


@dataclass(frozen=True)
class EngineSpec:
    kind: CalendarKind
    params: CalendarParams
    meta: Dict[str, Any]

    def tweak(self, **kwargs) -> "EngineSpec":
        return replace(self, params=replace(self.params, **kwargs))


# ============================================================
# STANDARD SPECS
# ============================================================

ALL_SPECS: Dict[CalendarKind, EngineSpec] = {
    CalendarKind.JULIAN: EngineSpec(
        kind=CalendarKind.JULIAN,
        params=MixedCalendarParams(),
        meta={"description": "Julian calendar until 4 Oct 1582, Gregorian from 15 Oct 1582",
              "epoch": "JDN 0 = 1 Jan -4712 (astronomical)"},
    ),
    CalendarKind.LILIAN: EngineSpec(
        kind=CalendarKind.LILIAN,
        params=LilianParams(),
        meta={"description": "Days since the Gregorian reform",
              "epoch": "day 1 = 15 Oct 1582"},
    ),
    CalendarKind.DAY360: EngineSpec(
        kind=CalendarKind.DAY360,
        params=FixedCalendarParams(MONTHS_360),
        meta={"description": "Twelve 30-day months",
              "epoch": "day 0 = 1 Jan 0"},
    ),
    CalendarKind.DAY365: EngineSpec(
        kind=CalendarKind.DAY365,
        params=FixedCalendarParams(MONTHS_365),
        meta={"description": "Standard month lengths without leap days",
              "epoch": "day 0 = 1 Jan 0"},
    ),
}
