"""
caljd.core.time
---------------
Fractional-day codec shared by every calendar, and the epsilon corrections
that make fractional day values survive a float round trip at second
resolution.
"""

from __future__ import annotations

import math
import sys
from typing import Optional, Tuple

EPS = sys.float_info.epsilon


def fraction_of_day(
    hour: Optional[int] = None,
    minute: Optional[int] = None,
    second: Optional[int] = None,
    fracday: Optional[float] = None,
) -> float:
    """
    hour/24 + minute/1440 + second/86400.

    `fracday` is only used when none of hour, minute, second is given.
    """
    if hour is not None or minute is not None or second is not None:
        return (hour or 0) / 24.0 + (minute or 0) / 1440.0 + (second or 0) / 86400.0
    if fracday is not None:
        return float(fracday)
    return 0.0


def _nint(x: float) -> int:
    # Round half away from zero
    return int(math.floor(x + 0.5)) if x >= 0 else -int(math.floor(-x + 0.5))


def split_fraction(fraction: float) -> Tuple[int, int, int, int]:
    """
    Split a fraction of a day into (hour, minute, second, day_carry).

    The second is rounded; a rounded 60 carries into the minute, the minute
    into the hour and an hour of 24 into day_carry=1.
    """
    hour = min(max(math.floor(fraction * 24.0), 0), 23)
    fraction = fraction - hour / 24.0
    minute = min(max(math.floor(fraction * 1440.0), 0), 59)
    second = max(_nint((fraction - minute / 1440.0) * 86400.0), 0)

    carry = 0
    if second == 60:
        second = 0
        minute += 1
        if minute == 60:
            minute = 0
            hour += 1
            if hour == 24:
                hour = 0
                carry = 1
    return hour, minute, second, carry


def nudge(value: float) -> float:
    """Add max(eps*|value|, eps) so that decoding reproduces the encoded fields."""
    return value + max(EPS * abs(value), EPS)


def unnudge(value: float) -> float:
    """Remove the offset of `nudge` ahead of adding a relative time to a reference."""
    if EPS * abs(value) > EPS:
        if value > 0.0:
            return value / (1.0 + EPS)
        return value / (1.0 - EPS)
    return value - EPS
