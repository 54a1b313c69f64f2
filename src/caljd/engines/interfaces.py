"""
caljd.engines.interfaces
------------------------
The boundary every calendar engine implements.

Two numeric day representations are in play:
  * the integer day number (JDN), which begins at midnight;
  * the fractional day, which for the julian calendar begins at noon, so
    that fractional = JDN - 0.5 + time-of-day.
Never mix them without that half-day correction.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol

from caljd.core.types import CalendarKind, CivilDate, CivilDateTime


class CalendarEngineProtocol(Protocol):
    kind: CalendarKind

    def info(self) -> Dict[str, Any]:
        ...

    def days_in_month(self, year: int, month: int) -> int:
        """Number of days of `month` in `year`."""
        ...

    def validate(self, d: CivilDate) -> None:
        """Raise InvalidDateError if `d` does not exist in this calendar."""
        ...

    def to_jdn(self, d: CivilDate) -> int:
        """Civil date -> integer day number."""
        ...

    def from_jdn(self, n: int) -> CivilDate:
        """Integer day number -> civil date."""
        ...

    def to_fractional(
        self, dt: CivilDateTime, fracday: Optional[float] = None, *, nudge: bool = True
    ) -> float:
        """
        Civil date and time -> fractional day.

        `fracday` is only consulted when `dt` carries no time fields.
        """
        ...

    def from_fractional(self, x: float) -> CivilDateTime:
        """Fractional day -> civil date and time at second resolution."""
        ...
