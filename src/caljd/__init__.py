"""caljd public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    to_day_number,
    from_day_number,
    to_fractional_day,
    from_fractional_day,
    imsl_day_number,
    from_imsl_day_number,
    parse_units,
    to_units_offset,
    days_in_month,
    list_calendars,
    calendar_info,
    get_engine,
)
from .core.errors import (
    CaljdError,
    InvalidDateError,
    GregorianGapError,
    MalformedUnitsError,
    DayNumberOverflowError,
)
from .core.types import CalendarKind, CivilDate, CivilDateTime, UnitsSpec

__all__ = [
    "to_day_number",
    "from_day_number",
    "to_fractional_day",
    "from_fractional_day",
    "imsl_day_number",
    "from_imsl_day_number",
    "parse_units",
    "to_units_offset",
    "days_in_month",
    "list_calendars",
    "calendar_info",
    "get_engine",
    "CaljdError",
    "InvalidDateError",
    "GregorianGapError",
    "MalformedUnitsError",
    "DayNumberOverflowError",
    "CalendarKind",
    "CivilDate",
    "CivilDateTime",
    "UnitsSpec",
]
