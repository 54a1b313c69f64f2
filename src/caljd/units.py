"""
caljd.units
-----------
Relative dates in the netCDF/CF style: "<unit> since YYYY-MM-DD[ hh:mm:ss]".

<unit> is one of days, hours, minutes, seconds. The time of day may be
omitted or truncated after the hour or minute. Anything after a complete
seconds field (e.g. "Z" or "+01:00") is ignored; a shorter time may only be
followed by blanks or a timezone designator.
"""

from __future__ import annotations

import logging
import re

from caljd.core.errors import InvalidDateError, MalformedUnitsError
from caljd.core.time import nudge, unnudge
from caljd.core.types import CivilDateTime, UnitsSpec
from caljd.engines.calendar import check_time
from caljd.engines.interfaces import CalendarEngineProtocol

logger = logging.getLogger(__name__)

_UNITS_RE = re.compile(
    r"^\s*(?P<unit>days|hours|minutes|seconds)\s+since\s+"
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"(?:[ T](?P<hour>\d{2})(?::(?P<minute>\d{2})(?::(?P<second>\d{2}))?)?)?"
)

_TZ_RE = re.compile(r"^\s*(?:Z|UTC|[+-]\d{2}(?::?\d{2})?)?\s*$")


def parse_units(units: str) -> UnitsSpec:
    """Parse a units string into a UnitsSpec; raise MalformedUnitsError if it does not fit."""
    if not isinstance(units, str):
        raise MalformedUnitsError(f"units must be a string, got {type(units).__name__}")

    m = _UNITS_RE.match(units)
    if m is None:
        raise MalformedUnitsError(
            f"Units must be 'days/hours/minutes/seconds since YYYY-MM-DD hh:mm:ss', got {units!r}"
        )

    rest = units[m.end():]
    if m.group("second") is None and not _TZ_RE.match(rest):
        raise MalformedUnitsError(f"Unexpected text {rest!r} after reference date in {units!r}")

    def _field(name: str):
        value = m.group(name)
        return int(value) if value is not None else None

    reference = CivilDateTime(
        day=int(m.group("day")),
        month=int(m.group("month")),
        year=int(m.group("year")),
        hour=_field("hour") or 0,
        minute=_field("minute") or 0,
        second=_field("second") or 0,
    )
    try:
        check_time(reference.hour, reference.minute, reference.second)
    except InvalidDateError as e:
        raise MalformedUnitsError(f"Invalid reference time in {units!r}: {e}") from e

    spec = UnitsSpec(unit=m.group("unit"), reference=reference)
    logger.debug("Parsed units %r -> %s since %s", units, spec.unit, spec.reference)
    return spec


def reference_fractional(spec: UnitsSpec, engine: CalendarEngineProtocol) -> float:
    """Fractional day of the reference, with the encoding offset removed."""
    try:
        x0 = engine.to_fractional(spec.reference)
    except InvalidDateError as e:
        raise MalformedUnitsError(f"Invalid reference date {spec.reference}: {e}") from e
    return unnudge(x0)


def offset_to_fractional(offset: float, spec: UnitsSpec, engine: CalendarEngineProtocol) -> float:
    """`offset` units after the reference, as a fractional day of `engine`'s calendar."""
    x = reference_fractional(spec, engine) + float(offset) / spec.per_day
    return nudge(x)


def fractional_to_offset(x: float, spec: UnitsSpec, engine: CalendarEngineProtocol) -> float:
    """Inverse of offset_to_fractional: units elapsed between the reference and `x`."""
    return (x - reference_fractional(spec, engine)) * spec.per_day
