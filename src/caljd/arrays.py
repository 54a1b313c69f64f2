"""
caljd.arrays
------------
Element-wise conversions over numpy arrays. Inputs are broadcast against
each other; scalars and nested sequences work as well. Every element goes
through the same scalar engine call as the plain API, so validation errors
propagate unchanged.
"""

from __future__ import annotations

from typing import NamedTuple, Optional, Tuple

import numpy as np

from .api import get_engine
from .core.types import CalendarLike, CivilDate, CivilDateTime
from .units import offset_to_fractional, parse_units


class DateTimeArrays(NamedTuple):
    day: np.ndarray
    month: np.ndarray
    year: np.ndarray
    hour: np.ndarray
    minute: np.ndarray
    second: np.ndarray


def to_day_numbers(day, month, year, calendar: CalendarLike = None) -> np.ndarray:
    eng = get_engine(calendar)
    d, m, y = np.broadcast_arrays(np.asarray(day), np.asarray(month), np.asarray(year))
    out = np.empty(d.shape, dtype=np.int64)
    for idx in np.ndindex(d.shape):
        out[idx] = eng.to_jdn(CivilDate(d[idx].item(), m[idx].item(), y[idx].item()))
    return out


def from_day_numbers(n, calendar: CalendarLike = None) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    eng = get_engine(calendar)
    n = np.asarray(n)
    dd = np.empty(n.shape, dtype=np.int64)
    mm = np.empty(n.shape, dtype=np.int64)
    yy = np.empty(n.shape, dtype=np.int64)
    for idx in np.ndindex(n.shape):
        dd[idx], mm[idx], yy[idx] = eng.from_jdn(n[idx].item()).as_tuple()
    return dd, mm, yy


def to_fractional_days(day, month, year, hour=0, minute=0, second=0,
                       calendar: CalendarLike = None) -> np.ndarray:
    eng = get_engine(calendar)
    fields = np.broadcast_arrays(*(np.asarray(a) for a in (day, month, year, hour, minute, second)))
    out = np.empty(fields[0].shape, dtype=np.float64)
    for idx in np.ndindex(out.shape):
        dt = CivilDateTime(*(f[idx].item() for f in fields))
        out[idx] = eng.to_fractional(dt)
    return out


def from_fractional_days(x, calendar: CalendarLike = None, units: Optional[str] = None) -> DateTimeArrays:
    eng = get_engine(calendar)
    x = np.asarray(x, dtype=np.float64)
    spec = parse_units(units) if units is not None else None

    cols = [np.empty(x.shape, dtype=np.int64) for _ in range(6)]
    for idx in np.ndindex(x.shape):
        xi = float(x[idx])
        if spec is not None:
            xi = offset_to_fractional(xi, spec, eng)
        values = eng.from_fractional(xi).as_tuple()
        for col, v in zip(cols, values):
            col[idx] = v
    return DateTimeArrays(*cols)
