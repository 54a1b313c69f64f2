# tests/test_units.py

import pytest

import caljd
from caljd import CivilDateTime, MalformedUnitsError, UnitsSpec


# ------------------------------------------------------------
# Parsing
# ------------------------------------------------------------

def test_parse_date_only():
    spec = caljd.parse_units("days since 1970-01-01")
    assert spec == UnitsSpec("days", CivilDateTime(1, 1, 1970, 0, 0, 0))
    assert spec.per_day == 1.0


@pytest.mark.parametrize(
    "units, unit, ref",
    [
        ("hours since 2000-01-01 06:30:15", "hours", (1, 1, 2000, 6, 30, 15)),
        ("hours since 2000-01-01 06:30:15Z", "hours", (1, 1, 2000, 6, 30, 15)),
        ("seconds since 1970-01-01T00:00:00+01:00", "seconds", (1, 1, 1970, 0, 0, 0)),
        ("minutes since 2000-01-01 12", "minutes", (1, 1, 2000, 12, 0, 0)),
        ("minutes since 2000-01-01 12:45", "minutes", (1, 1, 2000, 12, 45, 0)),
        ("days since 1900-01-01 00:00:00.0", "days", (1, 1, 1900, 0, 0, 0)),
        ("days since 1900-01-01 Z", "days", (1, 1, 1900, 0, 0, 0)),
        ("  days   since 1850-06-15  ", "days", (15, 6, 1850, 0, 0, 0)),
    ],
)
def test_parse_variants(units, unit, ref):
    spec = caljd.parse_units(units)
    assert spec.unit == unit
    assert spec.reference == CivilDateTime(*ref)


@pytest.mark.parametrize("units", ["hours", "minutes", "seconds"])
def test_per_day(units):
    expected = {"hours": 24.0, "minutes": 1440.0, "seconds": 86400.0}[units]
    assert caljd.parse_units(f"{units} since 2000-01-01").per_day == expected


@pytest.mark.parametrize(
    "units",
    [
        "",
        "days",
        "days since",
        "days after 2000-01-01",
        "weeks since 2000-01-01",
        "Days since 2000-01-01",
        "days since 2000-1-01",
        "days since 00-01-01",
        "days since 2000-01-01 1:00",
        "days since 2000-01-01T",
        "days since 2000-01-0112",
        "days since 2000-01-01 garbage",
        "days since 2000-01-01 25:00:00",
        "days since 2000-01-01 12:61:00",
    ],
)
def test_malformed_units_rejected(units):
    with pytest.raises(MalformedUnitsError):
        caljd.parse_units(units)


def test_malformed_units_is_value_error():
    with pytest.raises(ValueError):
        caljd.parse_units("fortnights since 2000-01-01")


def test_invalid_reference_date_rejected_on_use():
    with pytest.raises(MalformedUnitsError):
        caljd.from_fractional_day(0, units="days since 2000-13-01")
    with pytest.raises(MalformedUnitsError):
        caljd.from_fractional_day(0, units="days since 1582-10-10")


# ------------------------------------------------------------
# Decoding relative dates
# ------------------------------------------------------------

def test_reference_itself_decodes_exactly():
    assert caljd.from_fractional_day(0, units="days since 1900-01-01 00:00:00") == CivilDateTime(1, 1, 1900, 0, 0, 0)
    assert caljd.from_fractional_day(0, units="hours since 2000-01-01 23:59:59") == CivilDateTime(1, 1, 2000, 23, 59, 59)


@pytest.mark.parametrize(
    "offset, units, expected",
    [
        (36, "hours since 1900-01-01", (2, 1, 1900, 12, 0, 0)),
        (0.5, "days since 2000-01-01", (1, 1, 2000, 12, 0, 0)),
        (86400 * 365, "seconds since 1970-01-01 00:00:00Z", (1, 1, 1971, 0, 0, 0)),
        (90, "minutes since 2000-02-28 23:00:00", (29, 2, 2000, 0, 30, 0)),
        (-1, "days since 1582-10-15", (4, 10, 1582, 0, 0, 0)),
        (1, "seconds since 1999-12-31 23:59:59", (1, 1, 2000, 0, 0, 0)),
    ],
)
def test_relative_dates(offset, units, expected):
    assert caljd.from_fractional_day(offset, units=units) == CivilDateTime(*expected)


def test_relative_dates_in_fixed_calendars():
    assert caljd.from_fractional_day(30, "360day", units="days since 2000-01-01") == CivilDateTime(1, 2, 2000, 0, 0, 0)
    assert caljd.from_fractional_day(59, "365day", units="days since 2000-01-01") == CivilDateTime(1, 3, 2000, 0, 0, 0)
    assert caljd.from_fractional_day(60, "julian", units="days since 2000-01-01") == CivilDateTime(1, 3, 2000, 0, 0, 0)


def test_relative_dates_lilian():
    assert caljd.from_fractional_day(24, "lilian", units="hours since 1582-10-15") == CivilDateTime(16, 10, 1582, 0, 0, 0)


def test_to_units_offset():
    assert caljd.to_units_offset((2, 1, 1900, 12, 0, 0), "hours since 1900-01-01") == pytest.approx(36.0, abs=1e-5)
    assert caljd.to_units_offset((1, 1, 1971), "seconds since 1970-01-01") == pytest.approx(86400 * 365, abs=1e-3)
    assert caljd.to_units_offset((1, 2, 2000), "days since 2000-01-01", "360day") == pytest.approx(30.0, abs=1e-8)
