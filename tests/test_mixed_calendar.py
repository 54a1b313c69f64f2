# tests/test_mixed_calendar.py

import pytest
import random
from datetime import date

import caljd
from caljd import CivilDate, DayNumberOverflowError, GregorianGapError, InvalidDateError

# JDN of proleptic Gregorian dates via the datetime ordinal (1 Jan 1 AD = ordinal 1)
ORDINAL_TO_JDN = 1721425


def test_known_epochs():
    assert caljd.to_day_number((1, 1, 1900)) == 2415021
    assert caljd.to_day_number((1, 1, 2000)) == 2451545
    # JDN 0 is 1 Jan 4713 BC, i.e. year -4712 in astronomical numbering
    assert caljd.to_day_number((1, 1, -4712)) == 0
    assert caljd.to_day_number((1, 1, 1)) == 1721424
    # Year 0 exists (1 BC)
    assert caljd.to_day_number((1, 3, 0)) == 1721118


def test_known_epochs_inverse():
    assert caljd.from_day_number(2415021) == CivilDate(1, 1, 1900)
    assert caljd.from_day_number(0) == CivilDate(1, 1, -4712)
    assert caljd.from_day_number(1721118) == CivilDate(1, 3, 0)


def test_gregorian_cutover():
    assert caljd.to_day_number((4, 10, 1582)) == 2299160
    assert caljd.to_day_number((15, 10, 1582)) == 2299161
    assert caljd.from_day_number(2299160) == CivilDate(4, 10, 1582)
    assert caljd.from_day_number(2299161) == CivilDate(15, 10, 1582)


@pytest.mark.parametrize("day", range(5, 15))
def test_gregorian_gap_rejected(day):
    with pytest.raises(GregorianGapError):
        caljd.to_day_number((day, 10, 1582))
    with pytest.raises(GregorianGapError):
        caljd.to_fractional_day((day, 10, 1582, 12, 0, 0))


def test_gap_error_is_value_error():
    with pytest.raises(ValueError):
        caljd.to_day_number((10, 10, 1582))


def test_days_are_contiguous_across_cutover():
    prev = None
    for n in range(2299100, 2299220):
        d = caljd.from_day_number(n)
        assert caljd.to_day_number(d) == n
        if prev is not None:
            assert (d.year, d.month, d.day) > (prev.year, prev.month, prev.day)
        prev = d


def test_matches_proleptic_gregorian_after_reform():
    random.seed(42)
    for _ in range(5000):
        jdn = random.randint(2299161, 5373484)  # 15 Oct 1582 .. 31 Dec 9999
        pd = date.fromordinal(jdn - ORDINAL_TO_JDN)
        assert caljd.from_day_number(jdn) == CivilDate(pd.day, pd.month, pd.year)
        assert caljd.to_day_number((pd.day, pd.month, pd.year)) == jdn


def test_jdn_date_roundtrip():
    random.seed(42)
    for _ in range(10000):
        jdn_in = random.randint(-2_000_000, 5_373_484)
        d = caljd.from_day_number(jdn_in)
        assert caljd.to_day_number(d) == jdn_in


def test_leap_rules():
    # Julian rule up to the reform, Gregorian after
    assert caljd.days_in_month(1500, 2) == 29
    assert caljd.days_in_month(1700, 2) == 28
    assert caljd.days_in_month(1900, 2) == 28
    assert caljd.days_in_month(2000, 2) == 29
    assert caljd.days_in_month(0, 2) == 29
    assert caljd.days_in_month(-1, 2) == 28
    assert caljd.days_in_month(-4, 2) == 29
    assert caljd.to_day_number((1, 3, 1500)) - caljd.to_day_number((29, 2, 1500)) == 1


@pytest.mark.parametrize(
    "dmy",
    [(29, 2, 1900), (31, 4, 2000), (0, 1, 2000), (1, 0, 2000), (1, 13, 2000), (32, 1, 2000)],
)
def test_invalid_dates_rejected(dmy):
    with pytest.raises(InvalidDateError):
        caljd.to_day_number(dmy)


def test_day_number_overflow():
    with pytest.raises(DayNumberOverflowError):
        caljd.to_day_number((1, 1, 6_000_000))
    with pytest.raises(DayNumberOverflowError):
        caljd.from_day_number(2 ** 31)
    with pytest.raises(OverflowError):
        caljd.from_day_number(-(2 ** 31) - 1)
