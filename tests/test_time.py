# tests/test_time.py

import pytest
from datetime import date

from hypothesis import given, settings, strategies as st

from misri.core.errors import DateRangeError, InvalidDateError
from misri.core.time import (
    REFORM_JDN,
    date_to_jdn,
    days_in_month,
    from_jdn,
    gregorian_to_jdn,
    in_reform_gap,
    is_leap_year,
    jdn_to_date,
    to_jdn,
    weekday,
)
from misri.core.types import CalendarDate

JDN_MIN = 1948439   # 622-07-15 (Julian)
JDN_MAX = 5373484   # 9999-12-31


def test_known_epochs():
    # J2000.0 civil date is January 1, 2000
    assert gregorian_to_jdn(2000, 1, 1) == 2451545
    assert gregorian_to_jdn(9999, 12, 31) == 5373484
    # Thursday 15 July 622 (Julian)
    assert gregorian_to_jdn(622, 7, 15) == 1948439
    assert date_to_jdn(date(2000, 1, 1)) == 2451545


def test_reform_cutover_is_contiguous():
    """Thursday 4 October 1582 (Julian) is followed by Friday 15 October 1582."""
    last_julian = gregorian_to_jdn(1582, 10, 4)
    first_gregorian = gregorian_to_jdn(1582, 10, 15)
    assert last_julian == 2299160
    assert first_gregorian == REFORM_JDN == last_julian + 1
    assert weekday(last_julian) == 4
    assert weekday(first_gregorian) == 5


@pytest.mark.parametrize("day", range(5, 15))
def test_reform_gap_rejected(day):
    assert in_reform_gap(1582, 10, day)
    with pytest.raises(InvalidDateError):
        gregorian_to_jdn(1582, 10, day)


def test_reform_neighbours_of_january():
    # Jan/Feb 1583 belong to computational year 1582 and must carry the -10 correction
    assert gregorian_to_jdn(1583, 1, 1) - gregorian_to_jdn(1582, 12, 31) == 1
    assert gregorian_to_jdn(1582, 3, 1) - gregorian_to_jdn(1582, 2, 28) == 1


def test_leap_rules_switch_at_reform():
    assert is_leap_year(1500)        # Julian
    assert not is_leap_year(1700)    # Gregorian century
    assert is_leap_year(2000)
    assert days_in_month(1500, 2) == 29
    assert gregorian_to_jdn(1500, 3, 1) - gregorian_to_jdn(1500, 2, 29) == 1
    with pytest.raises(InvalidDateError):
        gregorian_to_jdn(1700, 2, 29)


@pytest.mark.parametrize(
    "fields",
    [
        (2023, 2, 29),
        (2024, 4, 31),
        (2024, 13, 1),
        (2024, 0, 10),
        (2024, 1, 0),
        (2024.0, 1, 1),
        (2024, 1.5, 1),
        (True, 1, 1),
        ("2024", 1, 1),
        (2024, 1, float("nan")),
    ],
)
def test_invalid_fields(fields):
    with pytest.raises(InvalidDateError):
        gregorian_to_jdn(*fields)


def test_to_jdn_rejects_unknown_types():
    with pytest.raises(InvalidDateError):
        to_jdn("2024-07-07")


def test_from_jdn_known_values():
    assert from_jdn(2451545) == CalendarDate(2000, 1, 1)
    assert from_jdn(2299160) == CalendarDate(1582, 10, 4)
    assert from_jdn(2299161) == CalendarDate(1582, 10, 15)
    assert from_jdn(1948439) == CalendarDate(622, 7, 15)
    with pytest.raises(DateRangeError):
        from_jdn(-1)


def test_jdn_to_date_range():
    assert jdn_to_date(2451545) == date(2000, 1, 1)
    with pytest.raises(DateRangeError):
        jdn_to_date(JDN_MAX + 1)


def test_weekday_convention():
    # 0=Sun..6=Sat; 2000-01-01 was a Saturday, 2024-07-07 a Sunday
    assert weekday(2451545) == 6
    assert weekday(gregorian_to_jdn(2024, 7, 7)) == 0


@settings(max_examples=300)
@given(st.integers(min_value=JDN_MIN, max_value=JDN_MAX - 1))
def test_jdn_roundtrip_and_monotonic(jdn):
    d0 = from_jdn(jdn)
    d1 = from_jdn(jdn + 1)
    assert to_jdn(d0) == jdn
    assert to_jdn(d1) == jdn + 1
    assert (d0.year, d0.month, d0.day) < (d1.year, d1.month, d1.day)


@settings(max_examples=300)
@given(st.dates(min_value=date(1582, 10, 15), max_value=date(9999, 12, 31)))
def test_agrees_with_ordinal_after_reform(d):
    assert gregorian_to_jdn(d.year, d.month, d.day) == date_to_jdn(d)
    assert to_jdn(CalendarDate.from_date(d)) == to_jdn(d)
